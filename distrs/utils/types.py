"""
Data types shared by the solvers and diagnostics.

The distribution kernels themselves only trade in floats; these containers
carry the extra bookkeeping of the iterative solvers and of the
consistency checks.
"""

from dataclasses import dataclass, field
from typing import Literal

DistributionName = Literal["normal", "t"]
SolverMethod = Literal["newton-raphson", "bisection"]


@dataclass
class RootResult:
    """
    Result from the bracketed root finder.

    Attributes:
        root: Best estimate of the root
        iterations: Number of iterations performed
        method: Method that produced the final step ('newton-raphson' or 'bisection')
        success: Whether the solver met its tolerance
        message: Additional information about convergence
    """
    root: float
    iterations: int
    method: SolverMethod
    success: bool
    message: str = ""


@dataclass
class ConsistencyCheck:
    """
    Result from a distribution consistency check.

    Attributes:
        is_valid: Whether the computed values satisfy the checked property
        violations: List of specific violations detected
        details: Dictionary with detailed check results
    """
    is_valid: bool
    violations: list[str]
    details: dict[str, float] = field(default_factory=dict)
