"""
Consistency diagnostics for distribution functions.

This module implements property checks that any correct implementation
must pass:
- CDF bounds
- CDF monotonicity
- Quantile round trip
- Symmetry about the center
- Density matches the derivative of the CDF
"""

from typing import Callable, Optional

from distrs.core.normal import Normal
from distrs.core.students_t import StudentsT
from distrs.utils.constants import (
    DENSITY_STEP,
    DENSITY_TOLERANCE,
    MONOTONICITY_TOLERANCE,
    ROUNDTRIP_TOLERANCE,
    SYMMETRY_TOLERANCE,
)
from distrs.utils.types import ConsistencyCheck, DistributionName

ScalarFunction = Callable[[float], float]

DEFAULT_POINTS = [x / 4.0 for x in range(-40, 41)]  # -10..+10 in quarter steps
DEFAULT_PROBABILITIES = [1e-12, 1e-6, 0.001, 0.01, 0.025, 0.1, 0.25, 0.5, 0.75, 0.9, 0.975, 0.99, 0.999, 1 - 1e-6]


def check_cdf_bounds(cdf: ScalarFunction, points: list[float]) -> ConsistencyCheck:
    """
    Validate that CDF values lie in [0, 1].

    Args:
        cdf: CDF with the distribution parameters already bound
        points: Evaluation points

    Returns:
        ConsistencyCheck with validation results
    """
    violations = []
    details = {}

    values = [cdf(x) for x in points]
    details["min_value"] = min(values)
    details["max_value"] = max(values)

    for x, value in zip(points, values):
        if not 0.0 <= value <= 1.0:
            violations.append(f"CDF({x:.6g}) = {value!r} outside [0, 1]")

    is_valid = len(violations) == 0
    return ConsistencyCheck(is_valid=is_valid, violations=violations, details=details)


def check_cdf_monotonicity(
    cdf: ScalarFunction, points: list[float], tolerance: float = MONOTONICITY_TOLERANCE
) -> ConsistencyCheck:
    """
    Check that the CDF never decreases.

    For x1 < x2: F(x1) <= F(x2)

    Args:
        cdf: CDF with the distribution parameters already bound
        points: Evaluation points (sorted here)
        tolerance: Allowed decrease between neighbours

    Returns:
        ConsistencyCheck with validation results
    """
    violations = []
    ordered = sorted(points)
    values = [cdf(x) for x in ordered]

    largest_drop = 0.0
    for i in range(len(ordered) - 1):
        drop = values[i] - values[i + 1]
        largest_drop = max(largest_drop, drop)
        if not drop <= tolerance:
            violations.append(
                f"CDF decreases: F({ordered[i]:.6g}) = {values[i]:.17g} "
                f"> F({ordered[i + 1]:.6g}) = {values[i + 1]:.17g}"
            )

    details = {"largest_drop": largest_drop}

    is_valid = len(violations) == 0
    return ConsistencyCheck(is_valid=is_valid, violations=violations, details=details)


def check_roundtrip(
    cdf: ScalarFunction,
    ppf: ScalarFunction,
    probabilities: list[float],
    tolerance: float = ROUNDTRIP_TOLERANCE,
) -> ConsistencyCheck:
    """
    Validate the quantile round trip.

    Round trip:
        F(F⁻¹(p)) = p

    Args:
        cdf, ppf: Distribution functions with parameters already bound
        probabilities: Probabilities in (0, 1)
        tolerance: Absolute tolerance on the recovered probability

    Returns:
        ConsistencyCheck with validation results
    """
    violations = []
    max_error = 0.0

    for p in probabilities:
        recovered = cdf(ppf(p))
        error = abs(recovered - p)
        max_error = max(max_error, error)
        if not error <= tolerance:
            violations.append(f"Round trip failed: F(F⁻¹({p:.6g})) = {recovered!r}, error = {error:.3e}")

    details = {"max_error": max_error}

    is_valid = len(violations) == 0
    return ConsistencyCheck(is_valid=is_valid, violations=violations, details=details)


def check_symmetry(
    cdf: ScalarFunction,
    points: list[float],
    center: float = 0.0,
    tolerance: float = SYMMETRY_TOLERANCE,
) -> ConsistencyCheck:
    """
    Check symmetry of the CDF about its center.

    Condition: F(c - h) + F(c + h) = 1

    Args:
        cdf: CDF with the distribution parameters already bound
        points: Offsets h from the center
        center: Center of symmetry
        tolerance: Absolute tolerance on the sum

    Returns:
        ConsistencyCheck with validation results
    """
    violations = []
    max_error = 0.0

    for h in points:
        total = cdf(center - h) + cdf(center + h)
        error = abs(total - 1.0)
        max_error = max(max_error, error)
        if not error <= tolerance:
            violations.append(f"Symmetry violated at offset {h:.6g}: F(c-h) + F(c+h) = {total!r}")

    details = {"max_error": max_error}

    is_valid = len(violations) == 0
    return ConsistencyCheck(is_valid=is_valid, violations=violations, details=details)


def check_pdf_cdf_consistency(
    pdf: ScalarFunction,
    cdf: ScalarFunction,
    points: list[float],
    step: float = DENSITY_STEP,
    tolerance: float = DENSITY_TOLERANCE,
) -> ConsistencyCheck:
    """
    Check that the density is the derivative of the CDF.

    Central difference:
        f(x) ≈ (F(x + h) - F(x - h)) / 2h

    Args:
        pdf, cdf: Distribution functions with parameters already bound
        points: Evaluation points
        step: Finite-difference step h
        tolerance: Absolute tolerance on the density

    Returns:
        ConsistencyCheck with validation results
    """
    violations = []
    max_error = 0.0

    for x in points:
        numeric = (cdf(x + step) - cdf(x - step)) / (2.0 * step)
        analytic = pdf(x)
        error = abs(numeric - analytic)
        max_error = max(max_error, error)
        if not error <= tolerance:
            violations.append(f"Density mismatch at {x:.6g}: pdf = {analytic:.10g}, dF/dx = {numeric:.10g}")

    details = {"max_error": max_error}

    is_valid = len(violations) == 0
    return ConsistencyCheck(is_valid=is_valid, violations=violations, details=details)


def bind_distribution(
    distribution: DistributionName,
    mean: float = 0.0,
    std_dev: float = 1.0,
    df: Optional[float] = None,
) -> tuple[ScalarFunction, ScalarFunction, ScalarFunction, float]:
    """
    Bind distribution parameters into one-argument functions.

    Args:
        distribution: "normal" or "t"
        mean, std_dev: Normal parameters
        df: Student's t degrees of freedom (required for "t")

    Returns:
        (pdf, cdf, ppf, center)

    Raises:
        ValueError: If the distribution name is unknown or df is missing
    """
    if distribution == "normal":
        return (
            lambda x: Normal.pdf(x, mean, std_dev),
            lambda x: Normal.cdf(x, mean, std_dev),
            lambda p: Normal.ppf(p, mean, std_dev),
            mean,
        )
    if distribution == "t":
        if df is None:
            raise ValueError("Student's t distribution requires df")
        return (
            lambda x: StudentsT.pdf(x, df),
            lambda x: StudentsT.cdf(x, df),
            lambda p: StudentsT.ppf(p, df),
            0.0,
        )
    raise ValueError(f"Distribution must be 'normal' or 't', got {distribution!r}")


def run_all_checks(
    distribution: DistributionName,
    mean: float = 0.0,
    std_dev: float = 1.0,
    df: Optional[float] = None,
    points: Optional[list[float]] = None,
    probabilities: Optional[list[float]] = None,
) -> dict[str, ConsistencyCheck]:
    """
    Run the full diagnostic suite for one parameterization.

    Evaluation points are given in standard units and scaled by std_dev and
    shifted by mean for the normal distribution.

    Args:
        distribution: "normal" or "t"
        mean, std_dev: Normal parameters
        df: Student's t degrees of freedom
        points: Evaluation points in standard units (default -10..10)
        probabilities: Probabilities for the round trip

    Returns:
        Mapping of check name to ConsistencyCheck

    Raises:
        ValueError: If the distribution name is unknown or df is missing
    """
    pdf, cdf, ppf, center = bind_distribution(distribution, mean, std_dev, df)

    if points is None:
        points = DEFAULT_POINTS
    if probabilities is None:
        probabilities = DEFAULT_PROBABILITIES

    scale = std_dev if distribution == "normal" else 1.0
    located = [center + scale * x for x in points]
    offsets = [scale * abs(x) for x in points]

    return {
        "bounds": check_cdf_bounds(cdf, located),
        "monotonicity": check_cdf_monotonicity(cdf, located),
        "roundtrip": check_roundtrip(cdf, ppf, probabilities),
        "symmetry": check_symmetry(cdf, offsets, center),
        "density": check_pdf_cdf_consistency(pdf, cdf, located, step=DENSITY_STEP * scale),
    }


def summarize(checks: dict[str, ConsistencyCheck]) -> tuple[bool, list[str]]:
    """Collapse a suite result into an overall flag and the violation list."""
    violations = []
    for name, check in checks.items():
        violations.extend(f"{name}: {message}" for message in check.violations)
    return all(check.is_valid for check in checks.values()), violations

