"""
Safeguarded Newton-Raphson root finder.

This module implements a Newton-Raphson iteration that keeps a bracket
around the root and falls back to bisection whenever a Newton step leaves
the bracket or the derivative vanishes. It is used to polish the
closed-form quantile approximations.
"""

import logging
import math
from typing import Callable

from distrs.utils.constants import QUANTILE_MAX_ITERATIONS, QUANTILE_TOLERANCE
from distrs.utils.types import RootResult

logger = logging.getLogger(__name__)


def newton_raphson_root(
    f: Callable[[float], float],
    fprime: Callable[[float], float],
    x0: float,
    lo: float,
    hi: float,
    max_iterations: int = QUANTILE_MAX_ITERATIONS,
    tolerance: float = QUANTILE_TOLERANCE,
) -> RootResult:
    """
    Solve f(x) = 0 on [lo, hi] starting from x0.

    The Newton-Raphson update is:
        x_{n+1} = x_n - f(x_n) / f'(x_n)

    Every evaluation of f shrinks the bracket, so the iteration can never
    wander off and the bisection fallback halves the bracket at worst.

    Args:
        f: Function whose root is sought; f(lo) and f(hi) must differ in sign
        fprime: Derivative of f
        x0: Starting point (replaced by the midpoint if outside the bracket)
        lo, hi: Bracket bounds, lo < hi
        max_iterations: Maximum number of iterations
        tolerance: Absolute convergence tolerance on the step size

    Returns:
        RootResult with root, iterations, method, success flag

    Notes:
        - Returns success=False if the bracket does not change sign
        - Returns success=False if max_iterations is reached, with the last
          iterate as the best estimate
    """
    f_lo = f(lo)
    f_hi = f(hi)
    if (f_lo > 0.0) == (f_hi > 0.0):
        return RootResult(
            root=lo if abs(f_lo) <= abs(f_hi) else hi,
            iterations=0,
            method="bisection",
            success=False,
            message=f"No sign change on bracket: f({lo:.6g}) = {f_lo:.3e}, f({hi:.6g}) = {f_hi:.3e}",
        )

    lo_positive = f_lo > 0.0
    x = x0 if lo < x0 < hi else 0.5 * (lo + hi)
    method = "newton-raphson"

    for i in range(max_iterations):
        fx = f(x)
        if fx == 0.0:
            return RootResult(
                root=x,
                iterations=i + 1,
                method=method,
                success=True,
                message=f"Exact root in {i + 1} iterations",
            )

        # Shrink the bracket on the side that shares the sign of f(x)
        if (fx > 0.0) == lo_positive:
            lo = x
        else:
            hi = x

        dfx = fprime(x)
        x_new = x - fx / dfx if dfx != 0.0 else math.nan

        if lo < x_new < hi:
            method = "newton-raphson"
        else:
            x_new = 0.5 * (lo + hi)
            method = "bisection"

        if abs(x_new - x) < tolerance or hi - lo < tolerance:
            return RootResult(
                root=x_new,
                iterations=i + 1,
                method=method,
                success=True,
                message=f"Converged in {i + 1} iterations",
            )

        x = x_new

    logger.debug("Root finder stopped after %d iterations at x=%r", max_iterations, x)
    return RootResult(
        root=x,
        iterations=max_iterations,
        method=method,
        success=False,
        message=f"Max iterations ({max_iterations}) reached without convergence",
    )
