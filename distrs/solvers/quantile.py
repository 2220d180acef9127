"""
Quantile refinement with closed-form starting points.

This module provides the machinery behind the Student's t percent point
function: an initial guess from Hill's Algorithm 396 (or from the power-law
tail when the degrees of freedom are below one), polished by the
safeguarded Newton-Raphson solver.

The refinement works on u = log(x) rather than x. Heavy-tailed quantiles
can span hundreds of orders of magnitude, and in log space a fixed bracket
covers the whole positive float range while Newton steps stay well scaled.
"""

import math
from typing import Callable

from distrs.core.beta import log_gamma_half_ratio
from distrs.core.normal import Normal
from distrs.solvers.newton_raphson import newton_raphson_root
from distrs.utils.constants import LOG_X_MAX, LOG_X_MIN, QUANTILE_MAX_ITERATIONS, QUANTILE_TOLERANCE
from distrs.utils.types import RootResult


def hill_396_start(q: float, df: float) -> float:
    """
    Approximate upper-tail Student's t quantile, Hill's Algorithm 396.

    Args:
        q: Upper-tail probability in (0, 0.5)
        df: Degrees of freedom, at least 1

    Returns:
        x > 0 with P(T > x) ≈ q

    Reference:
        Hill, G. W. (1970). Algorithm 396: Student's t-quantiles.
        Communications of the ACM, 13(10), 619-620.

    Notes:
        - Uses an inverse expansion about the normal when the crude estimate
          is large, and a power-series correction otherwise
        - Exact only for df = 2; elsewhere good to a few digits, which is
          all the Newton polish needs
    """
    p = 2.0 * q  # two-tailed probability
    half_pi = 0.5 * math.pi

    a = 1.0 / (df - 0.5)
    b = 48.0 / (a * a)
    c = ((20700.0 * a / b - 98.0) * a - 16.0) * a + 96.36
    d = ((94.5 / (b + c) - 3.0) / b + 1.0) * math.sqrt(a * half_pi) * df
    x = d * p
    y = x ** (2.0 / df)
    if y == 0.0:
        return math.nan

    if y > 0.05 + a:
        # Asymptotic inverse expansion about the normal
        x = Normal.ppf(q, 0.0, 1.0)
        y = x * x
        if df < 5.0:
            c += 0.3 * (df - 4.5) * (x + 0.6)
        c += (((0.05 * d * x - 5.0) * x - 7.0) * x - 2.0) * x + b
        y = (((((0.4 * y + 6.3) * y + 36.0) * y + 94.5) / c - y - 3.0) / b + 1.0) * x
        y = a * y * y
        if y > LOG_X_MAX:
            return math.nan
        y = math.expm1(y)
    else:
        y = (
            (1.0 / (((df + 6.0) / (df * y) - 0.089 * d - 0.822) * (df + 2.0) * 3.0) + 0.5 / (df + 4.0)) * y
            - 1.0
        ) * (df + 1.0) / (df + 2.0) + 1.0 / y

    if not y > 0.0:
        return math.nan
    return math.sqrt(df * y)


def power_tail_start(q: float, df: float) -> float:
    """
    Starting point from the leading term of the Student's t tail.

    For large x the density behaves like k·df^((df+1)/2)·x^-(df+1), so

        P(T > x) ≈ k·df^((df-1)/2)·x^-df,   k = Γ((df+1)/2) / (√(dfπ)·Γ(df/2))

    which inverts in closed form. Used where Algorithm 396 does not apply
    (df < 1). Returned in log space since the quantile can exceed the float
    range.

    Args:
        q: Upper-tail probability in (0, 0.5)
        df: Degrees of freedom (> 0)

    Returns:
        log(x) of the starting point
    """
    log_k = log_gamma_half_ratio(0.5 * df) - 0.5 * math.log(df * math.pi)
    return (log_k + 0.5 * (df - 1.0) * math.log(df) - math.log(q)) / df


def refine_upper_quantile(
    q: float,
    log_x0: float,
    upper_tail: Callable[[float], float],
    log_density: Callable[[float], float],
    max_iterations: int = QUANTILE_MAX_ITERATIONS,
    tolerance: float = QUANTILE_TOLERANCE,
) -> RootResult:
    """
    Solve upper_tail(x) = q for x > 0.

    Newton-Raphson on u = log(x):
        f(u)  = upper_tail(e^u) - q
        f'(u) = -density(e^u)·e^u

    Args:
        q: Target upper-tail probability in (0, 0.5)
        log_x0: Starting point, log(x)
        upper_tail: Decreasing survival function P(X > x) for x >= 0
        log_density: log of the density, the derivative of -upper_tail
        max_iterations: Maximum number of Newton-Raphson iterations
        tolerance: Convergence tolerance on u (relative tolerance on x)

    Returns:
        RootResult whose root is x itself (not its log); root is +inf when
        the quantile lies beyond the largest finite float
    """
    if upper_tail(math.exp(LOG_X_MAX)) > q:
        return RootResult(
            root=math.inf,
            iterations=0,
            method="bisection",
            success=True,
            message="Quantile beyond the float range",
        )

    def objective(u: float) -> float:
        return upper_tail(math.exp(u)) - q

    def derivative(u: float) -> float:
        return -math.exp(log_density(math.exp(u)) + u)

    result = newton_raphson_root(
        objective,
        derivative,
        log_x0,
        LOG_X_MIN,
        LOG_X_MAX,
        max_iterations=max_iterations,
        tolerance=tolerance,
    )
    result.root = math.exp(result.root)
    return result
