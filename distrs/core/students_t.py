"""
Student's t distribution.

Density, cumulative distribution and percent-point functions for a
Student's t random variable with real degrees of freedom df > 0, including
non-integer values and 0 < df < 1. Infinite df degenerates to the standard
normal. Invalid parameters and NaN inputs produce NaN rather than
exceptions.

References:
    Hill, G. W. (1970). Algorithm 395: Student's t-distribution.
    Communications of the ACM, 13(10), 617-619.

    Hill, G. W. (1970). Algorithm 396: Student's t-quantiles.
    Communications of the ACM, 13(10), 619-620.
"""

import logging
import math

from distrs.core.beta import betainc, log_gamma_half_ratio
from distrs.core.normal import Normal
from distrs.solvers.quantile import hill_396_start, power_tail_start, refine_upper_quantile
from distrs.utils.constants import T_ASYMPTOTIC_DF, T_HILL_MIN_DF, T_NORMAL_DF

logger = logging.getLogger(__name__)


def _log1p_square_ratio(x: float, df: float) -> float:
    """log(1 + x²/df) for x >= 0 without overflowing x²/df."""
    x2 = x * x
    ratio = x2 / df
    if math.isfinite(ratio):
        return math.log1p(ratio)
    return 2.0 * math.log(x) - math.log(df) + math.log1p(df / x2)


def _log_pdf(x: float, df: float) -> float:
    """log density for finite df < T_NORMAL_DF."""
    return (
        log_gamma_half_ratio(0.5 * df)
        - 0.5 * math.log(df * math.pi)
        - 0.5 * (df + 1.0) * _log1p_square_ratio(abs(x), df)
    )


def _hill_upper_tail(x: float, df: float) -> float:
    """
    P(T > x) for large df, Hill's normalizing transformation (Algorithm 395).

    Maps x to a standard normal deviate z with an asymptotic series in
    1/(df - 1/2), then returns Φ(-z).
    """
    a = df - 0.5
    b = 48.0 * a * a
    y = a * _log1p_square_ratio(x, df)
    z = (((((-0.4 * y - 3.3) * y - 24.0) * y - 85.5) / (0.8 * y * y + 100.0 + b) + y + 3.0) / b + 1.0) * math.sqrt(y)
    return Normal.cdf(-z, 0.0, 1.0)


def _upper_tail(x: float, df: float) -> float:
    """
    P(T > x) for x >= 0 and finite df < T_NORMAL_DF.

    Uses P(T > x) = ½·I_t(df/2, 1/2) with t = df/(df + x²). The beta
    prefactor raises t to the power df/2, so log t is taken as
    -log1p(x²/df) rather than from the rounded t. 1 - t = x²/(df + x²) is
    formed directly, and for x > 1 its log too, so neither underflow of t
    nor cancellation in 1 - t costs accuracy.
    """
    if x == math.inf:
        return 0.0
    if df >= T_ASYMPTOTIC_DF:
        return _hill_upper_tail(x, df)

    a = 0.5 * df
    log_t = -_log1p_square_ratio(x, df)
    x2 = x * x
    if x > 1.0:
        ratio = df / x2
        y = 1.0 / (1.0 + ratio)
        log_y = -math.log1p(ratio)
    else:
        y = x2 / (df + x2)
        log_y = math.log(y) if y > 0.0 else -math.inf
    return 0.5 * betainc(a, 0.5, math.exp(log_t), y, log_t, log_y)


class StudentsT:
    """Functions for a Student's t continuous random variable."""

    @staticmethod
    def pdf(x: float, df: float) -> float:
        """
        Probability density function.

        Args:
            x: Value at which to evaluate the density
            df: Degrees of freedom, any real > 0

        Returns:
            Density at x; NaN if df <= 0 or any input is NaN

        Examples:
            >>> abs(StudentsT.pdf(0.0, 1.0) - 1.0 / math.pi) < 1e-15
            True
            >>> StudentsT.pdf(math.inf, 3.0)
            0.0

        Notes:
            f(x) = Γ((ν+1)/2) / (√(νπ)·Γ(ν/2)) · (1 + x²/ν)^(-(ν+1)/2)

            Evaluated in log space so large ν neither overflows the gamma
            functions nor loses the convergence to the normal density.
        """
        if math.isnan(x) or not df > 0.0:
            return math.nan
        if df >= T_NORMAL_DF:
            return Normal.pdf(x, 0.0, 1.0)

        return math.exp(_log_pdf(x, df))

    @staticmethod
    def cdf(x: float, df: float) -> float:
        """
        Cumulative distribution function.

        Args:
            x: Value at which to evaluate the CDF
            df: Degrees of freedom, any real > 0

        Returns:
            P(T <= x) in [0, 1]; NaN if df <= 0 or any input is NaN

        Examples:
            >>> StudentsT.cdf(0.0, 10.0)
            0.5
            >>> abs(StudentsT.cdf(1.0, 1.0) - 0.75) < 1e-15
            True

        Notes:
            - Lower half is the upper tail at |x|, upper half its complement,
              so cdf(-x) == 1 - cdf(x) up to one rounding
            - df >= 1e5 uses Hill's asymptotic normalizing transformation
            - df = inf is the standard normal CDF
        """
        if math.isnan(x) or not df > 0.0:
            return math.nan
        if df >= T_NORMAL_DF:
            return Normal.cdf(x, 0.0, 1.0)

        if x < 0.0:
            return _upper_tail(-x, df)
        return 1.0 - _upper_tail(x, df)

    @staticmethod
    def ppf(p: float, df: float) -> float:
        """
        Percent point function (quantile, inverse CDF).

        Closed forms for df = 1 (Cauchy) and df = 2. Otherwise Hill's
        Algorithm 396 (or the power-law tail for df < 1) supplies a start
        point that is polished by safeguarded Newton-Raphson on the CDF.

        Args:
            p: Probability value
            df: Degrees of freedom, any real > 0

        Returns:
            x with P(T <= x) = p; -inf for p = 0, inf for p = 1,
            NaN for p outside [0, 1], df <= 0 or NaN input

        Examples:
            >>> StudentsT.ppf(0.5, 7.0)
            0.0
            >>> abs(StudentsT.ppf(0.975, 10.0) - 2.228139) < 1e-6
            True
        """
        if not (0.0 <= p <= 1.0) or not df > 0.0:
            return math.nan

        if p == 0.0:
            return -math.inf
        if p == 1.0:
            return math.inf
        if p == 0.5:
            return 0.0
        if df >= T_NORMAL_DF:
            return Normal.ppf(p, 0.0, 1.0)

        # Solve for the upper-tail magnitude, then restore the sign
        q = p if p < 0.5 else 1.0 - p

        if df == 1.0:
            magnitude = 1.0 / math.tan(math.pi * q)
        elif df == 2.0:
            magnitude = (1.0 - 2.0 * q) / math.sqrt(2.0 * q * (1.0 - q))
        else:
            x0 = hill_396_start(q, df) if df >= T_HILL_MIN_DF else math.nan
            log_x0 = math.log(x0) if x0 > 0.0 and math.isfinite(x0) else power_tail_start(q, df)

            result = refine_upper_quantile(
                q,
                log_x0,
                lambda x: _upper_tail(x, df),
                lambda x: _log_pdf(x, df),
            )
            if not result.success:
                logger.debug("t quantile refinement for p=%r, df=%r: %s", p, df, result.message)
            magnitude = result.root

        return -magnitude if p < 0.5 else magnitude
