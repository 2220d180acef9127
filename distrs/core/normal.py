"""
Normal (Gaussian) distribution.

Density, cumulative distribution and percent-point functions for a normal
random variable with a given mean and standard deviation. Invalid
parameters and NaN inputs produce NaN rather than exceptions.
"""

import math

from distrs.core import mathlib
from distrs.utils.constants import (
    AS241_CENTRAL_CONST,
    AS241_SPLIT_CENTRAL,
    AS241_SPLIT_TAIL,
    SQRT_2,
    SQRT_2PI,
)


def _standard_normal_ppf(p: float) -> float:
    """
    Standard normal quantile for p in (0, 1), Algorithm AS 241 (PPND16).

    Three rational approximations of degree 7: a central one for
    |p - 0.5| <= 0.425 and two tail ones in r = sqrt(-log(min(p, 1 - p))),
    split at r = 5. Accurate to about 1 part in 10^16.

    Reference:
        Wichura, M. J. (1988). Algorithm AS 241: The Percentage Points of the
        Normal Distribution. Journal of the Royal Statistical Society.
        Series C (Applied Statistics), 37(3), 477-484.
    """
    q = p - 0.5

    if abs(q) <= AS241_SPLIT_CENTRAL:
        r = AS241_CENTRAL_CONST - q * q
        num = (((((((2.5090809287301226727e3 * r + 3.3430575583588128105e4) * r
                    + 6.7265770927008700853e4) * r + 4.5921953931549871457e4) * r
                  + 1.3731693765509461125e4) * r + 1.9715909503065514427e3) * r
                + 1.3314166789178437745e2) * r + 3.3871328727963666080e0)
        den = (((((((5.2264952788528545610e3 * r + 2.8729085735721942674e4) * r
                    + 3.9307895800092710610e4) * r + 2.1213794301586595867e4) * r
                  + 5.3941960214247511077e3) * r + 6.8718700749205790830e2) * r
                + 4.2313330701600911252e1) * r + 1.0)
        return q * num / den

    r = p if q < 0.0 else 1.0 - p
    r = math.sqrt(-math.log(r))

    if r <= AS241_SPLIT_TAIL:
        r -= 1.6
        num = (((((((7.74545014278341407640e-4 * r + 2.27238449892691845833e-2) * r
                    + 2.41780725177450611770e-1) * r + 1.27045825245236838258e0) * r
                  + 3.64784832476320460504e0) * r + 5.76949722146069140550e0) * r
                + 4.63033784615654529590e0) * r + 1.42343711074968357734e0)
        den = (((((((1.05075007164441684324e-9 * r + 5.47593808499534494600e-4) * r
                    + 1.51986665636164571966e-2) * r + 1.48103976427480074590e-1) * r
                  + 6.89767334985100004550e-1) * r + 1.67638483018380384940e0) * r
                + 2.05319162663775882187e0) * r + 1.0)
    else:
        r -= 5.0
        num = (((((((2.01033439929228813265e-7 * r + 2.71155556874348757815e-5) * r
                    + 1.24266094738807843860e-3) * r + 2.65321895265761230930e-2) * r
                  + 2.96560571828504891230e-1) * r + 1.78482653991729133580e0) * r
                + 5.46378491116411436990e0) * r + 6.65790464350110377720e0)
        den = (((((((2.04426310338993978564e-15 * r + 1.42151175831644588870e-7) * r
                    + 1.84631831751005468180e-5) * r + 7.86869131145613259100e-4) * r
                  + 1.48753612908506148525e-2) * r + 1.36929880922735805310e-1) * r
                + 5.99832206555887937690e-1) * r + 1.0)

    z = num / den
    return -z if q < 0.0 else z


class Normal:
    """Functions for a normal continuous random variable."""

    @staticmethod
    def pdf(x: float, mean: float, std_dev: float) -> float:
        """
        Probability density function.

        Args:
            x: Value at which to evaluate the density
            mean: Location of the distribution
            std_dev: Scale of the distribution, must be positive

        Returns:
            Density at x; NaN if std_dev <= 0 or any input is NaN

        Examples:
            >>> abs(Normal.pdf(0.0, 0.0, 1.0) - 0.39894) < 1e-5
            True
            >>> Normal.pdf(math.inf, 0.0, 1.0)
            0.0
            >>> math.isnan(Normal.pdf(0.0, 0.0, -1.0))
            True

        Notes:
            φ(x) = exp(-z²/2) / (σ√(2π)),  z = (x - μ)/σ
        """
        if not std_dev > 0.0:
            return math.nan

        z = (x - mean) / std_dev
        return math.exp(-0.5 * z * z) / (std_dev * SQRT_2PI)

    @staticmethod
    def cdf(x: float, mean: float, std_dev: float) -> float:
        """
        Cumulative distribution function.

        Evaluated as 0.5·erfc(-z/√2) rather than 0.5·(1 + erf(z/√2)) so that
        the lower tail keeps its relative accuracy instead of cancelling to 0.

        Args:
            x: Value at which to evaluate the CDF
            mean: Location of the distribution
            std_dev: Scale of the distribution, must be positive

        Returns:
            P(X <= x) in [0, 1]; NaN if std_dev <= 0 or any input is NaN

        Examples:
            >>> Normal.cdf(0.0, 0.0, 1.0)
            0.5
            >>> Normal.cdf(-math.inf, 0.0, 1.0)
            0.0
        """
        if not std_dev > 0.0:
            return math.nan

        z = (x - mean) / std_dev
        return 0.5 * mathlib.erfc(-z / SQRT_2)

    @staticmethod
    def ppf(p: float, mean: float, std_dev: float) -> float:
        r"""
        Percent point function (quantile, inverse CDF).

        Computes the value such that the probability of a random variable
        being at or below it is `p`. If `p` is 0 it returns negative infinity,
        if `p` is 1 it returns infinity. Anything outside of [0, 1] results
        in NaN.

        Args:
            p: Probability value
            mean: Location of the distribution
            std_dev: Scale of the distribution, must be positive

        Returns:
            mean + std_dev·z where z is the AS 241 standard normal quantile

        Examples:
            >>> abs(Normal.ppf(0.975, 0.0, 1.0) - 1.959964) < 1e-6
            True
            >>> Normal.ppf(1.0, 0.0, 1.0)
            inf
        """
        if not (0.0 <= p <= 1.0) or not std_dev > 0.0 or math.isnan(mean):
            return math.nan

        if p == 0.0:
            return -math.inf
        if p == 1.0:
            return math.inf

        z = _standard_normal_ppf(p)
        # inf * 0 is NaN; the median is the mean for any scale
        if z == 0.0:
            return mean
        return mean + std_dev * z
