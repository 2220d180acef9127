"""
Numerical constants and tolerances for the distribution kernels.

This module defines the thresholds that select between approximation
regimes and the convergence criteria of the iterative routines. Every
iterative routine is capped so that each call terminates in bounded time.
"""

import math

# Mathematical constants
SQRT_2 = math.sqrt(2.0)
SQRT_2PI = math.sqrt(2.0 * math.pi)
LN_SQRT_PI = 0.5 * math.log(math.pi)  # log Γ(1/2)
LN_SQRT_2PI = 0.5 * math.log(2.0 * math.pi)

# Math backend selection (import-time option)
MATH_BACKEND_ENV = "DISTRS_MATH_BACKEND"
MATH_BACKENDS = ("host", "portable")
DEFAULT_MATH_BACKEND = "host"

# Error function (portable backend)
ERF_SERIES_LIMIT = 3.0  # |x| below this: power series, above: continued fraction
ERF_MAX_TERMS = 200
ERFC_MAX_TERMS = 500
SERIES_TOLERANCE = 1e-17  # Relative size of the last term / CF correction

# Log-gamma
LANCZOS_G = 7.0
LANCZOS_COEFFICIENTS = (
    0.99999999999980993,
    676.5203681218851,
    -1259.1392167224028,
    771.32342877765313,
    -176.61502916214059,
    12.507343278686905,
    -0.13857109526572012,
    9.9843695780195716e-6,
    1.5056327351493116e-7,
)
HALF_RATIO_ASYMPTOTIC = 100.0  # a above this: series for log Γ(a+½) - log Γ(a)

# Incomplete beta continued fraction
BETAINC_MAX_ITERATIONS = 2000
BETAINC_TOLERANCE = 1e-16
BETAINC_TINY = 1e-300  # Lentz guard against zero denominators

# Normal quantile (AS 241 split points)
AS241_SPLIT_CENTRAL = 0.425
AS241_CENTRAL_CONST = 0.180625  # 0.425²
AS241_SPLIT_TAIL = 5.0

# Student's t regimes
T_ASYMPTOTIC_DF = 1e5  # df at or above this: Hill (1970) normalizing transform
T_NORMAL_DF = 1e30  # df at or above this: indistinguishable from the normal
T_HILL_MIN_DF = 1.0  # Algorithm 396 start point is only valid from here up

# Quantile refinement (in log-x space)
QUANTILE_MAX_ITERATIONS = 100
QUANTILE_TOLERANCE = 1e-14  # Absolute on log(x), i.e. relative on x
LOG_X_MIN = -708.0  # exp() stays a normal float
LOG_X_MAX = 709.0  # exp() stays finite

# Diagnostics tolerances
MONOTONICITY_TOLERANCE = 0.0  # CDF must never decrease
ROUNDTRIP_TOLERANCE = 1e-9
SYMMETRY_TOLERANCE = 1e-12
DENSITY_TOLERANCE = 1e-6
DENSITY_STEP = 1e-5  # Central-difference step for pdf vs cdf comparison
