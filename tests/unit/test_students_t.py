"""
Unit tests for Student's t distribution.

This module validates:
1. Published table values for df = 1, 2 and 30
2. Closed forms for the Cauchy (df = 1) and df = 2 cases
3. Non-integer and fractional degrees of freedom against scipy.stats.t
4. Large-df convergence to the normal
5. Symmetry, boundaries and NaN handling
6. Quantile round trips across all regimes
"""

import math

import pytest
import scipy.stats

from distrs import Normal, StudentsT


def assert_in_delta(actual, expected, delta=0.0002):
    if math.isfinite(expected):
        assert abs(actual - expected) < delta, f"{actual} != {expected}"
    else:
        assert actual == expected


# ===========================
# Known Values Tests
# ===========================


@pytest.mark.parametrize(
    "df, expected",
    [
        (1.0, [0.03183, 0.06366, 0.15915, 0.31831, 0.15915, 0.06366, 0.03183]),
        (2.0, [0.02741, 0.06804, 0.19245, 0.35355, 0.19245, 0.06804, 0.02741]),
        (30.0, [0.00678, 0.05685, 0.23799, 0.39563, 0.23799, 0.05685, 0.00678]),
    ],
)
def test_pdf_table(table_inputs, df, expected):
    for x, exp in zip(table_inputs, expected):
        assert_in_delta(StudentsT.pdf(x, df), exp)


@pytest.mark.parametrize(
    "df, expected",
    [
        (1.0, [0.10242, 0.14758, 0.25, 0.5, 0.75, 0.85242, 0.89758]),
        (2.0, [0.04773, 0.09175, 0.21132, 0.5, 0.78868, 0.90825, 0.95227]),
        (30.0, [0.00269, 0.02731, 0.16265, 0.5, 0.83735, 0.97269, 0.99731]),
    ],
)
def test_cdf_table(table_inputs, df, expected):
    for x, exp in zip(table_inputs, expected):
        assert_in_delta(StudentsT.cdf(x, df), exp)


@pytest.mark.parametrize(
    "df, expected",
    [
        (1.0, [-math.inf, -3.07768, -1.37638, -0.72654, -0.32492, 0.0, 0.32492, 0.72654, 1.37638, 3.07768, math.inf]),
        (2.0, [-math.inf, -1.88562, -1.06066, -0.61721, -0.28868, 0.0, 0.28868, 0.61721, 1.06066, 1.88562, math.inf]),
        (30.0, [-math.inf, -1.31042, -0.85377, -0.53002, -0.25561, 0.0, 0.25561, 0.53002, 0.85377, 1.31042, math.inf]),
    ],
)
def test_ppf_table(table_probabilities, df, expected):
    for p, exp in zip(table_probabilities, expected):
        assert_in_delta(StudentsT.ppf(p, df), exp)


def test_ppf_critical_values():
    """Two-sided 95% critical values from standard t tables."""
    assert StudentsT.ppf(0.975, 10.0) == pytest.approx(2.228138852, rel=1e-9)
    assert StudentsT.ppf(0.975, 1.0) == pytest.approx(12.706204736, rel=1e-9)
    assert StudentsT.ppf(0.995, 5.0) == pytest.approx(4.032142984, rel=1e-9)


# ===========================
# Closed Form Tests
# ===========================


@pytest.mark.parametrize("x", [-50.0, -3.0, -0.5, 0.0, 0.25, 2.0, 1e8])
def test_cauchy_cdf(x):
    """df = 1 is the Cauchy distribution: F(x) = 1/2 + atan(x)/π."""
    expected = 0.5 + math.atan(x) / math.pi
    assert StudentsT.cdf(x, 1.0) == pytest.approx(expected, rel=1e-11, abs=1e-15)


@pytest.mark.parametrize("x", [-4.0, -1.0, 0.0, 0.5, 3.0])
def test_cauchy_pdf(x):
    """df = 1 density is 1 / (π(1 + x²))."""
    assert StudentsT.pdf(x, 1.0) == pytest.approx(1.0 / (math.pi * (1.0 + x * x)), rel=1e-13)


@pytest.mark.parametrize("x", [-20.0, -1.0, 0.0, 0.7, 5.0])
def test_df_two_cdf(x):
    """df = 2: F(x) = 1/2 + x / (2√(2 + x²))."""
    expected = 0.5 + x / (2.0 * math.sqrt(2.0 + x * x))
    assert StudentsT.cdf(x, 2.0) == pytest.approx(expected, rel=1e-11, abs=1e-15)


# ===========================
# Reference Comparison Tests
# ===========================


@pytest.mark.parametrize("df", [0.1, 0.3, 0.75, 1.5, 2.5, 3.0, 4.5, 7.3, 30.0, 150.0, 1e4])
@pytest.mark.parametrize("x", [-1e3, -12.0, -2.5, -0.4, 0.0, 0.3, 1.0, 1.7, 6.0, 80.0])
def test_pdf_matches_scipy(df, x):
    ref = scipy.stats.t.pdf(x, df)
    assert StudentsT.pdf(x, df) == pytest.approx(ref, rel=1e-11, abs=1e-300)


@pytest.mark.parametrize("df", [0.1, 0.3, 0.75, 1.5, 2.5, 3.0, 4.5, 7.3, 30.0, 150.0, 1e4])
@pytest.mark.parametrize("x", [-1e3, -12.0, -2.5, -0.4, 0.0, 0.3, 1.0, 1.7, 6.0, 80.0])
def test_cdf_matches_scipy(df, x):
    ref = scipy.stats.t.cdf(x, df)
    assert StudentsT.cdf(x, df) == pytest.approx(ref, rel=1e-9, abs=1e-15)


@pytest.mark.parametrize("df", [0.3, 0.75, 1.5, 2.5, 3.0, 4.5, 7.3, 30.0, 150.0, 1e4])
@pytest.mark.parametrize("p", [1e-8, 0.001, 0.05, 0.3, 0.45, 0.6, 0.9, 0.999])
def test_ppf_inverts_scipy_cdf(df, p):
    """The quantile is checked through scipy's CDF, which is tighter than its ppf."""
    x = StudentsT.ppf(p, df)
    assert scipy.stats.t.cdf(x, df) == pytest.approx(p, rel=1e-9)


def test_cdf_fractional_df_heavy_tail():
    """Lower tail for df < 1 decays like x^-df and stays positive."""
    value = StudentsT.cdf(-1e100, 0.5)
    assert 0.0 < value < 1e-40
    assert value == pytest.approx(scipy.stats.t.cdf(-1e100, 0.5), rel=1e-9)


# ===========================
# Large Degrees of Freedom Tests
# ===========================


@pytest.mark.parametrize("x", [-4.0, -1.96, -0.5, 0.0, 1.0, 2.5])
def test_large_df_approaches_normal(x):
    """At df = 1e7 the t CDF agrees with the normal to ~1e-7."""
    assert StudentsT.cdf(x, 1e7) == pytest.approx(Normal.cdf(x, 0.0, 1.0), abs=1e-6)
    assert StudentsT.pdf(x, 1e7) == pytest.approx(Normal.pdf(x, 0.0, 1.0), abs=1e-6)


@pytest.mark.parametrize("x", [-6.0, -2.0, -0.3, 1.5, 4.0])
def test_asymptotic_tail_matches_scipy(x):
    """Hill's normalizing transformation is used for df >= 1e5."""
    ref = scipy.stats.t.cdf(x, 2e5)
    assert StudentsT.cdf(x, 2e5) == pytest.approx(ref, rel=1e-8)


def test_asymptotic_switch_is_continuous():
    """No visible jump across the switch to the asymptotic transformation."""
    below = StudentsT.cdf(-2.0, 99999.999)
    above = StudentsT.cdf(-2.0, 100000.0)
    assert abs(below - above) < 1e-10


@pytest.mark.parametrize("df", [1e3, 1e4, 9.99e4])
@pytest.mark.parametrize("center", [0.5, 1.0, math.sqrt(3.0), 2.0])
def test_cdf_monotone_on_fine_grid(df, center):
    """
    Neighbouring points 1e-11 apart stay ordered for large df.

    The beta prefactor raises t to the power df/2, so any rounding in
    log t is magnified df/2 times and shows up as steps backwards.
    """
    step = 1e-11
    values = [StudentsT.cdf(center + (i - 150) * step, df) for i in range(300)]
    for left, right in zip(values, values[1:]):
        assert left <= right


def test_cdf_ordered_at_close_points():
    assert StudentsT.cdf(1.0000000001912, 99900.0) <= StudentsT.cdf(1.0000000001913, 99900.0)


@pytest.mark.parametrize("p", [0.001, 0.1, 0.5, 0.9, 0.999])
def test_infinite_df_is_normal(p):
    assert StudentsT.ppf(p, math.inf) == Normal.ppf(p, 0.0, 1.0)
    assert StudentsT.cdf(p, math.inf) == Normal.cdf(p, 0.0, 1.0)
    assert StudentsT.pdf(p, math.inf) == Normal.pdf(p, 0.0, 1.0)


# ===========================
# Symmetry Tests
# ===========================


@pytest.mark.parametrize("df", [0.3, 1.0, 2.0, 3.5, 30.0, 1e6])
@pytest.mark.parametrize("x", [0.1, 1.0, 2.5, 40.0])
def test_cdf_symmetry(df, x):
    """F(-x) = 1 - F(x)."""
    assert StudentsT.cdf(-x, df) == pytest.approx(1.0 - StudentsT.cdf(x, df), abs=1e-15)


@pytest.mark.parametrize("df", [0.3, 1.0, 3.5, 30.0])
@pytest.mark.parametrize("x", [0.2, 1.0, 7.0])
def test_pdf_symmetry(df, x):
    assert StudentsT.pdf(-x, df) == StudentsT.pdf(x, df)


@pytest.mark.parametrize("df", [0.3, 1.0, 2.0, 3.5, 30.0])
@pytest.mark.parametrize("p", [1e-5, 0.1, 0.3])
def test_ppf_antisymmetry(df, p):
    """ppf(p) = -ppf(1 - p)."""
    assert StudentsT.ppf(p, df) == pytest.approx(-StudentsT.ppf(1.0 - p, df), rel=1e-9)


# ===========================
# Boundary Tests
# ===========================


@pytest.mark.parametrize("df", [0.5, 1.0, 7.0, 1e6])
def test_median(df):
    assert StudentsT.cdf(0.0, df) == 0.5
    assert StudentsT.ppf(0.5, df) == 0.0


@pytest.mark.parametrize("df", [0.5, 1.0, 7.0])
def test_infinite_x(df):
    assert StudentsT.cdf(-math.inf, df) == 0.0
    assert StudentsT.cdf(math.inf, df) == 1.0
    assert StudentsT.pdf(math.inf, df) == 0.0
    assert StudentsT.pdf(-math.inf, df) == 0.0


@pytest.mark.parametrize("df", [0.5, 1.0, 7.0])
def test_ppf_boundaries(df):
    assert StudentsT.ppf(0.0, df) == -math.inf
    assert StudentsT.ppf(1.0, df) == math.inf


def test_ppf_beyond_float_range():
    """Very small df pushes moderate-tail quantiles past the largest float."""
    assert StudentsT.ppf(0.01, 0.004) == -math.inf
    assert StudentsT.ppf(0.99, 0.004) == math.inf


# ===========================
# Invalid Input Tests
# ===========================


@pytest.mark.parametrize("df", [0.0, -1.0, -math.inf, math.nan])
def test_invalid_df(df):
    assert math.isnan(StudentsT.pdf(0.5, df))
    assert math.isnan(StudentsT.cdf(0.5, df))
    assert math.isnan(StudentsT.ppf(0.5, df))


def test_nan_inputs():
    assert math.isnan(StudentsT.pdf(math.nan, 3.0))
    assert math.isnan(StudentsT.cdf(math.nan, 3.0))
    assert math.isnan(StudentsT.ppf(math.nan, 3.0))


@pytest.mark.parametrize("p", [-0.1, 1.1, math.inf, -math.inf])
def test_ppf_probability_out_of_range(p):
    assert math.isnan(StudentsT.ppf(p, 3.0))


# ===========================
# Round-Trip Tests
# ===========================


def test_roundtrip(degrees_of_freedom, interior_probabilities):
    """cdf(ppf(p)) recovers p for every regime of df."""
    for df in degrees_of_freedom:
        for p in interior_probabilities:
            x = StudentsT.ppf(p, df)
            assert math.isfinite(x), f"Non-finite quantile for p={p}, df={df}"
            error = abs(StudentsT.cdf(x, df) - p)
            assert error < 1e-9, f"Round trip failed for p={p}, df={df}: error {error:.3e}"


@pytest.mark.parametrize("df", [0.3, 1.5, 7.0])
def test_roundtrip_relative_in_lower_tail(df):
    """Tiny probabilities are recovered to relative, not just absolute, accuracy."""
    for p in [1e-30, 1e-100, 1e-200]:
        x = StudentsT.ppf(p, df)
        assert StudentsT.cdf(x, df) == pytest.approx(p, rel=1e-9)
