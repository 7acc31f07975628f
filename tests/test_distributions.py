"""Tests for the normal and Student's t CDFs."""

import math

import pytest
from scipy import stats

from meansd.stats.common.distributions import (
    T_CDF_CAP,
    normal_cdf,
    normal_pdf,
    t_cdf,
    t_cdf_exact,
)

GRID = [x / 4 for x in range(-24, 25)]


@pytest.mark.parametrize("z", GRID)
def test_normal_cdf_accuracy(z):
    assert abs(normal_cdf(z) - stats.norm.cdf(z)) < 2e-7


def test_normal_cdf_at_zero():
    assert normal_cdf(0.0) == pytest.approx(0.5, abs=1e-8)


@pytest.mark.parametrize("z", [0.1, 0.5, 1.0, 1.96, 3.0, 5.0])
def test_normal_cdf_symmetry(z):
    assert normal_cdf(z) + normal_cdf(-z) == pytest.approx(1.0, abs=1e-12)


def test_normal_cdf_is_monotone():
    values = [normal_cdf(z) for z in GRID]
    assert values == sorted(values)
    assert all(0.0 <= v <= 1.0 for v in values)


def test_normal_pdf():
    assert normal_pdf(0.0) == pytest.approx(1 / math.sqrt(2 * math.pi))
    assert normal_pdf(12.0, mean=10.0, sd=2.0) == pytest.approx(
        stats.norm.pdf(12.0, loc=10.0, scale=2.0)
    )


@pytest.mark.parametrize("t", [-3.0, -1.5, -0.2, 0.0, 0.7, 2.0, 3.0])
def test_t_cdf_is_normal_for_large_df(t):
    assert t_cdf(t, 1000) == normal_cdf(t)
    assert t_cdf(t, 1000) == pytest.approx(stats.norm.cdf(t), abs=1e-3)


def test_t_cdf_inflates_normal_cdf_for_moderate_df():
    x, df = 1.0, 10
    expected = normal_cdf(x) * (1 + (0.25 / df) * (x * x / (1 + x * x / df)))
    assert t_cdf(x, df) == pytest.approx(expected)
    assert t_cdf(x, df) > normal_cdf(x)


def test_t_cdf_corrects_up_to_df_100():
    x = 1.0
    expected = normal_cdf(x) * (1 + (0.25 / 100) * (x * x / (1 + x * x / 100)))
    assert t_cdf(x, 100) == pytest.approx(expected)
    assert t_cdf(x, 100.5) == normal_cdf(x)


def test_t_cdf_is_capped():
    assert t_cdf(50.0, 5) == T_CDF_CAP
    assert t_cdf(-50.0, 5) == pytest.approx(1 - T_CDF_CAP)


@pytest.mark.parametrize("df", [0.5, 1])
def test_t_cdf_uncorrected_at_or_below_one_df(df):
    assert t_cdf(1.2, df) == normal_cdf(1.2)
    assert t_cdf(-1.2, df) == 1 - normal_cdf(1.2)


@pytest.mark.parametrize("t", [0.3, 1.0, 2.5])
@pytest.mark.parametrize("df", [2, 6.98, 40])
def test_t_cdf_negative_mirror(t, df):
    assert t_cdf(-t, df) == 1 - t_cdf(t, df)


def test_t_cdf_exact_matches_scipy():
    assert t_cdf_exact(0.0, 5) == pytest.approx(0.5)
    assert t_cdf_exact(2.0, 7.5) == pytest.approx(stats.t.cdf(2.0, 7.5))
    assert isinstance(t_cdf_exact(2.0, 7.5), float)


def test_approximation_diverges_from_exact_at_small_df():
    # The approximate CDF is lighter-tailed than Student's t at 3 df.
    assert t_cdf(2.0, 3) != pytest.approx(t_cdf_exact(2.0, 3), abs=1e-3)
