"""
meansd.stats.common.distributions
=================================

Closed-form CDF approximations used by the hypothesis tests.

`normal_cdf`
    Abramowitz & Stegun 7.1.26 rational approximation of erf, absolute error
    about 1.5e-7.

`t_cdf`
    A deliberately rough Student's t model kept for compatibility with the
    widgets' published numbers. Above 100 degrees of freedom it is the normal
    CDF. Between 1 and 100 it inflates the normal CDF of ``|t|`` by
    ``1 + (0.25/df) * x²/(1 + x²/df)`` and caps it at 0.9999. It is not an
    incomplete-beta t CDF.

`t_cdf_exact`
    The rigorous Student's t CDF from `scipy.stats.t`, for callers that want
    correct p-values and accept diverging from the widgets.

Examples
--------
>>> round(normal_cdf(0.0), 6)
0.5
>>> abs(normal_cdf(1.96) + normal_cdf(-1.96) - 1.0) < 1e-12
True
>>> t_cdf(1.5, 1000) == normal_cdf(1.5)
True
>>> t_cdf(50.0, 5)
0.9999
"""

from __future__ import annotations
import math

from scipy.stats import t as student_t

# Abramowitz & Stegun 7.1.26
A1 = 0.254829592
A2 = -0.284496736
A3 = 1.421413741
A4 = -1.453152027
A5 = 1.061405429
P = 0.3275911

# t_cdf model
NORMAL_DF_THRESHOLD = 100
T_CDF_CAP = 0.9999


def normal_cdf(z: float) -> float:
    """P(Z <= z) for a standard normal Z."""
    sign = -1.0 if z < 0 else 1.0
    x = abs(z) / math.sqrt(2.0)

    t = 1.0 / (1.0 + P * x)
    y = 1.0 - (((((A5 * t + A4) * t) + A3) * t + A2) * t + A1) * t * math.exp(-x * x)

    return 0.5 * (1.0 + sign * y)


def normal_pdf(x: float, mean: float = 0.0, sd: float = 1.0) -> float:
    """Density of Normal(mean, sd) at ``x``."""
    variance = sd * sd
    coefficient = 1 / math.sqrt(2 * math.pi * variance)
    d = x - mean
    exponent = -(d * d) / (2 * variance)
    return coefficient * math.exp(exponent)


def t_cdf(t: float, df: float) -> float:
    """Approximate P(T <= t) for Student's t with ``df`` degrees of freedom.

    Args:
        t: Test statistic
        df: Degrees of freedom (may be fractional, as from Welch–Satterthwaite)

    Returns:
        Approximate lower-tail probability
    """
    if df > NORMAL_DF_THRESHOLD:
        return normal_cdf(t)

    x = abs(t)
    p = normal_cdf(x)

    # Heavier tails than the normal: inflate, then cap below 1.
    if df > 1:
        correction = 1 + (0.25 / df) * (x * x / (1 + x * x / df))
        p = min(p * correction, T_CDF_CAP)

    if t < 0:
        return 1 - p
    return p


def t_cdf_exact(t: float, df: float) -> float:
    """Exact P(T <= t) for Student's t (regularised incomplete beta)."""
    return float(student_t.cdf(t, df))
