"""
meansd.stats.common.sampling
============================

Normal and lognormal deviates built from a `SeededRandom` stream.

Normal deviates use the Box–Muller transform and consume exactly two uniform
draws per value, ``u1`` then ``u2``::

    z0 = sqrt(-2 ln u1) * cos(2 pi u2)
    x  = z0 * sd + mean

Lognormal deviates exponentiate a normal deviate whose mean is ``ln(scale)``
and whose SD is ``shape``. ``shape`` and ``scale`` parametrise the
*underlying normal*; the lognormal's own mean and SD are given by
`lognormal_moments`.

Examples
--------
>>> from meansd.stats.common.prng import SeededRandom
>>> a = draw_normal(5, mean=14, sd=23.1, rng=SeededRandom(7))
>>> b = draw_normal(5, mean=14, sd=23.1, rng=SeededRandom(7))
>>> a == b
True
>>> normal_sample(3.0, 0.0, SeededRandom(1))
3.0
>>> lognormal_sample(1.0, -2.0, SeededRandom(1))
Traceback (most recent call last):
...
meansd.core.errors.InvalidParameterError: scale must be positive, got -2.0
"""

from __future__ import annotations
import math
from typing import Optional, Tuple

from meansd.core.errors import InvalidParameterError
from meansd.core.model import Dataset
from meansd.stats.common.prng import SeededRandom


def normal_sample(mean: float, sd: float, rng: SeededRandom) -> float:
    """Draw one Normal(mean, sd) deviate with the Box–Muller transform.

    Raises:
        InvalidParameterError: if ``sd`` is negative.
        ValueError: if the uniform source emits exactly 0 for ``u1``.
    """
    if not sd >= 0:
        raise InvalidParameterError(f"sd must be non-negative, got {sd}")

    u1 = rng.next()
    u2 = rng.next()
    if u1 <= 0.0:
        raise ValueError("uniform source emitted 0; ln(u1) is undefined")

    z0 = math.sqrt(-2 * math.log(u1)) * math.cos(2 * math.pi * u2)
    return z0 * sd + mean


def lognormal_sample(shape: float, scale: float, rng: SeededRandom) -> float:
    """Draw one lognormal deviate with underlying Normal(ln(scale), shape)."""
    _check_lognormal(shape, scale)
    mean_log = math.log(scale)
    return math.exp(normal_sample(mean_log, shape, rng))


def lognormal_moments(shape: float, scale: float) -> Tuple[float, float]:
    """Return the (mean, sd) of the lognormal itself, not of its log.

    Args:
        shape: SD of the underlying normal
        scale: exp of the mean of the underlying normal

    Returns:
        Tuple of (mean, standard_deviation)
    """
    _check_lognormal(shape, scale)
    s2 = shape * shape
    m = scale * math.exp(s2 / 2)
    sd = m * math.sqrt(math.expm1(s2))
    return m, sd


def draw_normal(n: int, mean: float, sd: float, rng: SeededRandom) -> Dataset:
    """Draw ``n`` normal deviates as a Dataset."""
    _check_count(n)
    return Dataset(tuple(normal_sample(mean, sd, rng) for _ in range(n)))


def draw_lognormal(
    n: int,
    shape: float,
    scale: float,
    rng: SeededRandom,
    max_value: Optional[float] = None,
) -> Dataset:
    """Draw ``n`` lognormal deviates, discarding any above ``max_value``.

    With ``max_value`` set the result may hold fewer than ``n`` samples; the
    generator still advances by ``2 * n`` draws.
    """
    _check_count(n)
    _check_lognormal(shape, scale)
    values = (lognormal_sample(shape, scale, rng) for _ in range(n))
    if max_value is None:
        return Dataset(tuple(values))
    return Dataset(tuple(v for v in values if v <= max_value))


def draw_paired_lognormal(
    n: int,
    params_a: Tuple[float, float],
    params_b: Tuple[float, float],
    rng: SeededRandom,
) -> Tuple[Dataset, Dataset]:
    """Draw ``n`` samples per group, alternating A then B for each index.

    ``params_a`` and ``params_b`` are ``(shape, scale)`` pairs.
    """
    _check_count(n)
    _check_lognormal(*params_a)
    _check_lognormal(*params_b)
    a, b = [], []
    for _ in range(n):
        a.append(lognormal_sample(*params_a, rng))
        b.append(lognormal_sample(*params_b, rng))
    return Dataset(tuple(a)), Dataset(tuple(b))


def _check_lognormal(shape: float, scale: float) -> None:
    if not scale > 0:
        raise InvalidParameterError(f"scale must be positive, got {scale}")
    if not shape >= 0:
        raise InvalidParameterError(f"shape must be non-negative, got {shape}")


def _check_count(n: int) -> None:
    if n < 0:
        raise InvalidParameterError(f"sample count must be non-negative, got {n}")
