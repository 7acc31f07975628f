"""
meansd.stats.common.descriptive
===============================

Mean and standard deviations.

The two SD variants are not interchangeable:

- `population_sd` divides by ``n``. Curve-fit overlays use it.
- `sample_sd` divides by ``n - 1`` (Bessel). Welch's t-test uses it.

Every function has a defined value for degenerate input instead of raising:
the mean and population SD of an empty dataset are 0, and the sample SD of
fewer than two values is 0.

Examples
--------
>>> data = [2, 4, 4, 4, 5, 5, 7, 9]
>>> mean(data)
5.0
>>> population_sd(data)
2.0
>>> round(sample_sd(data), 3)
2.138
>>> mean([]), population_sd([]), sample_sd([3.0])
(0.0, 0.0, 0.0)
>>> binned_mean([1, 0, 1])
1.0
"""

from __future__ import annotations
import math
from typing import Sequence

from meansd.core.model import Summary


def mean(data: Sequence[float]) -> float:
    """Arithmetic mean; 0 for empty input."""
    if len(data) == 0:
        return 0.0
    return sum(data) / len(data)


def _rms_dev(data: Sequence[float], divisor: int) -> float:
    # Scaled by the largest deviation; squares stay in [0, 1].
    m = mean(data)
    devs = [abs(x - m) for x in data]
    scale = max(devs)
    if scale == 0 or math.isinf(scale):
        return scale
    return scale * math.sqrt(sum((d / scale) * (d / scale) for d in devs) / divisor)


def population_sd(data: Sequence[float]) -> float:
    """sqrt(mean((x - mean)^2)); 0 for empty input."""
    n = len(data)
    if n == 0:
        return 0.0
    return _rms_dev(data, n)


def sample_sd(data: Sequence[float]) -> float:
    """Bessel-corrected SD, sqrt(sum((x - mean)^2) / (n - 1)); 0 for n <= 1."""
    n = len(data)
    if n <= 1:
        return 0.0
    return _rms_dev(data, n - 1)


def describe(data: Sequence[float]) -> Summary:
    """Return n, mean and both SDs of ``data``."""
    return Summary(
        n=len(data),
        mean=mean(data),
        population_sd=population_sd(data),
        sample_sd=sample_sd(data),
    )


# --- Statistics over binned counts (Galton board) ---


def binned_mean(counts: Sequence[int]) -> float:
    """Mean bin *index* weighted by ``counts``; 0 when nothing is counted."""
    total = sum(counts)
    if total == 0:
        return 0.0
    return sum(i * c for i, c in enumerate(counts)) / total


def binned_sd(counts: Sequence[int]) -> float:
    """Population SD of bin indices weighted by ``counts``; 0 when empty."""
    total = sum(counts)
    if total == 0:
        return 0.0
    m = binned_mean(counts)
    return math.sqrt(sum(c * (i - m) ** 2 for i, c in enumerate(counts)) / total)
