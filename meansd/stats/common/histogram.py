"""
meansd.stats.common.histogram
=============================

Fixed-range frequency binning.

The range is part of the exercise, not derived from the data, so a widget
keeps the same axis however many times it is resampled. Values outside the
range are clamped into the edge bins, so no sample is ever dropped::

    bin_width = (range_max - range_min) / bin_count
    index     = clamp(floor((v - range_min) / bin_width), 0, bin_count - 1)

`HistogramBinner.bin` rebins its whole input on every call and remembers
nothing, so a caller revealing samples progressively simply calls it again
with a longer prefix.

Examples
--------
>>> binner = HistogramBinner(range_min=0.0, range_max=10.0, bin_count=5)
>>> binner.bin([-3.0, 0.0, 1.9, 2.0, 9.99, 10.0, 42.0]).counts
(3, 1, 0, 0, 3)
>>> binner.bin_width
2.0
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from meansd.core.errors import InvalidParameterError
from meansd.core.model import Histogram
from meansd.stats.common.distributions import normal_pdf

DEFAULT_BIN_COUNT = 30
DEFAULT_CURVE_POINTS = 200


@dataclass(frozen=True)
class HistogramBinner:
    """
    Bin datasets over a fixed range.

    Attributes:
        range_min: Left edge of the first bin
        range_max: Right edge of the last bin
        bin_count: Number of equal-width bins
    """

    range_min: float
    range_max: float
    bin_count: int = DEFAULT_BIN_COUNT

    def __post_init__(self) -> None:
        if self.bin_count < 1:
            raise InvalidParameterError(
                f"bin_count must be at least 1, got {self.bin_count}"
            )
        if not (
            math.isfinite(self.range_min)
            and math.isfinite(self.range_max)
            and self.range_max > self.range_min
        ):
            raise InvalidParameterError(
                f"range must satisfy range_min < range_max, got "
                f"[{self.range_min}, {self.range_max})"
            )

    @property
    def bin_width(self) -> float:
        return (self.range_max - self.range_min) / self.bin_count

    def bin_index(self, value: float) -> int:
        """Return the clamped bin index of ``value``."""
        if math.isnan(value):
            raise InvalidParameterError("cannot bin NaN")
        if value == math.inf:
            return self.bin_count - 1
        if value == -math.inf:
            return 0

        index = math.floor((value - self.range_min) / self.bin_width)
        return min(max(index, 0), self.bin_count - 1)

    def bin(self, values: Iterable[float]) -> Histogram:
        """Count all of ``values`` from scratch."""
        counts = [0] * self.bin_count
        for value in values:
            counts[self.bin_index(value)] += 1

        return Histogram(
            range_min=self.range_min,
            range_max=self.range_max,
            bin_count=self.bin_count,
            bin_width=self.bin_width,
            counts=tuple(counts),
        )

    def edges(self) -> Tuple[float, ...]:
        width = self.bin_width
        return tuple(self.range_min + i * width for i in range(self.bin_count + 1))

    def centers(self) -> Tuple[float, ...]:
        width = self.bin_width
        return tuple(self.range_min + (i + 0.5) * width for i in range(self.bin_count))

    def normal_curve(
        self,
        mean: float,
        sd: float,
        peak: float,
        points: int = DEFAULT_CURVE_POINTS,
    ) -> List[Tuple[float, float]]:
        """
        Normal curve overlay scaled so that its maximum equals ``peak``.

        Returns ``points + 1`` ``(x, y)`` pairs evenly spaced over the range,
        with ``y = peak * pdf(x) / pdf(mean)``. The widgets pass the tallest
        bar as ``peak`` so the curve and bars share a vertical scale.

        Args:
            mean: Mean of the fitted normal
            sd: Standard deviation of the fitted normal (population SD)
            peak: Height of the curve at ``mean``
            points: Number of segments in the polyline

        Returns:
            List of (x, y) pairs
        """
        if sd < 0:
            raise InvalidParameterError(f"sd must be non-negative, got {sd}")
        if points < 1:
            raise InvalidParameterError(f"points must be at least 1, got {points}")

        step = (self.range_max - self.range_min) / points
        curve = []
        for i in range(points + 1):
            x = self.range_min + i * step
            if sd == 0:
                y = float(peak) if x == mean else 0.0
            else:
                y = peak * normal_pdf(x, mean, sd) / normal_pdf(mean, mean, sd)
            curve.append((x, y))
        return curve
