"""
meansd.core.model
=================

Immutable records exchanged by the statistical core.

- `Dataset`: an ordered, immutable sequence of samples
- `TaggedSample`, `RankedObservation`: group-labelled samples used by rank tests
- `Histogram`: fixed-range frequency counts
- `Summary`: mean and both standard deviations
- `TestResult` and its subclasses `MannWhitneyResult`, `WelchResult`

Datasets never change once built. Appending samples produces a new, longer
Dataset, and every derived record is recomputed from a Dataset on demand.

Examples
--------
>>> from meansd.core.model import Dataset
>>> d = Dataset.of([1.0, 2.0])
>>> d2 = d.extend([3.0])
>>> len(d), len(d2)
(2, 3)
>>> d2.prefix(1).values
(1.0,)
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, Tuple, TypedDict

from meansd.core.names import Group, TestName


# --- Typed payloads (mypy-friendly dict views of the records) ---


class HistogramPayload(TypedDict):
    range_min: float
    range_max: float
    bin_count: int
    bin_width: float
    counts: Tuple[int, ...]


class TestResultPayload(TypedDict):
    test: str
    statistic: float
    secondary: float
    p_value: float


# --- Records ---


@dataclass(frozen=True)
class Dataset:
    """Immutable ordered sequence of real-valued samples."""

    values: Tuple[float, ...] = ()

    @classmethod
    def of(cls, values: Iterable[float]) -> "Dataset":
        return cls(tuple(float(v) for v in values))

    def extend(self, values: Iterable[float]) -> "Dataset":
        """Return a new Dataset with ``values`` appended."""
        return Dataset(self.values + tuple(float(v) for v in values))

    def prefix(self, n: int) -> "Dataset":
        """Return the first ``n`` samples as a new Dataset."""
        return Dataset(self.values[: max(n, 0)])

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[float]:
        return iter(self.values)


@dataclass(frozen=True)
class TaggedSample:
    value: float
    group: Group


@dataclass(frozen=True)
class RankedObservation:
    """A tagged sample with its (possibly fractional) rank in the pooled sort."""

    value: float
    group: Group
    rank: float


@dataclass(frozen=True)
class Histogram:
    """Counts of a dataset over ``bin_count`` equal bins of a fixed range."""

    range_min: float
    range_max: float
    bin_count: int
    bin_width: float
    counts: Tuple[int, ...]

    @property
    def total(self) -> int:
        return sum(self.counts)

    @property
    def max_count(self) -> int:
        return max(self.counts, default=0)

    def edges(self) -> Tuple[float, ...]:
        return tuple(
            self.range_min + i * self.bin_width for i in range(self.bin_count + 1)
        )

    def centers(self) -> Tuple[float, ...]:
        return tuple(
            self.range_min + (i + 0.5) * self.bin_width for i in range(self.bin_count)
        )

    def to_payload(self) -> HistogramPayload:
        return {
            "range_min": self.range_min,
            "range_max": self.range_max,
            "bin_count": self.bin_count,
            "bin_width": self.bin_width,
            "counts": self.counts,
        }


@dataclass(frozen=True)
class Summary:
    n: int
    mean: float
    population_sd: float
    sample_sd: float


@dataclass(frozen=True, kw_only=True)
class TestResult:
    """Outcome of a two-sample test.

    ``secondary`` holds the test's auxiliary parameter: the z-score for
    Mann-Whitney U, the Welch-Satterthwaite degrees of freedom for the t-test.
    """

    __test__ = False  # not a pytest test class

    test: TestName
    statistic: float
    secondary: float
    p_value: float

    def to_payload(self) -> TestResultPayload:
        return {
            "test": self.test,
            "statistic": self.statistic,
            "secondary": self.secondary,
            "p_value": self.p_value,
        }


@dataclass(frozen=True, kw_only=True)
class MannWhitneyResult(TestResult):
    test: TestName = "mann_whitney_u"
    u1: float = 0.0
    u2: float = 0.0
    rank_sum_a: float = 0.0
    ranked: Tuple[RankedObservation, ...] = field(default=(), repr=False)

    @property
    def u(self) -> float:
        return self.statistic

    @property
    def z(self) -> float:
        return self.secondary


@dataclass(frozen=True, kw_only=True)
class WelchResult(TestResult):
    test: TestName = "welch_t"
    mean_a: Optional[float] = None
    mean_b: Optional[float] = None
    sd_a: Optional[float] = None
    sd_b: Optional[float] = None

    @property
    def t(self) -> float:
        return self.statistic

    @property
    def df(self) -> float:
        return self.secondary
