"""
meansd.stats.schemes.exercises
==============================

Components and exercise templates for the sampling-distribution widgets.

**Components:**
- `HistogramStatistic`: fixed-range histogram of one dataset
- `SummaryStatistic`: mean, population SD and sample SD of one dataset
- `BinnedSummaryStatistic`: the same statistics computed from bin counts
- `MannWhitneyStatistic`: Mann-Whitney U of datasets A and B
- `WelchTStatistic`: Welch's t-test of datasets A and B

**Exercises:**
- `NormalExercise`: accumulate Normal(14, 23.1) draws
- `LognormalExercise`: accumulate Lognormal(1.1, 9) draws kept at or below 80
- `ParametricComparison`: two lognormal groups compared by both tests
- `GaltonBoardTally`: tally externally simulated Galton-board landing slots

Single-distribution exercises accumulate: every batch is appended to the
samples already drawn. The comparison regenerates both groups from its fixed
seed on every call, so the same group size always gives the same groups.

Examples
--------
>>> cmp = ParametricComparison("cmp")
>>> cmp.generate(5)
>>> result = cmp.analyze()
>>> sorted(result.tests)
['mann_whitney_u', 'welch_t']
>>> cmp.generate(5)
>>> cmp.analyze().tests["welch_t"] == result.tests["welch_t"]
True

>>> board = GaltonBoardTally("galton")
>>> board.add_observations(slots=[5, 5, 4, 6])
>>> board.analyze().summaries["binned_summary"].mean
5.0
"""

from __future__ import annotations
import math
import random
from abc import abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional, Tuple

from meansd.core.components import (
    ComponentBase,
    SingleDatasetStatistic,
    TwoSampleStatistic,
)
from meansd.core.errors import InvalidParameterError
from meansd.core.model import (
    Dataset,
    Histogram,
    MannWhitneyResult,
    Summary,
    WelchResult,
)
from meansd.core.names import GROUP_A, GROUP_B, SAMPLES, SLOTS
from meansd.runtime.experiment_template import ExerciseTemplate
from meansd.stats.common.descriptive import binned_mean, binned_sd, describe
from meansd.stats.common.distributions import t_cdf
from meansd.stats.common.histogram import DEFAULT_BIN_COUNT, HistogramBinner
from meansd.stats.common.prng import DEFAULT_SEED, SeededRandom
from meansd.stats.common.sampling import (
    draw_lognormal,
    draw_normal,
    draw_paired_lognormal,
)
from meansd.stats.methods.rank_tests import mann_whitney_u
from meansd.stats.methods.t_tests import CDF, welch_t_test


# --- Components ---


@dataclass(kw_only=True)
class HistogramStatistic(SingleDatasetStatistic):
    """
    Bin one dataset over a fixed range.

    Attributes:
        binner: The fixed-range binner
        tag: Tag for histogram records (default "stat:histogram")
    """

    binner: HistogramBinner
    tag: str = "stat:histogram"

    def compute_one(self, dataset: Dataset) -> Histogram:
        return self.binner.bin(dataset)


@dataclass(kw_only=True)
class SummaryStatistic(SingleDatasetStatistic):
    """Mean, population SD and sample SD of one dataset."""

    tag: str = "stat:summary"

    def compute_one(self, dataset: Dataset) -> Summary:
        return describe(dataset.values)


@dataclass(kw_only=True)
class BinnedSummaryStatistic(SingleDatasetStatistic):
    """
    Summary statistics of bin indices, computed from bin counts.

    The Galton board reports the mean and SD of the slot each ball landed in,
    read off its slot counts rather than off the raw landings.
    """

    binner: HistogramBinner
    tag: str = "stat:summary"

    def compute_one(self, dataset: Dataset) -> Summary:
        counts = self.binner.bin(dataset).counts
        n = sum(counts)
        pop_sd = binned_sd(counts)
        return Summary(
            n=n,
            mean=binned_mean(counts),
            population_sd=pop_sd,
            sample_sd=pop_sd * math.sqrt(n / (n - 1)) if n > 1 else 0.0,
        )


@dataclass(kw_only=True)
class MannWhitneyStatistic(TwoSampleStatistic):
    """Two-sided Mann-Whitney U test of A against B."""

    tag: str = "test:mann_whitney_u"

    def compare(self, a: Dataset, b: Dataset) -> MannWhitneyResult:
        return mann_whitney_u(a.values, b.values)


@dataclass(kw_only=True)
class WelchTStatistic(TwoSampleStatistic):
    """
    Two-sided Welch t-test of A against B.

    Attributes:
        cdf: Student's t CDF; the approximate `t_cdf` by default
    """

    cdf: CDF = t_cdf
    tag: str = "test:welch_t"

    def compare(self, a: Dataset, b: Dataset) -> WelchResult:
        return welch_t_test(a.values, b.values, cdf=self.cdf)


# --- Configuration ---


@dataclass
class HistogramConfig:
    """Histogram axis shared by every batch of an exercise."""

    range_min: float
    range_max: float
    bin_count: int = DEFAULT_BIN_COUNT

    def binner(self) -> HistogramBinner:
        return HistogramBinner(self.range_min, self.range_max, self.bin_count)


@dataclass
class NormalConfig:
    """
    Configuration of the normal-sampling exercise.

    Parameters
    ----------
    mean, sd : float
        Parameters of the sampled normal distribution (mGy)
    batch_size : int
        Samples drawn by each `add_samples()` call without an explicit size
    seed : int, optional
        Generator seed. When None a seed is chosen once per exercise and
        exposed on it, so the session can be replayed.
    histogram : HistogramConfig
        Fixed histogram axis
    """

    mean: float = 14.0
    sd: float = 23.1
    batch_size: int = 100
    seed: Optional[int] = None
    histogram: HistogramConfig = field(
        default_factory=lambda: HistogramConfig(-50.0, 80.0, DEFAULT_BIN_COUNT)
    )

    def validate(self) -> None:
        if not self.sd >= 0:
            raise InvalidParameterError(f"sd must be non-negative, got {self.sd}")
        _validate_batch_size(self.batch_size)
        self.histogram.binner()


@dataclass
class LognormalConfig:
    """
    Configuration of the lognormal-sampling exercise.

    ``shape`` and ``scale`` parametrise the underlying normal: a sample is
    ``exp(Normal(ln(scale), shape))``. Draws above ``max_value`` are
    discarded before they reach the dataset.
    """

    shape: float = 1.1
    scale: float = 9.0
    max_value: Optional[float] = 80.0
    batch_size: int = 100
    seed: Optional[int] = None
    histogram: HistogramConfig = field(
        default_factory=lambda: HistogramConfig(-50.0, 80.0, DEFAULT_BIN_COUNT)
    )

    def validate(self) -> None:
        _validate_lognormal(self.shape, self.scale)
        _validate_batch_size(self.batch_size)
        self.histogram.binner()


@dataclass
class ComparisonConfig:
    """
    Configuration of the parametric vs. non-parametric comparison.

    Group A is slightly lower than group B. Both groups are regenerated from
    ``seed`` on every `generate()`.
    """

    shape_a: float = 1.0
    scale_a: float = 10.0
    shape_b: float = 1.2
    scale_b: float = 12.0
    group_size: int = 5
    seed: int = DEFAULT_SEED
    histogram: HistogramConfig = field(
        default_factory=lambda: HistogramConfig(0.0, 100.0, DEFAULT_BIN_COUNT)
    )

    def validate(self) -> None:
        _validate_lognormal(self.shape_a, self.scale_a)
        _validate_lognormal(self.shape_b, self.scale_b)
        _validate_batch_size(self.group_size)
        self.histogram.binner()


@dataclass
class GaltonConfig:
    """
    Galton board geometry: ``rows`` of pegs over ``slots`` landing slots.

    Only ``slots`` enters the tally, as the histogram axis. ``rows`` describes
    the board the landings were simulated on; it is validated and reported by
    `GaltonBoardTally.get_summary` but never used in a computation.
    """

    rows: int = 10
    slots: int = 11

    def validate(self) -> None:
        if self.rows < 1:
            raise InvalidParameterError(f"rows must be at least 1, got {self.rows}")
        if self.slots < 1:
            raise InvalidParameterError(f"slots must be at least 1, got {self.slots}")

    def binner(self) -> HistogramBinner:
        # One unit-wide bin centred on each slot index.
        return HistogramBinner(-0.5, self.slots - 0.5, self.slots)


def _validate_lognormal(shape: float, scale: float) -> None:
    if not scale > 0:
        raise InvalidParameterError(f"scale must be positive, got {scale}")
    if not shape >= 0:
        raise InvalidParameterError(f"shape must be non-negative, got {shape}")


def _validate_batch_size(n: int) -> None:
    if n < 1:
        raise InvalidParameterError(f"batch size must be at least 1, got {n}")


def _resolve_seed(seed: Optional[int]) -> int:
    return seed if seed is not None else random.getrandbits(32)


# --- Exercises ---


class _AccumulatingExercise(ExerciseTemplate):
    """Single-dataset exercise whose batches are appended to one another."""

    def __init__(self, exercise_id: str, binner: HistogramBinner, seed: int):
        self.binner = binner
        self.rng = SeededRandom(seed)
        super().__init__(exercise_id)

    @property
    def seed(self) -> int:
        return self.rng.seed

    def configure_components(self) -> Dict[str, ComponentBase]:
        return {
            "histogram": HistogramStatistic(binner=self.binner, source=SAMPLES),
            "summary": SummaryStatistic(source=SAMPLES),
        }

    @property
    def samples(self) -> Dataset:
        return self._datasets.get(SAMPLES, Dataset())

    def add_samples(self, n: Optional[int] = None) -> None:
        """Draw one batch (``batch_size`` samples unless ``n`` is given)."""
        self.add_observations(n=n)

    def _draw_batch(self, n: Optional[int] = None, **kwargs: Any) -> Dict[str, Dataset]:
        if kwargs:
            raise ValueError(
                f"Unsupported observation format for {type(self).__name__}: "
                f"{sorted(kwargs)}"
            )
        size = self.batch_size if n is None else n
        _validate_batch_size(size)
        return {SAMPLES: self.samples.extend(self._draw(size))}

    @abstractmethod
    def _draw(self, n: int) -> Dataset:
        """Draw ``n`` new samples from the exercise's distribution."""
        pass

    @property
    @abstractmethod
    def batch_size(self) -> int:
        pass

    def normal_curve(self, points: int = 200) -> list:
        """Normal overlay fitted with the mean and *population* SD."""
        summary = describe(self.samples.values)
        histogram = self.binner.bin(self.samples)
        return self.binner.normal_curve(
            summary.mean, summary.population_sd, histogram.max_count, points
        )

    def reset(self) -> None:
        super().reset()
        self.rng.reset(self.rng.seed)

    def get_summary(self) -> Dict[str, Any]:
        summary = super().get_summary()
        summary.update({"seed": self.seed, "sample_count": len(self.samples)})
        return summary


class NormalExercise(_AccumulatingExercise):
    """
    Samples from Normal(mean=14 mGy, sd=23.1 mGy), binned over [-50, 80).

    A fitted normal curve (mean and population SD) matches the bars well.
    """

    def __init__(self, exercise_id: str, config: Optional[NormalConfig] = None):
        self.config = config or NormalConfig()
        self.config.validate()
        super().__init__(
            exercise_id, self.config.histogram.binner(), _resolve_seed(self.config.seed)
        )

    @property
    def batch_size(self) -> int:
        return self.config.batch_size

    def _draw(self, n: int) -> Dataset:
        return draw_normal(n, self.config.mean, self.config.sd, self.rng)

    def get_summary(self) -> Dict[str, Any]:
        summary = super().get_summary()
        summary.update(
            {
                "exercise_type": "normal",
                "true_distribution": {"mean": self.config.mean, "sd": self.config.sd},
            }
        )
        return summary


class LognormalExercise(_AccumulatingExercise):
    """
    Samples from Lognormal(shape=1.1, scale=9), keeping samples <= 80.

    A normal curve fitted to these samples visibly does not fit: mean and SD
    are poor summaries of skewed data.
    """

    def __init__(self, exercise_id: str, config: Optional[LognormalConfig] = None):
        self.config = config or LognormalConfig()
        self.config.validate()
        super().__init__(
            exercise_id, self.config.histogram.binner(), _resolve_seed(self.config.seed)
        )

    @property
    def batch_size(self) -> int:
        return self.config.batch_size

    def _draw(self, n: int) -> Dataset:
        return draw_lognormal(
            n,
            self.config.shape,
            self.config.scale,
            self.rng,
            max_value=self.config.max_value,
        )

    def get_summary(self) -> Dict[str, Any]:
        summary = super().get_summary()
        summary.update(
            {
                "exercise_type": "lognormal",
                "true_distribution": {
                    "shape": self.config.shape,
                    "scale": self.config.scale,
                },
            }
        )
        return summary


class ParametricComparison(ExerciseTemplate):
    """
    Parametric vs. non-parametric testing of two lognormal groups.

    For small groups the t-test can report a significant difference that the
    Mann-Whitney U test does not, because the t-test assumes normality.
    """

    def __init__(
        self,
        exercise_id: str,
        config: Optional[ComparisonConfig] = None,
        cdf: CDF = t_cdf,
    ):
        self.config = config or ComparisonConfig()
        self.config.validate()
        self.binner = self.config.histogram.binner()
        self.cdf = cdf
        self.rng = SeededRandom(self.config.seed)
        super().__init__(exercise_id)

    def configure_components(self) -> Dict[str, ComponentBase]:
        return {
            "histogram_a": HistogramStatistic(binner=self.binner, source=GROUP_A),
            "histogram_b": HistogramStatistic(binner=self.binner, source=GROUP_B),
            "summary_a": SummaryStatistic(source=GROUP_A),
            "summary_b": SummaryStatistic(source=GROUP_B),
            "mann_whitney_u": MannWhitneyStatistic(),
            "welch_t": WelchTStatistic(cdf=self.cdf),
        }

    def generate(self, group_size: Optional[int] = None) -> None:
        """Regenerate both groups from the fixed seed."""
        self.add_observations(group_size=group_size)

    def _draw_batch(
        self, group_size: Optional[int] = None, **kwargs: Any
    ) -> Dict[str, Dataset]:
        if kwargs:
            raise ValueError(
                f"Unsupported observation format for ParametricComparison: "
                f"{sorted(kwargs)}"
            )
        n = self.config.group_size if group_size is None else group_size
        _validate_batch_size(n)

        self.rng.reset(self.config.seed)
        a, b = draw_paired_lognormal(
            n,
            (self.config.shape_a, self.config.scale_a),
            (self.config.shape_b, self.config.scale_b),
            self.rng,
        )
        return {GROUP_A: a, GROUP_B: b}

    def groups(self) -> Tuple[Dataset, Dataset]:
        return (
            self._datasets.get(GROUP_A, Dataset()),
            self._datasets.get(GROUP_B, Dataset()),
        )

    def normal_curves(self, points: int = 200) -> Dict[str, list]:
        """Normal overlays for both groups, sharing the taller group's peak."""
        a, b = self.groups()
        peak = max(self.binner.bin(a).max_count, self.binner.bin(b).max_count)
        curves = {}
        for name, data in ((GROUP_A, a), (GROUP_B, b)):
            summary = describe(data.values)
            curves[str(name)] = self.binner.normal_curve(
                summary.mean, summary.population_sd, peak, points
            )
        return curves

    def get_summary(self) -> Dict[str, Any]:
        summary = super().get_summary()
        summary.update({"exercise_type": "parametric_comparison", "seed": self.config.seed})
        return summary


class GaltonBoardTally(ExerciseTemplate):
    """
    Tally of Galton-board landings.

    The ball animation is simulated elsewhere; this exercise receives the
    slot index (0..slots-1) each ball landed in and reports the slot counts
    with the mean and SD of the slot index.
    """

    def __init__(self, exercise_id: str, config: Optional[GaltonConfig] = None):
        self.config = config or GaltonConfig()
        self.config.validate()
        self.binner = self.config.binner()
        super().__init__(exercise_id)

    def configure_components(self) -> Dict[str, ComponentBase]:
        return {
            "slot_counts": HistogramStatistic(binner=self.binner, source=SLOTS),
            "binned_summary": BinnedSummaryStatistic(binner=self.binner, source=SLOTS),
        }

    def _draw_batch(self, slots: Iterable[int] = (), **kwargs: Any) -> Dict[str, Dataset]:
        if kwargs:
            raise ValueError(
                f"Unsupported observation format for GaltonBoardTally: {sorted(kwargs)}"
            )
        landed = list(slots)
        for slot in landed:
            if not 0 <= slot < self.config.slots:
                raise InvalidParameterError(
                    f"slot must be in [0, {self.config.slots}), got {slot}"
                )
        current = self._datasets.get(SLOTS, Dataset())
        return {SLOTS: current.extend(landed)}

    def normal_curve(self, points: int = 200) -> list:
        """Normal overlay over slot indices, scaled to the fullest slot."""
        counts = self.binner.bin(self._datasets.get(SLOTS, Dataset())).counts
        if sum(counts) == 0:
            return []
        return self.binner.normal_curve(
            binned_mean(counts), binned_sd(counts), max(counts), points
        )

    def get_summary(self) -> Dict[str, Any]:
        summary = super().get_summary()
        summary.update(
            {
                "exercise_type": "galton_board",
                "rows": self.config.rows,
                "slots": self.config.slots,
            }
        )
        return summary
