"""
meansd.api.exercises
====================

Ready-made exercises in the widgets' own terms.

Examples
--------
>>> from meansd.api.exercises import parametric_comparison, normal_exercise
>>> cmp = parametric_comparison("cmp", group_size=20)
>>> cmp.generate()
>>> len(cmp.groups()[0])
20
>>> ex = normal_exercise("normal", seed=11)
>>> ex.seed
11
"""

from __future__ import annotations
import logging
from typing import Literal, Optional

from meansd.stats.common.distributions import t_cdf, t_cdf_exact
from meansd.stats.schemes.exercises import (
    ComparisonConfig,
    GaltonBoardTally,
    GaltonConfig,
    HistogramConfig,
    LognormalConfig,
    LognormalExercise,
    NormalConfig,
    NormalExercise,
    ParametricComparison,
)

logger = logging.getLogger(__name__)


def normal_exercise(
    exercise_id: str,
    mean: float = 14.0,
    sd: float = 23.1,
    seed: Optional[int] = None,
    batch_size: int = 100,
    range_min: float = -50.0,
    range_max: float = 80.0,
    bin_count: int = 30,
) -> NormalExercise:
    """
    Create the normal-sampling exercise.

    Parameters
    ----------
    exercise_id : str
        Identifier for the exercise
    mean, sd : float, default=14.0, 23.1
        Parameters of the sampled normal distribution (mGy)
    seed : int, optional
        Generator seed; chosen at random and exposed as ``.seed`` when omitted
    batch_size : int, default=100
        Samples per `add_samples()` call
    range_min, range_max, bin_count
        Fixed histogram axis

    Returns
    -------
    NormalExercise
    """
    config = NormalConfig(
        mean=mean,
        sd=sd,
        batch_size=batch_size,
        seed=seed,
        histogram=HistogramConfig(range_min, range_max, bin_count),
    )
    exercise = NormalExercise(exercise_id, config)
    logger.debug("created normal exercise %s with seed %d", exercise_id, exercise.seed)
    return exercise


def lognormal_exercise(
    exercise_id: str,
    shape: float = 1.1,
    scale: float = 9.0,
    max_value: Optional[float] = 80.0,
    seed: Optional[int] = None,
    batch_size: int = 100,
    range_min: float = -50.0,
    range_max: float = 80.0,
    bin_count: int = 30,
) -> LognormalExercise:
    """
    Create the lognormal-sampling exercise.

    ``shape`` and ``scale`` describe the underlying normal (``ln X`` has mean
    ``ln(scale)`` and SD ``shape``). Samples above ``max_value`` are dropped;
    pass ``None`` to keep everything.
    """
    config = LognormalConfig(
        shape=shape,
        scale=scale,
        max_value=max_value,
        batch_size=batch_size,
        seed=seed,
        histogram=HistogramConfig(range_min, range_max, bin_count),
    )
    exercise = LognormalExercise(exercise_id, config)
    logger.debug(
        "created lognormal exercise %s with seed %d", exercise_id, exercise.seed
    )
    return exercise


def parametric_comparison(
    exercise_id: str,
    group_size: int = 5,
    seed: int = 24,
    p_values: Literal["compatible", "exact"] = "compatible",
) -> ParametricComparison:
    """
    Create the parametric vs. non-parametric comparison.

    Parameters
    ----------
    exercise_id : str
        Identifier for the exercise
    group_size : int, default=5
        Samples per group for `generate()` without an explicit size
    seed : int, default=24
        Seed both groups are regenerated from
    p_values : {"compatible", "exact"}, default="compatible"
        Student's t CDF used by the t-test:
        - "compatible": the approximate CDF matching the widgets' numbers
        - "exact": the incomplete-beta CDF from scipy
    """
    cdf_map = {"compatible": t_cdf, "exact": t_cdf_exact}
    if p_values not in cdf_map:
        raise ValueError(f"p_values must be 'compatible' or 'exact', got {p_values}")

    config = ComparisonConfig(group_size=group_size, seed=seed)
    return ParametricComparison(exercise_id, config, cdf=cdf_map[p_values])


def galton_board(exercise_id: str, rows: int = 10, slots: int = 11) -> GaltonBoardTally:
    """Create a Galton-board tally with ``slots`` landing slots."""
    return GaltonBoardTally(exercise_id, GaltonConfig(rows=rows, slots=slots))
