"""Tests for the exercise facade."""

import logging

import pytest

from meansd.api.exercises import (
    galton_board,
    lognormal_exercise,
    normal_exercise,
    parametric_comparison,
)
from meansd.stats.common.distributions import t_cdf, t_cdf_exact
from meansd.stats.schemes.exercises import (
    GaltonBoardTally,
    LognormalExercise,
    NormalExercise,
    ParametricComparison,
)


def test_normal_exercise_defaults():
    exercise = normal_exercise("normal", seed=3)
    assert isinstance(exercise, NormalExercise)
    assert (exercise.config.mean, exercise.config.sd) == (14.0, 23.1)
    assert exercise.binner.range_min == -50.0
    assert exercise.binner.range_max == 80.0
    assert exercise.binner.bin_count == 30


def test_normal_exercise_logs_its_seed(caplog):
    with caplog.at_level(logging.DEBUG, logger="meansd.api.exercises"):
        exercise = normal_exercise("normal")
    assert str(exercise.seed) in caplog.text


def test_lognormal_exercise_defaults():
    exercise = lognormal_exercise("lognormal", seed=3)
    assert isinstance(exercise, LognormalExercise)
    assert exercise.config.max_value == 80.0
    exercise.add_samples()
    assert all(v <= 80.0 for v in exercise.samples)


def test_parametric_comparison_cdf_choice():
    compatible = parametric_comparison("cmp")
    exact = parametric_comparison("cmp", p_values="exact")
    assert isinstance(compatible, ParametricComparison)
    assert compatible.components["welch_t"].cdf is t_cdf
    assert exact.components["welch_t"].cdf is t_cdf_exact


def test_parametric_comparison_shares_groups_across_cdfs():
    compatible = parametric_comparison("cmp", group_size=8)
    exact = parametric_comparison("cmp", group_size=8, p_values="exact")
    compatible.generate()
    exact.generate()
    assert compatible.groups() == exact.groups()
    assert (
        compatible.analyze().tests["welch_t"].t == exact.analyze().tests["welch_t"].t
    )


def test_parametric_comparison_rejects_unknown_cdf():
    with pytest.raises(ValueError, match="p_values"):
        parametric_comparison("cmp", p_values="bogus")


def test_galton_board():
    board = galton_board("galton", rows=6, slots=7)
    assert isinstance(board, GaltonBoardTally)
    assert board.binner.bin_count == 7
