"""Tests for mid-ranking and the Mann-Whitney U test."""

import math

import pytest
from scipy import stats

from meansd.core.names import Group
from meansd.stats.common.distributions import normal_cdf
from meansd.stats.methods.rank_tests import (
    mann_whitney_u,
    rank_observations,
    tag_samples,
)

X = [0.8, 1.9, 2.4, 3.7, 5.1, 6.6]
Y = [2.0, 4.4, 7.3, 8.8, 9.5, 12.1, 15.0]


def test_tag_samples_puts_group_a_first():
    tagged = tag_samples([3.0], [1.0, 2.0])
    assert [(s.value, s.group) for s in tagged] == [
        (3.0, Group.A),
        (1.0, Group.B),
        (2.0, Group.B),
    ]


def test_completely_separated_groups():
    res = mann_whitney_u([1, 2, 3], [4, 5, 6])
    assert (res.u1, res.u2, res.u) == (9.0, 0.0, 0.0)
    assert res.rank_sum_a == 6.0
    assert res.z == pytest.approx(-4 / math.sqrt(5.25))
    assert res.z == pytest.approx(-1.7457, abs=1e-4)
    assert res.p_value == pytest.approx(0.081, abs=1e-3)
    assert res.p_value == pytest.approx(2 * (1 - normal_cdf(4 / math.sqrt(5.25))))


def test_continuity_correction_is_always_added():
    res = mann_whitney_u(X, Y)
    assert (res.u1, res.u2, res.u) == (36.0, 6.0, 6.0)
    assert res.z == pytest.approx((6 - 21 + 0.5) / 7)


def test_p_value_agrees_with_scipy_when_there_are_no_ties():
    res = mann_whitney_u(X, Y)
    expected = stats.mannwhitneyu(
        X, Y, use_continuity=True, alternative="two-sided", method="asymptotic"
    ).pvalue
    assert res.p_value == pytest.approx(expected, abs=1e-6)


def test_u1_plus_u2_is_n1_n2():
    res = mann_whitney_u(X, Y)
    assert res.u1 + res.u2 == len(X) * len(Y)
    assert res.u == min(res.u1, res.u2)


def test_swapping_groups_keeps_u_and_p():
    forward = mann_whitney_u(X, Y)
    backward = mann_whitney_u(Y, X)
    assert backward.u == forward.u
    assert (backward.u1, backward.u2) == (forward.u2, forward.u1)
    assert backward.p_value == pytest.approx(forward.p_value)


def test_ties_receive_mid_ranks():
    ranked = rank_observations([1, 2, 3], [7, 7, 7])
    assert [o.rank for o in ranked] == [1.0, 2.0, 3.0, 5.0, 5.0, 5.0]


def test_ties_across_groups():
    res = mann_whitney_u([1, 2, 2], [2, 3])
    ranks = [(o.value, o.group, o.rank) for o in res.ranked]
    assert ranks == [
        (1.0, Group.A, 1.0),
        (2.0, Group.A, 3.0),
        (2.0, Group.A, 3.0),
        (2.0, Group.B, 3.0),
        (3.0, Group.B, 5.0),
    ]
    assert res.rank_sum_a == 7.0
    assert (res.u1, res.u2, res.u) == (5.0, 1.0, 1.0)


def test_rank_sum_is_triangular_number():
    ranked = rank_observations([4, 4, 1, 9], [4, 2, 9])
    n = len(ranked)
    assert sum(o.rank for o in ranked) == n * (n + 1) / 2
    assert [o.value for o in ranked] == sorted(o.value for o in ranked)


def test_identical_groups_are_not_significant():
    res = mann_whitney_u([1, 2, 3, 4], [1, 2, 3, 4])
    assert res.u1 == res.u2 == 8.0
    assert res.p_value > 0.5


@pytest.mark.parametrize("a, b", [([], [1.0, 2.0]), ([1.0], []), ([], [])])
def test_empty_group(a, b):
    res = mann_whitney_u(a, b)
    assert (res.statistic, res.secondary, res.p_value) == (0.0, 0.0, 1.0)
    assert res.test == "mann_whitney_u"


def test_accepts_generators():
    res = mann_whitney_u((v for v in [1, 2, 3]), iter([4, 5, 6]))
    assert res.u == 0.0
