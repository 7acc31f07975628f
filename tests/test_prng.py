"""Tests for the seeded linear congruential generator."""

import pytest

from meansd.stats.common.prng import (
    DEFAULT_SEED,
    INCREMENT,
    MODULUS,
    MULTIPLIER,
    SeededRandom,
)


def test_default_seed_is_24():
    assert DEFAULT_SEED == 24
    assert SeededRandom().state == 24


def test_first_output_from_seed_24():
    rng = SeededRandom(24)
    u = rng.next()
    assert rng.state == 1053852823
    assert u == 1053852823 / 2**32


def test_state_update_follows_lcg_recurrence():
    rng = SeededRandom(123456789)
    state = 123456789
    for _ in range(1000):
        u = rng.next()
        state = (state * MULTIPLIER + INCREMENT) % MODULUS
        assert rng.state == state
        assert u == state / MODULUS


def test_outputs_are_in_unit_interval():
    rng = SeededRandom(99)
    values = rng.draw(10_000)
    assert all(0.0 <= v < 1.0 for v in values)


@pytest.mark.parametrize("seed", [0, 1, 24, 2**31, 2**32 - 1])
def test_reseeding_reproduces_the_stream(seed):
    rng = SeededRandom(seed)
    first = rng.draw(500)
    rng.reset(seed)
    second = rng.draw(500)
    assert first == second


def test_independent_instances_with_same_seed_agree():
    assert SeededRandom(42).draw(100) == SeededRandom(42).draw(100)


def test_different_seeds_differ():
    assert SeededRandom(1).draw(10) != SeededRandom(2).draw(10)


def test_seed_is_reduced_modulo_2_32():
    assert SeededRandom(2**32 + 5).state == 5
    assert SeededRandom(-1).state == 2**32 - 1
    assert SeededRandom(2**32 + 5).draw(5) == SeededRandom(5).draw(5)


def test_reset_remembers_seed():
    rng = SeededRandom(7)
    rng.draw(3)
    assert rng.seed == 7
    rng.reset(11)
    assert rng.seed == 11
    assert rng.state == 11
