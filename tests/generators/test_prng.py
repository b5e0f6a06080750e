"""Unit tests for the seeded linear-congruential generator."""
from __future__ import annotations

import pytest

from findata.generators.prng import INCREMENT, MODULUS, MULTIPLIER, SeededRandom


def test_first_draw_follows_recurrence() -> None:
    rng = SeededRandom(42)

    assert rng.next() == 206659 / 233280


def test_stream_matches_manual_recurrence() -> None:
    rng = SeededRandom(7)
    state = 7
    for _ in range(50):
        state = (state * MULTIPLIER + INCREMENT) % MODULUS
        assert rng.next() == state / MODULUS


def test_same_seed_same_stream() -> None:
    first = SeededRandom(1234)
    second = SeededRandom(1234)

    draws_a = [first.next_float(-3.5, 10.0) for _ in range(200)]
    draws_b = [second.next_float(-3.5, 10.0) for _ in range(200)]

    assert draws_a == draws_b


def test_instances_do_not_share_state() -> None:
    a = SeededRandom(99)
    b = SeededRandom(99)
    a.next()
    a.next()

    assert b.next() == SeededRandom(99).next()


def test_next_stays_in_unit_interval() -> None:
    rng = SeededRandom(0)
    for _ in range(5_000):
        value = rng.next()
        assert 0.0 <= value < 1.0


def test_next_int_is_inclusive() -> None:
    rng = SeededRandom(3)
    seen = {rng.next_int(1, 4) for _ in range(2_000)}

    assert seen == {1, 2, 3, 4}


def test_next_float_bounds() -> None:
    rng = SeededRandom(11)
    for _ in range(1_000):
        value = rng.next_float(15_000, 40_000)
        assert 15_000 <= value < 40_000


def test_choice_reaches_every_item() -> None:
    rng = SeededRandom(5)
    items = ["a", "b", "c"]

    assert {rng.choice(items) for _ in range(500)} == set(items)


def test_choice_rejects_empty_sequence() -> None:
    with pytest.raises(ValueError):
        SeededRandom(1).choice([])


def test_weighted_choice_skips_zero_weights() -> None:
    rng = SeededRandom(8)
    picks = {rng.weighted_choice(["never", "always"], [0.0, 2.5]) for _ in range(500)}

    assert picks == {"always"}


def test_weighted_choice_consumes_one_draw() -> None:
    weighted = SeededRandom(21)
    plain = SeededRandom(21)

    weighted.weighted_choice(["x", "y"], [1, 1])
    plain.next()

    assert weighted.next() == plain.next()


@pytest.mark.parametrize(
    "weights",
    [[1.0], [-1.0, 2.0], [0.0, 0.0]],
)
def test_weighted_choice_validates_weights(weights) -> None:
    with pytest.raises(ValueError):
        SeededRandom(1).weighted_choice(["a", "b"], weights)
