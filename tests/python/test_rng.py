from __future__ import annotations

import math

import pytest

from vecta.rng import DeterministicRng
from vecta.vector import Vector2


def test_same_seed_produces_same_vectors():
    corners = (Vector2(0, 10), Vector2(15, -5))
    rng_a = DeterministicRng(404)
    rng_b = DeterministicRng(404)

    seq_a = [rng_a.next_vector(*corners) for _ in range(20)]
    seq_b = [Vector2.random(*corners, rng=rng_b) for _ in range(20)]

    assert seq_a == seq_b


def test_reset_replays_sequence():
    rng = DeterministicRng(7)
    first = [rng.next_float() for _ in range(5)]
    rng.reset()

    assert [rng.next_float() for _ in range(5)] == first
    assert rng.seed == 7


def test_next_range_is_half_open():
    rng = DeterministicRng(1)

    for _ in range(500):
        value = rng.next_range(-2.0, 3.0)
        assert -2.0 <= value < 3.0


def test_next_int_and_unit_vector():
    rng = DeterministicRng(3)

    for _ in range(100):
        assert 0 <= rng.next_int(4) < 4
        unit = rng.next_unit_vector()
        assert unit.magnitude() == pytest.approx(1.0)
        assert -math.pi <= unit.angle_radians() <= math.pi


def test_seeded_random_stays_inside_bounds():
    rng = DeterministicRng(99)

    for _ in range(200):
        result = rng.next_vector(Vector2(15, -5), Vector2(0, 10))
        assert 0 <= result.x < 15
        assert -5 <= result.y < 10
