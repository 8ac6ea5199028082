from __future__ import annotations

import pytest
from pygame.math import Vector2 as PygameVector2

from vecta.interop import from_pygame, to_pygame
from vecta.vector import Vector2


def test_round_trip_preserves_components():
    vec = Vector2(3.5, -4.25)
    pg_vec = to_pygame(vec)

    assert isinstance(pg_vec, PygameVector2)
    assert (pg_vec.x, pg_vec.y) == (3.5, -4.25)
    assert from_pygame(pg_vec) == vec


def test_from_pygame_copies_values():
    pg_vec = PygameVector2(1, 2)
    vec = from_pygame(pg_vec)
    pg_vec.x = 99

    assert vec == Vector2(1, 2)


def test_from_fields_accepts_pygame_vectors():
    assert Vector2.from_fields(PygameVector2(6, 8)) == Vector2(6, 8)


@pytest.mark.parametrize("degrees", [0, 30, 90, 135, 180, 270, -45])
def test_rotation_matches_pygame(degrees):
    vec = Vector2(3, 4)
    expected = PygameVector2(3, 4).rotate(degrees)
    result = vec.rotate_by_degrees(degrees)

    assert result.x == pytest.approx(expected.x, abs=1e-9)
    assert result.y == pytest.approx(expected.y, abs=1e-9)


@pytest.mark.parametrize("components", [(3, 4), (-2, 7), (-5, -5), (0, -1)])
def test_geometry_matches_pygame(components):
    vec = Vector2(*components)
    pg_vec = PygameVector2(*components)
    other = Vector2(1, -2)
    pg_other = PygameVector2(1, -2)

    radius, phi = pg_vec.as_polar()
    assert vec.magnitude() == pytest.approx(radius)
    assert vec.angle_degrees() == pytest.approx(phi)
    assert vec.dot_product(other) == pytest.approx(pg_vec.dot(pg_other))
    assert vec.cross_product(other) == pytest.approx(pg_vec.cross(pg_other))
    assert vec.distance_to(other) == pytest.approx(pg_vec.distance_to(pg_other))
