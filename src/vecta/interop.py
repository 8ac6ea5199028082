"""Conversions between :class:`Vector2` and ``pygame.math.Vector2``."""

from __future__ import annotations

from pygame.math import Vector2 as PygameVector2

from .vector import Vector2


def to_pygame(vector: Vector2) -> PygameVector2:
    return PygameVector2(vector.x, vector.y)


def from_pygame(vector: PygameVector2) -> Vector2:
    # copy so later in-place edits of the pygame vector cannot leak in
    return Vector2.from_fields(vector)
