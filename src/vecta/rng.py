from __future__ import annotations

import math
import random
from typing import Optional

from .vector import Vector2


class DeterministicRng:
    def __init__(self, seed: Optional[int] = None):
        self._seed = seed
        self._random = random.Random(seed)

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def reset(self) -> None:
        self._random.seed(self._seed)

    def next_float(self) -> float:
        return self._random.random()

    def next_range(self, low: float, high: float) -> float:
        # half-open [low, high); random.uniform may return high
        return low + self._random.random() * (high - low)

    def next_int(self, max_value: int) -> int:
        return self._random.randrange(max_value)

    def next_unit_vector(self) -> Vector2:
        angle = self._random.uniform(-math.pi, math.pi)
        return Vector2(math.cos(angle), math.sin(angle))

    def next_vector(self, top_left: Vector2, bottom_right: Vector2) -> Vector2:
        return Vector2.random(top_left, bottom_right, rng=self)
