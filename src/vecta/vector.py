"""Immutable 2D vector value type."""

from __future__ import annotations

import math
import random as _random
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterator, Optional, Sequence

from .errors import DivideByZeroError

if TYPE_CHECKING:
    from .rng import DeterministicRng


def _ieee_div(numerator: float, denominator: float) -> float:
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _round_half_up(value: float) -> float:
    if not math.isfinite(value):
        return value
    floor = math.floor(value)
    if value - floor >= 0.5:
        floor += 1
    return float(floor)


def _format_number(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


@dataclass(frozen=True, slots=True)
class Vector2:
    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @classmethod
    def from_pair(cls, pair: Sequence[float]) -> "Vector2":
        x, y = pair
        return cls(x, y)

    @classmethod
    def from_fields(cls, obj: Any) -> "Vector2":
        """Build a vector from anything exposing ``x``/``y`` (attributes or mapping keys)."""
        if isinstance(obj, Mapping):
            return cls(obj["x"], obj["y"])
        return cls(obj.x, obj.y)

    @classmethod
    def zero(cls) -> "Vector2":
        return cls(0.0, 0.0)

    @classmethod
    def random(
        cls,
        top_left: "Vector2",
        bottom_right: "Vector2",
        rng: Optional["DeterministicRng"] = None,
    ) -> "Vector2":
        """Sample a point uniformly from the rectangle spanned by two corners.

        The corners may be given in any order. Each axis is drawn from the
        half-open range ``[min, max)``.
        """
        next_float = _random.random if rng is None else rng.next_float
        min_x = min(top_left.x, bottom_right.x)
        max_x = max(top_left.x, bottom_right.x)
        min_y = min(top_left.y, bottom_right.y)
        max_y = max(top_left.y, bottom_right.y)
        return cls(
            min_x + next_float() * (max_x - min_x),
            min_y + next_float() * (max_y - min_y),
        )

    def clone(self) -> "Vector2":
        return Vector2(self.x, self.y)

    def get_x(self) -> float:
        return self.x

    def get_y(self) -> float:
        return self.y

    def to_pair(self) -> tuple[float, float]:
        return (self.x, self.y)

    def add(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def add_x(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y)

    def add_y(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x, self.y + other.y)

    def sub(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def sub_x(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y)

    def sub_y(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x, self.y - other.y)

    def mul(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x * other.x, self.y * other.y)

    def mul_x(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x * other.x, self.y)

    def mul_y(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x, self.y * other.y)

    # Component-wise division keeps IEEE semantics: a zero divisor yields inf or nan.
    def div(self, other: "Vector2") -> "Vector2":
        return Vector2(_ieee_div(self.x, other.x), _ieee_div(self.y, other.y))

    def div_x(self, other: "Vector2") -> "Vector2":
        return Vector2(_ieee_div(self.x, other.x), self.y)

    def div_y(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x, _ieee_div(self.y, other.y))

    # sy=None shares sx; an explicit 0 is honored.
    def add_scalar(self, sx: float, sy: Optional[float] = None) -> "Vector2":
        sy = sx if sy is None else sy
        return Vector2(self.x + sx, self.y + sy)

    def add_scalar_x(self, scalar: float) -> "Vector2":
        return Vector2(self.x + scalar, self.y)

    def add_scalar_y(self, scalar: float) -> "Vector2":
        return Vector2(self.x, self.y + scalar)

    def sub_scalar(self, sx: float, sy: Optional[float] = None) -> "Vector2":
        sy = sx if sy is None else sy
        return Vector2(self.x - sx, self.y - sy)

    def sub_scalar_x(self, scalar: float) -> "Vector2":
        return Vector2(self.x - scalar, self.y)

    def sub_scalar_y(self, scalar: float) -> "Vector2":
        return Vector2(self.x, self.y - scalar)

    def mul_scalar(self, sx: float, sy: Optional[float] = None) -> "Vector2":
        sy = sx if sy is None else sy
        return Vector2(self.x * sx, self.y * sy)

    def mul_scalar_x(self, scalar: float) -> "Vector2":
        return Vector2(self.x * scalar, self.y)

    def mul_scalar_y(self, scalar: float) -> "Vector2":
        return Vector2(self.x, self.y * scalar)

    def div_scalar(self, sx: float, sy: Optional[float] = None) -> "Vector2":
        """Divide each axis by a scalar.

        Raises:
            DivideByZeroError: if the effective x or y scalar is zero.
        """
        sy = sx if sy is None else sy
        if sx == 0 or sy == 0:
            raise DivideByZeroError(sx, sy)
        return Vector2(self.x / sx, self.y / sy)

    def div_scalar_x(self, scalar: float) -> "Vector2":
        if scalar == 0:
            return Vector2(0.0, self.y)
        return Vector2(self.x / scalar, self.y)

    def div_scalar_y(self, scalar: float) -> "Vector2":
        if scalar == 0:
            return Vector2(self.x, 0.0)
        return Vector2(self.x, self.y / scalar)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def magnitude(self) -> float:
        return math.sqrt(self.length_squared())

    def length(self) -> float:
        return self.magnitude()

    def normalize(self) -> "Vector2":
        mag = self.magnitude()
        if mag == 0:
            return Vector2(0.0, 0.0)
        return Vector2(self.x / mag, self.y / mag)

    def angle_radians(self) -> float:
        """Heading in radians within ``(-pi, pi]``; the zero vector reports 0."""
        return math.atan2(self.y, self.x)

    def angle_degrees(self) -> float:
        return self.angle_radians() * 180 / math.pi

    def angle_to_radians(self, other: "Vector2") -> float:
        return other.sub(self).angle_radians()

    def angle_to_degrees(self, other: "Vector2") -> float:
        return other.sub(self).angle_degrees()

    def distance_to(self, other: "Vector2") -> float:
        dx = other.x - self.x
        dy = other.y - self.y
        return math.sqrt(dx * dx + dy * dy)

    def dot_product(self, other: "Vector2") -> float:
        return self.x * other.x + self.y * other.y

    def cross_product(self, other: "Vector2") -> float:
        """Z component of the 3D cross product of two planar vectors."""
        return self.x * other.y - self.y * other.x

    def invert(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def invert_x(self) -> "Vector2":
        return Vector2(-self.x, self.y)

    def invert_y(self) -> "Vector2":
        return Vector2(self.x, -self.y)

    def round(self) -> "Vector2":
        return Vector2(_round_half_up(self.x), _round_half_up(self.y))

    def limit(self, max_abs: float, factor: float) -> "Vector2":
        """Damp each axis whose magnitude exceeds ``max_abs`` by ``factor``.

        This scales rather than clamps, so a damped axis may still exceed
        ``max_abs``.
        """
        return Vector2(
            self.x * factor if abs(self.x) > max_abs else self.x,
            self.y * factor if abs(self.y) > max_abs else self.y,
        )

    def interpolate(self, other: "Vector2", factor_x: float, factor_y: float) -> "Vector2":
        return Vector2(
            (1 - factor_x) * self.x + factor_x * other.x,
            (1 - factor_y) * self.y + factor_y * other.y,
        )

    def rotate_by_radians(self, radians: float) -> "Vector2":
        if radians == 0:
            return self.clone()
        cos_a = math.cos(radians)
        sin_a = math.sin(radians)
        return Vector2(
            self.x * cos_a - self.y * sin_a,
            self.x * sin_a + self.y * cos_a,
        )

    def rotate_by_degrees(self, degrees: float) -> "Vector2":
        return self.rotate_by_radians(degrees * math.pi / 180)

    def __add__(self, other: "Vector2") -> "Vector2":
        return self.add(other)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return self.sub(other)

    def __mul__(self, scalar: float) -> "Vector2":
        if isinstance(scalar, Vector2):
            return NotImplemented
        return self.mul_scalar(scalar)

    def __rmul__(self, scalar: float) -> "Vector2":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "Vector2":
        if isinstance(scalar, Vector2):
            return NotImplemented
        return self.div_scalar(scalar)

    def __neg__(self) -> "Vector2":
        return self.invert()

    def __abs__(self) -> float:
        return self.magnitude()

    def __round__(self, ndigits: Optional[int] = None) -> "Vector2":
        if ndigits is None:
            return self.round()
        return Vector2(round(self.x, ndigits), round(self.y, ndigits))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"Vector2 {{ x: {_format_number(self.x)}, y: {_format_number(self.y)} }}"

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        return f"Vector2 {{ x: {self.x:{format_spec}}, y: {self.y:{format_spec}} }}"


ZERO = Vector2(0.0, 0.0)
