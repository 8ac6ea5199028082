"""Immutable 2D vectors for geometry, physics and graphics code."""

from .errors import DivideByZeroError, VectaError
from .vector import ZERO, Vector2

__all__ = [
    "DivideByZeroError",
    "VectaError",
    "Vector2",
    "ZERO",
]
