from __future__ import annotations

from typing import Optional


class VectaError(Exception):
    """Base class for errors raised by vecta."""


class DivideByZeroError(VectaError, ZeroDivisionError):
    def __init__(self, sx: float, sy: Optional[float] = None) -> None:
        self.sx = sx
        self.sy = sx if sy is None else sy
        super().__init__(f"Cannot divide vector by zero scalar (sx={self.sx}, sy={self.sy})")
