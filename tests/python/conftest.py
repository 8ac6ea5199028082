import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[2]
src_root = ROOT / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from vecta.vector import Vector2  # noqa: E402


@pytest.fixture
def assert_unchanged():
    """Return a checker asserting a vector still holds its original components."""

    def _check(vector: Vector2, x: float, y: float) -> None:
        assert vector.get_x() == x
        assert vector.get_y() == y

    return _check
