"""Axis-aligned 3D bounding boxes."""

from __future__ import annotations

import sys

from meshmath.matrix import Matrix, distance, vector

_BIG = sys.float_info.max


class BoundingBox:
    """Axis-aligned box; a box built without points is empty."""

    __slots__ = ("_min", "_max")

    def __init__(self, min_point: Matrix | None = None, max_point: Matrix | None = None) -> None:
        self._min = vector(*min_point) if min_point is not None else vector(_BIG, _BIG, _BIG)
        self._max = vector(*max_point) if max_point is not None else vector(-_BIG, -_BIG, -_BIG)

    def __iadd__(self, other):
        """Grow the box to include a point or another box."""
        if isinstance(other, BoundingBox):
            lo, hi = other._min, other._max
        elif isinstance(other, Matrix):
            lo = hi = other
        else:
            return NotImplemented
        for i in range(3):
            if lo[i] < self._min[i]:
                self._min[i] = lo[i]
            if hi[i] > self._max[i]:
                self._max[i] = hi[i]
        return self

    def min(self) -> Matrix:
        """Minimum corner."""
        return vector(*self._min)

    def max(self) -> Matrix:
        """Maximum corner."""
        return vector(*self._max)

    def center(self) -> Matrix:
        """Center point."""
        return 0.5 * (self._min + self._max)

    def is_empty(self) -> bool:
        """True if the box contains no point."""
        return any(hi < lo for lo, hi in zip(self._min, self._max))

    def size(self) -> float:
        """Length of the diagonal, zero for an empty box."""
        return 0.0 if self.is_empty() else distance(self._max, self._min)

    def __repr__(self) -> str:
        return f"BoundingBox({list(self._min)}, {list(self._max)})"