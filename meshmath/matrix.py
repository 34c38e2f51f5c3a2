"""Small dense matrices and column vectors with column-major storage."""

from __future__ import annotations

import math
import numbers
import operator
import sys
from collections.abc import Iterable, Iterator, Sequence

_TINY = sys.float_info.min


def _format_entry(value) -> str:
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, numbers.Integral):
        return str(value)
    return format(value, "g")


class Matrix:
    """A rows x cols matrix; a vector is a matrix with one column.

    Entries are stored column by column. ``m[i, j]`` addresses row ``i`` and
    column ``j``; ``m[k]`` addresses the k-th entry in column-major order,
    which for vectors is simply the k-th component.
    """

    __slots__ = ("_rows", "_cols", "_data")

    def __init__(self, rows: int, cols: int, values: Iterable) -> None:
        """Build from ``rows * cols`` entries given row by row."""
        if rows <= 0 or cols <= 0:
            raise ValueError("matrix dimensions must be positive")
        entries = list(values)
        if len(entries) != rows * cols:
            raise ValueError(
                f"expected {rows * cols} entries, got {len(entries)}"
            )
        row_lists = [entries[r * cols:(r + 1) * cols] for r in range(rows)]
        self._rows = rows
        self._cols = cols
        self._data = [v for column in zip(*row_lists) for v in column]

    @classmethod
    def _raw(cls, rows: int, cols: int, data: Iterable) -> "Matrix":
        m = cls.__new__(cls)
        m._rows = rows
        m._cols = cols
        m._data = list(data)
        return m

    @classmethod
    def filled(cls, rows: int, cols: int, value) -> "Matrix":
        """Matrix with every entry set to ``value``."""
        if rows <= 0 or cols <= 0:
            raise ValueError("matrix dimensions must be positive")
        return cls._raw(rows, cols, [value] * (rows * cols))

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable]) -> "Matrix":
        """Build from a sequence of rows."""
        row_lists = [list(r) for r in rows]
        if not row_lists or not row_lists[0]:
            raise ValueError("matrix needs at least one row and column")
        width = len(row_lists[0])
        if any(len(r) != width for r in row_lists):
            raise ValueError("all rows must have the same length")
        return cls(len(row_lists), width, (v for r in row_lists for v in r))

    @classmethod
    def from_columns(cls, columns: Iterable[Iterable]) -> "Matrix":
        """Build from a sequence of columns (vectors or sequences)."""
        col_lists = [list(c) for c in columns]
        if not col_lists or not col_lists[0]:
            raise ValueError("matrix needs at least one row and column")
        height = len(col_lists[0])
        if any(len(c) != height for c in col_lists):
            raise ValueError("all columns must have the same length")
        return cls._raw(height, len(col_lists), (v for c in col_lists for v in c))

    @classmethod
    def identity(cls, size: int) -> "Matrix":
        """Square identity matrix."""
        if size <= 0:
            raise ValueError("matrix dimensions must be positive")
        return cls._raw(
            size,
            size,
            (1.0 if i == j else 0.0 for j in range(size) for i in range(size)),
        )

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)."""
        return (self._rows, self._cols)

    def column_major(self) -> tuple:
        """All entries, column by column."""
        return tuple(self._data)

    def _offset(self, i: int, j: int) -> int:
        i = operator.index(i)
        j = operator.index(j)
        if not (0 <= i < self._rows and 0 <= j < self._cols):
            raise IndexError(
                f"entry ({i}, {j}) outside {self._rows}x{self._cols} matrix"
            )
        return j * self._rows + i

    def __getitem__(self, index):
        if isinstance(index, tuple):
            return self._data[self._offset(*index)]
        return self._data[operator.index(index)]

    def __setitem__(self, index, value) -> None:
        if isinstance(index, tuple):
            self._data[self._offset(*index)] = value
        else:
            self._data[operator.index(index)] = value

    def __iter__(self) -> Iterator:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def _columns(self) -> list[list]:
        r = self._rows
        return [self._data[j * r:(j + 1) * r] for j in range(self._cols)]

    def _row_tuples(self) -> list[tuple]:
        return list(zip(*self._columns()))

    def _require_same_shape(self, other: "Matrix") -> None:
        if self.shape != other.shape:
            raise ValueError(
                f"shape mismatch: {self.shape} and {other.shape}"
            )

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_shape(other)
        return Matrix._raw(
            self._rows, self._cols, (a + b for a, b in zip(self._data, other._data))
        )

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_shape(other)
        return Matrix._raw(
            self._rows, self._cols, (a - b for a, b in zip(self._data, other._data))
        )

    def __neg__(self):
        return Matrix._raw(self._rows, self._cols, (-a for a in self._data))

    def __mul__(self, scalar):
        if not isinstance(scalar, numbers.Number):
            return NotImplemented
        return Matrix._raw(self._rows, self._cols, (a * scalar for a in self._data))

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __truediv__(self, scalar):
        if not isinstance(scalar, numbers.Number):
            return NotImplemented
        return Matrix._raw(self._rows, self._cols, (a / scalar for a in self._data))

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._cols != other._rows:
            raise ValueError(
                f"cannot multiply {self.shape} by {other.shape}"
            )
        rows = self._row_tuples()
        return Matrix._raw(
            self._rows,
            other._cols,
            (
                sum(a * b for a, b in zip(row, column))
                for column in other._columns()
                for row in rows
            ),
        )

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._data == other._data

    __hash__ = None

    def __str__(self) -> str:
        if self._cols == 1:
            return " ".join(_format_entry(v) for v in self._data)
        return "".join(
            "".join(_format_entry(v) + " " for v in row) + "\n"
            for row in self._row_tuples()
        )

    def __repr__(self) -> str:
        rows = [list(r) for r in self._row_tuples()]
        return f"Matrix({self._rows}, {self._cols}, {rows!r})"


def vector(*args) -> Matrix:
    """Column vector from numbers; vector arguments contribute their components."""
    components = []
    for arg in args:
        if isinstance(arg, (Matrix, Sequence)) and not isinstance(arg, str):
            components.extend(arg)
        else:
            components.append(arg)
    if not components:
        raise ValueError("a vector needs at least one component")
    return Matrix._raw(len(components), 1, components)


def cmult(a: Matrix, b: Matrix) -> Matrix:
    """Component-wise product."""
    a._require_same_shape(b)
    rows, cols = a.shape
    return Matrix._raw(rows, cols, (x * y for x, y in zip(a, b)))


def transpose(m: Matrix) -> Matrix:
    """Transpose of a matrix."""
    rows, cols = m.shape
    return Matrix._raw(cols, rows, (v for row in m._row_tuples() for v in row))


def sqrnorm(m: Matrix):
    """Squared Frobenius (or Euclidean) norm."""
    return sum(x * x for x in m)


def norm(m: Matrix) -> float:
    """Frobenius (or Euclidean) norm."""
    return math.sqrt(sqrnorm(m))


def normalize(m: Matrix) -> Matrix:
    """Copy scaled to unit norm; a (near) zero input yields all zeros."""
    n = norm(m)
    factor = 1.0 / n if n > _TINY else 0.0
    return m * factor


def minimum(a: Matrix, b: Matrix) -> Matrix:
    """Component-wise minimum."""
    a._require_same_shape(b)
    rows, cols = a.shape
    return Matrix._raw(rows, cols, (min(x, y) for x, y in zip(a, b)))


def maximum(a: Matrix, b: Matrix) -> Matrix:
    """Component-wise maximum."""
    a._require_same_shape(b)
    rows, cols = a.shape
    return Matrix._raw(rows, cols, (max(x, y) for x, y in zip(a, b)))


def _require_vector(v: Matrix, size: int | None = None) -> None:
    rows, cols = v.shape
    if cols != 1 or (size is not None and rows != size):
        wanted = "a vector" if size is None else f"a {size}D vector"
        raise ValueError(f"expected {wanted}, got shape {v.shape}")


def dot(a: Matrix, b: Matrix):
    """Dot product of two vectors."""
    _require_vector(a)
    a._require_same_shape(b)
    return sum(x * y for x, y in zip(a, b))


def distance(a: Matrix, b: Matrix) -> float:
    """Euclidean distance between two points."""
    a._require_same_shape(b)
    return math.sqrt(sum((x - y) ** 2 for x, y in zip(a, b)))


def perp(v: Matrix) -> Matrix:
    """2D vector rotated counter-clockwise by 90 degrees."""
    _require_vector(v, 2)
    return vector(-v[1], v[0])


def cross(a: Matrix, b: Matrix) -> Matrix:
    """Cross product of two 3D vectors."""
    _require_vector(a, 3)
    _require_vector(b, 3)
    return vector(
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def parse_vector(text: str, size: int) -> Matrix:
    """Read ``size`` whitespace-separated components; extra text is ignored."""
    tokens = text.split()
    if len(tokens) < size:
        raise ValueError(f"expected {size} components, found {len(tokens)}")
    return vector(*(float(t) for t in tokens[:size]))