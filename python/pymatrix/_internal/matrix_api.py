from __future__ import annotations

import operator
from collections.abc import Iterator
from typing import Any

import numpy as np

from . import ops as _ops
from .coercion import coerce_grid
from .dtypes import FLOAT32, is_real_scalar, require_float32
from .formatting import MatrixMixin


class Matrix(MatrixMixin):
    """Immutable dense matrix of float32 values.

    ``data`` may be another Matrix, a 2D NumPy array of integer or floating
    dtype, or a nested sequence of rows. The column count is taken from row 0
    and every other row must match it. Values are rounded to float32.

    Operators never modify their operands:

    - ``a + b`` and ``a - b`` require equal shapes.
    - ``a * b`` and ``a @ b`` are matrix products.
    - ``c * a`` and ``a * c`` scale by a real scalar.
    """

    __slots__ = ("_grid",)

    def __init__(self, data: Any, dtype: Any = None) -> None:
        require_float32(dtype)
        if isinstance(data, Matrix):
            grid = data._grid
        else:
            grid = coerce_grid(data)
        object.__setattr__(self, "_grid", grid)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{self.__class__.__name__} objects are immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{self.__class__.__name__} objects are immutable")

    def __reduce__(self) -> tuple[Any, tuple[Any, ...]]:
        return (self.__class__, (self.tolist(),))

    # Shape metadata

    @property
    def row_count(self) -> int:
        return int(self._grid.shape[0])

    @property
    def column_count(self) -> int:
        return int(self._grid.shape[1])

    @property
    def shape(self) -> tuple[int, int]:
        return (self.row_count, self.column_count)

    @property
    def dtype(self) -> str:
        return FLOAT32

    def rows(self) -> int:
        return self.row_count

    def cols(self) -> int:
        return self.column_count

    def __len__(self) -> int:
        return self.row_count

    # Element access

    def get(self, i: int, j: int) -> float:
        return float(self._grid[operator.index(i), operator.index(j)])

    def __getitem__(self, key: Any) -> float:
        if not (isinstance(key, tuple) and len(key) == 2):
            raise TypeError("Matrix indices must be a (row, column) pair.")
        return self.get(key[0], key[1])

    def __iter__(self) -> Iterator[tuple[float, ...]]:
        for row in self._grid.tolist():
            yield tuple(row)

    @property
    def data(self) -> tuple[tuple[float, ...], ...]:
        return tuple(self)

    def tolist(self) -> list[list[float]]:
        return self._grid.tolist()

    def to_numpy(self) -> np.ndarray:
        return self._grid.copy()

    # Comparison

    def __eq__(self, other: Any) -> Any:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._grid, other._grid))

    def __ne__(self, other: Any) -> Any:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        # tolist() widens to Python floats so 0.0 and -0.0 hash alike.
        return hash((self.shape, tuple(self._grid.ravel().tolist())))

    # Arithmetic

    def __add__(self, other: Any) -> Any:
        rhs = _operand_grid(other)
        if rhs is None:
            return NotImplemented
        return Matrix(_ops.add(self._grid, rhs))

    def __sub__(self, other: Any) -> Any:
        rhs = _operand_grid(other)
        if rhs is None:
            return NotImplemented
        return Matrix(_ops.subtract(self._grid, rhs))

    def __mul__(self, other: Any) -> Any:
        if is_real_scalar(other):
            return Matrix(_ops.scale(other, self._grid))
        if isinstance(other, Matrix):
            return Matrix(_ops.matmul(self._grid, other._grid))
        return NotImplemented

    def __rmul__(self, other: Any) -> Any:
        if is_real_scalar(other):
            return Matrix(_ops.scale(other, self._grid))
        return NotImplemented

    def __matmul__(self, other: Any) -> Any:
        rhs = _operand_grid(other)
        if rhs is None:
            return NotImplemented
        return Matrix(_ops.matmul(self._grid, rhs))


def _operand_grid(other: Any) -> np.ndarray | None:
    if isinstance(other, Matrix):
        return other._grid
    if isinstance(other, np.ndarray):
        return Matrix(other)._grid
    return None
