"""Small immutable dense float32 matrices."""
from __future__ import annotations

__version__ = "0.1.0"

from typing import Any

from ._internal import formatting as _formatting
from ._internal import interop as _interop
from ._internal import ops as _ops
from ._internal.dtypes import FLOAT32 as _FLOAT32
from ._internal.dtypes import is_real_scalar as _is_real_scalar
from ._internal.errors import (
    EmptyMatrixError,
    MatrixShapeError,
    RaggedRowsError,
    ShapeMismatchError,
)
from ._internal.factories import Row, from_rows, row
from ._internal.matrix_api import Matrix
from ._internal.warnings import (
    PyMatrixWarning,
    PyMatrixDTypeWarning,
    PyMatrixOverflowWarning,
)

# Public dtype token. The only storage type matrices support.
float32 = _FLOAT32

_interop.patch_interop(Matrix)


def _require_matrices(op: str, *operands: Any) -> None:
    for operand in operands:
        if not isinstance(operand, Matrix):
            raise TypeError(f"{op} expects Matrix operands, got {type(operand).__name__}.")


def equals(a: Matrix, b: Matrix) -> bool:
    """Structural equality: same shape and element-wise equal values."""
    _require_matrices("equals", a, b)
    return a == b


def add(a: Matrix, b: Matrix) -> Matrix:
    _require_matrices("add", a, b)
    return Matrix(_ops.add(a._grid, b._grid))


def subtract(a: Matrix, b: Matrix) -> Matrix:
    _require_matrices("subtract", a, b)
    return Matrix(_ops.subtract(a._grid, b._grid))


def multiply(a: Matrix, b: Matrix) -> Matrix:
    """Matrix product ``a @ b``; requires ``a.column_count == b.row_count``."""
    _require_matrices("multiply", a, b)
    return Matrix(_ops.matmul(a._grid, b._grid))


matmul = multiply


def scale(scalar: float, m: Matrix) -> Matrix:
    """Multiply every entry of ``m`` by ``scalar``."""
    _require_matrices("scale", m)
    if not _is_real_scalar(scalar):
        raise TypeError(f"scale expects a real scalar, got {type(scalar).__name__}.")
    return Matrix(_ops.scale(scalar, m._grid))


def set_print_options(*, edge_items: int | None = None) -> None:
    """Set how many leading/trailing rows and columns ``str()`` shows."""
    _formatting.configure(edge_items=edge_items)


def get_print_options() -> dict[str, Any]:
    return _formatting.options()


__all__ = [
    "Matrix",
    "Row",
    "row",
    "from_rows",
    "equals",
    "add",
    "subtract",
    "multiply",
    "matmul",
    "scale",
    "float32",
    "set_print_options",
    "get_print_options",
    "MatrixShapeError",
    "EmptyMatrixError",
    "RaggedRowsError",
    "ShapeMismatchError",
    "PyMatrixWarning",
    "PyMatrixDTypeWarning",
    "PyMatrixOverflowWarning",
]
