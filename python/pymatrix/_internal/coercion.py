from __future__ import annotations

import math
import warnings
from collections.abc import Sequence as _SequenceABC
from typing import Any

import numpy as np

from .dtypes import as_float, is_finite_scalar, is_real_scalar
from .errors import EmptyMatrixError, RaggedRowsError
from .warnings import PyMatrixDTypeWarning


def is_sequence_like(value: Any) -> bool:
    return isinstance(value, _SequenceABC) and not isinstance(value, (str, bytes, bytearray))


def is_row_like(value: Any) -> bool:
    if isinstance(value, np.ndarray):
        return value.ndim == 1
    return is_sequence_like(value)


def coerce_sequence_rows(candidate: Any) -> np.ndarray:
    """Validate a nested sequence of rows and return it as a float32 grid.

    Rows are scanned in order and the first row whose length differs from
    row 0 is reported.
    """
    if not is_sequence_like(candidate):
        raise TypeError(
            "Matrix data must be provided as a nested sequence of rows or a 2D NumPy array."
        )
    rows = list(candidate)
    if not rows:
        raise EmptyMatrixError()

    expected = -1
    for row_index, row in enumerate(rows):
        if not is_row_like(row):
            raise TypeError("Each matrix row must be a sequence of entries.")
        if row_index == 0:
            expected = len(row)
        elif len(row) != expected:
            raise RaggedRowsError(row_index, len(row), expected)

    overflowed = False
    values: list[list[float]] = []
    for row in rows:
        converted: list[float] = []
        for value in row:
            if not is_real_scalar(value):
                raise TypeError(
                    f"Matrix entries must be real numbers, got {type(value).__name__}."
                )
            widened = as_float(value)
            if math.isinf(widened) and is_finite_scalar(value):
                overflowed = True
            converted.append(widened)
        values.append(converted)

    wide = np.array(values, dtype=np.float64).reshape(len(rows), expected)
    return _narrow_to_float32(wide, overflowed=overflowed)


def coerce_array(array: np.ndarray) -> np.ndarray:
    if array.ndim != 2:
        raise ValueError(f"Matrix input must be a 2D structure, got {array.ndim}D.")
    if array.shape[0] == 0:
        raise EmptyMatrixError()
    if array.dtype.kind == "O":
        return coerce_sequence_rows(array.tolist())
    if array.dtype.kind not in ("f", "i", "u"):
        raise TypeError(
            f"Matrix entries must be real numbers, got an array of dtype {array.dtype}."
        )
    return _narrow_to_float32(array)


def coerce_grid(candidate: Any) -> np.ndarray:
    if isinstance(candidate, np.ndarray):
        return coerce_array(candidate)
    return coerce_sequence_rows(candidate)


def _narrow_to_float32(wide: np.ndarray, *, overflowed: bool = False) -> np.ndarray:
    with np.errstate(over="ignore"):
        grid = np.array(wide, dtype=np.float32, copy=True)
    if wide.dtype != np.float32 and bool(np.any(np.isinf(grid) & np.isfinite(wide))):
        overflowed = True
    if overflowed:
        warnings.warn(
            "Input values exceed the float32 range and were stored as infinity.",
            PyMatrixDTypeWarning,
            stacklevel=5,
        )
    grid.setflags(write=False)
    return grid
