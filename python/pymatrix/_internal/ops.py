"""Arithmetic kernels over frozen float32 grids.

Every kernel checks operand compatibility first, computes in float32 and
returns a fresh array; operands are never written to.
"""
from __future__ import annotations

import warnings
from typing import Any

import numpy as np

from .dtypes import as_float32_scalar, is_finite_scalar
from .errors import ShapeMismatchError
from .warnings import PyMatrixOverflowWarning


def _warn_if_overflowed(operation: str, result: np.ndarray, *operands: Any) -> None:
    if bool(np.all(np.isfinite(result))):
        return
    if all(bool(np.all(np.isfinite(op))) for op in operands):
        warnings.warn(
            f"float32 overflow in {operation}: result contains infinite values.",
            PyMatrixOverflowWarning,
            stacklevel=4,
        )


def check_same_shape(operation: str, lhs: np.ndarray, rhs: np.ndarray) -> None:
    if lhs.shape != rhs.shape:
        raise ShapeMismatchError(operation, tuple(lhs.shape), tuple(rhs.shape))


def add(lhs: np.ndarray, rhs: np.ndarray) -> np.ndarray:
    check_same_shape("add", lhs, rhs)
    with np.errstate(over="ignore", invalid="ignore"):
        out = np.add(lhs, rhs, dtype=np.float32)
    _warn_if_overflowed("add", out, lhs, rhs)
    return out


def subtract(lhs: np.ndarray, rhs: np.ndarray) -> np.ndarray:
    check_same_shape("subtract", lhs, rhs)
    with np.errstate(over="ignore", invalid="ignore"):
        out = np.subtract(lhs, rhs, dtype=np.float32)
    _warn_if_overflowed("subtract", out, lhs, rhs)
    return out


def matmul(lhs: np.ndarray, rhs: np.ndarray) -> np.ndarray:
    """Multiply two grids without BLAS.

    Each output cell starts from a float32 zero and accumulates
    ``lhs[i, k] * rhs[k, j]`` in increasing ``k``. The loop runs over ``k``
    and adds one outer product per step, which gives every cell the same
    sequence of float32 roundings as a scalar triple loop would.
    """
    rows, inner = lhs.shape
    inner_rhs, cols = rhs.shape
    if inner != inner_rhs:
        raise ShapeMismatchError("multiply", tuple(lhs.shape), tuple(rhs.shape))

    out = np.zeros((rows, cols), dtype=np.float32)
    with np.errstate(over="ignore", invalid="ignore"):
        for k in range(inner):
            out += np.multiply.outer(lhs[:, k], rhs[k, :])
    _warn_if_overflowed("multiply", out, lhs, rhs)
    return out


def scale(scalar: Any, grid: np.ndarray) -> np.ndarray:
    with np.errstate(over="ignore", invalid="ignore"):
        factor = as_float32_scalar(scalar)
        out = np.multiply(factor, grid, dtype=np.float32)
    if is_finite_scalar(scalar):
        _warn_if_overflowed("scale", out, grid)
    return out
