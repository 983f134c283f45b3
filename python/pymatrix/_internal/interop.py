from __future__ import annotations
from typing import Any
import numpy as np

from . import ops as _ops
from .dtypes import is_real_scalar


_GRID_UFUNCS = {
    np.add: _ops.add,
    np.subtract: _ops.subtract,
    np.matmul: _ops.matmul,
}


def _array(self: Any, dtype: Any = None, copy: Any = None) -> np.ndarray:
    """NumPy array protocol: expose the float32 grid (read-only unless copied)."""
    if dtype is not None:
        return self._grid.astype(dtype)
    if copy:
        return self._grid.copy()
    # A view of the frozen grid cannot have its WRITEABLE flag turned back on.
    return self._grid.view()


def _array_ufunc(self: Any, ufunc: Any, method: str, *inputs: Any, **kwargs: Any) -> Any:
    """
    NumPy ufunc protocol implementation for pymatrix matrices.
    Makes ``ndarray + m``, ``ndarray - m``, ``ndarray @ m`` and
    ``np.float32(c) * m`` return Matrix results. ``ndarray == m`` is False,
    as for any other non-matrix operand. Element-wise products of two
    matrices and every other ufunc are refused.
    """
    if method != "__call__" or kwargs or len(inputs) != 2:
        return NotImplemented

    cls = type(self)
    lhs, rhs = inputs

    if ufunc is np.equal or ufunc is np.not_equal:
        same = isinstance(lhs, cls) and isinstance(rhs, cls) and lhs == rhs
        return same if ufunc is np.equal else not same

    if ufunc is np.multiply:
        if is_real_scalar(lhs) and isinstance(rhs, cls):
            return cls(_ops.scale(lhs, rhs._grid))
        if isinstance(lhs, cls) and is_real_scalar(rhs):
            return cls(_ops.scale(rhs, lhs._grid))
        return NotImplemented

    kernel = _GRID_UFUNCS.get(ufunc)
    if kernel is None:
        return NotImplemented
    if not all(isinstance(x, (cls, np.ndarray)) for x in inputs):
        return NotImplemented
    grids = [x._grid if isinstance(x, cls) else cls(x)._grid for x in inputs]
    return cls(kernel(grids[0], grids[1]))


def patch_interop(cls: Any) -> None:
    """Patch the NumPy protocols onto the given class."""
    cls.__array__ = _array
    cls.__array_ufunc__ = _array_ufunc
