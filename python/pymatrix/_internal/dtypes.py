from __future__ import annotations

import math
import numbers
from typing import Any

import numpy as np


FLOAT32 = "float32"

_FLOAT32_ALIASES = ("float32", "f32", "single")


def normalize_dtype(dtype: Any) -> str | None:
    """Normalize a user-provided dtype token.

    Accepted float32 spellings:
    - Case-insensitive strings: "float32", "F32", "single"
    - NumPy dtypes/scalars: np.float32, np.dtype("float32")

    Returns FLOAT32 for those and None for anything else.
    """

    if dtype is None:
        return None

    if isinstance(dtype, str):
        return FLOAT32 if dtype.strip().lower() in _FLOAT32_ALIASES else None

    try:
        np_dtype = np.dtype(dtype)
    except (TypeError, ValueError):
        return None
    return FLOAT32 if np_dtype == np.dtype(np.float32) else None


def require_float32(dtype: Any) -> str:
    """Return the internal float32 token or raise for any other dtype."""
    if dtype is None or normalize_dtype(dtype) == FLOAT32:
        return FLOAT32
    raise TypeError(
        f"Unsupported dtype {dtype!r}: pymatrix matrices store float32 values only."
    )


def is_real_scalar(value: Any) -> bool:
    # bool is an Integral; it is not accepted as a matrix entry or scale factor.
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, numbers.Real)


def is_finite_scalar(value: Any) -> bool:
    # Integers are finite however large; float() would overflow on them.
    if isinstance(value, numbers.Integral):
        return True
    return math.isfinite(value)


def as_float(value: Any) -> float:
    """Widen a real scalar to a Python float; ints beyond float range become inf."""
    try:
        return float(value)
    except OverflowError:
        if not isinstance(value, numbers.Integral):
            raise
        return math.inf if value > 0 else -math.inf


def as_float32_scalar(value: Any) -> np.float32:
    if not is_real_scalar(value):
        raise TypeError(f"Expected a real scalar, got {type(value).__name__}.")
    with np.errstate(over="ignore"):
        return np.float32(as_float(value))
