from __future__ import annotations

from typing import Any, List

from .matrix_api import Matrix


Row = List[float]


def row(*values: Any) -> Row:
    """Collect values into a matrix row.

    >>> row(1.0, 2.0)
    [1.0, 2.0]
    """
    return list(values)


def from_rows(*rows: Any) -> Matrix:
    """Build a Matrix from rows; validation happens in the constructor.

    >>> from_rows(row(1.0, 2.0), row(3.0, 4.0)).shape
    (2, 2)
    """
    return Matrix(list(rows))
