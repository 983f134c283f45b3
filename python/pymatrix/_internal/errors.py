"""Exception types raised by pymatrix.

Shape problems derive from ValueError; wrong input or operand types raise the
builtin TypeError directly.
"""
from __future__ import annotations


class MatrixShapeError(ValueError):
    """Base class for shape validation failures."""


class EmptyMatrixError(MatrixShapeError):
    def __init__(self) -> None:
        super().__init__("Matrix data must not be empty.")


class RaggedRowsError(MatrixShapeError):
    """A row's length differs from the length of row 0."""

    def __init__(self, row_index: int, found: int, expected: int) -> None:
        self.row_index = row_index
        self.found = found
        self.expected = expected
        super().__init__(
            f"Column count mismatch in row {row_index} "
            f"(found {found}, expected {expected})."
        )


_VERBS = {
    "add": "added",
    "subtract": "subtracted",
    "multiply": "multiplied",
}


class ShapeMismatchError(MatrixShapeError):
    """Operand shapes are incompatible for a binary operation."""

    def __init__(
        self,
        operation: str,
        lhs_shape: tuple[int, int],
        rhs_shape: tuple[int, int],
    ) -> None:
        self.operation = operation
        self.lhs_shape = lhs_shape
        self.rhs_shape = rhs_shape
        verb = _VERBS.get(operation, operation)
        super().__init__(
            f"These two matrices cannot be {verb}: "
            f"shapes {lhs_shape} and {rhs_shape}."
        )
