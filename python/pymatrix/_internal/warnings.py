"""pymatrix warning categories.

These exist so users can filter/suppress pymatrix warnings without
catching all UserWarning.

Keep this module lightweight and dependency-free to avoid import cycles.
"""


class PyMatrixWarning(UserWarning):
    """Base warning category for all pymatrix user-facing warnings."""


class PyMatrixDTypeWarning(PyMatrixWarning):
    """Warnings about lossy narrowing of input values to float32."""


class PyMatrixOverflowWarning(PyMatrixWarning):
    """An arithmetic result overflowed float32 from finite operands."""
