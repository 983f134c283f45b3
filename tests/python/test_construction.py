import unittest

import numpy as np

import pymatrix
from pymatrix import EmptyMatrixError, Matrix, MatrixShapeError, RaggedRowsError


class TestMatrixConstruction(unittest.TestCase):
    def test_rectangular_shapes(self):
        for rows, cols in [(1, 1), (1, 3), (3, 1), (2, 5), (4, 4)]:
            data = [[float(r * cols + c) for c in range(cols)] for r in range(rows)]
            m = Matrix(data)
            self.assertEqual(m.row_count, rows)
            self.assertEqual(m.column_count, cols)
            self.assertEqual(m.shape, (rows, cols))
            self.assertEqual(m.rows(), rows)
            self.assertEqual(m.cols(), cols)
            self.assertEqual(len(m), rows)
            self.assertEqual(m.tolist(), data)

    def test_tuple_rows_and_ints(self):
        m = Matrix(((1, 2), (3, 4)))
        self.assertEqual(m.data, ((1.0, 2.0), (3.0, 4.0)))
        self.assertIsInstance(m[0, 0], float)

    def test_zero_length_row_is_allowed(self):
        m = Matrix([[]])
        self.assertEqual(m.shape, (1, 0))
        self.assertEqual(Matrix([[], []]).shape, (2, 0))

    def test_ragged_rows_rejected(self):
        with self.assertRaises(RaggedRowsError) as ctx:
            Matrix([[1.0, 2.0], [3.0]])
        err = ctx.exception
        self.assertEqual(err.row_index, 1)
        self.assertEqual(err.found, 1)
        self.assertEqual(err.expected, 2)
        self.assertIn("row 1", str(err))
        self.assertIn("found 1", str(err))
        self.assertIn("expected 2", str(err))
        self.assertIsInstance(err, MatrixShapeError)
        self.assertIsInstance(err, ValueError)

    def test_ragged_reports_first_offending_row(self):
        with self.assertRaises(RaggedRowsError) as ctx:
            Matrix([[1.0], [2.0], [3.0, 4.0], [5.0, 6.0, 7.0]])
        self.assertEqual(ctx.exception.row_index, 2)
        self.assertEqual(ctx.exception.found, 2)
        self.assertEqual(ctx.exception.expected, 1)

    def test_empty_input_rejected(self):
        with self.assertRaises(EmptyMatrixError):
            Matrix([])
        with self.assertRaises(EmptyMatrixError):
            Matrix(np.zeros((0, 3), dtype=np.float32))

    def test_non_sequence_input_rejected(self):
        for bad in (5, 1.5, "ab", None):
            with self.assertRaises(TypeError):
                Matrix(bad)
        with self.assertRaises(TypeError):
            Matrix([1.0, 2.0])

    def test_non_real_entries_rejected(self):
        for bad in ("a", True, 1 + 2j, None):
            with self.assertRaises(TypeError):
                Matrix([[1.0, bad]])

    def test_numpy_input(self):
        arr = np.array([[1, 2], [3, 4]], dtype=np.int64)
        m = Matrix(arr)
        self.assertEqual(m, Matrix([[1.0, 2.0], [3.0, 4.0]]))

        rows = [np.array([1.0, 2.0]), np.array([3.0, 4.0])]
        self.assertEqual(Matrix(rows), m)

    def test_numpy_input_must_be_2d_real(self):
        with self.assertRaises(ValueError):
            Matrix(np.array([1.0, 2.0]))
        with self.assertRaises(ValueError):
            Matrix(np.zeros((2, 2, 2)))
        with self.assertRaises(TypeError):
            Matrix(np.array([[True, False]]))
        with self.assertRaises(TypeError):
            Matrix(np.array([[1 + 1j]]))

    def test_copy_constructor(self):
        m = Matrix([[1.0, 2.0]])
        self.assertEqual(Matrix(m), m)

    def test_dtype_argument(self):
        for token in (None, "float32", "F32", "single", pymatrix.float32, np.float32, np.dtype("float32")):
            self.assertEqual(Matrix([[1.0]], dtype=token).dtype, "float32")
        for token in ("float64", float, int, np.float64, "int32", "nonsense"):
            with self.assertRaises(TypeError):
                Matrix([[1.0]], dtype=token)


class TestMatrixImmutability(unittest.TestCase):
    def test_input_list_is_copied(self):
        data = [[1.0, 2.0], [3.0, 4.0]]
        m = Matrix(data)
        data[0][0] = 99.0
        data.append([5.0, 6.0])
        self.assertEqual(m.tolist(), [[1.0, 2.0], [3.0, 4.0]])

    def test_input_array_is_copied(self):
        arr = np.ones((2, 2), dtype=np.float32)
        m = Matrix(arr)
        arr[0, 0] = 7.0
        self.assertEqual(m[0, 0], 1.0)

    def test_exports_do_not_alias(self):
        m = Matrix([[1.0, 2.0]])
        out = m.to_numpy()
        out[0, 0] = 42.0
        lst = m.tolist()
        lst[0][0] = 42.0
        self.assertEqual(m[0, 0], 1.0)
        self.assertFalse(np.asarray(m).flags.writeable)

    def test_no_assignment(self):
        m = Matrix([[1.0]])
        with self.assertRaises(TypeError):
            m[0, 0] = 2.0
        with self.assertRaises(AttributeError):
            m.extra = 1
        with self.assertRaises(AttributeError):
            del m._grid


class TestElementAccess(unittest.TestCase):
    def test_get_and_getitem(self):
        m = Matrix([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
        self.assertEqual(m.get(1, 2), 6.0)
        self.assertEqual(m[0, 1], 2.0)
        self.assertEqual(m[-1, -1], 6.0)

    def test_bad_keys(self):
        m = Matrix([[1.0, 2.0]])
        with self.assertRaises(IndexError):
            m[1, 0]
        with self.assertRaises(TypeError):
            m[0]
        with self.assertRaises(TypeError):
            m.get(0.5, 0)

    def test_iteration_yields_row_tuples(self):
        m = Matrix([[1, 2], [3, 4]])
        self.assertEqual(list(m), [(1.0, 2.0), (3.0, 4.0)])


if __name__ == '__main__':
    unittest.main()
