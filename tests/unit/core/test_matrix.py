"""Unit tests for the Matrix container."""

import numpy as np
import pytest

from pnumeric import Matrix, ShapeError, Vector, eye, ones, zeros


class TestConstruction:
    """Tests for Matrix construction, shape and row access."""

    def test_creating(self):
        a2 = Matrix([[.1, .2], [-.2, .1]])
        a43 = Matrix([[.2, .4, .2], [-.2, .2, .0], [.2, .2, -.2], [3., 4., 5.]])

        assert a2.shape == (2, 2)
        assert a43.shape == (4, 3)
        assert (a43.rows, a43.cols) == (4, 3)

    def test_ragged_rows_rejected(self):
        with pytest.raises(ShapeError):
            Matrix([[1, 2], [3]])

    def test_rows_from_vectors(self):
        m = Matrix([Vector([1, 2]), Vector([3, 4])])

        assert m == Matrix([[1, 2], [3, 4]])

    def test_empty(self):
        assert Matrix([]).shape == (0, 0)

    def test_elements_are_floats(self):
        m = Matrix([[1, 2], [3, 4]])

        assert type(m[0][1]) is float
        assert m.tolist() == [[1.0, 2.0], [3.0, 4.0]]

    def test_matrix_row(self, a3):
        r = a3[1]

        assert isinstance(r, Vector)
        assert r == Vector([-.2, .2, .0])

    def test_setitem_through_row(self, a3):
        """Writing through a row view should mutate the matrix."""
        a3[1][2] = 33

        assert a3 == Matrix([[.2, .4, .2], [-.2, .2, 33], [.2, .2, -.2]])

    def test_row_assignment(self):
        m = Matrix([[1, 2], [3, 4]])
        m[0] = [5, 6]

        assert m == Matrix([[5, 6], [3, 4]])

    def test_row_assignment_length_mismatch(self):
        m = Matrix([[1, 2], [3, 4]])

        with pytest.raises(ShapeError):
            m[0] = [1, 2, 3]
        assert m == Matrix([[1, 2], [3, 4]])

    @pytest.mark.parametrize("key", [[0, 1], np.array([0, 1]), 1.0, True])
    def test_row_index_must_be_integer(self, key):
        """Only a single integer selects a row Vector."""
        m = Matrix([[1, 2], [3, 4]])

        with pytest.raises(TypeError):
            m[key]
        with pytest.raises(TypeError):
            m[key] = [5, 6]
        assert m == Matrix([[1, 2], [3, 4]])

    def test_numpy_integer_row_index(self):
        m = Matrix([[1, 2], [3, 4]])

        assert m[np.int64(1)] == Vector([3, 4])

    def test_tuple_index(self):
        m = Matrix([[1, 2], [3, 4]])
        m[1, 0] = 9

        assert m[1, 0] == 9.0
        assert m[1][0] == 9.0

    def test_iteration_yields_rows(self):
        m = Matrix([[1, 2], [3, 4]])

        assert [row.tolist() for row in m] == [[1.0, 2.0], [3.0, 4.0]]

    def test_repr(self):
        assert repr(Matrix([[1, 2.5], [-3, 0]])) == 'Matrix([[1, 2.5], [-3, 0]])'

    def test_constructors(self):
        assert eye(2) == Matrix([[1, 0], [0, 1]])
        assert zeros(2, 3) == Matrix([[0, 0, 0], [0, 0, 0]])
        assert ones(2) == Matrix([[1, 1], [1, 1]])

    def test_transpose(self):
        m = Matrix([[1, 2, 3], [4, 5, 6]])

        assert m.T == Matrix([[1, 4], [2, 5], [3, 6]])

    def test_trace(self):
        assert Matrix([[1, 2], [3, 4]]).trace() == 5.0
        with pytest.raises(ShapeError):
            Matrix([[1, 2, 3]]).trace()


class TestEquality:
    """Tests for epsilon equality of matrices."""

    def test_compare(self):
        a3 = Matrix([[.134345674, .4, .2], [-.2, .2, .0], [.2, .2, -.2]])
        tmp = Matrix([[.134345675, .4, .2], [-.2, .2, .0], [.2, .2, -.2]])

        assert a3 == tmp

    def test_compare_unequal(self):
        a3 = Matrix([[213, .4, .2], [-.2, .2, .0], [.2, .13434564, -.2]])
        tmp = Matrix([[213, .4, .2], [-.2, .2, .0], [.2, .13434565, -.2]])

        assert a3 != tmp

    def test_shape_mismatch_unequal(self):
        assert Matrix([[1, 2]]) != Matrix([[1], [2]])

    def test_explicit_tolerance(self):
        a, b = Matrix([[1.0]]), Matrix([[1.001]])

        assert a != b
        assert a.equals(b, eps=1e-2)
        assert a.equals([[1.0]])


class TestArithmetic:
    """Tests for Matrix arithmetic."""

    def test_rmultiply(self):
        a = Matrix([[1, 2], [3, 4]])

        assert a * .5 == Matrix([[0.5, 1], [1.5, 2]])
        assert a * 5 == Matrix([[5, 10], [15, 20]])

    def test_lmultiply(self):
        a = Matrix([[1, 2], [3, 4]])

        assert .5 * a == Matrix([[0.5, 1], [1.5, 2]])
        assert 5 * a == Matrix([[5, 10], [15, 20]])

    def test_multiply(self):
        a = Matrix([[1, 2], [3, 4]])
        b = Matrix([[5, 6], [7, 8]])

        assert a * b == Matrix([[19, 22], [43, 50]])

    def test_multiply_rectangular(self):
        a = Matrix([[1, 2, 3]])
        b = Matrix([[1], [2], [3]])

        assert a * b == Matrix([[14]])
        assert (b * a).shape == (3, 3)

    def test_multiply_inner_mismatch(self):
        with pytest.raises(ShapeError):
            Matrix([[1, 2]]) * Matrix([[1, 2]])

    def test_matrix_vector(self):
        a = Matrix([[1, 2], [3, 4]])

        assert a * Vector([1, 1]) == Vector([3, 7])
        with pytest.raises(ShapeError):
            a * Vector([1, 2, 3])

    def test_vector_matrix_unsupported(self):
        with pytest.raises(TypeError):
            Vector([1, 2]) * Matrix([[1, 2], [3, 4]])

    def test_add(self):
        a = Matrix([[1, 2], [3, 4]])
        b = Matrix([[5, 6], [7, 8]])
        ab = Matrix([[6, 8], [10, 12]])

        assert a + b == ab
        assert b + a == ab
        assert a + 0.5 == Matrix([[1.5, 2.5], [3.5, 4.5]])
        assert 0.5 + a == Matrix([[1.5, 2.5], [3.5, 4.5]])

    def test_sub(self):
        a = Matrix([[1, 2], [3, 4]])
        b = Matrix([[5, 6], [7, 8]])
        ab = Matrix([[6, 8], [10, 12]])

        assert ab - b == a
        assert ab - 3 == Matrix([[3, 5], [7, 9]])
        assert 3 - ab == Matrix([[-3, -5], [-7, -9]])

    def test_add_shape_mismatch(self):
        with pytest.raises(ShapeError):
            Matrix([[1, 2]]) + Matrix([[1], [2]])
        with pytest.raises(ShapeError):
            Matrix([[1, 2]]) - Matrix([[1, 2, 3]])

    def test_neg_abs(self):
        a = Matrix([[1, -2], [-3, 4]])

        assert -a == Matrix([[-1, 2], [3, -4]])
        assert abs(a) == Matrix([[1, 2], [3, 4]])

    def test_numpy_scalar_operands(self):
        res = np.float64(2.0) * Matrix([[1, 2]])

        assert isinstance(res, Matrix)
        assert res == Matrix([[2, 4]])

    def test_operands_unchanged(self):
        a = Matrix([[1, 2], [3, 4]])
        b = Matrix([[5, 6], [7, 8]])
        a * b
        a + b
        a.T

        assert a == Matrix([[1, 2], [3, 4]])
        assert b == Matrix([[5, 6], [7, 8]])
