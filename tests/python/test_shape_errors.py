import pytest

import pydet
from pydet import ShapeError, det


def test_shape_error_is_value_error():
    assert issubclass(ShapeError, ValueError)


def test_non_square_matrix_rejected():
    with pytest.raises(ShapeError) as exc:
        det([[1, 2, 3], [4, 5, 6]])
    assert str(exc.value) == "Matrix must be square (size: [2, 3])"


def test_vector_longer_than_one_rejected():
    with pytest.raises(ShapeError) as exc:
        det([1, 2, 3])
    assert str(exc.value) == "Matrix must be square (size: [3])"


def test_empty_vector_rejected():
    with pytest.raises(ShapeError) as exc:
        det([])
    assert "(size: [0])" in str(exc.value)


def test_row_without_columns_rejected():
    with pytest.raises(ShapeError) as exc:
        det([[]])
    assert "(size: [1, 0])" in str(exc.value)


def test_rank_three_rejected():
    with pytest.raises(ShapeError) as exc:
        det([[[1, 2], [3, 4]], [[5, 6], [7, 8]]])
    assert str(exc.value) == "Matrix must be two dimensional (size: [2, 2, 2])"


def test_ragged_rows_rejected():
    with pytest.raises(ShapeError) as exc:
        det([[1, 2], [3]])
    assert "Dimension mismatch" in str(exc.value)


def test_mixed_scalar_and_row_rejected():
    with pytest.raises(ShapeError):
        det([[1, 2], 3])


def test_failed_call_leaves_input_untouched():
    a = [[1, 2, 3], [4, 5, 6]]
    with pytest.raises(ShapeError):
        det(a)
    assert a == [[1, 2, 3], [4, 5, 6]]


def test_size_query():
    assert pydet.size(5) == ()
    assert pydet.size("abc") == ()
    assert pydet.size([1, 2]) == (2,)
    assert pydet.size([[1, 2, 3], [4, 5, 6]]) == (2, 3)
    assert pydet.size([]) == (0,)
