import unittest

from pydet import determinant, NATIVE_FIELD


class TestDeterminantEngine(unittest.TestCase):
    def test_one_by_one_returns_entry(self):
        self.assertEqual(determinant([[7]]), 7)

    def test_two_by_two(self):
        self.assertEqual(determinant([[1, 2], [3, 4]]), -2)

    def test_default_field_is_native(self):
        grid = [[-2, 2, 3], [-1, 1, 3], [2, 0, -1]]
        self.assertEqual(determinant(grid, field=NATIVE_FIELD), 6)

    def test_works_in_place_on_owned_grid(self):
        grid = [[-2, 2, 3], [-1, 1, 3], [2, 0, -1]]
        determinant(grid)
        self.assertNotEqual(grid, [[-2, 2, 3], [-1, 1, 3], [2, 0, -1]])

    def test_swaps_exchange_row_objects(self):
        grid = [[-2, 2, 3], [-1, 1, 3], [2, 0, -1]]
        rows = [id(r) for r in grid]
        determinant(grid)
        after = [id(r) for r in grid]
        self.assertEqual(sorted(after), sorted(rows))
        # Column 1 pivots on the last row, so rows 1 and 2 trade places.
        self.assertEqual(after, [rows[0], rows[2], rows[1]])

    def test_eliminated_grid_is_unit_upper_triangular(self):
        grid = [[4.0, 3.0, 2.0], [2.0, 1.0, 3.0], [3.0, 2.0, 1.0]]
        determinant(grid)
        for j in range(3):
            self.assertEqual(grid[j][j], 1.0)
            for k in range(j + 1, 3):
                self.assertAlmostEqual(grid[k][j], 0.0)

    def test_singular_returns_zero_without_nan(self):
        grid = [[1.0, 2.0, 3.0], [2.0, 4.0, 6.0], [1.0, 1.0, 1.0]]
        d = determinant(grid)
        self.assertEqual(d, 0)
        for row in grid:
            for value in row:
                self.assertEqual(value, value)  # no NaN


def test_field_none_selects_native_field():
    assert determinant([[1, 2], [3, 4]], field=None) == -2
    assert determinant([[-2, 2, 3], [-1, 1, 3], [2, 0, -1]], field=None) == 6


def test_one_by_one_goes_through_field():
    from pydet import PrimeField

    assert determinant([[13]], field=PrimeField(5)) == 3


def test_ints_beyond_float_range_do_not_raise():
    grid = [[10**400, 1, 0], [0, 1, 0], [0, 0, 1]]
    assert determinant(grid) == float("inf")
    grid = [[-(10**400), 1, 0], [0, 1, 0], [0, 0, 1]]
    assert determinant(grid) == float("-inf")
