import unittest

import pytest

from selection import Selection, SelectionDimension, SelectionType


class SelectionDimensionTests(unittest.TestCase):
    def test_set_index_clamps_to_bound(self):
        dim = SelectionDimension(index=0, bound=5)
        dim.set_index(42)
        self.assertEqual(dim.index, 4)

    def test_set_bound_reclamps_present_index(self):
        dim = SelectionDimension(index=8, bound=10)
        dim.set_bound(3)
        self.assertEqual(dim.index, 2)
        dim.set_bound(20)
        self.assertEqual(dim.index, 2)

    def test_set_bound_leaves_absent_index_absent(self):
        dim = SelectionDimension(index=None, bound=0)
        dim.set_bound(7)
        self.assertIsNone(dim.index)

    def test_zero_bound_hides_index_until_rows_return(self):
        dim = SelectionDimension(index=3, bound=10)
        dim.set_bound(0)
        self.assertIsNone(dim.index)
        self.assertFalse(dim.is_selected(0))
        dim.set_bound(10)
        self.assertEqual(dim.index, 0)

    def test_next_and_previous_saturate(self):
        dim = SelectionDimension(index=0, bound=3)
        dim.select_previous()
        self.assertEqual(dim.index, 0)
        dim.select_next()
        dim.select_next()
        dim.select_next()
        dim.select_next()
        self.assertEqual(dim.index, 2)

    def test_first_and_last(self):
        dim = SelectionDimension(index=1, bound=6)
        dim.select_last()
        self.assertEqual(dim.index, 5)
        dim.select_first()
        self.assertEqual(dim.index, 0)

    def test_navigation_never_creates_a_selection(self):
        dim = SelectionDimension(index=None, bound=6)
        dim.select_next()
        dim.select_previous()
        dim.select_first()
        dim.select_last()
        self.assertIsNone(dim.index)

    def test_is_selected(self):
        dim = SelectionDimension(index=2, bound=6)
        self.assertTrue(dim.is_selected(2))
        self.assertFalse(dim.is_selected(3))


@pytest.mark.parametrize("bounds", [[5, 0, 3], [1, 1, 0, 0, 9], [10, 2, 7, 1], [0, 4]])
def test_index_always_within_bound_after_set_bound(bounds):
    dim = SelectionDimension(index=4, bound=10)
    for bound in bounds:
        dim.set_bound(bound)
        if bound == 0:
            assert dim.index is None
        else:
            assert 0 <= dim.index < bound


@pytest.mark.parametrize(
    "row, column, expected",
    [
        (0, 0, SelectionType.CELL),
        (0, None, SelectionType.ROW),
        (None, 0, SelectionType.COLUMN),
        (None, None, SelectionType.NONE),
    ],
)
def test_selection_type(row, column, expected):
    selection = Selection(
        row=SelectionDimension(index=row, bound=5),
        column=SelectionDimension(index=column, bound=5),
    )
    assert selection.selection_type() == expected


def test_default_selection_selects_first_row_only():
    selection = Selection.default(10)
    assert selection.row.index == 0
    assert selection.row.bound == 10
    assert selection.column.index is None
    assert selection.selection_type() == SelectionType.ROW
