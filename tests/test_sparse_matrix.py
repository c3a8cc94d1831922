import io
from unittest import mock

import pytest

from sparsegrid.console import Console
from sparsegrid.sparse_matrix import CellNotFoundError, SparseMatrix


@pytest.fixture
def matrix():
    m = SparseMatrix()
    m.insert_cell(2, 3, 5)
    m.insert_cell(0, 3, 7)
    m.insert_cell(2, 1, 9)
    m.insert_cell(4, 0, 11)
    return m


def test_empty_matrix():
    m = SparseMatrix()
    assert len(m) == 0
    assert list(m) == []
    assert m.get_cell(0, 0) is None
    assert not m.is_exist_row(0)


def test_insert_and_get(matrix):
    assert matrix.get_cell(2, 3).data == 5
    assert matrix.get_cell(0, 3).data == 7
    assert matrix.get_cell(2, 1).data == 9
    assert matrix.get_cell(4, 0).data == 11


def test_headers_sorted(matrix):
    assert matrix.rows() == sorted(matrix.rows())
    assert set(matrix.rows()) == {0, 2, 4}
    assert matrix.cols() == sorted(matrix.cols())
    assert set(matrix.cols()) == {0, 1, 3}


def test_cells_row_major(matrix):
    cells = list(matrix.cells())
    assert cells == sorted(cells)
    assert len(matrix) == 4


def test_update_existing_keeps_count(matrix):
    matrix.insert_cell(2, 3, 100)
    assert matrix.get_cell(2, 3).data == 100
    assert len(matrix) == 4


def test_existence_queries(matrix):
    assert matrix.is_existing(2, 1)
    assert not matrix.is_existing(2, 0)
    assert matrix.is_exist_row(4)
    assert not matrix.is_exist_row(3)
    assert matrix.is_exist_col(1)
    assert not matrix.is_exist_col(2)
    assert (0, 3) in matrix
    assert (0, 0) not in matrix
    assert "x" not in matrix


def test_column_links_consistent(matrix):
    col_head = matrix._col_header(3)
    rows = []
    node = col_head.next_row
    while node is not None:
        rows.append(node.row)
        node = node.next_row
    assert rows == [0, 2]


def test_remove_keeps_neighbours(matrix):
    matrix.insert_cell(2, 5, 8)
    matrix.remove_cell(2, 3)
    assert not matrix.is_existing(2, 3)
    assert matrix.get_cell(2, 1).data == 9
    assert matrix.get_cell(2, 5).data == 8
    assert matrix.get_cell(0, 3).data == 7
    assert len(matrix) == 4


def test_remove_leaves_headers(matrix):
    matrix.remove_cell(4, 0)
    assert matrix.is_exist_row(4)
    assert matrix.is_exist_col(0)
    assert not matrix.is_existing(4, 0)


def test_remove_missing_raises(matrix):
    with pytest.raises(CellNotFoundError):
        matrix.remove_cell(1, 1)


def test_reinsert_after_remove(matrix):
    matrix.remove_cell(2, 3)
    matrix.insert_cell(2, 3, 1)
    assert matrix.get_cell(2, 3).data == 1
    assert list(matrix.cells()) == sorted(matrix.cells())


def test_display_places_each_value(matrix):
    out = io.StringIO()
    with mock.patch("time.sleep") as sleep:
        matrix.display(Console(out), delay=0.25)
    text = out.getvalue()
    assert "Sparse Matrix" in text
    assert "\x1b[3;4H5" in text
    assert "\x1b[5;1H11" in text
    assert sleep.call_count == len(matrix)
    sleep.assert_called_with(0.25)