"""A sparse integer matrix kept as sorted, cross-linked row and column lists."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Iterator

from sparsegrid.console import Console

_KEY = {"next_row": "row", "next_col": "col"}


@dataclass(eq=False)
class Node:
    """One cell, or a row or column header (header coordinates use -1)."""

    row: int = 0
    col: int = 0
    data: int = 0
    next_row: Node | None = field(default=None, repr=False)
    next_col: Node | None = field(default=None, repr=False)


class CellNotFoundError(KeyError):
    """Raised when a cell that is not stored is asked for."""

    def __init__(self, row: int, col: int) -> None:
        super().__init__((row, col))
        self.row = row
        self.col = col

    def __str__(self) -> str:
        return f"no cell at row {self.row}, column {self.col}"


def _walk(start: Node, link: str) -> Iterator[Node]:
    node = getattr(start, link)
    while node is not None:
        yield node
        node = getattr(node, link)


def _find(start: Node, link: str, key: int) -> Node | None:
    attr = _KEY[link]
    return next((n for n in _walk(start, link) if getattr(n, attr) == key), None)


def _link_sorted(start: Node, link: str, node: Node) -> None:
    attr = _KEY[link]
    key = getattr(node, attr)
    prev = start
    while (nxt := getattr(prev, link)) is not None and getattr(nxt, attr) < key:
        prev = nxt
    setattr(node, link, nxt)
    setattr(prev, link, node)


def _unlink(start: Node, link: str, node: Node) -> None:
    prev = start
    while (nxt := getattr(prev, link)) is not None:
        if nxt is node:
            setattr(prev, link, getattr(node, link))
            setattr(node, link, None)
            return
        prev = nxt


class SparseMatrix:
    """Integer cells addressed by (row, col); only stored cells take space.

    Row headers hang off the head's row link, column headers off its column
    link; each header chains its cells in ascending order. Headers stay in
    place once created, even after their cells are removed.
    """

    def __init__(self) -> None:
        self.head = Node(-1, -1, 0)

    def _row_header(self, row: int, create: bool = False) -> Node | None:
        header = _find(self.head, "next_row", row)
        if header is None and create:
            header = Node(row, -1, 0)
            _link_sorted(self.head, "next_row", header)
        return header

    def _col_header(self, col: int, create: bool = False) -> Node | None:
        header = _find(self.head, "next_col", col)
        if header is None and create:
            header = Node(-1, col, 0)
            _link_sorted(self.head, "next_col", header)
        return header

    def insert_cell(self, row: int, col: int, value: int) -> None:
        """Store value at (row, col), replacing any value already there."""
        row_head = self._row_header(row, create=True)
        col_head = self._col_header(col, create=True)
        existing = _find(row_head, "next_col", col)
        if existing is not None:
            existing.data = value
            return
        node = Node(row, col, value)
        _link_sorted(row_head, "next_col", node)
        _link_sorted(col_head, "next_row", node)

    def remove_cell(self, row: int, col: int) -> None:
        """Remove the cell at (row, col); raise CellNotFoundError if absent."""
        node = self.get_cell(row, col)
        if node is None:
            raise CellNotFoundError(row, col)
        _unlink(self._row_header(row), "next_col", node)
        _unlink(self._col_header(col), "next_row", node)

    def is_existing(self, row: int, col: int) -> bool:
        """Whether a cell is stored at (row, col)."""
        return self.get_cell(row, col) is not None

    def is_exist_row(self, row: int) -> bool:
        """Whether a header for this row exists."""
        return self._row_header(row) is not None

    def is_exist_col(self, col: int) -> bool:
        """Whether a header for this column exists."""
        return self._col_header(col) is not None

    def get_cell(self, row: int, col: int) -> Node | None:
        """The node stored at (row, col), or None."""
        row_head = self._row_header(row)
        if row_head is None:
            return None
        return _find(row_head, "next_col", col)

    def rows(self) -> list[int]:
        """Row indices with headers, ascending."""
        return [n.row for n in _walk(self.head, "next_row")]

    def cols(self) -> list[int]:
        """Column indices with headers, ascending."""
        return [n.col for n in _walk(self.head, "next_col")]

    def cells(self) -> Iterator[tuple[int, int, int]]:
        """Yield (row, col, value) for every stored cell in row-major order."""
        for row_head in _walk(self.head, "next_row"):
            for node in _walk(row_head, "next_col"):
                yield node.row, node.col, node.data

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        return self.is_existing(*key)

    def __iter__(self) -> Iterator[tuple[int, int, int]]:
        return self.cells()

    def __len__(self) -> int:
        return sum(1 for _ in self.cells())

    def display(self, console: Console | None = None, delay: float = 0.6) -> None:
        """Draw each value at its own screen position, pausing between cells."""
        console = console if console is not None else Console()
        console.set_title("Sparse Matrix")
        console.erase()
        for row, col, value in self.cells():
            console.set_cursor_at(row, col)
            time.sleep(delay)
            console.write(str(value))