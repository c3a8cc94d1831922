"""Interactive menu for editing and showing a sparse matrix."""

from __future__ import annotations

import argparse
import sys
from typing import Iterator, TextIO

from sparsegrid.console import Console
from sparsegrid.sparse_matrix import CellNotFoundError, SparseMatrix

MENU = (
    "\t\t Menu\n"
    "1. Insert data\n"
    "2. Display\n"
    "3. Remove\n"
    "------------------------------------\n"
    "Enter choice: "
)


class _EndOfInput(Exception):
    pass


class _Reader:
    """Whitespace-separated token reader over a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._tokens: Iterator[str] = (tok for line in stream for tok in line.split())

    def token(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise _EndOfInput from None

    def integer(self) -> int:
        try:
            return int(self.token())
        except ValueError:
            raise _EndOfInput from None


def _read_non_negative(reader: _Reader, out: TextIO) -> int:
    value = reader.integer()
    while value < 0:
        out.write("Invalid Enter again: ")
        value = reader.integer()
    return value


def _session(matrix: SparseMatrix, reader: _Reader, out: TextIO, console: Console) -> None:
    while True:
        out.write(MENU)
        choice = reader.integer()
        if choice == 1:
            out.write("Enter Row: ")
            row = _read_non_negative(reader, out)
            out.write("Enter Col: ")
            col = _read_non_negative(reader, out)
            out.write("\nEnter data: ")
            matrix.insert_cell(row, col, reader.integer())
        elif choice == 2:
            matrix.display(console)
        elif choice == 3:
            out.write("Enter row to remove: ")
            row = reader.integer()
            out.write("Enter col to remove: ")
            col = reader.integer()
            try:
                matrix.remove_cell(row, col)
            except CellNotFoundError:
                out.write("Not Exists\n")
        else:
            out.write("Nothing \n")
        out.write("\nDo u want to show menu : ")
        if reader.token()[0] not in "Yy":
            return
        console.erase()


def run_menu(
    matrix: SparseMatrix,
    input_stream: TextIO,
    output_stream: TextIO,
    console: Console | None = None,
) -> SparseMatrix:
    """Run the menu until the user declines to continue or input ends."""
    console = console if console is not None else Console(output_stream)
    try:
        _session(matrix, _Reader(input_stream), output_stream, console)
    except _EndOfInput:
        pass
    output_stream.flush()
    return matrix


def main(argv: list[str] | None = None) -> int:
    """Start the interactive sparse matrix menu on the terminal."""
    parser = argparse.ArgumentParser(description="Edit and show a sparse matrix.")
    parser.parse_args(argv)
    run_menu(SparseMatrix(), sys.stdin, sys.stdout, Console(sys.stdout))
    return 0