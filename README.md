# sparsegrid

A sparse matrix of integers held as orthogonally linked lists. A head node
leads to a sorted chain of row headers and a sorted chain of column headers,
and every stored cell is linked into both its row and its column in
ascending order. Only the cells that were inserted take up space.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from sparsegrid.sparse_matrix import SparseMatrix, CellNotFoundError

matrix = SparseMatrix()
matrix.insert_cell(2, 3, 7)
matrix.insert_cell(0, 1, 4)
matrix.insert_cell(2, 3, 9)      # replaces the value already at (2, 3)

matrix.is_existing(2, 3)         # True
(0, 1) in matrix                 # True
matrix.is_exist_row(2)           # True
matrix.is_exist_col(5)           # False
matrix.get_cell(2, 3)            # the Node with row 2, col 3, data 9
matrix.get_cell(5, 5)            # None

matrix.rows()                    # [0, 2]  row indices with a header, ascending
matrix.cols()                    # [1, 3]  column indices with a header, ascending
list(matrix.cells())             # [(0, 1, 4), (2, 3, 9)]  row by row
len(matrix)                      # 2

matrix.remove_cell(0, 1)
matrix.remove_cell(8, 8)         # raises CellNotFoundError
```

Iterating over a `SparseMatrix` yields the same `(row, col, value)` tuples
as `cells()`. `CellNotFoundError` is a `KeyError` carrying the `row` and
`col` that were asked for.

Row and column headers stay in place once created: after
`remove_cell(0, 1)` above, `is_exist_row(0)` and `is_exist_col(1)` are
still `True`, while `is_existing(0, 1)` is `False`.

`display(console=None, delay=0.6)` sets the terminal title to
"Sparse Matrix", blanks the screen, and then writes each stored value at its
own zero-based row and column position, pausing `delay` seconds before each
value. Without a console it writes to standard output.

## Terminal helpers

`sparsegrid.console` has a `Console` that writes ANSI escape sequences to a
text stream (standard output by default):

- `set_title(title)` sets the window title;
- `set_cursor_at(row, col)` moves the cursor to a zero-based position;
- `set_color(text, back)` selects foreground and background colours and
  returns the attribute value used;
- `write(text)` writes text at the cursor;
- `erase()` blanks the screen and homes the cursor;
- `clear()` switches to black on black, then erases.

Colours come from the `ConsoleColor` enum (`BLACK` = 0 through
`WHITE` = 15, with aliases such as `DARK_CYAN`/`DARK_AQUA` and
`MAGENTA`/`PURPLE`/`PINK`). `color_attribute(text, back)` packs a text and a
background colour into one value, `text | back * 16`, after moving the text
colour on by one whenever it would equal the background colour. `Point` is
a small dataclass holding an `x` and a `y`.

## The interactive menu

```
sparsegrid
```

shows a menu with three choices:

1. Insert data: asks for a row and a column (negative numbers are refused
   and asked for again) and a value;
2. Display: draws the matrix with `display`;
3. Remove: asks for a row and a column and removes that cell, printing
   "Not Exists" if there is none.

Any other choice prints "Nothing". After each step it asks
"Do u want to show menu : "; an answer starting with `Y` or `y` clears the
screen and shows the menu again, anything else ends the program. The menu
also ends when input runs out or a number cannot be read.

The same loop is available as `sparsegrid.cli.run_menu(matrix,
input_stream, output_stream, console=None)`, which reads answers from any
text stream and returns the matrix when it is done.

## Limitations

The matrix lives only in memory: nothing is saved to or loaded from a file.
Display relies on the terminal understanding ANSI escape sequences.