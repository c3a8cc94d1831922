"""Console helpers: colours, cursor placement, titles and clearing via ANSI escapes."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass
from typing import TextIO

ESC = "\x1b"
ERASE_SCREEN = f"{ESC}[2J{ESC}[H"


class ConsoleColor(enum.IntEnum):
    """The sixteen console colours, numbered as console attribute nibbles."""

    BLACK = 0
    DARK_BLUE = 1
    DARK_GREEN = 2
    DARK_AQUA = 3
    DARK_CYAN = 3
    DARK_RED = 4
    DARK_PURPLE = 5
    DARK_PINK = 5
    DARK_MAGENTA = 5
    DARK_YELLOW = 6
    DARK_WHITE = 7
    GRAY = 8
    BLUE = 9
    GREEN = 10
    AQUA = 11
    CYAN = 11
    RED = 12
    PURPLE = 13
    PINK = 13
    MAGENTA = 13
    YELLOW = 14
    WHITE = 15


@dataclass
class Point:
    """A screen position."""

    x: int = 0
    y: int = 0


def color_attribute(text: int, back: int) -> int:
    """Combine text and background colours into one attribute byte.

    The text colour is never allowed to equal the background colour:
    if they match, the text colour moves to the next one.
    """
    text = int(text)
    back = int(back)
    if text % 16 == back % 16:
        text += 1
    text %= 16
    back %= 16
    return text | (back * 16)


def _ansi_index(color: int) -> int:
    # Attribute nibbles order the bits blue/green/red; ANSI orders them red/green/blue.
    return ((color & 1) << 2) | (color & 2) | ((color & 4) >> 2)


def _sgr(color: int, normal_base: int, bright_base: int) -> int:
    base = bright_base if color & 8 else normal_base
    return base + _ansi_index(color)


class Console:
    """A terminal written to through a text stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.attribute = color_attribute(ConsoleColor.DARK_WHITE, ConsoleColor.BLACK)

    def write(self, text: str) -> None:
        """Write text at the current cursor position."""
        self.stream.write(text)
        self.stream.flush()

    def set_title(self, title: str) -> None:
        """Set the terminal window title."""
        self.write(f"{ESC}]0;{title}\a")

    def set_cursor_at(self, row: int, col: int) -> None:
        """Move the cursor to a zero-based row and column."""
        self.write(f"{ESC}[{row + 1};{col + 1}H")

    def set_color(self, text: int, back: int) -> int:
        """Select text and background colours; returns the attribute used."""
        self.attribute = color_attribute(text, back)
        fore = _sgr(self.attribute & 15, 30, 90)
        background = _sgr(self.attribute >> 4, 40, 100)
        self.write(f"{ESC}[{fore};{background}m")
        return self.attribute

    def erase(self) -> None:
        """Blank the screen and home the cursor, keeping the colours."""
        self.write(ERASE_SCREEN)

    def clear(self) -> None:
        """Switch to black colours, blank the screen and home the cursor."""
        self.set_color(ConsoleColor.BLACK, ConsoleColor.BLACK)
        self.erase()