"""
Backing representations for grid buffers.

Three buffers implement both GridWriter and DisplayGrid:
1. FixedGrid - rectangular rows of a fixed width and height
2. GrowableGrid - ragged rows that grow to fit any position written
3. TextGrid - a single string, one line per row, that grows with spaces
"""

from __future__ import annotations

import logging
from typing import BinaryIO, Callable, Generic, Iterable

from grid_types import ENCODING, DisplayGrid, Position, T, check_position

logger = logging.getLogger(__name__)


def _write_rows(rows: Iterable[Iterable[object]], stream: BinaryIO) -> None:
    """Write each row's elements with no separator, then a newline after every row."""
    for row in rows:
        for element in row:
            stream.write(str(element).encode(ENCODING))
        stream.write(b"\n")


# =============================================================================
# Fixed Grid
# =============================================================================


class FixedGrid(DisplayGrid, Generic[T]):
    """
    A rectangular grid whose width and height never change.

    The outer list holds the rows and the inner lists hold the columns, so the
    element at (x, y) lives at rows[y][x]. Writing outside the grid raises
    IndexError.

    The rows are copied on construction, so later changes to the caller's
    lists cannot reshape the grid.

    Example:
        grid = FixedGrid.filled(2, 2, 0)
        grid.set((1, 1), 1)
        assert grid.rows == [[0, 0], [0, 1]]
    """

    def __init__(self, rows: list[list[T]]) -> None:
        if rows:
            width = len(rows[0])
            mismatched = [(i, len(row)) for i, row in enumerate(rows) if len(row) != width]
            if mismatched:
                error_msg = (
                    f"Inconsistent row lengths for a fixed grid\n"
                    f"  Expected: {width} columns (from row 0)\n"
                    f"  Mismatched rows:\n"
                )
                for row_idx, actual_cols in mismatched:
                    error_msg += f"    Row {row_idx}: {actual_cols} columns\n"
                error_msg += "  All rows must have the same number of cells"
                raise ValueError(error_msg)
        self.rows = [list(row) for row in rows]
        self._width = len(rows[0]) if rows else 0
        self._height = len(rows)

    @classmethod
    def filled(cls, width: int, height: int, fill: T) -> FixedGrid[T]:
        """Create a width x height grid with every cell set to fill."""
        return cls([[fill for _ in range(width)] for _ in range(height)])

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _index(self, position: Position) -> tuple[int, int]:
        x, y = check_position(position)
        if x >= self._width or y >= self._height:
            raise IndexError(
                f"Position {position} is out of bounds\n"
                f"  Grid size: {self._width}x{self._height}\n"
                f"  Valid x: 0..{self._width - 1}, valid y: 0..{self._height - 1}"
            )
        return x, y

    def __getitem__(self, position: Position) -> T:
        x, y = self._index(position)
        return self.rows[y][x]

    def set(self, position: Position, element: T) -> None:
        """
        Set the element at the given (x, y) position.

        Raises:
            IndexError: If the position is outside the grid
        """
        x, y = self._index(position)
        self.rows[y][x] = element

    def write_to(self, stream: BinaryIO) -> None:
        _write_rows(self.rows, stream)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FixedGrid):
            return self.rows == other.rows
        return NotImplemented

    def __repr__(self) -> str:
        return f"FixedGrid({self.rows!r})"


# =============================================================================
# Growable Grid
# =============================================================================


class GrowableGrid(DisplayGrid, Generic[T]):
    """
    A grid of rows that grows to fit whatever position is written.

    New rows are empty; a row that is too short is padded with values from
    default_factory, the same way collections.defaultdict fills missing keys.
    Only the written row is widened, so the grid is not guaranteed to be
    rectangular.

    The rows list is used in place, so a caller-owned list of lists sees every
    write.

    Example:
        grid = GrowableGrid(int)
        grid.set((1, 1), 1)
        assert grid.rows == [[], [0, 1]]
    """

    def __init__(self, default_factory: Callable[[], T], rows: list[list[T]] | None = None) -> None:
        self.default_factory = default_factory
        self.rows: list[list[T]] = rows if rows is not None else []

    def set(self, position: Position, element: T) -> None:
        """Set the element at the given (x, y) position, growing the grid if needed."""
        x, y = check_position(position)

        if y >= len(self.rows):
            logger.debug("Growing rows from %d to %d", len(self.rows), y + 1)
            self.rows.extend([] for _ in range(y + 1 - len(self.rows)))

        row = self.rows[y]

        if x >= len(row):
            logger.debug("Widening row %d from %d to %d", y, len(row), x + 1)
            row.extend(self.default_factory() for _ in range(x + 1 - len(row)))

        row[x] = element

    def write_to(self, stream: BinaryIO) -> None:
        _write_rows(self.rows, stream)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, GrowableGrid):
            return self.rows == other.rows
        return NotImplemented

    def __repr__(self) -> str:
        return f"GrowableGrid({self.default_factory!r}, {self.rows!r})"


# =============================================================================
# Text Grid
# =============================================================================

# Unicode White_Space; str.isspace also counts the \x1c-\x1f separators
WHITESPACE = "\t\n\x0b\x0c\r \x85\xa0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000"


def split_lines(text: str) -> list[str]:
    """
    Split text into lines on "\\n".

    A trailing line break does not start another line, and a "\\r" left at
    the end of a line is dropped. Empty text has no lines.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


class TextGrid(DisplayGrid):
    """
    A grid stored as a single string, one line per row.

    Empty cells are spaces. Each element must be exactly one character;
    multi-character glyphs, ANSI escape sequences and graphemes are rejected,
    use FixedGrid or GrowableGrid for those.

    Trailing whitespace is trimmed from every written row, so the grid is not
    guaranteed to be rectangular. Every write re-splits the whole string,
    which is fine for small grids and prototyping.

    Example:
        grid = TextGrid()
        grid.set((1, 1), "X")
        assert grid.text == "\\n X"
    """

    def __init__(self, text: str = "") -> None:
        self.text = text

    def set(self, position: Position, element: str) -> None:
        """
        Set the character at the given (x, y) position, growing the grid if needed.

        Raises:
            ValueError: If the element is not exactly one character
        """
        x, y = check_position(position)
        glyph = str(element)
        if len(glyph) != 1:
            raise ValueError(
                f"Invalid element {glyph!r} for a text grid\n"
                f"  Expected exactly one character, got {len(glyph)}"
            )

        rows = split_lines(self.text)

        if y >= len(rows):
            logger.debug("Adding lines: %d -> %d", len(rows), y + 1)
            rows.extend("" for _ in range(y + 1 - len(rows)))

        row = rows[y]
        if x >= len(row):
            row = row.ljust(x + 1)

        rows[y] = (row[:x] + glyph + row[x + 1:]).rstrip(WHITESPACE)
        self.text = "\n".join(rows)

    def render_to_text(self) -> str:
        return self.text

    def write_to(self, stream: BinaryIO) -> None:
        """Write the text verbatim; no newline is added after the last row."""
        stream.write(self.text.encode(ENCODING))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TextGrid):
            return self.text == other.text
        return NotImplemented

    def __repr__(self) -> str:
        return f"TextGrid({self.text!r})"
