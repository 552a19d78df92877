"""
A library for drawing grid-based user interfaces with ASCII (or ASCII-like) characters.

Write elements at (x, y) positions into one of several buffers, stamp sprites
onto them, then render the buffer as text:

    from grux import BorderRect, FillRect, FixedGrid

    grid = FixedGrid.filled(4, 4, " ")
    BorderRect(4, 4, "╔═╗║║╚═╝").draw_to((0, 0), grid)
    FillRect(2, 2, "█").draw_to((1, 1), grid)
    print(grid.render_to_text(), end="")

Buffers:
- FixedGrid: dimensions known ahead of time; any displayable element,
  including emoji and ANSI-coloured strings
- GrowableGrid: dimensions not known ahead of time; rows may be ragged
- TextGrid: a plain string, one character per cell; rows may be ragged
"""

from __future__ import annotations

from grid_parser import parse_fixed, parse_growable, parse_rows
from grid_types import ENCODING, DisplayGrid, GridWriter, Orientation, Position
from grids import FixedGrid, GrowableGrid, TextGrid, split_lines
from sprites import BorderRect, BorderStyle, FillRect, Line, Sprite

__all__ = [
    "ENCODING",
    "BorderRect",
    "BorderStyle",
    "DisplayGrid",
    "FillRect",
    "FixedGrid",
    "GridWriter",
    "GrowableGrid",
    "Line",
    "Orientation",
    "Position",
    "Sprite",
    "TextGrid",
    "parse_fixed",
    "parse_growable",
    "parse_rows",
    "split_lines",
]
