"""
Grid parsing utilities for grux.

Builds character grids from a compact format:
- Rows separated by |
- Each character is one cell
"""

from __future__ import annotations

from grids import FixedGrid, GrowableGrid

__all__ = ["parse_rows", "parse_fixed", "parse_growable"]


def parse_rows(definition: str) -> list[list[str]]:
    """
    Split a definition into rows of single-character cells.

    Example:
        parse_rows("ab|c") -> [["a", "b"], ["c"]]

    An empty definition has no rows.
    """
    if not definition:
        return []
    return [list(row_str) for row_str in definition.split("|")]


def parse_fixed(definition: str, fill: str = " ") -> FixedGrid[str]:
    """
    Parse a definition into a fixed grid.

    Rows shorter than the longest row are padded on the right with fill.

    Example:
        parse_fixed("012|34") -> 3x2 grid ["0", "1", "2"], ["3", "4", " "]

    Args:
        definition: Rows separated by |
        fill: Padding cell for short rows (default space)

    Returns:
        FixedGrid of single-character strings
    """
    rows = parse_rows(definition)

    # Pad rows to maximum length
    if rows:
        max_cols = max(len(row) for row in rows)
        for row in rows:
            row.extend(fill for _ in range(max_cols - len(row)))

    return FixedGrid(rows)


def parse_growable(definition: str, blank: str = " ") -> GrowableGrid[str]:
    """
    Parse a definition into a growable grid, keeping ragged rows as written.

    Args:
        definition: Rows separated by |
        blank: Padding cell used when a later write widens a row (default space)

    Returns:
        GrowableGrid of single-character strings
    """
    return GrowableGrid(lambda: blank, parse_rows(definition))
