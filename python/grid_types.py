"""
Shared type definitions for the grux system.

Two capabilities are shared by every grid-like buffer:
1. GridWriter - place one element at an (x, y) position
2. DisplayGrid - render the buffer row by row as text or to a byte stream
"""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from enum import Enum
from typing import BinaryIO, Protocol, TypeVar

ENCODING = "utf-8"

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)

Position = tuple[int, int]
"""An (x, y) coordinate: x is the column, y is the row."""


class Orientation(Enum):
    """Direction a line is drawn in."""

    HORIZONTAL = "horizontal"  # Left to right (increasing x)
    VERTICAL = "vertical"  # Top to bottom (increasing y)


# =============================================================================
# Capabilities
# =============================================================================


class GridWriter(Protocol[T_contra]):
    """A grid-like writable buffer, indexed by (x, y)."""

    def set(self, position: Position, element: T_contra) -> None:
        """Set the element at the given (x, y) position.

        How the position is interpreted is up to the implementor: it may grow
        the buffer to fit the position, or raise IndexError when the position
        is out of bounds.
        """
        ...


class DisplayGrid(ABC):
    """A grid-like buffer that can be rendered as rows of text.

    Subclasses only have to provide write_to; render_to_text is derived from it.
    """

    @abstractmethod
    def write_to(self, stream: BinaryIO) -> None:
        """
        Write the grid to a binary stream.

        Each row is followed by a newline, including the last row. Errors
        raised by the stream propagate to the caller.
        """
        raise NotImplementedError

    def render_to_text(self) -> str:
        """
        Return the grid as a string.

        Equivalent to write_to with an in-memory stream. For large grids that
        end up on stdout anyway, prefer write_to.

        Raises:
            UnicodeDecodeError: If the written bytes are not valid UTF-8
        """
        stream = io.BytesIO()
        self.write_to(stream)
        return stream.getvalue().decode(ENCODING)

    def __str__(self) -> str:
        return self.render_to_text()


def check_position(position: Position) -> tuple[int, int]:
    """Unpack a position, rejecting negative coordinates."""
    x, y = position
    if x < 0 or y < 0:
        raise IndexError(
            f"Invalid position {position}\n"
            f"  Coordinates must be non-negative (x is the column, y is the row)"
        )
    return x, y
