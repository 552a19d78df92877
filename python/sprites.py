"""
Simple ASCII (or ASCII-like) sprites drawn onto any GridWriter.

A sprite is an immutable description of a pattern. It owns no buffer: it is
stamped onto a caller-supplied grid at a caller-supplied offset, and can be
reused on as many grids and offsets as needed.

Sprites are not limited to characters. A Line of ANSI-coloured strings, or of
a custom cell type, draws the same way.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, Sequence

from grid_types import GridWriter, Orientation, Position, T

logger = logging.getLogger(__name__)


class Sprite(ABC, Generic[T]):
    """
    Something that can be drawn to a 2D grid.

    Example:
        class Box(Sprite[str]):
            def width(self) -> int:
                return 3

            def height(self) -> int:
                return 3

            def draw_to(self, position, to):
                x, y = position
                to.set((x, y), "╔")
                ...
    """

    @abstractmethod
    def width(self) -> int:
        """The width of the sprite in cells."""
        raise NotImplementedError

    @abstractmethod
    def height(self) -> int:
        """The height of the sprite in cells."""
        raise NotImplementedError

    @abstractmethod
    def draw_to(self, position: Position, to: GridWriter[T]) -> None:
        """Draw the sprite with its top-left corner at the given (x, y) position."""
        raise NotImplementedError


# =============================================================================
# Line
# =============================================================================


@dataclass(frozen=True)
class Line(Sprite[T]):
    """
    A straight run of one element.

    Example:
        grid = FixedGrid.filled(3, 4, " ")
        Line.horizontal(3, "═").draw_to((0, 0), grid)
        Line.vertical(2, "║").draw_to((0, 1), grid)
    """

    length: int
    fill: T
    orientation: Orientation = Orientation.HORIZONTAL

    def __post_init__(self) -> None:
        if not isinstance(self.orientation, Orientation):
            raise ValueError(
                f"Invalid orientation {self.orientation!r}\n"
                f"  Expected one of: {', '.join(str(o) for o in Orientation)}"
            )

    @classmethod
    def horizontal(cls, length: int, fill: T) -> Line[T]:
        """A left-to-right line of the given length."""
        return cls(length, fill, Orientation.HORIZONTAL)

    @classmethod
    def vertical(cls, length: int, fill: T) -> Line[T]:
        """A top-to-bottom line of the given length."""
        return cls(length, fill, Orientation.VERTICAL)

    def width(self) -> int:
        match self.orientation:
            case Orientation.HORIZONTAL:
                return self.length
            case Orientation.VERTICAL:
                return 1

    def height(self) -> int:
        match self.orientation:
            case Orientation.HORIZONTAL:
                return 1
            case Orientation.VERTICAL:
                return self.length

    def draw_to(self, position: Position, to: GridWriter[T]) -> None:
        x, y = position
        logger.debug("Drawing %s line of %d at %s", self.orientation.value, self.length, position)

        match self.orientation:
            case Orientation.HORIZONTAL:
                for i in range(self.length):
                    to.set((x + i, y), self.fill)
            case Orientation.VERTICAL:
                for i in range(self.length):
                    to.set((x, y + i), self.fill)


# =============================================================================
# Filled Rectangle
# =============================================================================


@dataclass(frozen=True)
class FillRect(Sprite[T]):
    """A rectangle with every cell set to one element. For an outline, see BorderRect."""

    rect_width: int
    rect_height: int
    fill: T

    def width(self) -> int:
        return self.rect_width

    def height(self) -> int:
        return self.rect_height

    def draw_to(self, position: Position, to: GridWriter[T]) -> None:
        x, y = position
        logger.debug("Filling %dx%d rect at %s", self.rect_width, self.rect_height, position)

        for i in range(self.rect_width):
            for j in range(self.rect_height):
                to.set((x + i, y + j), self.fill)


# =============================================================================
# Bordered Rectangle
# =============================================================================


class BorderStyle(Enum):
    """Ready-made border palettes, in BorderRect palette order."""

    SINGLE = ("┌", "─", "┐", "│", "│", "└", "─", "┘")
    DOUBLE = ("╔", "═", "╗", "║", "║", "╚", "═", "╝")
    ROUNDED = ("╭", "─", "╮", "│", "│", "╰", "─", "╯")
    HEAVY = ("┏", "━", "┓", "┃", "┃", "┗", "━", "┛")
    ASCII = ("+", "-", "+", "|", "|", "+", "-", "+")


@dataclass(frozen=True)
class BorderRect(Sprite[T]):
    """
    The outline of a rectangle; the interior is left untouched.

    The palette holds eight elements in this order:
    top-left, top, top-right, left, right, bottom-left, bottom, bottom-right.

    Example:
        grid = FixedGrid.filled(4, 4, " ")
        BorderRect(4, 4, "╔═╗║║╚═╝").draw_to((0, 0), grid)
        # ╔══╗
        # ║  ║
        # ║  ║
        # ╚══╝

    Raises:
        ValueError: If the width or height is less than 2, or the palette
            does not have exactly eight elements
    """

    rect_width: int
    rect_height: int
    palette: Sequence[T]

    def __post_init__(self) -> None:
        if self.rect_width < 2:
            raise ValueError(f"Width must be at least 2, got {self.rect_width}")
        if self.rect_height < 2:
            raise ValueError(f"Height must be at least 2, got {self.rect_height}")
        palette = tuple(self.palette)
        if len(palette) != 8:
            raise ValueError(
                f"Border palette must have exactly 8 elements, got {len(palette)}\n"
                f"  Order: top-left, top, top-right, left, right, bottom-left, bottom, bottom-right"
            )
        object.__setattr__(self, "palette", palette)

    @classmethod
    def styled(
        cls,
        width: int,
        height: int,
        style: BorderStyle,
        color_fn: Callable[[str], str] | None = None,
    ) -> BorderRect[str]:
        """
        Build a border from a preset style.

        Args:
            width: Width of the border, at least 2
            height: Height of the border, at least 2
            style: Preset palette
            color_fn: Optional colorizer applied to every glyph (e.g. chalk.blue)

        Returns:
            BorderRect of strings
        """
        palette: Sequence[str] = style.value
        if color_fn is not None:
            palette = [color_fn(glyph) for glyph in palette]
        return cls(width, height, palette)

    def top_left(self) -> T:
        return self.palette[0]

    def top(self) -> T:
        return self.palette[1]

    def top_right(self) -> T:
        return self.palette[2]

    def left(self) -> T:
        return self.palette[3]

    def right(self) -> T:
        return self.palette[4]

    def bottom_left(self) -> T:
        return self.palette[5]

    def bottom(self) -> T:
        return self.palette[6]

    def bottom_right(self) -> T:
        return self.palette[7]

    def width(self) -> int:
        return self.rect_width

    def height(self) -> int:
        return self.rect_height

    def draw_to(self, position: Position, to: GridWriter[T]) -> None:
        x, y = position
        right = x + self.rect_width - 1
        bottom = y + self.rect_height - 1
        logger.debug("Drawing %dx%d border at %s", self.rect_width, self.rect_height, position)

        # Top and bottom edges
        for col in range(x + 1, right):
            to.set((col, y), self.top())
            to.set((col, bottom), self.bottom())

        # Left and right edges
        for row in range(y + 1, bottom):
            to.set((x, row), self.left())
            to.set((right, row), self.right())

        # Corners last
        to.set((x, y), self.top_left())
        to.set((right, y), self.top_right())
        to.set((x, bottom), self.bottom_left())
        to.set((right, bottom), self.bottom_right())
