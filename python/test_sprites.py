"""Tests for sprites module."""

from dataclasses import FrozenInstanceError

import pytest

from grid_types import Orientation, Position
from grids import FixedGrid, GrowableGrid, TextGrid
from sprites import BorderRect, BorderStyle, FillRect, Line, Sprite

DOUBLE_BOX = ["╔", "═", "╗", "║", "║", "╚", "═", "╝"]


class RecordingGrid:
    """A GridWriter that only records the writes it receives."""

    def __init__(self) -> None:
        self.writes: list[tuple[Position, object]] = []

    def set(self, position: Position, element: object) -> None:
        self.writes.append((position, element))


class TestSprite:
    """Tests for the Sprite base class."""

    def test_sprite_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            Sprite()  # type: ignore[abstract]

    def test_custom_sprite(self) -> None:
        """A hand-written sprite draws through the same interface."""

        class Box(Sprite[str]):
            def width(self) -> int:
                return 3

            def height(self) -> int:
                return 3

            def draw_to(self, position, to) -> None:  # type: ignore[no-untyped-def]
                x, y = position
                to.set((x + 0, y + 0), "╔")
                to.set((x + 1, y + 0), "═")
                to.set((x + 2, y + 0), "╗")
                to.set((x + 0, y + 1), "║")
                to.set((x + 2, y + 1), "║")
                to.set((x + 0, y + 2), "╚")
                to.set((x + 1, y + 2), "═")
                to.set((x + 2, y + 2), "╝")
                to.set((x + 1, y + 1), " ")

        grid = FixedGrid.filled(3, 3, " ")
        Box().draw_to((0, 0), grid)

        assert grid.rows == [
            ["╔", "═", "╗"],
            ["║", " ", "║"],
            ["╚", "═", "╝"],
        ]


class TestLine:
    """Tests for Line sprites."""

    def test_horizontal_dimensions(self) -> None:
        line = Line.horizontal(5, "-")
        assert line.orientation is Orientation.HORIZONTAL
        assert line.width() == 5
        assert line.height() == 1

    def test_vertical_dimensions(self) -> None:
        line = Line.vertical(4, "|")
        assert line.orientation is Orientation.VERTICAL
        assert line.width() == 1
        assert line.height() == 4

    def test_draw_lines(self) -> None:
        """Lines can be reused at several offsets."""
        grid = FixedGrid.filled(3, 4, " ")

        line = Line.horizontal(3, "═")
        line.draw_to((0, 0), grid)
        line.draw_to((0, 3), grid)

        line = Line.vertical(2, "║")
        line.draw_to((0, 1), grid)
        line.draw_to((2, 1), grid)

        assert grid.rows == [
            ["═", "═", "═"],
            ["║", " ", "║"],
            ["║", " ", "║"],
            ["═", "═", "═"],
        ]

    def test_horizontal_writes(self) -> None:
        recorder = RecordingGrid()
        Line.horizontal(3, "x").draw_to((2, 5), recorder)
        assert recorder.writes == [((2, 5), "x"), ((3, 5), "x"), ((4, 5), "x")]

    def test_vertical_writes(self) -> None:
        recorder = RecordingGrid()
        Line.vertical(2, "x").draw_to((1, 1), recorder)
        assert recorder.writes == [((1, 1), "x"), ((1, 2), "x")]

    def test_zero_length_draws_nothing(self) -> None:
        recorder = RecordingGrid()
        Line.horizontal(0, "x").draw_to((0, 0), recorder)
        assert recorder.writes == []

    def test_vertical_on_growable_grid(self) -> None:
        grid = GrowableGrid(int)
        Line.vertical(2, 1).draw_to((1, 1), grid)
        assert grid.rows == [[], [0, 1], [0, 1]]

    def test_invalid_orientation_raises_error(self) -> None:
        with pytest.raises(ValueError, match="Invalid orientation"):
            Line(3, "x", "horizontal")  # type: ignore[arg-type]

    def test_line_is_immutable(self) -> None:
        line = Line.horizontal(3, "-")
        with pytest.raises(FrozenInstanceError):
            line.length = 4  # type: ignore[misc]


class TestFillRect:
    """Tests for FillRect sprites."""

    def test_dimensions(self) -> None:
        rect = FillRect(3, 2, "#")
        assert rect.width() == 3
        assert rect.height() == 2

    def test_draw(self) -> None:
        grid = FixedGrid.filled(4, 4, " ")

        FillRect(2, 2, "█").draw_to((1, 1), grid)

        assert grid.rows == [
            [" ", " ", " ", " "],
            [" ", "█", "█", " "],
            [" ", "█", "█", " "],
            [" ", " ", " ", " "],
        ]

    def test_draw_covers_every_cell_once(self) -> None:
        recorder = RecordingGrid()
        FillRect(3, 2, "#").draw_to((1, 1), recorder)

        positions = [position for position, _ in recorder.writes]
        assert len(positions) == 6
        assert set(positions) == {(x, y) for x in range(1, 4) for y in range(1, 3)}

    def test_draw_on_text_grid(self) -> None:
        grid = TextGrid()
        FillRect(2, 2, "#").draw_to((1, 0), grid)
        assert grid.text == " ##\n ##"

    def test_draw_out_of_bounds_raises_error(self) -> None:
        grid = FixedGrid.filled(2, 2, " ")
        with pytest.raises(IndexError):
            FillRect(3, 1, "#").draw_to((0, 0), grid)


class TestBorderRect:
    """Tests for BorderRect sprites."""

    def test_draw(self) -> None:
        grid = FixedGrid.filled(4, 4, " ")

        BorderRect(4, 4, DOUBLE_BOX).draw_to((0, 0), grid)

        assert grid.rows == [
            ["╔", "═", "═", "╗"],
            ["║", " ", " ", "║"],
            ["║", " ", " ", "║"],
            ["╚", "═", "═", "╝"],
        ]

    def test_draw_at_offset(self) -> None:
        grid = FixedGrid.filled(4, 3, ".")
        BorderRect(3, 2, "+-+||+-+").draw_to((1, 1), grid)
        assert grid.render_to_text() == "....\n.+-+\n.+-+\n"

    def test_interior_is_untouched(self) -> None:
        grid = FixedGrid.filled(3, 3, "?")
        BorderRect(3, 3, DOUBLE_BOX).draw_to((0, 0), grid)
        assert grid[1, 1] == "?"

    def test_each_cell_written_once(self) -> None:
        recorder = RecordingGrid()
        BorderRect(4, 3, "abcdefgh").draw_to((0, 0), recorder)

        positions = [position for position, _ in recorder.writes]
        assert len(positions) == len(set(positions)) == 10

    def test_corners_written_last(self) -> None:
        recorder = RecordingGrid()
        BorderRect(3, 3, "abcdefgh").draw_to((0, 0), recorder)

        assert recorder.writes[-4:] == [((0, 0), "a"), ((2, 0), "c"), ((0, 2), "f"), ((2, 2), "h")]

    def test_smallest_border(self) -> None:
        """A 2x2 border is all corners, for any palette type."""
        grid = FixedGrid.filled(2, 2, -1)
        BorderRect(2, 2, list(range(8))).draw_to((0, 0), grid)
        assert grid.rows == [[0, 2], [5, 7]]

    def test_palette_accessors(self) -> None:
        rect = BorderRect(2, 2, "abcdefgh")
        assert rect.palette == ("a", "b", "c", "d", "e", "f", "g", "h")
        assert [
            rect.top_left(),
            rect.top(),
            rect.top_right(),
            rect.left(),
            rect.right(),
            rect.bottom_left(),
            rect.bottom(),
            rect.bottom_right(),
        ] == list("abcdefgh")

    def test_width_too_small_raises_error(self) -> None:
        with pytest.raises(ValueError, match="Width must be at least 2"):
            BorderRect(1, 4, DOUBLE_BOX)

    def test_height_too_small_raises_error(self) -> None:
        with pytest.raises(ValueError, match="Height must be at least 2"):
            BorderRect(4, 0, DOUBLE_BOX)

    def test_palette_size_raises_error(self) -> None:
        with pytest.raises(ValueError, match="exactly 8 elements"):
            BorderRect(4, 4, DOUBLE_BOX[:7])

    def test_dimensions_unaffected_by_drawing(self) -> None:
        rect = BorderRect(5, 3, DOUBLE_BOX)
        before = (rect.width(), rect.height())

        rect.draw_to((0, 0), FixedGrid.filled(5, 3, " "))
        rect.draw_to((2, 2), GrowableGrid(str))

        assert (rect.width(), rect.height()) == before == (5, 3)

    def test_styled(self) -> None:
        grid = FixedGrid.filled(3, 2, " ")
        BorderRect.styled(3, 2, BorderStyle.ASCII).draw_to((0, 0), grid)
        assert grid.render_to_text() == "+-+\n+-+\n"

    def test_styled_with_color_fn(self) -> None:
        rect = BorderRect.styled(2, 2, BorderStyle.SINGLE, color_fn=lambda glyph: f"<{glyph}>")
        assert rect.top_left() == "<┌>"
        assert rect.bottom_right() == "<┘>"

    def test_styled_keeps_subclass(self) -> None:
        class Frame(BorderRect[str]):
            pass

        rect = Frame.styled(3, 3, BorderStyle.DOUBLE)

        assert isinstance(rect, Frame)
        assert rect.top_left() == "╔"

    def test_every_style_has_eight_glyphs(self) -> None:
        for style in BorderStyle:
            rect = BorderRect.styled(2, 2, style)
            assert len(rect.palette) == 8
            assert all(len(glyph) == 1 for glyph in rect.palette)
