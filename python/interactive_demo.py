"""
Interactive sketch pad for grux.
Move a cursor around a fixed grid and stamp sprites with keyboard commands.
"""

from __future__ import annotations

import logging
import sys

import readchar
import simple_chalk as chalk  # type: ignore[import-untyped]
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from grux import BorderRect, BorderStyle, FillRect, FixedGrid, Line, Position, Sprite

logger = logging.getLogger(__name__)

MOVES: dict[str, Position] = dict(w=(0, -1), s=(0, 1), a=(-1, 0), d=(1, 0))


class SketchPad:
    """A fixed grid with a cursor and a pen."""

    def __init__(self, width: int = 40, height: int = 12, brush: str = "#") -> None:
        self.width = width
        self.height = height
        self.brush = brush
        self.grid: FixedGrid[str] = FixedGrid.filled(width, height, " ")
        self.cursor: Position = (0, 0)
        self.pen_down = False
        self.status_message = "Ready"

    def move(self, dx: int, dy: int) -> None:
        """Move the cursor, staying on the grid, and paint if the pen is down."""
        x, y = self.cursor
        self.cursor = (min(max(x + dx, 0), self.width - 1), min(max(y + dy, 0), self.height - 1))
        if self.pen_down:
            self.grid.set(self.cursor, self.brush)
        self.status_message = f"Cursor at {self.cursor}"

    def toggle_pen(self) -> None:
        self.pen_down = not self.pen_down
        if self.pen_down:
            self.grid.set(self.cursor, self.brush)
        self.status_message = "Pen down" if self.pen_down else "Pen up"

    def stamp(self, sprite: Sprite[str]) -> None:
        """Draw a sprite at the cursor if it fits on the grid."""
        x, y = self.cursor
        if x + sprite.width() > self.width or y + sprite.height() > self.height:
            self.status_message = (
                f"✗ {type(sprite).__name__} {sprite.width()}x{sprite.height()} "
                f"does not fit at {self.cursor}"
            )
            return
        sprite.draw_to(self.cursor, self.grid)
        logger.info("Stamped %r at %s", sprite, self.cursor)
        self.status_message = f"✓ Stamped {type(sprite).__name__} at {self.cursor}"

    def clear(self) -> None:
        FillRect(self.width, self.height, " ").draw_to((0, 0), self.grid)
        self.status_message = "Cleared"

    def render(self) -> str:
        """Render the grid with the cursor cell highlighted."""
        lines = self.grid.render_to_text().splitlines()
        x, y = self.cursor
        row = lines[y]
        lines[y] = row[:x] + chalk.bgWhite.black(row[x]) + row[x + 1:]
        return "\n".join(lines)

    def generate_display(self) -> Panel:
        """Generate the current display with grid and status."""
        status = Text()
        status.append(Text.from_ansi(self.render()))
        status.append("\n\n")
        status.append("Keys:\n", style="bold cyan")
        status.append("  W/A/S/D - Move cursor\n")
        status.append("  Space   - Toggle pen\n")
        status.append("  B - Stamp border   F - Stamp fill\n")
        status.append("  H - Horizontal line   V - Vertical line\n")
        status.append("  C - Clear   Q - Quit\n\n")

        # Status line at the bottom
        status.append("─" * 40 + "\n", style="dim")
        status.append("Status: ", style="bold")
        status.append(self.status_message)

        return Panel(status, title="grux Sketch Pad", border_style="green", width=self.width + 4)

    def handle_key(self, key: str) -> bool:
        """Apply a key press. Returns False when the pad should close."""
        key = key.lower()
        if key == "q":
            self.status_message = "Quitting..."
            return False
        if key in MOVES:
            self.move(*MOVES[key])
        elif key == " ":
            self.toggle_pen()
        elif key == "b":
            self.stamp(BorderRect.styled(6, 4, BorderStyle.DOUBLE))
        elif key == "f":
            self.stamp(FillRect(3, 2, "█"))
        elif key == "h":
            self.stamp(Line.horizontal(5, "─"))
        elif key == "v":
            self.stamp(Line.vertical(3, "│"))
        elif key == "c":
            self.clear()
        else:
            self.status_message = f"Unknown key: {repr(key)}"
        return True

    def run(self) -> None:
        """Run the sketch pad until Q is pressed."""
        console = Console()
        with Live(self.generate_display(), console=console, refresh_per_second=4) as live:
            try:
                while True:
                    live.update(self.generate_display())
                    if not self.handle_key(readchar.readkey()):
                        live.update(self.generate_display())
                        break
            except KeyboardInterrupt:
                self.status_message = "Interrupted by user"
                live.update(self.generate_display())


if __name__ == "__main__":
    # Log to a file; stdout belongs to the live display
    logging.basicConfig(
        filename="sketchpad.log",
        level=logging.DEBUG if "--verbose" in sys.argv else logging.INFO,
        format='%(levelname)s: %(message)s',
    )
    SketchPad().run()
