"""
Demonstration scripts for the grux grid library.

Usage:
    python demo.py [arrays|sprites|growable|ansi|panel|all] [--verbose]
"""

from __future__ import annotations

import logging
import sys

import simple_chalk as chalk  # type: ignore[import-untyped]
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from grux import (
    BorderRect,
    BorderStyle,
    FillRect,
    FixedGrid,
    GrowableGrid,
    Line,
    TextGrid,
    parse_fixed,
)


def arrays_demo() -> None:
    """Draw a box one element at a time into a fixed grid."""
    grid = FixedGrid.filled(3, 3, " ")

    # In practice you'd probably use a loop (or a sprite)
    grid.set((0, 0), "╔")
    grid.set((1, 0), "═")
    grid.set((2, 0), "╗")
    grid.set((0, 1), "║")
    grid.set((2, 1), "║")
    grid.set((0, 2), "╚")
    grid.set((1, 2), "═")
    grid.set((2, 2), "╝")

    print(grid.render_to_text())


def sprites_demo() -> None:
    """Stamp a border and a filled rectangle onto a fixed grid."""
    grid = FixedGrid.filled(4, 4, " ")

    BorderRect(4, 4, ["╔", "═", "╗", "║", "║", "╚", "═", "╝"]).draw_to((0, 0), grid)
    FillRect(2, 2, "█").draw_to((1, 1), grid)

    # ╔══╗
    # ║██║
    # ║██║
    # ╚══╝
    print(grid.render_to_text())

    # Every preset, side by side
    styles = list(BorderStyle)
    gallery = FixedGrid.filled(len(styles) * 6, 3, " ")
    for i, style in enumerate(styles):
        BorderRect.styled(5, 3, style).draw_to((i * 6, 0), gallery)
    print(gallery.render_to_text())


def growable_demo() -> None:
    """Draw past the edges of growable buffers."""
    numbers = GrowableGrid(int)
    numbers.set((3, 3), 9)
    print(f"Rows: {numbers.rows}")
    print(numbers.render_to_text())

    text = TextGrid("012\n345\n678\n")
    text.set((1, 1), "9")
    Line.horizontal(3, "-").draw_to((0, 4), text)
    print(repr(text.text))
    print(text.render_to_text())
    print()


def ansi_demo() -> None:
    """Colored elements pass straight through a fixed grid."""
    grid = parse_fixed("       |       |       ")
    BorderRect.styled(7, 3, BorderStyle.ROUNDED, color_fn=chalk.cyan).draw_to((0, 0), grid)
    Line.horizontal(5, chalk.yellow("*")).draw_to((1, 1), grid)
    print(grid.render_to_text())


def panel_demo() -> None:
    """Show a rendered grid inside a rich panel."""
    grid = FixedGrid.filled(12, 5, " ")
    BorderRect.styled(12, 5, BorderStyle.HEAVY, color_fn=chalk.green).draw_to((0, 0), grid)
    FillRect(8, 1, chalk.magenta("▒")).draw_to((2, 2), grid)

    console = Console()
    console.print(Panel(Text.from_ansi(grid.render_to_text()), title="grux", border_style="green", expand=False))


DEMOS = dict(
    arrays=arrays_demo,
    sprites=sprites_demo,
    growable=growable_demo,
    ansi=ansi_demo,
    panel=panel_demo,
)


def main(argv: list[str]) -> None:
    """Run the demo named on the command line, or all of them."""
    verbose = "--verbose" in argv
    args = [arg for arg in argv if arg != "--verbose"]
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format='%(levelname)s: %(message)s')

    name = args[0] if args else "all"
    if name == "all":
        for demo_name, demo in DEMOS.items():
            print("=" * 40)
            print(f"{demo_name}:")
            print("=" * 40)
            demo()
    elif name in DEMOS:
        DEMOS[name]()
    else:
        print(f"Unknown demo: {name!r} (choose from {', '.join(DEMOS)}, all)")
        sys.exit(1)


if __name__ == "__main__":
    main(sys.argv[1:])
