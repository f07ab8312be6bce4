#!/usr/bin/env python3
"""
Demo for mazepath: solve a maze and show the optimal tiles.

Usage:
    demo.py [LAYOUT | PATH] [--verbose]

LAYOUT is one of the built-in sample mazes; anything else is read as a file.
"""

import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from ascii_render import render_solution
from mazepath import MazeError, parse_maze, solve


LAYOUTS = dict(
    small="""
###############
#.......#....E#
#.#.###.#.###.#
#.....#.#...#.#
#.###.#####.#.#
#.#.#.......#.#
#.#.#####.###.#
#...........#.#
###.#.#####.#.#
#...#.....#.#.#
#.#.#.###.#.#.#
#.....#...#.#.#
#.###.#.#.#.#.#
#S..#.....#...#
###############
""",
    large="""
#################
#...#...#...#..E#
#.#.#.#.#.#.#.#.#
#.#.#.#...#...#.#
#.#.#.#.###.#.#.#
#...#.#.#.....#.#
#.#.#.#.#.#####.#
#.#...#.#.#.....#
#.#.#####.#.###.#
#.#.#.......#...#
#.#.###.#####.###
#.#.#...#.....#.#
#.#.#.#####.###.#
#.#.#.........#.#
#.#.#.#########.#
#S#.............#
#################
""",
    walled="""
#######
#S..#E#
#######
""",
)


def build_display(name: str, text: str) -> tuple[Panel, bool]:
    """
    Solve the maze text and build a panel with both answers and the drawing.

    Returns:
        The panel, and False if the text could not be parsed
    """
    try:
        maze = parse_maze(text)
    except MazeError as e:
        status = Text()
        status.append("ERROR: could not parse maze\n", style="bold red")
        status.append(str(e))
        return Panel(status, title=f"mazepath - {name}", border_style="red"), False

    solution = solve(maze)

    status = Text()
    status.append("Lowest score: ", style="bold")
    status.append("unreachable" if solution.cost is None else str(solution.cost))
    status.append("\n")
    status.append("Tiles on best paths: ", style="bold")
    status.append(f"{solution.tile_count}\n\n")

    # Convert ANSI-colored maze text to Rich Text properly
    status.append(Text.from_ansi(render_solution(maze, solution)))
    return Panel(status, title=f"mazepath - {name}", border_style="green"), True


def main(argv: list[str]) -> int:
    args = [a for a in argv if a != "--verbose"]
    if len(args) != len(argv):
        logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    target = args[0] if args else "small"
    if target in LAYOUTS:
        text = LAYOUTS[target]
    else:
        path = Path(target)
        if not path.is_file():
            print(f"Unknown layout or missing file: {target}")
            print(f"Layouts: {', '.join(LAYOUTS)}")
            return 1
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            status = Text()
            status.append(f"ERROR: could not read {target}\n", style="bold red")
            status.append(str(e))
            Console().print(status)
            return 1

    panel, ok = build_display(target, text)
    Console().print(panel)
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
