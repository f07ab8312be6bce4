"""
ASCII rendering for mazes and their optimal paths.

Draws a maze as a bordered character grid, colouring walls, markers and the
cells that lie on optimal paths.
"""

from __future__ import annotations

import logging
from typing import Callable, Collection

import simple_chalk as chalk  # type: ignore[import-untyped]

from maze_parser import Symbols
from maze_types import Maze, Position, Terrain
from mazepath import MazeSolution

logger = logging.getLogger(__name__)

PATH_CHAR = "O"


def render_maze(
    maze: Maze,
    tiles: Collection[Position] | None = None,
    highlight: Position | None = None,
    symbols: Symbols = Symbols(),
    title: str | None = None,
) -> str:
    """
    Render a maze as a bordered character grid with colours.

    Args:
        maze: The maze to render
        tiles: Optional cells to mark as lying on a path; floor cells among
               them are drawn as 'O', start and goal keep their markers
        highlight: Optional cell drawn on a white background
        symbols: Characters used for each terrain
        title: Optional title centred in the top border

    Returns:
        Rendered string with ANSI colour codes
    """
    on_path = set(tiles) if tiles is not None else set()
    chars = {
        Terrain.WALL: symbols.wall,
        Terrain.OPEN: symbols.floor,
        Terrain.START: symbols.start,
        Terrain.GOAL: symbols.goal,
    }
    palette: dict[Terrain, Callable[[str], str]] = {
        Terrain.WALL: chalk.blue,
        Terrain.OPEN: lambda s: s,
        Terrain.START: chalk.yellow,
        Terrain.GOAL: chalk.yellow,
    }

    lines: list[str] = []

    # Top border with title
    top = "─" * maze.cols
    if title and len(title) + 2 <= maze.cols:
        label = f" {title} "
        left = (maze.cols - len(label)) // 2
        top = "─" * left + label + "─" * (maze.cols - left - len(label))
    lines.append("┌" + top + "┐")

    for r_idx, row in enumerate(maze.cells):
        line_parts = ["│"]
        for c_idx, terrain in enumerate(row):
            pos = Position(r_idx, c_idx)
            if terrain is Terrain.OPEN and pos in on_path:
                content = chalk.green(PATH_CHAR)
            else:
                content = palette[terrain](chars[terrain])

            if pos == highlight:
                content = chalk.bgWhite.black(content)

            line_parts.append(content)

        line_parts.append("│")
        lines.append("".join(line_parts))

    # Bottom border
    lines.append("└" + "─" * maze.cols + "┘")

    logger.debug("render_maze: %dx%d, %d path tiles", maze.rows, maze.cols, len(on_path))
    return "\n".join(lines)


def render_solution(maze: Maze, solution: MazeSolution, symbols: Symbols = Symbols()) -> str:
    """Render a maze with every tile on an optimal path marked."""
    title = "unreachable" if solution.cost is None else f"cost {solution.cost}"
    return render_maze(maze, solution.tiles, symbols=symbols, title=title)
