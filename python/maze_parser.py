"""
Maze parsing for mazepath.

Turns a block of single-character cells into a Maze, validating shape and
start/goal markers along the way.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from maze_types import (
    DuplicateMarker,
    MalformedGrid,
    Maze,
    MissingMarker,
    Position,
    Terrain,
)

__all__ = ["Symbols", "parse_maze"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Symbols:
    """Characters reserved for each kind of cell."""

    wall: str = "#"
    floor: str = "."
    start: str = "S"
    goal: str = "E"

    def __post_init__(self) -> None:
        chars = (self.wall, self.floor, self.start, self.goal)
        if any(len(c) != 1 for c in chars) or len(set(chars)) != len(chars):
            raise ValueError(
                f"Maze symbols must be four distinct single characters\n"
                f"  Got: wall={self.wall!r}, floor={self.floor!r}, "
                f"start={self.start!r}, goal={self.goal!r}"
            )

    def terrain_map(self) -> dict[str, Terrain]:
        return {
            self.wall: Terrain.WALL,
            self.floor: Terrain.OPEN,
            self.start: Terrain.START,
            self.goal: Terrain.GOAL,
        }


def parse_maze(text: str, symbols: Symbols = Symbols()) -> Maze:
    """
    Parse a maze from its text form.

    Format:
    - One row per line, one character per cell
    - Surrounding blank lines are ignored
    - Every row must have the same number of cells
    - Exactly one start and one goal cell

    Example:
        \"\"\"
        #####
        #S.E#
        #####
        \"\"\"

        Creates a 3x5 Maze with start at (1, 1) and goal at (1, 3).

    Args:
        text: The maze text
        symbols: Characters used for walls, floor, start and goal

    Returns:
        The parsed Maze

    Raises:
        MalformedGrid: Empty input, rows of unequal length or unknown characters
        MissingMarker: No start or no goal cell
        DuplicateMarker: More than one start or goal cell
    """
    row_strings = text.splitlines()
    while row_strings and not row_strings[0].strip():
        row_strings.pop(0)
    while row_strings and not row_strings[-1].strip():
        row_strings.pop()
    if not row_strings:
        raise MalformedGrid("Empty maze definition")

    # Validate all rows have same length
    cols = len(row_strings[0])
    mismatched = [(i, len(row)) for i, row in enumerate(row_strings) if len(row) != cols]
    if mismatched:
        error_msg = (
            f"Inconsistent row lengths in maze\n"
            f"  Expected: {cols} columns (from row 0)\n"
            f"  Mismatched rows:\n"
        )
        for row_idx, actual_cols in mismatched:
            error_msg += f"    Row {row_idx}: {actual_cols} columns - \"{row_strings[row_idx]}\"\n"
        error_msg += "  All rows must have the same number of cells"
        raise MalformedGrid(error_msg)

    terrain_for = symbols.terrain_map()
    rows: list[tuple[Terrain, ...]] = []
    markers: dict[Terrain, list[Position]] = {Terrain.START: [], Terrain.GOAL: []}

    for row_idx, row_str in enumerate(row_strings):
        cells: list[Terrain] = []
        for col_idx, char in enumerate(row_str):
            terrain = terrain_for.get(char)
            if terrain is None:
                raise MalformedGrid(
                    f"Invalid character '{char}' in maze\n"
                    f"  Row {row_idx}, column {col_idx}\n"
                    f"  Valid characters: {', '.join(repr(c) for c in terrain_for)}"
                )
            if terrain in markers:
                markers[terrain].append(Position(row_idx, col_idx))
            cells.append(terrain)
        rows.append(tuple(cells))

    start = _single_marker(markers[Terrain.START], "start", symbols.start)
    goal = _single_marker(markers[Terrain.GOAL], "goal", symbols.goal)

    logger.debug(
        "parse_maze: %dx%d, start=%s, goal=%s", len(rows), cols, start, goal
    )
    return Maze(tuple(rows), start, goal)


def _single_marker(found: list[Position], name: str, char: str) -> Position:
    """Return the only position in found, or raise the matching marker error."""
    if not found:
        raise MissingMarker(f"No {name} cell ('{char}') found in maze")
    if len(found) > 1:
        locations = ", ".join(f"({p.row}, {p.col})" for p in found)
        raise DuplicateMarker(
            f"Multiple {name} cells ('{char}') found in maze\n"
            f"  Positions: {locations}\n"
            f"  Exactly one {name} cell is required"
        )
    return found[0]
