"""
Shared type definitions for mazepath.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Cardinal direction the walker is facing."""

    N = "N"  # Up (decreasing row)
    E = "E"  # Right (increasing col)
    S = "S"  # Down (increasing row)
    W = "W"  # Left (decreasing col)

    @property
    def delta(self) -> tuple[int, int]:
        """(row_delta, col_delta) for one step in this direction."""
        return _DELTAS[self]

    def clockwise(self) -> Direction:
        return _CLOCKWISE[self]

    def counter_clockwise(self) -> Direction:
        return _COUNTER_CLOCKWISE[self]

    def reverse(self) -> Direction:
        return _CLOCKWISE[_CLOCKWISE[self]]


_DELTAS = {
    Direction.N: (-1, 0),
    Direction.E: (0, 1),
    Direction.S: (1, 0),
    Direction.W: (0, -1),
}

_CLOCKWISE = {
    Direction.N: Direction.E,
    Direction.E: Direction.S,
    Direction.S: Direction.W,
    Direction.W: Direction.N,
}

_COUNTER_CLOCKWISE = {after: before for before, after in _CLOCKWISE.items()}


class Terrain(Enum):
    """What occupies a maze cell."""

    OPEN = "open"
    WALL = "wall"
    START = "start"
    GOAL = "goal"


# =============================================================================
# Errors
# =============================================================================


class MazeError(ValueError):
    """Base class for maze input errors."""


class MalformedGrid(MazeError):
    """Rows of unequal length, empty input or an unknown character."""


class MissingMarker(MazeError):
    """No start or no goal cell in the grid."""


class DuplicateMarker(MazeError):
    """More than one start or goal cell in the grid."""


# =============================================================================
# Maze Definition Types
# =============================================================================


@dataclass(frozen=True, order=True)
class Position:
    """A cell coordinate within the maze."""

    row: int
    col: int

    def step(self, direction: Direction) -> Position:
        dr, dc = direction.delta
        return Position(self.row + dr, self.col + dc)


@dataclass(frozen=True)
class State:
    """Search-graph node: where the walker stands and which way it faces."""

    position: Position
    direction: Direction


@dataclass(frozen=True)
class Maze:
    """A rectangular grid of terrain with known start and goal cells."""

    cells: tuple[tuple[Terrain, ...], ...]
    start: Position
    goal: Position

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.row < self.rows and 0 <= pos.col < self.cols

    def terrain_at(self, pos: Position) -> Terrain:
        return self.cells[pos.row][pos.col]

    def is_open(self, pos: Position) -> bool:
        """True if the walker may stand on pos (in bounds and not a wall)."""
        return self.in_bounds(pos) and self.terrain_at(pos) is not Terrain.WALL


@dataclass(frozen=True)
class SearchRules:
    """Costs and starting orientation governing a search."""

    move_cost: int = 1
    turn_cost: int = 1000
    start_direction: Direction = Direction.E

    def __post_init__(self) -> None:
        if self.move_cost <= 0 or self.turn_cost <= 0:
            raise ValueError(
                f"Search costs must be positive\n"
                f"  move_cost: {self.move_cost}\n"
                f"  turn_cost: {self.turn_cost}"
            )
