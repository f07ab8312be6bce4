"""
Labeled-state shortest-path search over turn-penalised mazes.

The walker's state is (position, direction). Moving forward and turning in
place are the only actions, each with its own cost. A generic best-first
engine finds the minimum cost to the goal and, on request, every trail that
achieves it.
"""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass
from itertools import count
from typing import Callable, Generic, Hashable, Iterable, Iterator, TypeVar

from maze_parser import Symbols, parse_maze
from maze_types import (
    Direction,
    DuplicateMarker,
    MalformedGrid,
    Maze,
    MazeError,
    MissingMarker,
    Position,
    SearchRules,
    State,
    Terrain,
)

__all__ = [
    "Direction",
    "DuplicateMarker",
    "MalformedGrid",
    "Maze",
    "MazeError",
    "MazeSolution",
    "MissingMarker",
    "Position",
    "SearchOutcome",
    "SearchRules",
    "State",
    "Symbols",
    "Terrain",
    "Trail",
    "best_first_search",
    "count_optimal_tiles",
    "min_cost",
    "parse_maze",
    "part_one",
    "part_two",
    "search_maze",
    "solve",
    "successors",
]

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=Hashable)

DEFAULT_RULES = SearchRules()


# =============================================================================
# State-Space Model
# =============================================================================


def successors(
    maze: Maze, state: State, rules: SearchRules = DEFAULT_RULES
) -> Iterator[tuple[State, int]]:
    """
    Yield (next_state, step_cost) for every legal action from state.

    Moving forward is skipped when the cell ahead is a wall or off the grid.
    Both quarter turns are always available.
    """
    ahead = state.position.step(state.direction)
    if maze.is_open(ahead):
        yield State(ahead, state.direction), rules.move_cost
    yield State(state.position, state.direction.clockwise()), rules.turn_cost
    yield State(state.position, state.direction.counter_clockwise()), rules.turn_cost


# =============================================================================
# Priority Search Engine
# =============================================================================


@dataclass(frozen=True, eq=False, repr=False)
class Trail(Generic[S]):
    """
    One node of a path back to the start state.

    Trails share their prefixes: extending a trail allocates a single node
    pointing at the previous one. Nodes compare by identity; compare
    states() to compare paths.
    """

    state: S
    previous: Trail[S] | None = None

    def extend(self, state: S) -> Trail[S]:
        return Trail(state, self)

    def states(self) -> tuple[S, ...]:
        """All states from the start to this node, in walking order."""
        out: list[S] = []
        node: Trail[S] | None = self
        while node is not None:
            out.append(node.state)
            node = node.previous
        out.reverse()
        return tuple(out)

    def __len__(self) -> int:
        length = 0
        node: Trail[S] | None = self
        while node is not None:
            length += 1
            node = node.previous
        return length

    def __repr__(self) -> str:
        return f"Trail(state={self.state!r}, length={len(self)})"


@dataclass(frozen=True)
class SearchOutcome(Generic[S]):
    """Result of a best_first_search call."""

    cost: int | None  # None = no goal state reachable
    trails: tuple[tuple[S, ...], ...]
    expanded: int

    @property
    def reachable(self) -> bool:
        return self.cost is not None


def best_first_search(
    start: S,
    next_states: Callable[[S], Iterable[tuple[S, int]]],
    is_goal: Callable[[S], bool],
    all_paths: bool = False,
) -> SearchOutcome[S]:
    """
    Dijkstra-style search from start to the cheapest goal state.

    Step costs must be positive.

    Args:
        start: Initial state, reached at cost 0
        next_states: Returns (next_state, step_cost) pairs for a state
        is_goal: Goal predicate
        all_paths: If False, stop at the first goal popped and return its
                   trail. If True, keep draining the frontier until every
                   entry at or below the best goal cost is handled, and
                   return every trail that reaches a goal at that cost.

    Returns:
        SearchOutcome with the minimum cost (None if unreachable) and the
        optimal trails found
    """
    tiebreak = count()
    frontier: list[tuple[int, int, Trail[S]]] = [(0, next(tiebreak), Trail(start))]
    finalized: dict[S, int] = {}
    best_goal: int | None = None
    goal_trails: list[tuple[S, ...]] = []
    expanded = 0

    while frontier:
        cost, _, trail = heapq.heappop(frontier)
        if best_goal is not None and cost > best_goal:
            break

        state = trail.state
        known = finalized.get(state)
        if known is not None and (cost > known or not all_paths):
            continue
        finalized[state] = cost

        if is_goal(state):
            best_goal = cost
            goal_trails.append(trail.states())
            if not all_paths:
                break
            continue

        expanded += 1
        for nxt, step_cost in next_states(state):
            new_cost = cost + step_cost
            if best_goal is not None and new_cost > best_goal:
                continue
            seen = finalized.get(nxt)
            if seen is not None and (new_cost > seen or not all_paths):
                continue
            heapq.heappush(frontier, (new_cost, next(tiebreak), trail.extend(nxt)))

    logger.info(
        "best_first_search: cost=%s, expanded=%d, trails=%d, all_paths=%s",
        best_goal,
        expanded,
        len(goal_trails),
        all_paths,
    )
    return SearchOutcome(best_goal, tuple(goal_trails), expanded)


def search_maze(
    maze: Maze, rules: SearchRules = DEFAULT_RULES, all_paths: bool = False
) -> SearchOutcome[State]:
    """Run best_first_search from the maze start towards its goal cell (any direction)."""
    return best_first_search(
        State(maze.start, rules.start_direction),
        lambda state: successors(maze, state, rules),
        lambda state: state.position == maze.goal,
        all_paths=all_paths,
    )


# =============================================================================
# Result Extraction
# =============================================================================


@dataclass(frozen=True)
class MazeSolution:
    """Minimum cost and the cells lying on at least one optimal path."""

    cost: int | None
    tiles: frozenset[Position]

    @property
    def tile_count(self) -> int:
        return len(self.tiles)


def min_cost(maze: Maze, rules: SearchRules = DEFAULT_RULES) -> int | None:
    """Minimum cost from start to goal, or None if the goal is unreachable."""
    return search_maze(maze, rules).cost


def solve(maze: Maze, rules: SearchRules = DEFAULT_RULES) -> MazeSolution:
    """Find the minimum cost and every tile on an optimal path in one search."""
    outcome = search_maze(maze, rules, all_paths=True)
    tiles = frozenset(state.position for trail in outcome.trails for state in trail)
    return MazeSolution(outcome.cost, tiles)


def count_optimal_tiles(maze: Maze, rules: SearchRules = DEFAULT_RULES) -> int:
    """Number of distinct cells on any minimum-cost path; 0 if unreachable."""
    return solve(maze, rules).tile_count


def part_one(text: str) -> int:
    """Lowest possible score for the maze text (0 if the goal can't be reached)."""
    cost = min_cost(parse_maze(text))
    return 0 if cost is None else cost


def part_two(text: str) -> int:
    """How many tiles are part of at least one best path through the maze text."""
    return count_optimal_tiles(parse_maze(text))
