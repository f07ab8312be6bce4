"""Tests for ascii_render module."""

import re

from ascii_render import PATH_CHAR, render_maze, render_solution
from maze_parser import Symbols, parse_maze
from maze_types import Position
from mazepath import MazeSolution, solve

ANSI = re.compile(r"\x1b\[[0-9;]*m")

FORCED_TURN = "#####\n#S..#\n###.#\n###E#\n#####"


def plain(text: str) -> list[str]:
    """Rendered output without colour codes, split into lines."""
    return ANSI.sub("", text).split("\n")


class TestRenderMaze:
    """Tests for render_maze."""

    def test_plain_maze(self) -> None:
        """Without tiles the maze text is drawn inside a border."""
        maze = parse_maze(FORCED_TURN)

        assert plain(render_maze(maze)) == [
            "┌─────┐",
            "│#####│",
            "│#S..#│",
            "│###.#│",
            "│###E#│",
            "│#####│",
            "└─────┘",
        ]

    def test_path_tiles_marked(self) -> None:
        """Floor cells on the path become 'O'; markers keep their letters."""
        maze = parse_maze(FORCED_TURN)
        tiles = {Position(1, 1), Position(1, 2), Position(1, 3), Position(2, 3), Position(3, 3)}

        lines = plain(render_maze(maze, tiles))

        assert lines[2] == f"│#S{PATH_CHAR}{PATH_CHAR}#│"
        assert lines[3] == f"│###{PATH_CHAR}#│"
        assert lines[4] == "│###E#│"

    def test_highlight_keeps_text(self) -> None:
        """Highlighting changes colour only."""
        maze = parse_maze(FORCED_TURN)

        assert plain(render_maze(maze, highlight=Position(1, 2))) == plain(render_maze(maze))

    def test_title_in_border(self) -> None:
        """A title that fits is centred in the top border."""
        maze = parse_maze("###########\n#S.......E#\n###########")

        top = plain(render_maze(maze, title="demo"))[0]

        assert top == "┌── demo ───┐"

    def test_title_too_long_dropped(self) -> None:
        """A title wider than the maze leaves a plain border."""
        maze = parse_maze(FORCED_TURN)

        assert plain(render_maze(maze, title="far too long"))[0] == "┌─────┐"

    def test_custom_symbols(self) -> None:
        """Rendering uses the same symbols as parsing."""
        symbols = Symbols(wall="X", floor=" ", start="A", goal="B")
        maze = parse_maze("XXXXX\nXA BX\nXXXXX", symbols)

        assert plain(render_maze(maze, symbols=symbols))[2] == "│XA BX│"


class TestRenderSolution:
    """Tests for render_solution."""

    def test_solution_title_and_tiles(self) -> None:
        """The cost goes in the title and optimal tiles are marked."""
        maze = parse_maze("###########\n#S.......E#\n###########")

        lines = plain(render_solution(maze, solve(maze)))

        assert "cost 8" in lines[0]
        assert lines[2] == "│#S" + PATH_CHAR * 7 + "E#│"

    def test_unreachable_title(self) -> None:
        """Unreachable solutions say so and mark nothing."""
        maze = parse_maze("###############\n#S....#......E#\n###############")

        lines = plain(render_solution(maze, MazeSolution(None, frozenset())))

        assert "unreachable" in lines[0]
        assert PATH_CHAR not in "".join(lines)
