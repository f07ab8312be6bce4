"""Tests for the demo script."""

import logging
from pathlib import Path

import pytest

from demo import LAYOUTS, build_display, main


class TestDemo:
    """Tests for demo.main and build_display."""

    @pytest.mark.parametrize("name", sorted(LAYOUTS))
    def test_layouts_solve(self, name: str, capsys: pytest.CaptureFixture[str]) -> None:
        """Every built-in layout runs and prints both answers."""
        assert main([name]) == 0

        out = capsys.readouterr().out
        assert "Lowest score" in out
        assert "Tiles on best paths" in out

    def test_small_layout_answers(self, capsys: pytest.CaptureFixture[str]) -> None:
        """The default layout shows the known answers."""
        assert main([]) == 0

        out = capsys.readouterr().out
        assert "7036" in out
        assert "45" in out

    def test_walled_layout_is_unreachable(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["walled"])

        assert "unreachable" in capsys.readouterr().out

    def test_reads_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """A path argument is read as maze text."""
        maze_file = tmp_path / "maze.txt"
        maze_file.write_text("#####\n#S..#\n###.#\n###E#\n#####\n")

        assert main([str(maze_file)]) == 0
        assert "1004" in capsys.readouterr().out

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(tmp_path / "nope.txt")]) == 1
        assert "Unknown layout" in capsys.readouterr().out

    def test_parse_error_panel(self) -> None:
        """Malformed text produces a red error panel instead of raising."""
        panel, ok = build_display("broken", "#####\n#S.E\n#####")

        assert not ok
        assert panel.border_style == "red"

    def test_parse_error_exit_status(self, tmp_path: Path) -> None:
        """A file holding a malformed maze gives exit status 1."""
        maze_file = tmp_path / "maze.txt"
        maze_file.write_text("#####\n#S.E\n#####\n")

        assert main([str(maze_file)]) == 1

    def test_undecodable_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """A file that is not UTF-8 is reported, not raised."""
        maze_file = tmp_path / "maze.txt"
        maze_file.write_bytes(b"\xff\xfe#S.E#\n")

        assert main([str(maze_file)]) == 1
        assert "could not read" in capsys.readouterr().out

    def test_verbose_logs_search_summary(self, caplog: pytest.LogCaptureFixture) -> None:
        """--verbose runs normally and the search summary is logged."""
        with caplog.at_level(logging.INFO, logger="mazepath"):
            assert main(["small", "--verbose"]) == 0

        assert "best_first_search: cost=7036" in caplog.text
