"""Terminal frontend tests: command-line validation and recording wins."""

from __future__ import annotations

import random
from pathlib import Path

import pytest
from typer.testing import CliRunner

from backend.engine.gameplay import GamePlay
from backend.models.board import Board
from backend.models.highscore import POINTS_PER_COMPLETION, ScoreBook
from frontend.cli.rich.app import _new_game, _record_win
from main import app
from tests.helpers import SWAPPED_3x3

runner = CliRunner()


# -- command line ---------------------------------------------------------------


@pytest.mark.parametrize(
    "args",
    [["-r", "1", "-c", "1"], ["-r", "1", "-c", "4"], ["-r", "3", "-c", "11"]],
    ids=["single-piece", "one-row", "too-wide"],
)
def test_grid_size_out_of_range_is_refused(args: list[str], tmp_path: Path) -> None:
    result = runner.invoke(app, [*args, "--data-dir", str(tmp_path)])

    assert result.exit_code == 2
    assert not (tmp_path / "scores.json").exists()


def test_rows_without_cols_is_refused(tmp_path: Path) -> None:
    result = runner.invoke(app, ["-r", "3", "--data-dir", str(tmp_path)])

    assert result.exit_code != 0


# -- recording wins -------------------------------------------------------------


def test_completing_move_is_recorded(tmp_path: Path) -> None:
    book = ScoreBook(tmp_path / "scores.json")
    game = GamePlay.from_board(Board.from_positions(3, 3, SWAPPED_3x3))
    outcome = game.move(unit_id=1, delta=1)

    entry = _record_win(book, game, outcome, level=2)

    assert entry is not None
    assert entry.moves == 1
    assert book.points == POINTS_PER_COMPLETION
    assert book.unlocked_level == 3
    assert [e.moves for e in book.get_scores(3, 3)] == [1]


def test_board_solved_from_the_start_earns_nothing(tmp_path: Path) -> None:
    book = ScoreBook(tmp_path / "scores.json")
    game = GamePlay(1, 1)
    assert game.is_won

    assert _record_win(book, game, outcome=None) is None
    assert book.points == 0
    assert not (tmp_path / "scores.json").exists()


def test_rejected_last_move_earns_nothing(tmp_path: Path) -> None:
    book = ScoreBook(tmp_path / "scores.json")
    game = GamePlay.from_board(Board.from_positions(3, 3, SWAPPED_3x3))
    outcome = game.move(unit_id=1, delta=-1)

    assert _record_win(book, game, outcome) is None
    assert book.points == 0


# -- new games ------------------------------------------------------------------


def test_level_game_takes_level_dimensions() -> None:
    game = _new_game(0, 0, random.Random(3), level=13)

    assert (game.rows, game.cols) == (4, 4)
    assert not game.is_won
