"""Tests for messages and the rich board display."""

import io

import pytest
from rich.console import Console

from reversi.core import Board, Cell, GameResult
from reversi.game import GameController, Notice
from reversi.utils import BoardDisplay, Messages, SUPPORTED_LANGS


def make_display(lang: str = "en"):
    """Display writing to a plain-text buffer."""
    buffer = io.StringIO()
    output = Console(file=buffer, width=80, color_system=None, force_terminal=False)
    return BoardDisplay(messages=Messages(lang), output=output), buffer


def test_supported_languages():
    """Test both catalogs are available."""
    assert SUPPORTED_LANGS == ("en", "ja")

    with pytest.raises(ValueError):
        Messages("fr")


def test_english_messages():
    """Test English notice, score and turn text."""
    messages = Messages()

    assert messages.score_line(3, 1) == "Black: 3  White: 1"
    assert messages.turn_label(Cell.WHITE) == "To move: White"
    assert messages.turn_label(Cell.WHITE, game_over=True) == "Finished"
    assert messages.notice(None) == ""
    assert messages.notice(Notice.PASSED) == "No legal move, turn passed."
    assert messages.notice(Notice.GAME_OVER, GameResult.DRAW) == "Game over: Draw"


def test_japanese_messages():
    """Test Japanese wording."""
    messages = Messages("ja")

    assert messages.turn_label(Cell.BLACK) == "手番: 黒"
    assert messages.notice(Notice.PASSED) == "打てる手がないためパスしました。"
    assert messages.notice(Notice.GAME_OVER, GameResult.WHITE_WINS) == "ゲーム終了：白の勝ち"


def test_every_result_has_text():
    """Test each result is translated in every language."""
    for lang in SUPPORTED_LANGS:
        messages = Messages(lang)
        for result in GameResult:
            assert messages.result(result)


def test_render_start_position():
    """Test the board, hints and status lines are drawn."""
    display, buffer = make_display()
    game = GameController()

    display.render(game)
    output = buffer.getvalue()

    assert "a" in output and "h" in output
    assert "●" in output
    assert output.count("·") == 4
    assert "Black: 2  White: 2" in output
    assert "To move: Black" in output


def test_status_lines_after_game_over():
    """Test the finished state shows the result."""
    display, _ = make_display()
    board = Board.from_rows(["XX.....O"] + ["........"] * 7)
    game = GameController.from_position(board)

    assert display.status_lines(game) == [
        "Black: 2  White: 1",
        "Finished",
        "Game over: Black wins",
    ]


def test_render_as_listener():
    """Test the display redraws when registered on a controller."""
    display, buffer = make_display()
    game = GameController()
    game.add_listener(display.render)

    game.submit_move(2, 3)

    assert "Black: 4  White: 1" in buffer.getvalue()
    assert "To move: White" in buffer.getvalue()
