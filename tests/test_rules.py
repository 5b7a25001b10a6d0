"""Tests for Reversi rules."""

import random

import pytest
from reversi.core import (
    Board,
    Cell,
    GameResult,
    apply_move,
    count_discs,
    create_starting_board,
    flips_for_move,
    game_result,
    has_any_move,
    is_legal_move,
    list_legal_moves,
    opponent,
)

# Black at (2, 2) is surrounded by white runs closed by black in all 8 directions
STAR = [
    "X.X.X...",
    ".OOO....",
    "XO.OX...",
    ".OOO....",
    "X.X.X...",
    "........",
    "........",
    "........",
]


def test_starting_counts():
    """Test both sides start with two discs."""
    board = create_starting_board()

    assert count_discs(board) == (2, 2)


def test_starting_legal_moves_black():
    """Test Black's four opening moves in row-major order."""
    board = create_starting_board()

    assert list_legal_moves(board, Cell.BLACK) == [(2, 3), (3, 2), (4, 5), (5, 4)]


def test_starting_legal_moves_white():
    """Test White's four replies to the same layout in row-major order."""
    board = create_starting_board()

    assert list_legal_moves(board, Cell.WHITE) == [(2, 4), (3, 5), (4, 2), (5, 3)]


def test_opening_move():
    """Test Black at (2, 3) flips (3, 3)."""
    board = create_starting_board()
    next_board = apply_move(board, 2, 3, Cell.BLACK)

    assert next_board[2, 3] == Cell.BLACK
    assert next_board[3, 3] == Cell.BLACK
    assert count_discs(next_board) == (4, 1)

    # Original board untouched
    assert board == create_starting_board()


def test_opening_move_white_side():
    """Test White at (2, 4) flips (3, 4)."""
    board = create_starting_board()
    next_board = apply_move(board, 2, 4, Cell.WHITE)

    assert next_board[3, 4] == Cell.WHITE
    assert count_discs(next_board) == (1, 4)


def test_occupied_and_off_board_illegal():
    """Test occupied or off-board targets are never legal."""
    board = create_starting_board()

    assert not is_legal_move(board, 3, 3, Cell.BLACK)
    assert not is_legal_move(board, 3, 4, Cell.BLACK)
    assert not is_legal_move(board, -1, 3, Cell.BLACK)
    assert not is_legal_move(board, 2, 8, Cell.BLACK)
    assert not is_legal_move(board, 8, 8, Cell.WHITE)


def test_no_sandwich_illegal():
    """Test empty cells that flip nothing are illegal."""
    board = create_starting_board()

    assert not is_legal_move(board, 0, 0, Cell.BLACK)
    # Adjacent to white but not closed by black
    assert not is_legal_move(board, 2, 2, Cell.BLACK)


def test_run_reaching_edge_does_not_flip():
    """Test a white run that runs off the board is not a sandwich."""
    board = Board.from_rows(
        [
            "..OOOOOO",
            "........",
            "........",
            "........",
            "........",
            "........",
            "........",
            "........",
        ]
    )

    assert not is_legal_move(board, 0, 1, Cell.BLACK)
    assert flips_for_move(board, 0, 1, Cell.BLACK) == []


def test_run_interrupted_by_empty_does_not_flip():
    """Test only closed runs flip."""
    board = Board.from_rows(
        [
            ".OOX....",
            "O.......",
            "........",
            "X.......",
            "........",
            "........",
            "........",
            "........",
        ]
    )

    # Row run closed by X at (0,3); column run broken by empty (2,0)
    assert flips_for_move(board, 0, 0, Cell.BLACK) == [(0, 1), (0, 2)]

    next_board = apply_move(board, 0, 0, Cell.BLACK)
    assert next_board[1, 0] == Cell.WHITE
    assert next_board.to_rows()[0] == "XXXX...."


def test_flips_in_all_directions():
    """Test one move can flip runs in all 8 directions."""
    board = Board.from_rows(STAR)

    assert is_legal_move(board, 2, 2, Cell.BLACK)
    assert len(flips_for_move(board, 2, 2, Cell.BLACK)) == 8

    next_board = apply_move(board, 2, 2, Cell.BLACK)
    assert count_discs(next_board) == (17, 0)


def test_apply_move_off_board():
    """Test off-board coordinates are rejected instead of wrapping."""
    with pytest.raises(ValueError):
        apply_move(create_starting_board(), -1, 0, Cell.BLACK)


def test_has_any_move():
    """Test move existence check."""
    board = create_starting_board()
    assert has_any_move(board, Cell.BLACK)
    assert has_any_move(board, Cell.WHITE)

    lone = Board.from_rows(["X......."] + ["........"] * 7)
    assert not has_any_move(lone, Cell.BLACK)
    assert not has_any_move(lone, Cell.WHITE)


def test_legal_moves_match_cell_scan():
    """Test list_legal_moves agrees with is_legal_move over every cell."""
    boards = [create_starting_board(), Board.from_rows(STAR)]

    for board in boards:
        for player in (Cell.BLACK, Cell.WHITE):
            scanned = [
                (row, col)
                for row in range(8)
                for col in range(8)
                if is_legal_move(board, row, col, player)
            ]
            assert list_legal_moves(board, player) == scanned


def test_game_result():
    """Test scoring by disc count."""
    assert game_result(Board.from_rows(["XX.....O"] + ["........"] * 7)) == GameResult.BLACK_WINS
    assert game_result(Board.from_rows(["X....OO."] + ["........"] * 7)) == GameResult.WHITE_WINS
    assert game_result(Board.from_rows(["X......O"] + ["........"] * 7)) == GameResult.DRAW


def test_random_playouts_keep_invariants():
    """Test disc accounting over random games."""
    rng = random.Random(1234)

    for _ in range(20):
        board = create_starting_board()
        player = Cell.BLACK
        passes = 0

        while passes < 2:
            moves = list_legal_moves(board, player)
            if not moves:
                passes += 1
                player = opponent(player)
                continue
            passes = 0

            black, white = count_discs(board)
            row, col = rng.choice(moves)
            next_board = apply_move(board, row, col, player)
            next_black, next_white = count_discs(next_board)

            # Totals always cover the 64 cells
            assert next_black + next_white + next_board.empty_count == 64
            # One disc placed
            assert next_black + next_white == black + white + 1
            # Placed disc plus at least one flip
            if player == Cell.BLACK:
                assert next_black - black >= 2
            else:
                assert next_white - white >= 2

            board = next_board
            player = opponent(player)

        assert list_legal_moves(board, Cell.BLACK) == []
        assert list_legal_moves(board, Cell.WHITE) == []
