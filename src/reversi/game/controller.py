"""
Game controller: turn order, passes and termination.

The controller owns one SessionState and is the only thing that changes it.
Presentation code reads the state through the controller's properties,
drives it with submit_move() / reset(), and registers a listener to be told
when to redraw.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple

from ..core import (
    Board,
    Cell,
    GameAlreadyOverError,
    GameResult,
    IllegalMoveError,
    apply_move,
    count_discs,
    create_starting_board,
    game_result,
    has_any_move,
    is_legal_move,
    list_legal_moves,
    opponent,
)

logger = logging.getLogger(__name__)


class Notice(Enum):
    """User-visible notice attached to the last transition."""

    PASSED = "passed"  # player to move had no legal move, turn handed over
    GAME_OVER = "game_over"


@dataclass
class SessionState:
    """Mutable state of one game. Replaced wholesale on reset."""

    board: Board
    current_player: Cell = Cell.BLACK
    game_over: bool = False
    result: Optional[GameResult] = None
    notice: Optional[Notice] = None


def create_initial_state() -> SessionState:
    """Standard starting position with Black to move."""
    return SessionState(board=create_starting_board())


Listener = Callable[["GameController"], None]


class GameController:
    """
    Runs one game of Reversi.

    Usage:
        game = GameController()
        game.add_listener(redraw)
        game.submit_move(2, 3)
        ...
        if game.game_over:
            print(game.result)

    Invalid input (illegal moves, moves after the end) is ignored unless the
    controller is created with strict=True, in which case IllegalMoveError
    or GameAlreadyOverError is raised. Game behaviour is the same either way.
    """

    def __init__(self, strict: bool = False):
        """
        Initialize a new game.

        Args:
            strict: Raise on invalid moves instead of ignoring them
        """
        self.strict = strict
        self._listeners: List[Listener] = []
        self.state = create_initial_state()
        # A start position with no move for Black is impossible on the
        # standard layout, but the pass/terminate check still runs once.
        self._step_turn()

    @classmethod
    def from_position(
        cls, board: Board, current_player: Cell = Cell.BLACK, strict: bool = False
    ) -> "GameController":
        """
        Start a game from an arbitrary position.

        The pass/terminate check runs immediately, so the returned controller
        may already have passed the turn or finished.
        """
        controller = cls(strict=strict)
        controller.state = SessionState(board=board, current_player=current_player)
        controller._step_turn()
        return controller

    # Read-only view of the session

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def current_player(self) -> Cell:
        return self.state.current_player

    @property
    def game_over(self) -> bool:
        return self.state.game_over

    @property
    def result(self) -> Optional[GameResult]:
        return self.state.result

    @property
    def notice(self) -> Optional[Notice]:
        return self.state.notice

    @property
    def legal_moves(self) -> List[Tuple[int, int]]:
        """Legal moves for the player to move (empty once the game is over)."""
        if self.state.game_over:
            return []
        return list_legal_moves(self.state.board, self.state.current_player)

    @property
    def score(self) -> Tuple[int, int]:
        """(black, white) disc counts."""
        return count_discs(self.state.board)

    # Redraw notification

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # Commands

    def submit_move(self, row: int, col: int) -> bool:
        """
        Play a disc for the current player.

        Args:
            row: Target row (0-based)
            col: Target column (0-based)

        Returns:
            True if the move was accepted, False if it was ignored
        """
        state = self.state

        if state.game_over:
            if self.strict:
                raise GameAlreadyOverError(state.result)
            logger.debug(f"Ignoring move ({row}, {col}): game is over")
            return False

        player = state.current_player
        if not is_legal_move(state.board, row, col, player):
            if self.strict:
                raise IllegalMoveError(row, col, player)
            logger.debug(f"Ignoring illegal move ({row}, {col}) for {player.name}")
            return False

        state.board = apply_move(state.board, row, col, player)
        state.current_player = opponent(player)
        logger.debug(f"{player.name} played ({row}, {col}); score {self.score}")

        self._step_turn()
        self._notify()
        return True

    def reset(self) -> None:
        """Start a new game, discarding the current one."""
        self.state = create_initial_state()
        self._step_turn()
        logger.info("Game reset")
        self._notify()

    def _step_turn(self) -> None:
        """
        Decide whether the player to move must pass or the game has ended.

        - Neither side can move: the game ends and is scored
        - Only the opponent can move: the current player passes
        - Otherwise the current player keeps the turn
        """
        state = self.state
        player = state.current_player
        has_current = has_any_move(state.board, player)
        has_opponent = has_any_move(state.board, opponent(player))

        if not has_current and has_opponent:
            state.current_player = opponent(player)
            state.notice = Notice.PASSED
            logger.info(f"{player.name} has no legal move, turn passes to {state.current_player.name}")
        elif not has_current and not has_opponent:
            state.game_over = True
            state.result = game_result(state.board)
            state.notice = Notice.GAME_OVER
            black, white = count_discs(state.board)
            logger.info(f"Game over: {state.result.value} ({black}-{white})")
        else:
            state.notice = None
