"""
Localized text shown around the board.

English is the default; Japanese carries the wording of the original
browser game.
"""

from typing import Dict, Optional

from ..core import Cell, GameResult
from ..game import Notice

DEFAULT_LANG = "en"

_CATALOG: Dict[str, Dict[str, str]] = {
    "en": {
        "black": "Black",
        "white": "White",
        "turn": "To move: {player}",
        "finished": "Finished",
        "score": "Black: {black}  White: {white}",
        "passed": "No legal move, turn passed.",
        "game_over": "Game over: {result}",
        GameResult.BLACK_WINS.value: "Black wins",
        GameResult.WHITE_WINS.value: "White wins",
        GameResult.DRAW.value: "Draw",
    },
    "ja": {
        "black": "黒",
        "white": "白",
        "turn": "手番: {player}",
        "finished": "終了",
        "score": "黒: {black}　白: {white}",
        "passed": "打てる手がないためパスしました。",
        "game_over": "ゲーム終了：{result}",
        GameResult.BLACK_WINS.value: "黒の勝ち",
        GameResult.WHITE_WINS.value: "白の勝ち",
        GameResult.DRAW.value: "引き分け",
    },
}

SUPPORTED_LANGS = tuple(sorted(_CATALOG))


class Messages:
    """Message lookup for one language."""

    def __init__(self, lang: str = DEFAULT_LANG):
        if lang not in _CATALOG:
            raise ValueError(
                f"Unsupported language {lang!r} (supported: {', '.join(SUPPORTED_LANGS)})"
            )
        self.lang = lang
        self._text = _CATALOG[lang]

    def player_name(self, player: Cell) -> str:
        return self._text["black"] if player == Cell.BLACK else self._text["white"]

    def turn_label(self, player: Cell, game_over: bool = False) -> str:
        if game_over:
            return self._text["finished"]
        return self._text["turn"].format(player=self.player_name(player))

    def score_line(self, black: int, white: int) -> str:
        return self._text["score"].format(black=black, white=white)

    def result(self, result: GameResult) -> str:
        return self._text[result.value]

    def notice(self, notice: Optional[Notice], result: Optional[GameResult] = None) -> str:
        """Text for a controller notice; empty string when there is none."""
        if notice is None:
            return ""
        if notice is Notice.PASSED:
            return self._text["passed"]
        return self._text["game_over"].format(result=self.result(result or GameResult.DRAW))
