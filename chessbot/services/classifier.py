"""
Game outcome classification.

Decides whether a finished game counts as a win, a loss or neither for one
player. Draws and unrecognized endings count as neither.
"""

from enum import Enum

from chessbot.constants import GameResults
from chessbot.data_models.games import Game


class GameOutcome(Enum):
    WIN = "win"
    LOSS = "loss"
    NONE = "none"

    @property
    def wins(self) -> int:
        return 1 if self is GameOutcome.WIN else 0

    @property
    def losses(self) -> int:
        return 1 if self is GameOutcome.LOSS else 0


def classify_game(game: Game, chess_handle: str) -> GameOutcome:
    """
    Classify a game from the point of view of ``chess_handle``.

    Win conditions are checked before loss conditions. A handle that played
    neither side yields GameOutcome.NONE.
    """
    handle = chess_handle.lower()
    if game.white.username.lower() == handle:
        player, opponent = game.white, game.black
    elif game.black.username.lower() == handle:
        player, opponent = game.black, game.white
    else:
        return GameOutcome.NONE

    if player.result == GameResults.WIN or opponent.result in GameResults.DECISIVE_FOR_OPPONENT:
        return GameOutcome.WIN
    if opponent.result == GameResults.WIN or player.result in GameResults.DECISIVE_FOR_OPPONENT:
        return GameOutcome.LOSS
    return GameOutcome.NONE
