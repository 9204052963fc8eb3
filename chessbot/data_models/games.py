"""
chess.com data models.

Immutable projections of the chess.com JSON payloads consumed by the bot:
roster entries, finished games and a player's rating snapshot.
"""

from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Any, Dict, Optional, Union

from chessbot.constants import UIConstants

NOT_AVAILABLE = UIConstants.NOT_AVAILABLE

RatingDisplay = Union[int, str]


def not_available(value: Optional[int]) -> RatingDisplay:
    """Return the value itself, or the N/A marker when it is missing."""
    return NOT_AVAILABLE if value is None else value


def _dig(payload: Any, *keys: str) -> Optional[int]:
    """Walk nested dicts, returning None as soon as a level is missing."""
    for key in keys:
        if not isinstance(payload, dict):
            return None
        payload = payload.get(key)
    if isinstance(payload, bool) or not isinstance(payload, (int, float)):
        return None
    return int(payload)


@dataclass(frozen=True)
class RosterEntry:
    """Links a chat handle to a chess.com handle."""
    chat_handle: str
    chess_handle: str


@dataclass(frozen=True)
class GameSide:
    """One colour of a finished game."""
    username: str
    result: str

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "GameSide":
        return cls(username=data.get("username", ""), result=data.get("result", ""))


@dataclass(frozen=True)
class Game:
    """Single finished game from a monthly archive."""
    end_time: int
    time_class: str
    white: GameSide
    black: GameSide

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Game":
        """Build a game from one entry of an archive's ``games`` list.

        Raises:
            KeyError: If a required field is missing
        """
        return cls(
            end_time=int(data["end_time"]),
            time_class=data.get("time_class", ""),
            white=GameSide.from_api(data["white"]),
            black=GameSide.from_api(data["black"]),
        )

    def ended_at(self, tz: tzinfo) -> datetime:
        """End time as an aware datetime in the given zone."""
        return datetime.fromtimestamp(self.end_time, tz=tz)


@dataclass(frozen=True)
class RatingSnapshot:
    """Current ratings of one player, any of which may be missing."""
    rapid: Optional[int] = None
    blitz: Optional[int] = None
    bullet: Optional[int] = None
    tactics: Optional[int] = None
    puzzle_rush: Optional[int] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "RatingSnapshot":
        """Project the ``/player/{handle}/stats`` payload."""
        return cls(
            rapid=_dig(data, "chess_rapid", "last", "rating"),
            blitz=_dig(data, "chess_blitz", "last", "rating"),
            bullet=_dig(data, "chess_bullet", "last", "rating"),
            tactics=_dig(data, "tactics", "highest", "rating"),
            puzzle_rush=_dig(data, "puzzle_rush", "best", "score"),
        )

    def display(self, field: str) -> RatingDisplay:
        return not_available(getattr(self, field))
