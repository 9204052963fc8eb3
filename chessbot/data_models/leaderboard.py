"""
Leaderboard data models.

A mutable per-request accumulator plus the immutable query/result objects
handed from the leaderboard service to the reply formatters.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass
class PlayerStats:
    """Win/loss accumulator for one chess.com handle during one request."""
    chess_handle: str
    display_name: str
    wins: int = 0
    losses: int = 0

    @property
    def net_wins(self) -> int:
        return self.wins - self.losses

    @property
    def has_games(self) -> bool:
        return self.wins > 0 or self.losses > 0

    def record(self, wins: int, losses: int) -> None:
        """Add the counts of one classified game."""
        if wins < 0 or losses < 0:
            raise ValueError("wins and losses can only grow")
        self.wins += wins
        self.losses += losses


@dataclass(frozen=True)
class LeaderboardQuery:
    """Resolved leaderboard command option."""
    option: Optional[str]
    window_start: datetime
    speed: Optional[str]
    title: str
    description: str
    time_frame: str


@dataclass(frozen=True)
class LeaderboardEntry:
    """Single leaderboard row."""
    rank: int
    display_name: str
    net_wins: int
    wins: int
    losses: int


@dataclass(frozen=True)
class LeaderboardResult:
    """Ranked leaderboard for one query."""
    query: LeaderboardQuery
    entries: List[LeaderboardEntry] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.entries
