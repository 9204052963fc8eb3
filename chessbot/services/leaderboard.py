"""
Leaderboard service for the roster win/loss board.

Resolves the command option into a time window and speed filter, fetches the
latest monthly archive of every roster member concurrently, classifies each
game and ranks the members by net wins.
"""

import asyncio
import logging
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Tuple

from chessbot.constants import COMMAND_DESCRIPTIONS, LeaderboardOptions, UIConstants
from chessbot.data_models.games import RosterEntry
from chessbot.data_models.leaderboard import (
    LeaderboardEntry,
    LeaderboardQuery,
    LeaderboardResult,
    PlayerStats,
)
from chessbot.services.chess_api import ChessComClient
from chessbot.services.classifier import classify_game
from chessbot.utils.time_window import (
    DEFAULT_OFFSET_HOURS,
    is_in_window,
    is_today_option,
    resolve_window_start,
    speed_filter,
)

logger = logging.getLogger(__name__)


def normalize_option(raw: Optional[str]) -> Optional[str]:
    """First argument of the command, lower-cased, or None when absent."""
    if not raw:
        return None
    parts = raw.split()
    return parts[0].lower() if parts else None


def rank_players(players: Iterable[PlayerStats]) -> List[LeaderboardEntry]:
    """
    Rank players by net wins, highest first.

    Players without any counted game are left out. Ties keep the input order.
    """
    active = [player for player in players if player.has_games]
    active.sort(key=lambda player: player.net_wins, reverse=True)
    return [
        LeaderboardEntry(
            rank=position,
            display_name=player.display_name,
            net_wins=player.net_wins,
            wins=player.wins,
            losses=player.losses,
        )
        for position, player in enumerate(active, start=1)
    ]


class LeaderboardService:
    """Builds roster leaderboards from chess.com game archives."""

    def __init__(
        self,
        client: ChessComClient,
        roster: Tuple[RosterEntry, ...],
        offset_hours: int = DEFAULT_OFFSET_HOURS,
    ):
        self.client = client
        self.roster = tuple(roster)
        self.offset_hours = offset_hours

    def resolve_query(self, option: Optional[str], now: Optional[datetime] = None) -> LeaderboardQuery:
        """Turn a normalized option into window, speed filter and headings."""
        window_start = resolve_window_start(option, now, self.offset_hours)

        if is_today_option(option):
            title = UIConstants.TODAY_TITLE
            description = COMMAND_DESCRIPTIONS[LeaderboardOptions.TODAY]
            time_frame = "today"
        else:
            title = UIConstants.MONTHLY_TITLE
            # Unknown keywords fall back to the default description
            description = COMMAND_DESCRIPTIONS.get(option or "default", COMMAND_DESCRIPTIONS["default"])
            time_frame = "this month"

        return LeaderboardQuery(
            option=option,
            window_start=window_start,
            speed=speed_filter(option),
            title=title,
            description=description,
            time_frame=time_frame,
        )

    def _init_stats(self) -> Dict[str, PlayerStats]:
        # Keyed by chess handle; a repeated handle keeps the last chat handle
        stats: Dict[str, PlayerStats] = {}
        for entry in self.roster:
            if entry.chess_handle in stats:
                logger.warning(
                    f"Roster maps several chat handles to {entry.chess_handle}; "
                    f"merging under {entry.chat_handle}"
                )
                stats[entry.chess_handle].display_name = entry.chat_handle
            else:
                stats[entry.chess_handle] = PlayerStats(entry.chess_handle, entry.chat_handle)
        return stats

    async def _collect_player(self, player: PlayerStats, query: LeaderboardQuery) -> None:
        """Fetch and count one roster entry's games; any failure leaves it at zero."""
        try:
            games = await self.client.get_latest_games(player.chess_handle)
            outcomes = [
                classify_game(game, player.chess_handle)
                for game in games
                if is_in_window(game, query.window_start, query.speed)
            ]
        except Exception as e:
            logger.warning(f"Error processing games for {player.chess_handle}: {e}")
            return

        for outcome in outcomes:
            player.record(outcome.wins, outcome.losses)
        logger.debug(
            f"{player.chess_handle}: {len(outcomes)}/{len(games)} games in window, "
            f"W {player.wins} L {player.losses}"
        )

    async def build(self, option: Optional[str], now: Optional[datetime] = None) -> LeaderboardResult:
        """
        Build the leaderboard for a normalized option.

        One fetch runs per roster entry, all concurrently, and the ranking is
        only computed once every fetch has settled. Entries sharing a chess
        handle add into the same record, once per entry.
        """
        query = self.resolve_query(option, now)
        stats = self._init_stats()

        await asyncio.gather(*(
            self._collect_player(stats[entry.chess_handle], query) for entry in self.roster
        ))

        entries = rank_players(stats.values())
        logger.info(
            f"Leaderboard {option or 'default'}: {len(entries)} ranked of {len(stats)} players "
            f"since {query.window_start.isoformat()}"
        )
        return LeaderboardResult(query=query, entries=entries)
