"""
Rating lookup service for the stats command.
"""

import logging

from chessbot.data_models.games import RatingSnapshot
from chessbot.services.chess_api import ChessComClient

logger = logging.getLogger(__name__)


class StatsService:
    """Looks up a player's current chess.com ratings."""

    def __init__(self, client: ChessComClient):
        self.client = client

    @staticmethod
    def normalize_handle(raw: str) -> str:
        """Trim and case-fold a free-text handle."""
        return (raw or "").strip().lower()

    async def get_snapshot(self, handle: str) -> RatingSnapshot:
        """
        Fetch the rating snapshot for a normalized handle.

        Raises:
            ValueError: If the handle is empty
            ChessApiError: If chess.com answers with a non-success status
        """
        if not handle:
            raise ValueError("handle must not be empty")
        snapshot = await self.client.get_player_stats(handle)
        logger.debug(f"Fetched ratings for {handle}: {snapshot}")
        return snapshot
