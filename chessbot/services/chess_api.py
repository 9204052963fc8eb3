"""
Async client for the public chess.com API.

Wraps the three read-only endpoints the bot consumes:
- /player/{handle}/stats: current ratings
- /player/{handle}/games/archives: monthly archive URLs
- an archive URL: the games finished in that month

No retries and no pagination; callers decide how failures are surfaced.
"""

import logging
from typing import Any, Dict, List, Optional

import aiohttp

from chessbot.data_models.games import Game, RatingSnapshot
from chessbot.utils.exceptions import ChessApiError, PlayerNotFoundError

logger = logging.getLogger(__name__)


class ChessComClient:
    """Thin aiohttp wrapper around the chess.com published-data API."""

    def __init__(
        self,
        base_url: str = "https://api.chess.com/pub",
        user_agent: str = "chessbot/0.1",
        timeout: float = 10.0,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.headers = {"User-Agent": user_agent}
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session = session

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(headers=self.headers, timeout=self.timeout)
        return self._session

    async def close(self):
        """Close the underlying HTTP session"""
        if self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None

    async def _get_json(self, url: str, handle: Optional[str] = None) -> Dict[str, Any]:
        session = await self._get_session()
        logger.debug(f"GET {url}")
        async with session.get(url) as response:
            if response.status == 404 and handle is not None:
                raise PlayerNotFoundError(url, handle)
            if response.status != 200:
                raise ChessApiError(url, response.status)
            return await response.json()

    async def get_player_stats(self, handle: str) -> RatingSnapshot:
        """Fetch the rating snapshot of a player.

        Raises:
            PlayerNotFoundError: If chess.com does not know the handle
            ChessApiError: On any other non-success status
        """
        data = await self._get_json(f"{self.base_url}/player/{handle}/stats", handle=handle)
        return RatingSnapshot.from_api(data)

    async def get_archives(self, handle: str) -> List[str]:
        """Fetch the monthly archive URLs of a player, oldest first."""
        data = await self._get_json(f"{self.base_url}/player/{handle}/games/archives", handle=handle)
        return list(data.get("archives", []))

    async def get_archive_games(self, archive_url: str) -> List[Game]:
        """Fetch all games of one monthly archive."""
        data = await self._get_json(archive_url)
        return [Game.from_api(game) for game in data.get("games", [])]

    async def get_latest_games(self, handle: str) -> List[Game]:
        """Fetch the games of the most recent monthly archive only."""
        archives = await self.get_archives(handle)
        if not archives:
            return []
        return await self.get_archive_games(archives[-1])
