"""
Pytest configuration and shared fixtures for the chess bot tests.
"""

from datetime import datetime, timezone

import pytest

from chessbot.data_models.games import Game, GameSide

# 2026-10-16 17:00 in GMT+5
NOW = datetime(2026, 10, 16, 12, 0, tzinfo=timezone.utc)


def utc_ts(*args) -> int:
    return int(datetime(*args, tzinfo=timezone.utc).timestamp())


class FakeChessClient:
    """Stands in for ChessComClient, serving canned games per handle."""

    def __init__(self, games=None, failures=None):
        self.games = games or {}
        self.failures = failures or {}
        self.calls = []

    async def get_latest_games(self, handle):
        self.calls.append(handle)
        if handle in self.failures:
            raise self.failures[handle]
        return list(self.games.get(handle, []))


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def make_game():
    """Factory for finished games; ends inside the current month by default."""
    def _make_game(white, white_result, black, black_result,
                   end_time=None, time_class="blitz"):
        return Game(
            end_time=end_time if end_time is not None else utc_ts(2026, 10, 16, 10, 0),
            time_class=time_class,
            white=GameSide(white, white_result),
            black=GameSide(black, black_result),
        )
    return _make_game


@pytest.fixture
def fake_client():
    return FakeChessClient()
