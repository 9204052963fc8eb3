"""
Tests for the chess.com API client with mocked HTTP responses.
"""

from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from chessbot.data_models.games import Game, RatingSnapshot
from chessbot.services.chess_api import ChessComClient
from chessbot.utils.exceptions import ChessApiError, PlayerNotFoundError

BASE = "https://api.chess.com/pub"


def mock_response(status=200, payload=None):
    response = AsyncMock()
    response.status = status
    response.json = AsyncMock(return_value=payload or {})
    response.__aenter__ = AsyncMock(return_value=response)
    response.__aexit__ = AsyncMock(return_value=None)
    return response


def client_with(*responses):
    session = MagicMock()
    session.closed = False
    session.get = MagicMock(side_effect=list(responses))
    session.close = AsyncMock()
    return ChessComClient(base_url=BASE + "/", session=session), session


def game_payload(end_time=1760000000):
    return {
        "end_time": end_time,
        "time_class": "blitz",
        "white": {"username": "alice", "result": "win", "rating": 1500},
        "black": {"username": "bob", "result": "resigned", "rating": 1480},
    }


class TestPlayerStats:
    async def test_parses_snapshot(self):
        client, session = client_with(mock_response(payload={
            "chess_rapid": {"last": {"rating": 1500, "date": 1}},
            "chess_bullet": {"best": {"rating": 1700}},
            "tactics": {"highest": {"rating": 2100}},
            "puzzle_rush": {"best": {"score": 30}},
        }))

        snapshot = await client.get_player_stats("alice")

        session.get.assert_called_once_with(f"{BASE}/player/alice/stats")
        assert snapshot == RatingSnapshot(rapid=1500, blitz=None, bullet=None, tactics=2100, puzzle_rush=30)

    async def test_not_found(self):
        client, _ = client_with(mock_response(status=404))
        with pytest.raises(PlayerNotFoundError) as exc:
            await client.get_player_stats("nobody")
        assert exc.value.handle == "nobody"
        assert exc.value.status == 404

    async def test_server_error(self):
        client, _ = client_with(mock_response(status=503))
        with pytest.raises(ChessApiError) as exc:
            await client.get_player_stats("alice")
        assert exc.value.status == 503

    async def test_network_error_propagates(self):
        client, session = client_with()
        session.get = MagicMock(side_effect=aiohttp.ClientError())
        with pytest.raises(aiohttp.ClientError):
            await client.get_player_stats("alice")


class TestLatestGames:
    async def test_uses_only_last_archive(self):
        archives = [f"{BASE}/player/alice/games/2026/09", f"{BASE}/player/alice/games/2026/10"]
        client, session = client_with(
            mock_response(payload={"archives": archives}),
            mock_response(payload={"games": [game_payload(), game_payload(1760000100)]}),
        )

        games = await client.get_latest_games("alice")

        assert [call.args[0] for call in session.get.call_args_list] == [
            f"{BASE}/player/alice/games/archives",
            archives[-1],
        ]
        assert len(games) == 2
        assert isinstance(games[0], Game)
        assert games[0].white.username == "alice"
        assert games[0].black.result == "resigned"
        assert games[1].end_time == 1760000100

    async def test_no_archives(self):
        client, session = client_with(mock_response(payload={"archives": []}))
        assert await client.get_latest_games("alice") == []
        assert session.get.call_count == 1

    async def test_archive_failure(self):
        client, _ = client_with(
            mock_response(payload={"archives": [f"{BASE}/player/alice/games/2026/10"]}),
            mock_response(status=500),
        )
        with pytest.raises(ChessApiError):
            await client.get_latest_games("alice")


def test_snapshot_ignores_malformed_fields():
    snapshot = RatingSnapshot.from_api({
        "chess_rapid": "oops",
        "chess_blitz": {"last": {"rating": None}},
        "chess_bullet": {"last": {"rating": 1200.0}},
        "tactics": {"highest": {"rating": True}},
    })
    assert snapshot == RatingSnapshot(bullet=1200)
    assert snapshot.display("rapid") == "N/A"
    assert snapshot.display("bullet") == 1200


async def test_close_closes_owned_session():
    client, session = client_with()
    await client.close()
    session.close.assert_awaited_once()


def test_error_messages_name_status_and_url():
    url = f"{BASE}/player/ghost/stats"
    error = PlayerNotFoundError(url, "ghost")
    assert isinstance(error, ChessApiError)
    assert str(error) == f"chess.com returned HTTP 404 for {url}"
    assert (error.url, error.status, error.handle) == (url, 404, "ghost")
