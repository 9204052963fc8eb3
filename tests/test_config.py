"""
Tests for configuration loading and roster parsing.
"""

import pytest

from chessbot.config import Config
from chessbot.constants import DEFAULT_ROSTER
from chessbot.data_models.games import RosterEntry


def test_default_roster(monkeypatch):
    monkeypatch.setattr(Config, "CHESS_ROSTER", "")
    roster = Config.get_roster()
    assert isinstance(roster, tuple)
    assert len(roster) == len(DEFAULT_ROSTER)
    assert roster[0] == RosterEntry("azimjonfffff", "adheeeem")


def test_roster_from_environment(monkeypatch):
    monkeypatch.setattr(Config, "CHESS_ROSTER", " A:alice, B:bob ,")
    assert Config.get_roster() == (RosterEntry("A", "alice"), RosterEntry("B", "bob"))


@pytest.mark.parametrize("value", ["A", "A:", ":alice", "A:alice,B"])
def test_malformed_roster(monkeypatch, value):
    monkeypatch.setattr(Config, "CHESS_ROSTER", value)
    with pytest.raises(ValueError):
        Config.get_roster()


def test_validate_requires_token(monkeypatch):
    monkeypatch.setattr(Config, "DISCORD_TOKEN", None)
    with pytest.raises(ValueError, match="DISCORD_TOKEN"):
        Config.validate()


def test_validate_rejects_bad_roster(monkeypatch):
    monkeypatch.setattr(Config, "DISCORD_TOKEN", "token")
    monkeypatch.setattr(Config, "CHESS_ROSTER", "broken")
    with pytest.raises(ValueError, match="CHESS_ROSTER"):
        Config.validate()
