"""
Time window utilities for leaderboard queries.

Leaderboards are counted in a fixed civil-time frame (GMT+5 by default):
either since the start of the current calendar month or since midnight today.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from chessbot.constants import LeaderboardOptions, TimeClasses
from chessbot.data_models.games import Game

DEFAULT_OFFSET_HOURS = 5


def fixed_offset(offset_hours: int = DEFAULT_OFFSET_HOURS) -> timezone:
    """Fixed-offset zone used for all window calculations."""
    return timezone(timedelta(hours=offset_hours))


def is_today_option(option: Optional[str]) -> bool:
    return option in LeaderboardOptions.TODAY_ALIASES


def speed_filter(option: Optional[str]) -> Optional[str]:
    """Time class selected by the option, or None when no speed filter applies."""
    return option if option in TimeClasses.ALL else None


def resolve_window_start(
    option: Optional[str],
    now: Optional[datetime] = None,
    offset_hours: int = DEFAULT_OFFSET_HOURS,
) -> datetime:
    """
    Compute the inclusive start of the leaderboard window.

    Args:
        option: Normalized leaderboard keyword (None for the default board)
        now: Current moment; naive values are taken as UTC
        offset_hours: Offset of the civil-time frame from UTC

    Returns:
        Aware datetime in the fixed-offset frame: midnight today for the
        today option, else the first instant of the current month
    """
    tz = fixed_offset(offset_hours)
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    local_now = now.astimezone(tz)
    start = local_now.replace(hour=0, minute=0, second=0, microsecond=0)
    if not is_today_option(option):
        start = start.replace(day=1)
    return start


def is_in_window(game: Game, window_start: datetime, speed: Optional[str] = None) -> bool:
    """Check a game against the window start and optional speed filter."""
    if game.ended_at(window_start.tzinfo) < window_start:
        return False
    if speed is not None and game.time_class != speed:
        return False
    return True
