"""
Shared text reply builders for the chess leaderboard bot.

Every command answers with plain multi-line text; all wording lives here so
the cogs only decide which reply to send.
"""

from chessbot.config import Config
from chessbot.constants import COMMAND_DESCRIPTIONS, UIConstants
from chessbot.data_models.games import RatingSnapshot
from chessbot.data_models.leaderboard import LeaderboardEntry, LeaderboardResult

STATS_UNAVAILABLE = "⚠️ Could not fetch stats."
STATS_ERROR = "🚨 Error while fetching stats."
NO_REGISTERED_USERS = "⚠️ No registered users found."


def leaderboard_command() -> str:
    return f"{Config.COMMAND_PREFIX}zuri"


def help_footer() -> str:
    return f"Type {leaderboard_command()} help to see all available commands."


def leaderboard_error() -> str:
    return f"🚨 Error generating leaderboard. Type {leaderboard_command()} help to see available commands."


def build_stats_reply(handle: str, snapshot: RatingSnapshot) -> str:
    """Render the five rating fields in a fixed order, N/A for missing ones."""
    return (
        f"📊 Stats for @{handle}:\n\n"
        f"♟ Rapid: {snapshot.display('rapid')}\n"
        f"⚡ Blitz: {snapshot.display('blitz')}\n"
        f"💨 Bullet: {snapshot.display('bullet')}\n"
        f"🧠 Tactics: {snapshot.display('tactics')}\n"
        f"📅 Puzzle Rush Best: {snapshot.display('puzzle_rush')}"
    )


def build_help_reply() -> str:
    """Static usage listing for the leaderboard command."""
    command = leaderboard_command()
    return "\n".join([
        f"📋 Available {command} commands:",
        "",
        f"🎮 {command} - {COMMAND_DESCRIPTIONS['default']}",
        f"🌅 {command} bugin - {COMMAND_DESCRIPTIONS['bugin']}",
        f"⚡ {command} blitz - {COMMAND_DESCRIPTIONS['blitz']}",
        f"🔫 {command} bullet - {COMMAND_DESCRIPTIONS['bullet']}",
        f"🏃 {command} rapid - {COMMAND_DESCRIPTIONS['rapid']}",
        "",
        "Use any command to see the corresponding leaderboard!",
    ])


def position_label(position: int) -> str:
    """Medal for the podium, ``N.`` for everybody else."""
    return UIConstants.POSITION_EMOJI.get(position, f"{position}.")


def format_entry(entry: LeaderboardEntry) -> str:
    return (
        f"{position_label(entry.rank)} {entry.display_name}: "
        f"{entry.net_wins:+d} (W: {entry.wins} L: {entry.losses})"
    )


def build_no_games_reply(result: LeaderboardResult) -> str:
    query = result.query
    game_type = f" for {query.speed} games" if query.speed else ""
    return f"📊 No games found{game_type} {query.time_frame}.\n\n{help_footer()}"


def build_leaderboard_reply(result: LeaderboardResult) -> str:
    """
    Render a ranked leaderboard.

    Falls back to the no-games message when nobody has a counted game.
    """
    if result.is_empty:
        return build_no_games_reply(result)

    return "\n".join([
        result.query.title,
        result.query.description,
        "",
        *(format_entry(entry) for entry in result.entries),
        "",
        help_footer(),
    ])
