"""
Bot-wide constants for the chess leaderboard Discord bot.

Outcome vocabularies, command keywords and reply glyphs shared by the
services and the reply formatters.
"""

class GameResults:
    """chess.com per-side result strings that decide a game."""

    WIN = "win"

    # Ending reasons that hand the game to the other side
    DECISIVE_FOR_OPPONENT = frozenset({"resigned", "timeout", "abandoned"})

class TimeClasses:
    """chess.com time-control classes usable as a speed filter."""

    BLITZ = "blitz"
    BULLET = "bullet"
    RAPID = "rapid"

    ALL = (BLITZ, BULLET, RAPID)

class LeaderboardOptions:
    """Keywords accepted by the leaderboard command."""

    HELP = "help"
    TODAY = "bugin"
    TODAY_ALIASES = frozenset({"bugin", "today"})

COMMAND_DESCRIPTIONS = {
    "default": "Shows overall monthly leaderboard for all game types",
    "bugin": "Shows today's top players across all game types",
    "blitz": "Shows monthly leaderboard for blitz games (3-5 minutes)",
    "bullet": "Shows monthly leaderboard for bullet games (1-2 minutes)",
    "rapid": "Shows monthly leaderboard for rapid games (10+ minutes)",
}

class UIConstants:
    """Glyphs used in text replies."""

    NOT_AVAILABLE = "N/A"

    MONTHLY_TITLE = "🏆 Monthly Leaderboard"
    TODAY_TITLE = "🏆 Today's Leaderboard"

    # Medal glyphs for ranks 1-3
    POSITION_EMOJI = {1: "🥇", 2: "🥈", 3: "🥉"}

# Chat handle -> chess.com handle
DEFAULT_ROSTER = (
    ("azimjonfffff", "adheeeem"),
    ("rahniz90", "RahNiz"),
    ("RahmonovShuhrat", "shuhratrahmonov"),
    ("aisoqov", "guaje032"),
    ("Akhmedov_Sanjar", "Sanjar_Akhmedov"),
    ("knajmitdinov", "komiljon_najmitdinov"),
    ("nuriddin_yakubovich", "Nuriddin_2004"),
    ("Alisherrik", "alisherrik"),
)
