import os
from dotenv import load_dotenv

from chessbot.constants import DEFAULT_ROSTER
from chessbot.data_models.games import RosterEntry

load_dotenv()

class Config:
    """Bot configuration settings"""

    # Discord settings
    DISCORD_TOKEN = os.getenv('DISCORD_TOKEN')

    # Bot settings
    COMMAND_PREFIX = os.getenv('COMMAND_PREFIX', '!')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'

    # chess.com API settings
    CHESSCOM_API_BASE_URL = os.getenv('CHESSCOM_API_BASE_URL', 'https://api.chess.com/pub')
    CHESSCOM_USER_AGENT = os.getenv('CHESSCOM_USER_AGENT', 'chessbot/0.1')
    HTTP_TIMEOUT_SECONDS = float(os.getenv('HTTP_TIMEOUT_SECONDS', 10))

    # Leaderboard settings
    TIMEZONE_OFFSET_HOURS = int(os.getenv('TIMEZONE_OFFSET_HOURS', 5))  # GMT+5
    CHESS_ROSTER = os.getenv('CHESS_ROSTER', '')  # Comma-separated chat:chess pairs

    @classmethod
    def get_roster(cls):
        """Get the chat handle -> chess.com handle roster"""
        if not cls.CHESS_ROSTER:
            return tuple(RosterEntry(chat, chess) for chat, chess in DEFAULT_ROSTER)

        roster = []
        for pair in cls.CHESS_ROSTER.split(','):
            if not pair.strip():
                continue
            chat_handle, sep, chess_handle = pair.partition(':')
            if not sep or not chat_handle.strip() or not chess_handle.strip():
                raise ValueError("CHESS_ROSTER must be comma-separated chat:chess pairs")
            roster.append(RosterEntry(chat_handle.strip(), chess_handle.strip()))
        return tuple(roster)

    @classmethod
    def validate(cls):
        """Validate that required configuration is present"""
        if not cls.DISCORD_TOKEN:
            raise ValueError("DISCORD_TOKEN is required")
        if cls.HTTP_TIMEOUT_SECONDS <= 0:
            raise ValueError("HTTP_TIMEOUT_SECONDS must be positive")
        # Surfaces a malformed CHESS_ROSTER at startup
        cls.get_roster()
