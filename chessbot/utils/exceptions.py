"""
Custom exceptions for the chess.com integration.

Cogs treat every ChessBotException as recoverable and answer with their own
fixed reply text.
"""

class ChessBotException(Exception):
    """Base exception for recoverable bot errors."""

class ChessApiError(ChessBotException):
    """Raised when chess.com answers with a non-success status."""
    def __init__(self, url: str, status: int):
        super().__init__(f"chess.com returned HTTP {status} for {url}")
        self.url = url
        self.status = status

class PlayerNotFoundError(ChessApiError):
    """Raised when chess.com does not know the requested handle."""
    def __init__(self, url: str, handle: str):
        super().__init__(url, 404)
        self.handle = handle
