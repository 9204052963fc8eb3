"""
Services package for the chess leaderboard bot.
"""

from .chess_api import ChessComClient
from .leaderboard import LeaderboardService
from .stats import StatsService

__all__ = ['ChessComClient', 'LeaderboardService', 'StatsService']
