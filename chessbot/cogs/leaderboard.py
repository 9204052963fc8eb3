from typing import Optional

from discord.ext import commands

from chessbot.config import Config
from chessbot.constants import LeaderboardOptions
from chessbot.services.leaderboard import LeaderboardService, normalize_option
from chessbot.utils.logger import setup_logger
from chessbot.utils.replies import (
    NO_REGISTERED_USERS,
    build_help_reply,
    build_leaderboard_reply,
    leaderboard_error,
)

logger = setup_logger(__name__)

class LeaderboardCog(commands.Cog):
    """Roster win/loss leaderboard commands"""

    def __init__(self, bot):
        self.bot = bot
        self.leaderboard_service = LeaderboardService(
            bot.chess_client,
            bot.roster,
            offset_hours=Config.TIMEZONE_OFFSET_HOURS
        )

    @commands.command(name='zuri')
    async def zuri(self, ctx: commands.Context, *, option: Optional[str] = None):
        """Show the roster leaderboard (help, bugin, blitz, bullet, rapid)"""
        try:
            keyword = normalize_option(option)

            if keyword == LeaderboardOptions.HELP:
                await ctx.send(build_help_reply())
                return

            if not self.leaderboard_service.roster:
                await ctx.send(NO_REGISTERED_USERS)
                return

            async with ctx.typing():
                result = await self.leaderboard_service.build(keyword)
            await ctx.send(build_leaderboard_reply(result))

        except Exception as e:
            logger.error(f"Error in leaderboard command: {e}", exc_info=True)
            await ctx.send(leaderboard_error())

async def setup(bot):
    await bot.add_cog(LeaderboardCog(bot))
