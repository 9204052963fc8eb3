from discord.ext import commands

from chessbot.services.stats import StatsService
from chessbot.utils.exceptions import ChessApiError
from chessbot.utils.logger import setup_logger
from chessbot.utils.replies import STATS_ERROR, STATS_UNAVAILABLE, build_stats_reply

logger = setup_logger(__name__)

class StatsCog(commands.Cog):
    """chess.com rating lookup"""

    def __init__(self, bot):
        self.bot = bot
        self.stats_service = StatsService(bot.chess_client)

    @commands.command(name='stats')
    async def stats(self, ctx: commands.Context, *, handle: str = ""):
        """Show a player's current chess.com ratings"""
        username = self.stats_service.normalize_handle(handle)
        if not username:
            return

        try:
            snapshot = await self.stats_service.get_snapshot(username)
            await ctx.send(build_stats_reply(username, snapshot))
        except ChessApiError as e:
            logger.info(f"Stats unavailable for {username}: {e}")
            await ctx.send(STATS_UNAVAILABLE)
        except Exception as e:
            logger.error(f"Error in stats command for {username}: {e}", exc_info=True)
            await ctx.send(STATS_ERROR)

async def setup(bot):
    await bot.add_cog(StatsCog(bot))
