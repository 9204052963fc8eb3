import asyncio
import logging
import traceback

import discord
from discord.ext import commands

from chessbot.config import Config
from chessbot.services.chess_api import ChessComClient
from chessbot.utils.logger import setup_logger

class ChessBot(commands.Bot):
    def __init__(self):
        intents = discord.Intents.default()
        intents.message_content = True

        super().__init__(
            command_prefix=Config.COMMAND_PREFIX,
            intents=intents
        )

        self.logger = setup_logger(__name__)
        self.roster = Config.get_roster()
        self.chess_client = ChessComClient(
            base_url=Config.CHESSCOM_API_BASE_URL,
            user_agent=Config.CHESSCOM_USER_AGENT,
            timeout=Config.HTTP_TIMEOUT_SECONDS
        )

    async def setup_hook(self):
        """Called when the bot is starting up"""
        self.logger.info("Setting up chess bot...")
        self.logger.info(f"Roster loaded with {len(self.roster)} player(s)")

        await self.load_cogs()

        self.logger.info("Chess bot setup complete!")

    async def load_cogs(self):
        """Load all cogs"""
        cogs_to_load = [
            'chessbot.cogs.stats',
            'chessbot.cogs.leaderboard'
        ]

        for cog in cogs_to_load:
            try:
                await self.load_extension(cog)
                self.logger.info(f"Loaded cog: {cog}")
            except Exception as e:
                self.logger.error(f"Failed to load cog {cog}: {e}", exc_info=True)

    async def on_ready(self):
        """Called when the bot is ready"""
        self.logger.info(f'{self.user} has connected to Discord!')
        self.logger.info(f'Bot is in {len(self.guilds)} guilds')

        await self.change_presence(
            activity=discord.Game(name=f"Chess | {Config.COMMAND_PREFIX}zuri help")
        )

    async def on_command_error(self, ctx: commands.Context, error: Exception):
        """Global error handler for commands"""
        if isinstance(error, commands.CommandNotFound):
            return

        self.logger.error(f"Unexpected error in command {ctx.command}: {error}")
        self.logger.error(traceback.format_exc())
        await ctx.send("❌ An unexpected error occurred while processing your command.")

    async def close(self):
        """Cleanup when bot is shutting down"""
        self.logger.info("Shutting down chess bot...")

        await self.chess_client.close()

        await super().close()

async def main():
    """Main entry point"""
    Config.validate()

    bot = ChessBot()

    try:
        await bot.start(Config.DISCORD_TOKEN)
    except KeyboardInterrupt:
        await bot.close()
    except Exception as e:
        logging.error(f"Fatal error: {e}")
        traceback.print_exc()
    finally:
        await bot.close()

def run():
    asyncio.run(main())

if __name__ == "__main__":
    run()
