import discord
from discord.ext import commands
import os
from dotenv import load_dotenv
import logging
import asyncio
from pathlib import Path
from typing import List

from config import Config, NotifierSettings, get_config
from cogs.health_check import ChatNotifier

logger = logging.getLogger('discord')

COGS_DIR = Path(__file__).parent / 'cogs'


def setup_logging(config: Config) -> None:
    """Send bot logs to the console and the configured log file"""
    logging.basicConfig(
        level=getattr(logging, str(config.log_level).upper(), logging.INFO),
        format='[{asctime}] [{levelname:<8}] {name}: {message}',
        datefmt='%Y-%m-%d %H:%M:%S',
        style='{',
        handlers=[
            logging.FileHandler(config.log_file, encoding='utf-8', mode='a'),
            logging.StreamHandler()
        ]
    )
    # Reduce gateway verbosity
    logging.getLogger('discord.gateway').setLevel(logging.WARNING)


def build_intents() -> discord.Intents:
    # Guild cache carries the channels and roles the lookups scan
    intents = discord.Intents.default()
    intents.guilds = True
    return intents


class HealthCheckBot(commands.Bot):
    """Discord bot that owns the connection used by the chat notifier"""

    def __init__(self, settings: NotifierSettings):
        super().__init__(
            command_prefix='!',
            intents=build_intents(),
            max_messages=None,
            heartbeat_timeout=60,
            guild_ready_timeout=10,
        )
        self.settings = settings
        self.notifier = ChatNotifier(self, settings)
        self.cogs_dir = COGS_DIR
        self.loaded_cogs: List[str] = []

    async def setup_hook(self):
        """Called after login, before the gateway connection opens"""
        logger.info("Setting up bot...")
        await self.load_all_cogs()

    async def load_all_cogs(self):
        """Load all available cog packages from the cogs directory"""
        self.loaded_cogs = []

        if not self.cogs_dir.is_dir():
            logger.warning(f"Cogs directory '{self.cogs_dir}' not found")
            return

        for item in sorted(os.listdir(self.cogs_dir)):
            item_path = self.cogs_dir / item

            # Skip hidden files and directories
            if item.startswith('_') or not item_path.is_dir():
                continue

            if (item_path / '__init__.py').exists():
                try:
                    await self.load_extension(f'cogs.{item}')
                    self.loaded_cogs.append(item)
                    logger.info(f"✅ Loaded cog: {item}")
                except commands.ExtensionError as e:
                    logger.error(f"❌ Failed to load cog {item}: {e}")

        logger.info(f"Loaded {len(self.loaded_cogs)} cogs successfully")


async def main():
    """Run the health-check bot once; connection failures are logged, not retried"""
    settings = get_config().notifier_settings()
    bot = HealthCheckBot(settings)
    # The bot is the whole process here: once start() gives up, main returns.
    # Hosts embedding the notifier keep running by scheduling start() as a task.
    try:
        await bot.notifier.start()
    finally:
        await bot.notifier.close()


if __name__ == '__main__':
    load_dotenv()
    setup_logging(get_config())
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Bot stopped by keyboard interrupt")
