from discord.ext import commands
import logging

from .notifier import ChatNotifier


logger = logging.getLogger('discord.health_check')


class HealthCheck(commands.Cog):
    """Reports portal liveness to the health-check channel"""

    def __init__(self, bot, notifier: ChatNotifier):
        self.bot = bot
        self.notifier = notifier

    @commands.Cog.listener()
    async def on_ready(self):
        logger.info(f'{self.bot.user} is online!')
        logger.info(f'Connected to {len(self.bot.guilds)} guilds')
        self.notifier.announce_ready()

    @commands.Cog.listener()
    async def on_disconnect(self):
        logger.warning("Bot disconnected from Discord Gateway")

    @commands.Cog.listener()
    async def on_resumed(self):
        logger.info("Bot resumed connection to Discord Gateway")
