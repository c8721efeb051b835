"""Health Check Cog - Announces portal liveness and exposes guild/role lookups"""

from .cog import HealthCheck
from .exceptions import GuildNotFound, HealthCheckException
from .notifier import ChatNotifier

__all__ = [
    'ChatNotifier',
    'GuildNotFound',
    'HealthCheck',
    'HealthCheckException',
]


async def setup(bot):
    """Setup function to add the HealthCheck cog to the bot"""
    await bot.add_cog(HealthCheck(bot, bot.notifier))


async def teardown(bot):
    """Teardown function to remove the HealthCheck cog from the bot"""
    await bot.remove_cog("HealthCheck")
