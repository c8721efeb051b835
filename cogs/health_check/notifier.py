"""
Chat Notifier
=============

Wraps the bot's Discord connection: best-effort login, the one-time
"reporting for duty" announcement, and name lookups over the client cache.

Lookups read whatever discord.py has cached at call time. Anything not
cached yet is reported as missing, so callers must tolerate transient misses.
"""

import asyncio
import logging
from functools import partial
from typing import Optional, Set

import discord

from config import NotifierSettings
from .exceptions import GuildNotFound

logger = logging.getLogger('discord.health_check')


class ChatNotifier:
    """Sends liveness messages and resolves guilds/roles by name."""

    def __init__(self, client: discord.Client, settings: NotifierSettings):
        self.client = client
        self.settings = settings
        self._announced = False
        self._pending: Set[asyncio.Task] = set()

    async def start(self) -> bool:
        """
        Log in and hold the gateway connection until the client closes.

        Never raises: a missing token disables the integration, and login or
        connection errors are logged once and left unretried so the host
        process keeps running. Schedule this as a task if the caller must
        not block on the connection.

        Returns:
            True if the connection ran and ended normally, False otherwise
        """
        if not self.settings.enabled:
            logger.info("DISCORD_BOT_TOKEN environment variable not available, skipping discord integration")
            return False

        try:
            await self.client.login(self.settings.token)
            await self.client.connect()
        except Exception as e:
            logger.error(f"Could not connect to discord server: {e}")
            return False
        return True

    async def close(self) -> None:
        """Close the connection if it is still open."""
        if not self.client.is_closed():
            await self.client.close()

    def announce_ready(self) -> None:
        """Send the ready announcement the first time the client becomes ready."""
        # on_ready fires again after a full session re-identify; only a
        # scheduled send uses up the announcement
        if self._announced:
            return
        self._announced = self._submit(
            f"{self.settings.portal_name}: reporting for duty!",
            self.settings.health_check_channel,
        )

    def send(self, message: str, channel_name: str) -> None:
        """
        Post a message to the first cached channel with this exact name.

        The send is scheduled on the running loop and not awaited. A missing
        channel, or a call made with no running loop, is logged and
        otherwise ignored.
        """
        self._submit(message, channel_name)

    def _submit(self, message: str, channel_name: str) -> bool:
        """Schedule a send; returns True if a task was created."""
        channel = discord.utils.get(self.client.get_all_channels(), name=channel_name)

        if channel is None:
            logger.warning(f"Channel {channel_name} not found!")
            return False

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.error(f"Cannot send message to channel {channel_name}: no running event loop")
            return False

        task = loop.create_task(channel.send(message))
        self._pending.add(task)
        task.add_done_callback(partial(self._on_send_done, channel_name))
        return True

    def send_to_health_check_channel(self, message: str) -> None:
        """Post a message to the health-check channel."""
        self.send(message, self.settings.health_check_channel)

    def get_guild_by_name(self, guild_name: str) -> Optional[discord.Guild]:
        """Get the first cached guild with this exact name, or None."""
        return discord.utils.get(self.client.guilds, name=guild_name)

    def get_role_by_name(self, role_name: str) -> Optional[discord.Role]:
        """
        Get a role from the configured guild by exact name.

        Only the guild named by ``settings.guild_name`` is searched.

        Raises:
            GuildNotFound: the configured guild is not in the client cache
        """
        guild = self.get_guild_by_name(self.settings.guild_name)
        if guild is None:
            raise GuildNotFound(self.settings.guild_name)

        return discord.utils.get(guild.roles, name=role_name)

    def _on_send_done(self, channel_name: str, task: asyncio.Task) -> None:
        self._pending.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.warning(f"Failed to send message to channel {channel_name}: {error}")
