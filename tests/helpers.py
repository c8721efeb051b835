import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock


def make_channel(name):
    return SimpleNamespace(name=name, send=AsyncMock())


def make_guild(name, role_names=()):
    roles = [SimpleNamespace(name=role_name, guild_name=name) for role_name in role_names]
    return SimpleNamespace(name=name, roles=roles)


async def drain():
    """Let scheduled send tasks and their done callbacks run."""
    for _ in range(3):
        await asyncio.sleep(0)
