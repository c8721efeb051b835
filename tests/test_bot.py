import logging
from unittest.mock import AsyncMock

import discord
import pytest

import bot as bot_module
from config import Config, NotifierSettings
from cogs.health_check import ChatNotifier, HealthCheck


@pytest.mark.asyncio
async def test_bot_wires_notifier_and_loads_health_check_cog():
    settings = NotifierSettings(token='abc', portal_name='qa')
    bot = bot_module.HealthCheckBot(settings)
    try:
        assert isinstance(bot.notifier, ChatNotifier)
        assert bot.notifier.client is bot
        assert bot.notifier.settings is settings
        assert bot.intents.guilds

        await bot.load_all_cogs()

        assert bot.loaded_cogs == ['health_check']
        cog = bot.get_cog('HealthCheck')
        assert isinstance(cog, HealthCheck)
        assert cog.notifier is bot.notifier
    finally:
        await bot.close()


@pytest.mark.asyncio
async def test_main_without_token_exits_quietly(monkeypatch, tmp_path, caplog):
    caplog.set_level(logging.INFO, logger='discord.health_check')
    monkeypatch.delenv('DISCORD_BOT_TOKEN', raising=False)
    monkeypatch.setattr(bot_module, 'get_config', lambda: Config(tmp_path / 'settings.ini'))

    await bot_module.main()

    assert (
        "DISCORD_BOT_TOKEN environment variable not available, skipping discord integration"
        in [r.getMessage() for r in caplog.records]
    )


@pytest.mark.asyncio
async def test_main_returns_after_rejected_login(monkeypatch, tmp_path, caplog):
    caplog.set_level(logging.INFO, logger='discord.health_check')
    monkeypatch.setenv('DISCORD_BOT_TOKEN', 'bad-token')
    monkeypatch.setattr(bot_module, 'get_config', lambda: Config(tmp_path / 'settings.ini'))
    login = AsyncMock(side_effect=discord.LoginFailure("Improper token has been passed."))
    monkeypatch.setattr(bot_module.HealthCheckBot, 'login', login)

    await bot_module.main()

    login.assert_awaited_once_with('bad-token')
    assert (
        "Could not connect to discord server: Improper token has been passed."
        in [r.getMessage() for r in caplog.records]
    )
