"""
Configuration Module
====================
Handles loading the health-check settings from the environment and the
optional settings.ini file.
"""

import configparser
import os
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger('discord.config')

# Default configuration directory
CONFIG_DIR = Path(__file__).parent
CONFIG_FILE = CONFIG_DIR / 'settings.ini'

DEFAULT_PORTAL_NAME = 'PORTAL_NAME not defined'
DEFAULT_GUILD_NAME = 'Nebulous'
DEFAULT_HEALTH_CHECK_CHANNEL = 'skynet-portal-health-check'


@dataclass
class NotifierSettings:
    """Everything the chat notifier needs to run."""
    token: str = ''
    portal_name: str = DEFAULT_PORTAL_NAME
    guild_name: str = DEFAULT_GUILD_NAME
    health_check_channel: str = DEFAULT_HEALTH_CHECK_CHANNEL

    @property
    def enabled(self) -> bool:
        """Check if a bot token is configured."""
        return bool(self.token)


class Config:
    """Configuration manager for the health-check bot."""

    def __init__(self, config_file: Optional[Path] = None):
        self.config = configparser.ConfigParser()
        self.config_file = config_file or CONFIG_FILE
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from INI file."""
        if not self.config_file.exists():
            logger.warning(f"Config file not found: {self.config_file}")
            logger.info("Using environment and default configuration values")
            return

        try:
            self.config.read(self.config_file, encoding='utf-8')
            logger.info(f"✅ Loaded configuration from {self.config_file}")
        except configparser.Error as e:
            logger.error(f"❌ Failed to load config: {e}")

    def get(self, section: str, key: str, fallback: Any = None) -> Any:
        """
        Get a raw configuration value.

        Empty values count as missing, so ``token =`` in the INI file
        behaves the same as leaving the key out.

        Args:
            section: INI section name
            key: Configuration key
            fallback: Default value if key not found

        Returns:
            Configuration value or fallback
        """
        try:
            value = self.config.get(section, key)
        except (configparser.NoSectionError, configparser.NoOptionError):
            return fallback
        return value if value.strip() else fallback

    def _env_or(self, env_name: str, section: str, key: str, fallback: str) -> str:
        """Environment variable first, then the INI key, then the fallback."""
        value = os.getenv(env_name)
        if value:
            return value
        return self.get(section, key, fallback)

    # Convenience properties for commonly used settings

    @property
    def token(self) -> str:
        """Get Discord bot token."""
        return self._env_or('DISCORD_BOT_TOKEN', 'discord', 'token', '')

    @property
    def portal_name(self) -> str:
        """Get the portal display name used in the ready announcement."""
        return self._env_or('PORTAL_NAME', 'health_check', 'portal_name', DEFAULT_PORTAL_NAME)

    @property
    def guild_name(self) -> str:
        """Get the guild that role lookups are pinned to."""
        return self.get('health_check', 'guild_name', DEFAULT_GUILD_NAME)

    @property
    def health_check_channel(self) -> str:
        """Get the health-check channel name."""
        return self.get('health_check', 'channel', DEFAULT_HEALTH_CHECK_CHANNEL)

    @property
    def log_file(self) -> str:
        """Get log file path."""
        return self.get('logging', 'log_file', 'bot.log')

    @property
    def log_level(self) -> str:
        """Get log level."""
        return self.get('logging', 'log_level', 'INFO')

    def notifier_settings(self) -> NotifierSettings:
        """Snapshot the values the notifier needs."""
        return NotifierSettings(
            token=self.token,
            portal_name=self.portal_name,
            guild_name=self.guild_name,
            health_check_channel=self.health_check_channel,
        )


# Global config instance
_config: Optional[Config] = None


def get_config(config_file: Optional[Path] = None) -> Config:
    """
    Get the global configuration instance.

    Args:
        config_file: Optional path to config file

    Returns:
        Config instance
    """
    global _config
    if _config is None:
        _config = Config(config_file)
    return _config
