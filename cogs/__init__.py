"""
Cogs Package - Discord Bot Feature Modules
=========================================

Each cog is a self-contained package loaded by the bot's setup hook.
Packages expose async ``setup``/``teardown`` extension hooks.

Available Cogs:
- health_check: Ready announcement to the health-check channel, plus
  channel/guild/role lookups through ChatNotifier
"""

__all__ = [
    'health_check',
]

__version__ = '1.0.0'
