"""
Custom Exceptions for Health Check Module
=========================================

Defines the errors the chat notifier lets escape to callers.
"""


class HealthCheckException(Exception):
    """Base exception for the health check module."""

    def __init__(self, message: str, original_error: Exception = None):
        self.message = message
        self.original_error = original_error
        super().__init__(self.message)

    def __str__(self):
        if self.original_error:
            return f"{self.message} (Caused by: {self.original_error})"
        return self.message


class GuildNotFound(HealthCheckException, LookupError):
    """Raised when the guild pinned for role lookups is not in the client cache."""

    def __init__(self, guild_name: str):
        self.guild_name = guild_name
        super().__init__(f"Guild {guild_name} not found!")
