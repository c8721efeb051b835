from unittest.mock import AsyncMock, MagicMock

import pytest

from config import NotifierSettings


@pytest.fixture
def settings():
    return NotifierSettings(token='test-token', portal_name='staging-portal')


@pytest.fixture
def client():
    client = MagicMock()
    client.get_all_channels.return_value = []
    client.guilds = []
    client.login = AsyncMock()
    client.connect = AsyncMock()
    client.close = AsyncMock()
    client.is_closed.return_value = False
    return client
