"""Unit tests for client wiring."""

import httpx
import pytest

from honeycomb_client.domain.errors import ConfigurationError
from honeycomb_client.domain.ports import BoardsPort, QueriesPort
from honeycomb_client.infrastructure.config.settings import Settings
from honeycomb_client.infrastructure.runtime.container import HoneycombClient


@pytest.mark.asyncio
async def test_resources_share_one_executor():
    """Test every resource is built on the same executor."""
    settings = Settings(api_key="test-key", _env_file=None)

    async with HoneycombClient.from_settings(settings, transport=httpx.MockTransport(lambda r: httpx.Response(200))) as client:
        assert client.boards.executor is client.executor
        assert client.recipients.executor is client.executor
        assert isinstance(client.boards, BoardsPort)
        assert isinstance(client.queries, QueriesPort)


@pytest.mark.asyncio
async def test_retry_policy_follows_settings():
    """Test the retry knobs come from the settings."""
    settings = Settings(api_key="test-key", retry_max_attempts=3, retry_max_wait_seconds=1.0, _env_file=None)

    async with HoneycombClient.from_settings(settings) as client:
        assert client.executor.policy.max_attempts == 3
        assert client.executor.policy.max_wait == 1.0
        assert client.executor.policy.min_wait == 0.2


def test_missing_api_key():
    """Test the client cannot be built without an API key."""
    with pytest.raises(ConfigurationError):
        HoneycombClient.from_settings(Settings(api_key="", _env_file=None))
