"""Main entrypoint: verify the configured API key."""

import asyncio
import sys

import httpx
import structlog

from honeycomb_client.domain.errors import ConfigurationError, DetailedError
from honeycomb_client.infrastructure.config.settings import Settings
from honeycomb_client.infrastructure.observability.logging import configure_logging
from honeycomb_client.infrastructure.runtime.container import HoneycombClient

logger = structlog.get_logger()


async def check_auth(settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> int:
    """Report which team and environment the API key belongs to.

    Returns a process exit code.
    """
    async with HoneycombClient.from_settings(settings, transport=transport) as client:
        try:
            metadata = await client.auth.list()
        except DetailedError as e:
            logger.error("auth_check_failed", status=e.status, error=str(e), request_id=e.request_id)
            return 1

    granted = sorted(name for name, allowed in metadata.api_key_access.model_dump().items() if allowed)
    logger.info(
        "auth_check_succeeded",
        team=metadata.team.slug,
        environment=metadata.environment.slug,
        access=granted,
    )
    return 0


def main() -> None:
    """Entrypoint."""
    settings = Settings()
    configure_logging(settings.log_level, settings.log_format)

    try:
        code = asyncio.run(check_auth(settings))
    except ConfigurationError as e:
        logger.error("configuration_error", error=str(e))
        code = 2
    except KeyboardInterrupt:
        code = 130
    sys.exit(code)


if __name__ == "__main__":
    main()
