"""Read a resource that may have been deleted out-of-band."""

from collections.abc import Awaitable
from typing import TypeVar

import structlog

from honeycomb_client.domain.errors import is_not_found

logger = structlog.get_logger()

T = TypeVar("T")


async def run(read: Awaitable[T]) -> T | None:
    """Await a read, returning None when the resource no longer exists.

    Any error other than a not-found DetailedError propagates.
    """
    try:
        return await read
    except Exception as e:
        if not is_not_found(e):
            raise
        logger.info("resource_gone", error=str(e))
        return None
