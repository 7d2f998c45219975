"""Reuse a saved query when it still matches, create one otherwise."""

import structlog

from honeycomb_client.application.dto.query_spec import QuerySpec
from honeycomb_client.application.services.query_equivalence import equivalent_to
from honeycomb_client.domain.errors import is_not_found
from honeycomb_client.domain.ports import QueriesPort

logger = structlog.get_logger()


async def run(
    queries: QueriesPort,
    dataset: str,
    desired: QuerySpec,
    existing_id: str | None = None,
) -> QuerySpec:
    """Return a saved query equivalent to desired.

    The server fills in defaults on the queries it stores, so the existing
    query is compared by equivalence rather than equality.
    """
    if existing_id:
        try:
            existing = await queries.get(dataset, existing_id)
        except Exception as e:
            if not is_not_found(e):
                raise
            logger.info("query_gone", dataset=dataset, query_id=existing_id)
        else:
            if equivalent_to(existing, desired):
                logger.debug("query_unchanged", dataset=dataset, query_id=existing_id)
                return existing
            logger.info("query_drifted", dataset=dataset, query_id=existing_id)

    return await queries.create(dataset, desired)
