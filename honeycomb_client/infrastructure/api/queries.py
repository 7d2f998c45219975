"""Queries API adapter."""

import structlog

from honeycomb_client.application.dto.query_spec import QuerySpec
from honeycomb_client.application.services.query_validation import validate_query_spec
from honeycomb_client.domain.ports import QueriesPort
from honeycomb_client.infrastructure.http.executor import RequestExecutor, url_encode_dataset

logger = structlog.get_logger()


class QueriesAPI(QueriesPort):
    """Saved queries backed by the Honeycomb API.

    Queries are immutable: they can only be created and read.
    """

    def __init__(self, executor: RequestExecutor) -> None:
        self.executor = executor

    async def get(self, dataset: str, query_id: str) -> QuerySpec:
        path = f"/1/queries/{url_encode_dataset(dataset)}/{query_id}"
        return await self.executor.do("GET", path, response_type=QuerySpec)

    async def create(self, dataset: str, query: QuerySpec) -> QuerySpec:
        """Create a new query, validating it before anything is sent."""
        validate_query_spec(query)
        created = await self.executor.do(
            "POST",
            f"/1/queries/{url_encode_dataset(dataset)}",
            query,
            response_type=QuerySpec,
        )
        logger.info("query_created", dataset=dataset, query_id=created.id)
        return created
