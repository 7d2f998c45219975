"""Query results API adapter."""

import asyncio

import structlog

from honeycomb_client.application.dto.queries import QueryResult, QueryResultRequest
from honeycomb_client.domain.ports import QueryResultsPort
from honeycomb_client.infrastructure.http.executor import RequestExecutor, url_encode_dataset

logger = structlog.get_logger()

QUERY_RESULT_POLL_INTERVAL = 0.2


class QueryResultsAPI(QueryResultsPort):
    """Query results backed by the Honeycomb API."""

    def __init__(self, executor: RequestExecutor, poll_interval: float = QUERY_RESULT_POLL_INTERVAL) -> None:
        self.executor = executor
        self.poll_interval = poll_interval

    async def create(self, dataset: str, request: QueryResultRequest) -> QueryResult:
        path = f"/1/query_results/{url_encode_dataset(dataset)}"
        return await self.executor.do("POST", path, request, response_type=QueryResult)

    async def get(self, dataset: str, result_id: str, *, timeout: float | None = None) -> QueryResult:
        """Poll a query result until it is complete.

        Args:
            dataset: Dataset the query runs against.
            result_id: ID returned by create().
            timeout: Overall deadline in seconds; TimeoutError once exceeded.
        """
        path = f"/1/query_results/{url_encode_dataset(dataset)}/{result_id}"
        polls = 0
        async with asyncio.timeout(timeout):
            while True:
                result = await self.executor.do("GET", path, response_type=QueryResult)
                polls += 1
                if result.complete:
                    logger.debug("query_result_complete", dataset=dataset, result_id=result_id, polls=polls)
                    return result
                await asyncio.sleep(self.poll_interval)
