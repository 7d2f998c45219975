"""Client wiring."""

from dataclasses import dataclass

import httpx
import structlog

from honeycomb_client.infrastructure.api.auth import AuthAPI
from honeycomb_client.infrastructure.api.boards import BoardsAPI
from honeycomb_client.infrastructure.api.burn_alerts import BurnAlertsAPI
from honeycomb_client.infrastructure.api.columns import ColumnsAPI
from honeycomb_client.infrastructure.api.datasets import DatasetsAPI
from honeycomb_client.infrastructure.api.derived_columns import DerivedColumnsAPI
from honeycomb_client.infrastructure.api.markers import MarkersAPI
from honeycomb_client.infrastructure.api.queries import QueriesAPI
from honeycomb_client.infrastructure.api.query_annotations import QueryAnnotationsAPI
from honeycomb_client.infrastructure.api.query_results import QueryResultsAPI
from honeycomb_client.infrastructure.api.recipients import RecipientsAPI
from honeycomb_client.infrastructure.api.slos import SLOsAPI
from honeycomb_client.infrastructure.api.triggers import TriggersAPI
from honeycomb_client.infrastructure.config.settings import Settings
from honeycomb_client.infrastructure.http.executor import RequestExecutor
from honeycomb_client.infrastructure.http.retry_policy import RetryPolicy

logger = structlog.get_logger()


@dataclass
class HoneycombClient:
    """Honeycomb API client.

    Every resource shares the executor and therefore one pooled
    connection. Use as an async context manager, or call aclose().
    """

    executor: RequestExecutor
    auth: AuthAPI
    boards: BoardsAPI
    columns: ColumnsAPI
    datasets: DatasetsAPI
    derived_columns: DerivedColumnsAPI
    markers: MarkersAPI
    queries: QueriesAPI
    query_annotations: QueryAnnotationsAPI
    query_results: QueryResultsAPI
    triggers: TriggersAPI
    slos: SLOsAPI
    burn_alerts: BurnAlertsAPI
    recipients: RecipientsAPI

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
        policy: RetryPolicy | None = None,
    ) -> "HoneycombClient":
        """Build a client and all of its resources.

        Raises:
            ConfigurationError: The API key is missing or the URL is invalid.
        """
        executor = RequestExecutor(settings, policy=policy, transport=transport)
        logger.info("honeycomb_client_created", api_url=settings.api_url, user_agent=settings.user_agent)
        return cls(
            executor=executor,
            auth=AuthAPI(executor),
            boards=BoardsAPI(executor),
            columns=ColumnsAPI(executor),
            datasets=DatasetsAPI(executor),
            derived_columns=DerivedColumnsAPI(executor),
            markers=MarkersAPI(executor),
            queries=QueriesAPI(executor),
            query_annotations=QueryAnnotationsAPI(executor),
            query_results=QueryResultsAPI(executor),
            triggers=TriggersAPI(executor),
            slos=SLOsAPI(executor),
            burn_alerts=BurnAlertsAPI(executor),
            recipients=RecipientsAPI(executor),
        )

    async def __aenter__(self) -> "HoneycombClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Release the pooled connection."""
        await self.executor.aclose()
