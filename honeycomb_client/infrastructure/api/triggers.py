"""Triggers API adapter."""

from honeycomb_client.application.dto.alerting import Trigger
from honeycomb_client.application.services.query_validation import validate_trigger_subset
from honeycomb_client.application.services.shaping import shape_trigger
from honeycomb_client.domain.ports import TriggersPort
from honeycomb_client.infrastructure.http.executor import RequestExecutor, url_encode_dataset


class TriggersAPI(TriggersPort):
    """Triggers backed by the Honeycomb API."""

    def __init__(self, executor: RequestExecutor) -> None:
        self.executor = executor

    async def list(self, dataset: str) -> list[Trigger]:
        return await self.executor.do("GET", self._path(dataset), response_type=list[Trigger])

    async def get(self, dataset: str, trigger_id: str) -> Trigger:
        return await self.executor.do("GET", self._path(dataset, trigger_id), response_type=Trigger)

    async def create(self, dataset: str, trigger: Trigger) -> Trigger:
        self._validate(trigger)
        return await self.executor.do("POST", self._path(dataset), shape_trigger(trigger), response_type=Trigger)

    async def update(self, dataset: str, trigger: Trigger) -> Trigger:
        self._validate(trigger)
        path = self._path(dataset, trigger.id)
        return await self.executor.do("PUT", path, shape_trigger(trigger), response_type=Trigger)

    async def delete(self, dataset: str, trigger_id: str) -> None:
        await self.executor.do("DELETE", self._path(dataset, trigger_id))

    @staticmethod
    def _validate(trigger: Trigger) -> None:
        # An inline query is only sent without a query ID
        if trigger.query is not None and not trigger.query_id:
            validate_trigger_subset(trigger.query)

    @staticmethod
    def _path(dataset: str, trigger_id: str | None = None) -> str:
        path = f"/1/triggers/{url_encode_dataset(dataset)}"
        return f"{path}/{trigger_id}" if trigger_id is not None else path
