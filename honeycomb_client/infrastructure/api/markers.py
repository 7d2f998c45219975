"""Markers API adapter."""

import structlog

from honeycomb_client.application.dto.markers import Marker
from honeycomb_client.domain.errors import NOT_FOUND, DetailedError
from honeycomb_client.domain.ports import MarkersPort
from honeycomb_client.infrastructure.http.executor import RequestExecutor, url_encode_dataset

logger = structlog.get_logger()


class MarkersAPI(MarkersPort):
    """Markers backed by the Honeycomb API."""

    def __init__(self, executor: RequestExecutor) -> None:
        self.executor = executor

    async def list(self, dataset: str) -> list[Marker]:
        return await self.executor.do("GET", self._path(dataset), response_type=list[Marker])

    async def get(self, dataset: str, marker_id: str) -> Marker:
        """Get a marker by its ID.

        The API has no endpoint for a single marker, so the dataset's
        markers are listed and searched.
        """
        for marker in await self.list(dataset):
            if marker.id == marker_id:
                return marker

        logger.debug("marker_not_found", dataset=dataset, marker_id=marker_id)
        raise DetailedError(status=NOT_FOUND, message="Marker Not Found.")

    async def create(self, dataset: str, marker: Marker) -> Marker:
        return await self.executor.do("POST", self._path(dataset), marker, response_type=Marker)

    async def update(self, dataset: str, marker: Marker) -> Marker:
        return await self.executor.do("PUT", self._path(dataset, marker.id), marker, response_type=Marker)

    async def delete(self, dataset: str, marker_id: str) -> None:
        await self.executor.do("DELETE", self._path(dataset, marker_id))

    @staticmethod
    def _path(dataset: str, marker_id: str | None = None) -> str:
        path = f"/1/markers/{url_encode_dataset(dataset)}"
        return f"{path}/{marker_id}" if marker_id is not None else path
