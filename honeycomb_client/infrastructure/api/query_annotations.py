"""Query annotations API adapter."""

from honeycomb_client.application.dto.queries import QueryAnnotation
from honeycomb_client.domain.ports import QueryAnnotationsPort
from honeycomb_client.infrastructure.http.executor import RequestExecutor, url_encode_dataset


class QueryAnnotationsAPI(QueryAnnotationsPort):
    """Query annotations backed by the Honeycomb API."""

    def __init__(self, executor: RequestExecutor) -> None:
        self.executor = executor

    async def list(self, dataset: str) -> list[QueryAnnotation]:
        return await self.executor.do("GET", self._path(dataset), response_type=list[QueryAnnotation])

    async def get(self, dataset: str, annotation_id: str) -> QueryAnnotation:
        return await self.executor.do("GET", self._path(dataset, annotation_id), response_type=QueryAnnotation)

    async def create(self, dataset: str, annotation: QueryAnnotation) -> QueryAnnotation:
        return await self.executor.do("POST", self._path(dataset), annotation, response_type=QueryAnnotation)

    async def update(self, dataset: str, annotation: QueryAnnotation) -> QueryAnnotation:
        path = self._path(dataset, annotation.id)
        return await self.executor.do("PUT", path, annotation, response_type=QueryAnnotation)

    async def delete(self, dataset: str, annotation_id: str) -> None:
        await self.executor.do("DELETE", self._path(dataset, annotation_id))

    @staticmethod
    def _path(dataset: str, annotation_id: str | None = None) -> str:
        path = f"/1/query_annotations/{url_encode_dataset(dataset)}"
        return f"{path}/{annotation_id}" if annotation_id is not None else path
