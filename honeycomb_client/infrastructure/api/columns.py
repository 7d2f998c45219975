"""Columns API adapter."""

from urllib.parse import urlencode

from honeycomb_client.application.dto.datasets import Column
from honeycomb_client.domain.ports import ColumnsPort
from honeycomb_client.infrastructure.http.executor import RequestExecutor, url_encode_dataset


class ColumnsAPI(ColumnsPort):
    """Dataset columns backed by the Honeycomb API."""

    def __init__(self, executor: RequestExecutor) -> None:
        self.executor = executor

    async def list(self, dataset: str) -> list[Column]:
        return await self.executor.do("GET", self._path(dataset), response_type=list[Column])

    async def get(self, dataset: str, column_id: str) -> Column:
        return await self.executor.do("GET", self._path(dataset, column_id), response_type=Column)

    async def get_by_key_name(self, dataset: str, key_name: str) -> Column:
        path = f"{self._path(dataset)}?{urlencode({'key_name': key_name})}"
        return await self.executor.do("GET", path, response_type=Column)

    async def create(self, dataset: str, column: Column) -> Column:
        return await self.executor.do("POST", self._path(dataset), column, response_type=Column)

    async def update(self, dataset: str, column: Column) -> Column:
        return await self.executor.do("PUT", self._path(dataset, column.id), column, response_type=Column)

    async def delete(self, dataset: str, column_id: str) -> None:
        await self.executor.do("DELETE", self._path(dataset, column_id))

    @staticmethod
    def _path(dataset: str, column_id: str | None = None) -> str:
        path = f"/1/columns/{url_encode_dataset(dataset)}"
        return f"{path}/{column_id}" if column_id is not None else path
