"""Derived columns API adapter."""

from urllib.parse import urlencode

from honeycomb_client.application.dto.datasets import DerivedColumn
from honeycomb_client.domain.ports import DerivedColumnsPort
from honeycomb_client.infrastructure.http.executor import RequestExecutor, url_encode_dataset


class DerivedColumnsAPI(DerivedColumnsPort):
    """Derived columns backed by the Honeycomb API."""

    def __init__(self, executor: RequestExecutor) -> None:
        self.executor = executor

    async def list(self, dataset: str) -> list[DerivedColumn]:
        return await self.executor.do("GET", self._path(dataset), response_type=list[DerivedColumn])

    async def get(self, dataset: str, column_id: str) -> DerivedColumn:
        return await self.executor.do("GET", self._path(dataset, column_id), response_type=DerivedColumn)

    async def get_by_alias(self, dataset: str, alias: str) -> DerivedColumn:
        path = f"{self._path(dataset)}?{urlencode({'alias': alias})}"
        return await self.executor.do("GET", path, response_type=DerivedColumn)

    async def create(self, dataset: str, column: DerivedColumn) -> DerivedColumn:
        return await self.executor.do("POST", self._path(dataset), column, response_type=DerivedColumn)

    async def update(self, dataset: str, column: DerivedColumn) -> DerivedColumn:
        return await self.executor.do("PUT", self._path(dataset, column.id), column, response_type=DerivedColumn)

    async def delete(self, dataset: str, column_id: str) -> None:
        await self.executor.do("DELETE", self._path(dataset, column_id))

    @staticmethod
    def _path(dataset: str, column_id: str | None = None) -> str:
        path = f"/1/derived_columns/{url_encode_dataset(dataset)}"
        return f"{path}/{column_id}" if column_id is not None else path
