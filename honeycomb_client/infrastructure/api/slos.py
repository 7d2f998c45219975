"""SLOs API adapter."""

from honeycomb_client.application.dto.alerting import SLO
from honeycomb_client.domain.ports import SLOsPort
from honeycomb_client.infrastructure.http.executor import RequestExecutor, url_encode_dataset


class SLOsAPI(SLOsPort):
    """SLOs backed by the Honeycomb API."""

    def __init__(self, executor: RequestExecutor) -> None:
        self.executor = executor

    async def list(self, dataset: str) -> list[SLO]:
        return await self.executor.do("GET", self._path(dataset), response_type=list[SLO])

    async def get(self, dataset: str, slo_id: str) -> SLO:
        return await self.executor.do("GET", self._path(dataset, slo_id), response_type=SLO)

    async def create(self, dataset: str, slo: SLO) -> SLO:
        return await self.executor.do("POST", self._path(dataset), slo, response_type=SLO)

    async def update(self, dataset: str, slo: SLO) -> SLO:
        return await self.executor.do("PUT", self._path(dataset, slo.id), slo, response_type=SLO)

    async def delete(self, dataset: str, slo_id: str) -> None:
        await self.executor.do("DELETE", self._path(dataset, slo_id))

    @staticmethod
    def _path(dataset: str, slo_id: str | None = None) -> str:
        path = f"/1/slos/{url_encode_dataset(dataset)}"
        return f"{path}/{slo_id}" if slo_id is not None else path
