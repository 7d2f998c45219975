"""Burn alerts API adapter."""

from urllib.parse import urlencode

from honeycomb_client.application.dto.alerting import BurnAlert
from honeycomb_client.domain.ports import BurnAlertsPort
from honeycomb_client.infrastructure.http.executor import RequestExecutor, url_encode_dataset


class BurnAlertsAPI(BurnAlertsPort):
    """SLO burn alerts backed by the Honeycomb API."""

    def __init__(self, executor: RequestExecutor) -> None:
        self.executor = executor

    async def list_for_slo(self, dataset: str, slo_id: str) -> list[BurnAlert]:
        path = f"{self._path(dataset)}?{urlencode({'slo_id': slo_id})}"
        return await self.executor.do("GET", path, response_type=list[BurnAlert])

    async def get(self, dataset: str, alert_id: str) -> BurnAlert:
        return await self.executor.do("GET", self._path(dataset, alert_id), response_type=BurnAlert)

    async def create(self, dataset: str, alert: BurnAlert) -> BurnAlert:
        return await self.executor.do("POST", self._path(dataset), alert, response_type=BurnAlert)

    async def update(self, dataset: str, alert: BurnAlert) -> BurnAlert:
        return await self.executor.do("PUT", self._path(dataset, alert.id), alert, response_type=BurnAlert)

    async def delete(self, dataset: str, alert_id: str) -> None:
        await self.executor.do("DELETE", self._path(dataset, alert_id))

    @staticmethod
    def _path(dataset: str, alert_id: str | None = None) -> str:
        path = f"/1/burn_alerts/{url_encode_dataset(dataset)}"
        return f"{path}/{alert_id}" if alert_id is not None else path
