"""Recipients API adapter."""

from honeycomb_client.application.dto.alerting import Recipient
from honeycomb_client.application.services.shaping import shape_recipient
from honeycomb_client.domain.ports import RecipientsPort
from honeycomb_client.infrastructure.http.executor import RequestExecutor


class RecipientsAPI(RecipientsPort):
    """Notification recipients backed by the Honeycomb API."""

    def __init__(self, executor: RequestExecutor) -> None:
        self.executor = executor

    async def list(self) -> list[Recipient]:
        return await self.executor.do("GET", "/1/recipients", response_type=list[Recipient])

    async def get(self, recipient_id: str) -> Recipient:
        return await self.executor.do("GET", f"/1/recipients/{recipient_id}", response_type=Recipient)

    async def create(self, recipient: Recipient) -> Recipient:
        return await self.executor.do("POST", "/1/recipients", shape_recipient(recipient), response_type=Recipient)

    async def update(self, recipient: Recipient) -> Recipient:
        path = f"/1/recipients/{recipient.id}"
        return await self.executor.do("PUT", path, shape_recipient(recipient), response_type=Recipient)

    async def delete(self, recipient_id: str) -> None:
        await self.executor.do("DELETE", f"/1/recipients/{recipient_id}")
