"""Auth API adapter."""

from honeycomb_client.application.dto.auth import AuthMetadata
from honeycomb_client.domain.ports import AuthPort
from honeycomb_client.infrastructure.http.executor import RequestExecutor


class AuthAPI(AuthPort):
    """Lists the authorizations of the configured API key."""

    def __init__(self, executor: RequestExecutor) -> None:
        self.executor = executor

    async def list(self) -> AuthMetadata:
        return await self.executor.do("GET", "/1/auth", response_type=AuthMetadata)
