"""Request executor shared by every API resource adapter."""

import asyncio
import json
from functools import lru_cache
from typing import Any, TypeVar

import httpx
import structlog
from pydantic import BaseModel, TypeAdapter, ValidationError
from tenacity import AsyncRetrying, RetryCallState, retry_if_exception, retry_if_result, stop_after_attempt

from honeycomb_client.domain.errors import ConfigurationError, SerializationError
from honeycomb_client.infrastructure.config.settings import Settings
from honeycomb_client.infrastructure.http.error_decoder import decode_error
from honeycomb_client.infrastructure.http.retry_policy import (
    RetryPolicy,
    is_retryable_error,
    is_retryable_response,
    wait_rate_limit_aware,
)
from honeycomb_client.infrastructure.observability.metrics import (
    api_request_duration_seconds,
    api_request_retries,
    api_requests,
    status_class,
)

logger = structlog.get_logger()

T = TypeVar("T")

HEADER_API_KEY = "X-Honeycomb-Team"


def url_encode_dataset(dataset: str) -> str:
    """Sanitize a dataset name for use in a URL path."""
    return dataset.replace("/", "-")


@lru_cache(maxsize=None)
def _adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


def _encode_body(body: Any) -> bytes | None:
    if body is None:
        return None
    try:
        if isinstance(body, BaseModel):
            return body.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")
        return json.dumps(body).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise SerializationError(f"failed to encode request body: {e}") from e


def _last_outcome(retry_state: RetryCallState) -> httpx.Response:
    """Hand back the final attempt once retries are exhausted.

    Returns the last response, or re-raises the last transport error.
    """
    return retry_state.outcome.result()


class RequestExecutor:
    """Sends API requests with retries and decodes their responses.

    Holds a single pooled HTTP client; close it with aclose() or use the
    executor as an async context manager.
    """

    def __init__(
        self,
        settings: Settings,
        policy: RetryPolicy | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the HTTP client."""
        if not settings.api_key:
            raise ConfigurationError("API key must be configured")

        try:
            base_url = httpx.URL(settings.api_url)
        except httpx.InvalidURL as e:
            raise ConfigurationError(f"unable to parse API URL {settings.api_url!r}: {e}") from e
        if base_url.scheme not in ("http", "https") or not base_url.host:
            raise ConfigurationError(f"API URL must be an absolute http(s) URL, got {settings.api_url!r}")

        self.settings = settings
        self.policy = policy or RetryPolicy(
            min_wait=settings.retry_min_wait_seconds,
            max_wait=settings.retry_max_wait_seconds,
            max_attempts=settings.retry_max_attempts,
        )
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers={
                "Content-Type": "application/json",
                "User-Agent": settings.user_agent,
                HEADER_API_KEY: settings.api_key,
            },
            timeout=settings.request_timeout_seconds,
            transport=transport,
        )

    async def __aenter__(self) -> "RequestExecutor":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the pooled HTTP client."""
        await self._client.aclose()

    async def send(
        self,
        method: str,
        path: str,
        body: Any = None,
        *,
        timeout: float | None = None,
    ) -> httpx.Response:
        """Send a request, retrying transient failures.

        The path is resolved relative to the API URL, keeping any path
        prefix it carries. Once retries are exhausted the last response is
        returned, whatever its status, or the last transport error raised.

        Args:
            method: HTTP method.
            path: Request path, optionally with a query string.
            body: Pydantic model or JSON-serializable value.
            timeout: Overall deadline in seconds for all attempts.
        """
        content = _encode_body(body)
        attempt_number = 0

        async def attempt() -> httpx.Response:
            nonlocal attempt_number
            attempt_number += 1
            try:
                response = await self._client.request(method, path, content=content)
            except httpx.TransportError as e:
                api_requests.labels(method=method, status_class=status_class(None)).inc()
                if self.settings.debug:
                    logger.debug(
                        "api_request_error",
                        method=method,
                        path=path,
                        attempt=attempt_number,
                        error=str(e),
                    )
                raise

            api_requests.labels(method=method, status_class=status_class(response.status_code)).inc()
            if self.settings.debug:
                logger.debug(
                    "api_response",
                    method=method,
                    url=str(response.request.url),
                    status_code=response.status_code,
                    attempt=attempt_number,
                )
            return response

        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.policy.max_attempts),
            wait=wait_rate_limit_aware(self.policy),
            retry=retry_if_exception(is_retryable_error) | retry_if_result(is_retryable_response),
            before_sleep=self._before_sleep,
            retry_error_callback=_last_outcome,
        )

        with api_request_duration_seconds.labels(method=method).time():
            async with asyncio.timeout(timeout):
                return await retrying(attempt)

    async def do(
        self,
        method: str,
        path: str,
        body: Any = None,
        response_type: type[T] | Any = None,
        *,
        timeout: float | None = None,
    ) -> T | None:
        """Send a request and decode its response.

        Raises:
            DetailedError: The API answered with a non-2xx status.
            SerializationError: The body could not be encoded, or the
                response could not be decoded into response_type.
        """
        response = await self.send(method, path, body, timeout=timeout)

        if not response.is_success:
            error = decode_error(response)
            logger.debug(
                "api_request_failed",
                method=method,
                path=path,
                status_code=error.status,
                request_id=error.request_id,
            )
            raise error

        if response_type is None:
            return None
        try:
            return _adapter(response_type).validate_json(response.content)
        except ValidationError as e:
            raise SerializationError(f"failed to decode response of {method} {path}: {e}") from e

    def _before_sleep(self, retry_state: RetryCallState) -> None:
        outcome = retry_state.outcome
        if outcome.failed:
            reason = type(outcome.exception()).__name__
        else:
            reason = str(outcome.result().status_code)

        api_request_retries.labels(reason=reason).inc()
        logger.warning(
            "request_retry_scheduled",
            attempt=retry_state.attempt_number,
            wait_seconds=round(retry_state.next_action.sleep, 3),
            reason=reason,
        )
