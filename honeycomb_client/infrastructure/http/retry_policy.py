"""Retry policy for API requests."""

import asyncio
import random
from dataclasses import dataclass
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime

import httpx
from tenacity import RetryCallState
from tenacity.wait import wait_base, wait_exponential

from honeycomb_client.domain.types import RateLimitDict

RETRYABLE_STATUS_CODES = frozenset({429, 502, 504})
TOO_MANY_REQUESTS = 429

# IETF draft header: "limit=X, remaining=Y, reset=Z"
HEADER_RATE_LIMIT = "RateLimit"
HEADER_RETRY_AFTER = "Retry-After"


@dataclass(frozen=True)
class RetryPolicy:
    """Backoff floor/ceiling and attempt cap."""

    min_wait: float = 0.2
    max_wait: float = 10.0
    max_attempts: int = 15


def should_retry(response: httpx.Response | None, error: BaseException | None) -> bool:
    """Decide whether an attempt should be retried."""
    # never retry past cancellation or an expired deadline
    if isinstance(error, (asyncio.CancelledError, TimeoutError)):
        return False
    if error is not None:
        return isinstance(error, httpx.TransportError)
    if response is not None:
        return response.status_code in RETRYABLE_STATUS_CODES
    return False


def is_retryable_error(error: BaseException) -> bool:
    """tenacity predicate for failed attempts."""
    return should_retry(None, error)


def is_retryable_response(response: httpx.Response) -> bool:
    """tenacity predicate for attempts that produced a response."""
    return should_retry(response, None)


def parse_rate_limit_header(value: str) -> RateLimitDict:
    """Parse a RateLimit header into its limit, remaining and reset parts."""
    members: dict[str, int] = {}
    for item in value.split(","):
        key, sep, raw = item.strip().partition("=")
        if not sep:
            raise ValueError(f"invalid ratelimit header: {value!r}")
        # drop structured field parameters, e.g. "reset=10;w=60"
        raw = raw.split(";", 1)[0].strip()
        try:
            members[key.strip().lower()] = int(raw)
        except ValueError as e:
            raise ValueError(f"invalid ratelimit header member {key!r}: {raw!r}") from e

    for key in ("limit", "remaining", "reset"):
        if key not in members:
            raise ValueError(f"could not get {key!r} from ratelimit header")
    return RateLimitDict(limit=members["limit"], remaining=members["remaining"], reset=members["reset"])


def _retry_after_seconds(value: str, now: datetime) -> float | None:
    value = value.strip()
    if value.isdigit():
        return float(value)
    try:
        retry_at = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        try:
            retry_at = parsedate_to_datetime(value)
        except (TypeError, ValueError):
            return None
    if retry_at.tzinfo is None:
        retry_at = retry_at.replace(tzinfo=timezone.utc)
    return (retry_at - now).total_seconds()


def rate_limit_reset(response: httpx.Response, now: datetime | None = None) -> float | None:
    """Seconds the server asks us to wait before retrying, if it says so."""
    if value := response.headers.get(HEADER_RATE_LIMIT):
        try:
            reset = parse_rate_limit_header(value)["reset"]
        except ValueError:
            reset = 0
        if reset > 0:
            return float(reset)

    if value := response.headers.get(HEADER_RETRY_AFTER):
        seconds = _retry_after_seconds(value, now or datetime.now(timezone.utc))
        if seconds is not None and seconds > 0:
            return seconds
    return None


class wait_rate_limit_aware(wait_base):
    """Exponential backoff that honours rate-limit hints on 429 responses.

    The wait is always kept within the policy's floor and ceiling.
    """

    def __init__(self, policy: RetryPolicy) -> None:
        self.policy = policy
        self._exponential = wait_exponential(multiplier=policy.min_wait, min=policy.min_wait, max=policy.max_wait)

    def __call__(self, retry_state: RetryCallState) -> float:
        wait = self._exponential(retry_state)

        outcome = retry_state.outcome
        if outcome is not None and not outcome.failed:
            response = outcome.result()
            if isinstance(response, httpx.Response) and response.status_code == TOO_MANY_REQUESTS:
                reset = rate_limit_reset(response)
                if reset is not None:
                    # jitter keeps a herd of clients from retrying in lockstep
                    jitter = random.uniform(0, self.policy.min_wait)
                    wait = max(wait, reset + jitter)

        return min(max(wait, self.policy.min_wait), self.policy.max_wait)
