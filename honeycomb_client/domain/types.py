"""Domain types and aliases."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypedDict

# JSON-serializable types (recursive)
if TYPE_CHECKING:
    JsonValue = str | int | float | bool | None | dict[str, "JsonValue"] | list["JsonValue"]
else:
    JsonValue = str | int | float | bool | None | dict | list

# Scalar filter/having value as it travels on the wire
ScalarValue = str | int | float | bool


class RateLimitDict(TypedDict):
    """Parsed RateLimit header structure."""
    limit: int
    remaining: int
    reset: int
