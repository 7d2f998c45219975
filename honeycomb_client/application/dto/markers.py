"""Marker DTOs.

API docs: https://docs.honeycomb.io/api/markers/
"""

from datetime import datetime

from pydantic import BaseModel


class Marker(BaseModel):
    """A marker placed on a dataset's graphs."""

    id: str | None = None
    # Unix time, defaults to when the request was received
    start_time: int | None = None
    end_time: int | None = None
    message: str | None = None
    # Marker identifier, e.g. 'deploy'
    type: str | None = None
    url: str | None = None
    # Set by the API
    created_at: datetime | None = None
    updated_at: datetime | None = None
    color: str | None = None
