"""Query annotation and query result DTOs."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from honeycomb_client.domain.types import JsonValue


class QueryAnnotation(BaseModel):
    """Name and description attached to a saved query.

    API docs: https://docs.honeycomb.io/api/query-annotations/
    """

    id: str | None = None
    name: str
    description: str | None = None
    query_id: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class QueryResultRequest(BaseModel):
    """Request to run a saved query."""

    model_config = ConfigDict(populate_by_name=True)

    query_id: str
    disable_series: bool | None = None
    limit: int | None = None


class QueryResultSeries(BaseModel):
    """One point of the time series of a query result."""

    time: datetime
    data: dict[str, JsonValue] = Field(default_factory=dict)


class QueryResultRow(BaseModel):
    """One row of the summary table of a query result."""

    data: dict[str, JsonValue] = Field(default_factory=dict)


class QueryResultData(BaseModel):
    """Resulting data of a query."""

    series: list[QueryResultSeries] | None = None
    results: list[QueryResultRow] | None = None


class QueryResultLinks(BaseModel):
    """Permalinks to a query result."""

    model_config = ConfigDict(populate_by_name=True)

    url: str | None = Field(None, alias="query_url")
    graph_url: str | None = Field(None, alias="graph_image_url")


class QueryResult(BaseModel):
    """A query result.

    API docs: https://docs.honeycomb.io/api/query-results/
    """

    id: str
    # True once the query has completed and the results are populated
    complete: bool = False
    data: QueryResultData | None = None
    links: QueryResultLinks | None = None
