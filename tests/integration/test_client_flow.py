"""Integration test driving the client against an in-memory fake API."""

import itertools
import json

import httpx
import pytest

from honeycomb_client.application.dto.alerting import Trigger, TriggerThreshold
from honeycomb_client.application.dto.query_spec import FilterSpec, QuerySpec
from honeycomb_client.application.use_cases.ensure_query import run as ensure_query
from honeycomb_client.application.use_cases.read_or_forget import run as read_or_forget
from honeycomb_client.domain.enums import FilterOp, TriggerThresholdOp
from honeycomb_client.infrastructure.config.settings import Settings
from honeycomb_client.infrastructure.http.retry_policy import RetryPolicy
from honeycomb_client.infrastructure.runtime.container import HoneycombClient

SERVER_QUERY_DEFAULTS = {
    "calculations": [{"op": "COUNT"}],
    "filter_combination": "AND",
    "limit": 1000,
    "time_range": 7200,
    "granularity": 0,
}


class InMemoryHoneycomb:
    """Stores queries and triggers, filling in defaults like the real API."""

    def __init__(self) -> None:
        self.ids = (f"id{n}" for n in itertools.count(1))
        self.queries: dict[str, dict] = {}
        self.triggers: dict[str, dict] = {}
        # the first trigger request is rate limited
        self.throttle = True

    def __call__(self, request: httpx.Request) -> httpx.Response:
        if request.headers.get("X-Honeycomb-Team") != "integration-key":
            return httpx.Response(401, json={"status": 401, "error": "unknown API key - check your credentials"})

        parts = request.url.path.strip("/").split("/")
        resource = parts[1]
        body = json.loads(request.content) if request.content else None

        if resource == "queries":
            return self._queries(request.method, parts, body)
        if resource == "triggers":
            if self.throttle:
                self.throttle = False
                return httpx.Response(429, headers={"RateLimit": "limit=10, remaining=0, reset=0"})
            return self._triggers(request.method, parts, body)
        return httpx.Response(404, json={"error": "not found"})

    def _queries(self, method: str, parts: list[str], body: dict | None) -> httpx.Response:
        if method == "POST":
            query_id = next(self.ids)
            self.queries[query_id] = {**SERVER_QUERY_DEFAULTS, **body, "id": query_id}
            return httpx.Response(200, json=self.queries[query_id])
        if parts[3] in self.queries:
            return httpx.Response(200, json=self.queries[parts[3]])
        return httpx.Response(404, json={"error": "Query not found"})

    def _triggers(self, method: str, parts: list[str], body: dict | None) -> httpx.Response:
        if method == "POST":
            if "query" in body and "query_id" in body:
                return httpx.Response(
                    422,
                    json={
                        "error": "invalid trigger",
                        "type_detail": [{"code": "invalid", "field": "query", "description": "conflicts with query_id"}],
                    },
                )
            trigger_id = next(self.ids)
            self.triggers[trigger_id] = {**body, "id": trigger_id}
            return httpx.Response(201, json=self.triggers[trigger_id])
        if method == "DELETE":
            self.triggers.pop(parts[3], None)
            return httpx.Response(204)
        if parts[3] in self.triggers:
            return httpx.Response(200, json=self.triggers[parts[3]])
        return httpx.Response(404, json={"error": "Trigger not found"})


@pytest.mark.asyncio
async def test_query_and_trigger_lifecycle():
    """Test creating, reusing and forgetting resources end to end."""
    server = InMemoryHoneycomb()
    settings = Settings(api_key="integration-key", api_url="https://api.example.com", _env_file=None)

    async with HoneycombClient.from_settings(
        settings,
        transport=httpx.MockTransport(server),
        policy=RetryPolicy(min_wait=0, max_wait=0),
    ) as client:
        desired = QuerySpec(
            filters=[
                FilterSpec(column="service.name", op=FilterOp.EQUALS, value="checkout"),
                FilterSpec(column="error", op=FilterOp.EXISTS),
            ],
            breakdowns=["http.route"],
        )

        created = await ensure_query(client.queries, "prod/checkout", desired)
        # the server copy carries defaults, but is still the same query
        reused = await ensure_query(client.queries, "prod/checkout", desired, created.id)
        assert reused.id == created.id
        assert len(server.queries) == 1

        trigger = await client.triggers.create(
            "prod/checkout",
            Trigger(
                name="Checkout errors",
                query_id=created.id,
                query=desired,
                threshold=TriggerThreshold(op=TriggerThresholdOp.GREATER_THAN, value=5),
                frequency=300,
            ),
        )
        assert trigger.query_id == created.id
        assert trigger.query is None

        await client.triggers.delete("prod/checkout", trigger.id)
        assert await read_or_forget(client.triggers.get("prod/checkout", trigger.id)) is None
