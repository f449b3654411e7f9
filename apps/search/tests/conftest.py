"""Shared fixtures and fakes for airport search tests."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import httpx
import pytest

from flight_alert_core.schemas import Airport
from flight_alert_search.client import AirportClient

if TYPE_CHECKING:
    from collections.abc import Callable


def make_airport(iata_code: str, **overrides: object) -> Airport:
    fields: dict[str, object] = {
        "name": f"{iata_code} International",
        "city_name": f"{iata_code} City",
        "country_name": "Testland",
    }
    fields.update(overrides)
    return Airport(iata_code=iata_code, **fields)


class FakeAirportClient:
    """Stands in for AirportClient; each call blocks until released.

    ``responses`` maps a query to a result list or an exception instance.
    """

    def __init__(self, responses: dict[str, object] | None = None) -> None:
        self.responses = responses or {}
        self.calls: list[tuple[str, int, int]] = []
        self.gates: dict[str, asyncio.Event] = {}
        self.auto_release = True

    def release(self, query: str) -> None:
        self.gates.setdefault(query, asyncio.Event()).set()

    async def search(self, query: str, limit: int = 10, page: int = 1) -> list[Airport]:
        self.calls.append((query, limit, page))
        if not self.auto_release:
            await self.gates.setdefault(query, asyncio.Event()).wait()
        else:
            await asyncio.sleep(0)
        outcome = self.responses.get(query, [])
        if isinstance(outcome, BaseException):
            raise outcome
        return list(outcome)  # type: ignore[arg-type]

    @property
    def queries(self) -> list[str]:
        return [q for q, _, _ in self.calls]


@pytest.fixture
def fake_client() -> FakeAirportClient:
    return FakeAirportClient()


@pytest.fixture
async def mock_client():
    """Factory fixture: an AirportClient whose HTTP layer is *handler*."""
    clients: list[AirportClient] = []

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> AirportClient:
        client = AirportClient(
            base_url="https://airports.test",
            transport=httpx.MockTransport(handler),
        )
        clients.append(client)
        return client

    yield _make

    for client in clients:
        await client.close()


def json_handler(
    body: object, status_code: int = 200
) -> Callable[[httpx.Request], httpx.Response]:
    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=body)

    return _handler
