import asyncio
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, List

import httpx
import pytest

from awattar_api import AwattarClient

HOUR_MS = 3_600_000


def make_item(start_ms: int, marketprice: float = 42.09, unit: str = "Eur/MWh", length_ms: int = HOUR_MS) -> Dict:
    return {
        "start_timestamp": start_ms,
        "end_timestamp": start_ms + length_ms,
        "marketprice": marketprice,
        "unit": unit,
    }


def hourly_items(start_ms: int, end_ms: int, prices: List[float] = None) -> List[Dict]:
    """Consecutive hourly items covering ``[start_ms, end_ms)`` like the live API."""
    items = []
    for index, slot_start in enumerate(range(start_ms, end_ms, HOUR_MS)):
        price = prices[index] if prices else 40.0 + index
        items.append(make_item(slot_start, price))
    return items


def millis(instant: datetime) -> int:
    return int((instant - datetime(1970, 1, 1, tzinfo=timezone.utc)) / timedelta(milliseconds=1))


class Recorder:
    """Collects the requests a mock transport receives."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.handler = handler
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)


def range_handler(request: httpx.Request) -> httpx.Response:
    """Answer with hourly slots for the requested start/end parameters."""
    start_ms = int(request.url.params["start"])
    end_ms = int(request.url.params["end"])
    return httpx.Response(200, json={"object": "list", "data": hourly_items(start_ms, end_ms)})


@pytest.fixture
def mock_client():
    """Build an AwattarClient whose blocking and async clients use a mock transport."""
    opened = []

    def factory(handler: Callable[[httpx.Request], httpx.Response], headers: Dict[str, str] = None):
        recorder = Recorder(handler)
        transport = httpx.MockTransport(recorder)
        http_client = httpx.Client(transport=transport)
        async_http_client = httpx.AsyncClient(transport=transport)
        opened.append((http_client, async_http_client))
        client = AwattarClient(
            headers=headers,
            http_client=http_client,
            async_http_client=async_http_client,
        )
        return client, recorder

    yield factory

    for http_client, async_http_client in opened:
        http_client.close()
        asyncio.run(async_http_client.aclose())
