from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingTransport(httpx.MockTransport):
    def __init__(self, handler: Handler) -> None:
        self.requests: list[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


def route_fmp(
    quote: Handler | httpx.Response, news: Handler | httpx.Response
) -> Handler:
    """Dispatch quote and news requests to separate canned responses."""

    def handler(request: httpx.Request) -> httpx.Response:
        target = quote if "/quote/" in request.url.path else news
        if isinstance(target, httpx.Response):
            return target
        return target(request)

    return handler


@pytest.fixture
def transport_factory() -> Callable[[Handler], RecordingTransport]:
    return RecordingTransport


@pytest.fixture
def fmp_router() -> Callable[..., Handler]:
    return route_fmp


@pytest.fixture
def gspc_quote() -> dict:
    return {
        "symbol": "^GSPC",
        "price": 5000,
        "change": 10,
        "changesPercentage": 0.2,
        "dayLow": 4950,
        "dayHigh": 5010,
        "volume": 1000000,
        "timestamp": 1700000000,
    }


@pytest.fixture
def articles() -> list[dict]:
    return [
        {
            "title": f"Headline {index}",
            "site": "example.com",
            "publishedDate": f"2024-01-0{index + 1} 09:30:00",
            "url": f"https://example.com/{index}",
            "text": f"Body {index}",
        }
        for index in range(8)
    ]
