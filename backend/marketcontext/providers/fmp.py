from __future__ import annotations

import logging

import httpx

from marketcontext.config.settings import settings
from marketcontext.indices import joined_symbols
from marketcontext.schemas.provider import ProviderResponse

logger = logging.getLogger(__name__)

_QUOTE_PATH = "/quote/{symbols}"
_NEWS_PATH = "/stock_news"


def _build_url(path: str) -> str:
    base_url = settings.providers.fmp_base_url.rstrip("/")
    return f"{base_url}{path}"


async def _get_array(
    client: httpx.AsyncClient, endpoint: str, path: str, params: dict[str, str]
) -> ProviderResponse:
    try:
        response = await client.get(_build_url(path), params=params)
    except httpx.HTTPError as exc:
        logger.warning("FMP %s request failed: %s", endpoint, exc.__class__.__name__)
        return ProviderResponse(provider="fmp", endpoint=endpoint, status="transport_error")

    if not response.is_success:
        logger.warning("FMP %s API returned %s", endpoint, response.status_code)
        status = "rate_limited" if response.status_code == 429 else "rejected"
        return ProviderResponse(
            provider="fmp",
            endpoint=endpoint,
            status=status,
            status_code=response.status_code,
        )

    try:
        payload = response.json()
    except ValueError:
        logger.warning("FMP %s API returned a body that is not JSON", endpoint)
        return ProviderResponse(
            provider="fmp",
            endpoint=endpoint,
            status="shape_mismatch",
            status_code=response.status_code,
        )

    if not isinstance(payload, list):
        logger.warning(
            "FMP %s API returned %s, expected a list", endpoint, type(payload).__name__
        )
        return ProviderResponse(
            provider="fmp",
            endpoint=endpoint,
            status="shape_mismatch",
            status_code=response.status_code,
        )

    if not payload:
        logger.warning("FMP %s API returned no records", endpoint)
        return ProviderResponse(
            provider="fmp",
            endpoint=endpoint,
            status="empty",
            status_code=response.status_code,
        )

    return ProviderResponse(
        provider="fmp",
        endpoint=endpoint,
        status_code=response.status_code,
        payload=payload,
    )


async def fetch_index_quotes(client: httpx.AsyncClient, api_key: str | None) -> ProviderResponse:
    if not api_key:
        return ProviderResponse(provider="fmp", endpoint="quote", status="missing_key")
    return await _get_array(
        client,
        "quote",
        _QUOTE_PATH.format(symbols=joined_symbols()),
        {"apikey": api_key},
    )


async def fetch_market_news(client: httpx.AsyncClient, api_key: str | None) -> ProviderResponse:
    if not api_key:
        return ProviderResponse(provider="fmp", endpoint="news", status="missing_key")
    return await _get_array(
        client,
        "news",
        _NEWS_PATH,
        {"limit": str(settings.providers.news_request_limit), "apikey": api_key},
    )
