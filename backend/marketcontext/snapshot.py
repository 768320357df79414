"""Snapshot aggregation over the FMP quote and news endpoints.

Quotes gate the snapshot: without usable quotes the result is ``None``.
News is supplementary and may be ``None`` inside a present snapshot. No
exception leaves :func:`fetch_market_snapshot`.
"""

from __future__ import annotations

import datetime
import logging

import httpx

from marketcontext.config.settings import settings
from marketcontext.indices import IndexId
from marketcontext.normalization.news import normalize_news
from marketcontext.normalization.quotes import normalize_quotes
from marketcontext.providers import fmp
from marketcontext.schemas.market import MarketSnapshot, NewsItem, QuoteRecord

logger = logging.getLogger(__name__)


async def _quote_phase(
    client: httpx.AsyncClient, api_key: str
) -> dict[IndexId, QuoteRecord] | None:
    try:
        response = await fmp.fetch_index_quotes(client, api_key)
        if not response.ok:
            return None
        return normalize_quotes(response.payload)
    except Exception:
        logger.exception("FMP index quotes phase failed")
        return None


async def _news_phase(client: httpx.AsyncClient, api_key: str) -> list[NewsItem] | None:
    try:
        response = await fmp.fetch_market_news(client, api_key)
        if not response.ok:
            return None
        return normalize_news(response.payload)
    except Exception:
        logger.exception("FMP market news phase failed")
        return None


async def _collect(client: httpx.AsyncClient, api_key: str) -> MarketSnapshot | None:
    quotes = await _quote_phase(client, api_key)
    if quotes is None:
        logger.warning("No usable index quotes, market snapshot unavailable")
        return None

    news = await _news_phase(client, api_key)
    if news is None:
        logger.warning("Market news unavailable, continuing with quotes only")

    return MarketSnapshot(
        indices=quotes,
        news=news,
        timestamp=datetime.datetime.now(datetime.UTC).isoformat(),
    )


async def fetch_market_snapshot(
    api_key: str | None, client: httpx.AsyncClient | None = None
) -> MarketSnapshot | None:
    if not api_key:
        logger.warning("FMP API key not configured")
        return None

    try:
        if client is not None:
            return await _collect(client, api_key)
        async with httpx.AsyncClient(
            timeout=settings.providers.request_timeout_seconds
        ) as owned_client:
            return await _collect(owned_client, api_key)
    except Exception:
        logger.exception("Market snapshot assembly failed")
        return None
