from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel

from marketcontext.indices import IndexId


class QuoteRecord(BaseModel):
    # Numeric fields are copied from the provider untouched.
    identifier: IndexId
    symbol: str
    price: Any = None
    change: Any = None
    change_percent: Any = None
    day_low: Any = None
    day_high: Any = None
    volume: Any = None
    timestamp: str


class NewsItem(BaseModel):
    title: Any = None
    site: Any = None
    published_at: Any = None
    url: Any = None
    summary: str = ""


class MarketSnapshot(BaseModel):
    """Descriptive market context. Carries no trading recommendation."""

    indices: dict[IndexId, QuoteRecord]
    news: Optional[list[NewsItem]] = None
    timestamp: str
