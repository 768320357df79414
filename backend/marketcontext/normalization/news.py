from __future__ import annotations

import logging
from typing import Any, Mapping

from marketcontext.schemas.market import NewsItem

logger = logging.getLogger(__name__)

MAX_NEWS_ITEMS = 5
SUMMARY_MAX_CHARS = 200
TRUNCATION_SUFFIX = "..."


def summarize(text: Any) -> str:
    if text is None:
        return ""
    text = str(text)
    if len(text) <= SUMMARY_MAX_CHARS:
        return text
    return text[:SUMMARY_MAX_CHARS] + TRUNCATION_SUFFIX


def _build_item(raw: Mapping[str, Any]) -> NewsItem:
    return NewsItem(
        title=raw.get("title"),
        site=raw.get("site"),
        published_at=raw.get("publishedDate"),
        url=raw.get("url"),
        summary=summarize(raw.get("text")),
    )


def normalize_news(raw_articles: Any) -> list[NewsItem] | None:
    """Keep the first articles in provider order, with short summaries."""
    if not isinstance(raw_articles, list):
        logger.warning(
            "News payload is %s, expected a list", type(raw_articles).__name__
        )
        return None
    if not raw_articles:
        return None

    items: list[NewsItem] = []
    for raw in raw_articles[:MAX_NEWS_ITEMS]:
        if not isinstance(raw, Mapping):
            logger.warning("News article of type %s, dropping news", type(raw).__name__)
            return None
        items.append(_build_item(raw))
    return items
