from __future__ import annotations

import datetime
import logging
from typing import Any, Mapping

from pydantic import TypeAdapter, ValidationError

from marketcontext.indices import IndexId, identifier_for_symbol
from marketcontext.schemas.market import QuoteRecord

logger = logging.getLogger(__name__)

_DATETIME = TypeAdapter(datetime.datetime)


def to_iso_timestamp(value: Any) -> str:
    """Convert an FMP timestamp to ISO-8601.

    Accepts epoch seconds (milliseconds above 2e10) or a date string. Naive
    values are taken as UTC. Raises ``ValidationError`` when the value cannot
    be read as a datetime.
    """
    parsed = _DATETIME.validate_python(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=datetime.UTC)
    return parsed.isoformat()


def _build_quote(identifier: IndexId, raw: Mapping[str, Any]) -> QuoteRecord:
    return QuoteRecord(
        identifier=identifier,
        symbol=raw["symbol"],
        price=raw.get("price"),
        change=raw.get("change"),
        change_percent=raw.get("changesPercentage"),
        day_low=raw.get("dayLow"),
        day_high=raw.get("dayHigh"),
        volume=raw.get("volume"),
        timestamp=to_iso_timestamp(raw.get("timestamp")),
    )


def normalize_quotes(raw_records: Any) -> dict[IndexId, QuoteRecord] | None:
    if not isinstance(raw_records, list):
        logger.warning(
            "Quote payload is %s, expected a list", type(raw_records).__name__
        )
        return None

    quotes: dict[IndexId, QuoteRecord] = {}
    for raw in raw_records:
        if not isinstance(raw, Mapping):
            logger.warning("Skipping quote record of type %s", type(raw).__name__)
            continue
        identifier = identifier_for_symbol(raw.get("symbol"))
        if identifier is None:
            continue
        try:
            quotes[identifier] = _build_quote(identifier, raw)
        except ValidationError as exc:
            logger.warning(
                "Skipping quote for %s, unreadable timestamp: %d validation error(s)",
                raw.get("symbol"),
                exc.error_count(),
            )

    return quotes or None
