from __future__ import annotations

import enum
from types import MappingProxyType
from typing import Mapping


class IndexId(str, enum.Enum):
    SP500 = "SP500"
    NASDAQ = "NASDAQ"
    DOW = "DOW"
    VIX = "VIX"
    US10Y = "US10Y"


# FMP tickers for the tracked indices.
INDEX_SYMBOLS: Mapping[IndexId, str] = MappingProxyType(
    {
        IndexId.SP500: "^GSPC",
        IndexId.NASDAQ: "^IXIC",
        IndexId.DOW: "^DJI",
        IndexId.VIX: "^VIX",
        IndexId.US10Y: "^TNX",
    }
)

_IDS_BY_SYMBOL: Mapping[str, IndexId] = MappingProxyType(
    {symbol: index_id for index_id, symbol in INDEX_SYMBOLS.items()}
)


def identifier_for_symbol(symbol: object) -> IndexId | None:
    if not isinstance(symbol, str):
        return None
    return _IDS_BY_SYMBOL.get(symbol)


def joined_symbols() -> str:
    return ",".join(INDEX_SYMBOLS.values())
