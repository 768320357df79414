from typing import Optional

from fastapi import APIRouter

from marketcontext.config.settings import settings
from marketcontext.schemas.market import MarketSnapshot
from marketcontext.snapshot import fetch_market_snapshot

router = APIRouter()


@router.get("/market/snapshot", response_model=Optional[MarketSnapshot])
async def market_snapshot_endpoint() -> Optional[MarketSnapshot]:
    """Current index quotes and headlines, or null when quotes are unavailable."""
    return await fetch_market_snapshot(settings.providers.fmp_api_key)
