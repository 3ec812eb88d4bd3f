# services/hotel_search.py
"""
Hotel Search Service

Asks every provider for a quote in parallel, drops the ones that fail
and returns the rows cheapest first.
"""

import asyncio
import logging
import random
from typing import List, Optional

from app.core.config import settings
from schemas.search import SearchQuery, SearchResponse, SearchResultItem
from services.providers import BaseProvider, get_default_providers

logger = logging.getLogger(__name__)


def sort_by_price(items: List[SearchResultItem]) -> List[SearchResultItem]:
    """Cheapest first; rows without a price go last, provider order kept on ties."""
    return sorted(items, key=lambda item: (item.price is None, item.price or 0))


class HotelSearchService:
    """
    Price comparison across the affiliate providers.

    Args:
        providers: adapters to query (defaults to Agoda, Priceline, Expedia)
        rng: random source for demo prices
    """

    def __init__(
        self,
        providers: Optional[List[BaseProvider]] = None,
        rng: Optional[random.Random] = None,
    ):
        self.providers = providers if providers is not None else get_default_providers()
        self.rng = rng

    async def search(self, query: SearchQuery, mode: Optional[str] = None) -> SearchResponse:
        mode = mode or settings.PROVIDER_MODE
        logger.info(
            f"Searching: '{query.query_text}', {query.check_in}→{query.check_out}, "
            f"{query.adults} adults, {query.rooms} rooms, mode={mode}"
        )

        tasks = [provider.quote(query, mode, self.rng) for provider in self.providers]
        results = await asyncio.gather(*tasks, return_exceptions=True)

        items: List[SearchResultItem] = []
        for provider, result in zip(self.providers, results):
            if isinstance(result, BaseException):
                logger.error(f"Provider {provider.name} failed: {result}")
            else:
                items.append(result)

        logger.info(f"Got {len(items)}/{len(self.providers)} provider quotes")

        return SearchResponse(currency=query.currency, items=sort_by_price(items))


# ==================== SINGLETON ====================

_search_service: Optional[HotelSearchService] = None

def get_hotel_search() -> HotelSearchService:
    """Get or create search service singleton"""
    global _search_service
    if _search_service is None:
        _search_service = HotelSearchService()
    return _search_service
