# services/providers.py
"""
Demo provider adapters.

Each adapter returns one SearchResultItem per query:
- demo mode: a random integer price from the provider's demo range
- live mode: price=None (no real provider integration yet)

The deeplink is built in both modes.
"""

from __future__ import annotations

import logging
import random
from typing import Callable, List, Optional, Tuple

from app.core.config import settings
from schemas.search import SearchQuery, SearchResultItem
from services.exceptions import ProviderError
from services.deeplinks import build_agoda_link, build_expedia_link, build_priceline_link

logger = logging.getLogger(__name__)

DEMO_MODE = "demo"
LIVE_MODE = "live"


class BaseProvider:
    name: str = ""
    demo_price_range: Tuple[int, int] = (0, 0)
    affiliate_setting: str = ""
    link_builder: Callable[[SearchQuery, Optional[str]], str]

    def __init__(self) -> None:
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def affiliate_id(self) -> str:
        # read at call time, not at import
        return getattr(settings, self.affiliate_setting, "") or ""

    def build_deeplink(self, query: SearchQuery) -> str:
        return type(self).link_builder(query, self.affiliate_id)

    def demo_price(self, rng: Optional[random.Random] = None) -> int:
        low, high = self.demo_price_range
        return (rng or random).randint(low, high)

    async def quote(
        self,
        query: SearchQuery,
        mode: str = DEMO_MODE,
        rng: Optional[random.Random] = None,
    ) -> SearchResultItem:
        price: Optional[int] = None
        if mode == DEMO_MODE:
            price = self.demo_price(rng)
        elif mode == LIVE_MODE:
            self.logger.debug("%s live pricing not implemented, returning null price", self.name)
        else:
            raise ProviderError(f"Unknown provider mode: {mode}")

        return SearchResultItem(
            provider=self.name,
            currency=query.currency,
            price=price,
            deeplink=self.build_deeplink(query),
        )


class AgodaProvider(BaseProvider):
    name = "Agoda"
    demo_price_range = (80, 220)
    affiliate_setting = "AGODA_AFFILIATE_CID"
    link_builder = build_agoda_link


class PricelineProvider(BaseProvider):
    name = "Priceline"
    demo_price_range = (85, 230)
    affiliate_setting = "PRICELINE_REFID"
    link_builder = build_priceline_link


class ExpediaProvider(BaseProvider):
    name = "Expedia"
    demo_price_range = (90, 240)
    affiliate_setting = "EXPEDIA_PARTNER_ATTR"
    link_builder = build_expedia_link


def get_default_providers() -> List[BaseProvider]:
    """Agoda, Priceline, Expedia, in that order."""
    return [AgodaProvider(), PricelineProvider(), ExpediaProvider()]
