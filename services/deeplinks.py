# services/deeplinks.py
"""
Affiliate deeplink builders.

Each builder maps a search query to a provider search URL with
URL-encoded params and the affiliate id appended. Missing ids fall back
to placeholder strings so a link is always produced.
"""

from typing import Optional
from urllib.parse import urlencode

from app.core.config import (
    AGODA_CID_PLACEHOLDER,
    EXPEDIA_ATTR_PLACEHOLDER,
    PRICELINE_REFID_PLACEHOLDER,
)
from schemas.search import SearchQuery

AGODA_SEARCH_URL = "https://www.agoda.com/search"
PRICELINE_SEARCH_URL = "https://www.priceline.com/relax/in/search"
EXPEDIA_SEARCH_URL = "https://www.expedia.com/Hotel-Search"


def build_agoda_link(query: SearchQuery, cid: Optional[str] = None) -> str:
    """
    Format: https://www.agoda.com/search?cid=CID&textToSearch=...
    """
    params = {
        "cid": cid or AGODA_CID_PLACEHOLDER,
        "textToSearch": query.query_text,
        "checkIn": query.check_in,
        "checkOut": query.check_out,
        "adults": query.adults,
        "rooms": query.rooms,
        "currencyCode": query.currency,
    }
    return f"{AGODA_SEARCH_URL}?{urlencode(params)}"


def build_priceline_link(query: SearchQuery, refid: Optional[str] = None) -> str:
    """
    Format: https://www.priceline.com/relax/in/search?refid=REFID&query=...
    """
    params = {
        "refid": refid or PRICELINE_REFID_PLACEHOLDER,
        "query": query.query_text,
        "checkin": query.check_in,
        "checkout": query.check_out,
        "adults": query.adults,
        "rooms": query.rooms,
        "currency": query.currency,
    }
    return f"{PRICELINE_SEARCH_URL}?{urlencode(params)}"


def build_expedia_link(query: SearchQuery, partner_attr: Optional[str] = None) -> str:
    """
    Format: https://www.expedia.com/Hotel-Search?destination=...&affcid=ATTR
    """
    params = {
        "destination": query.query_text,
        "startDate": query.check_in,
        "endDate": query.check_out,
        "adults": query.adults,
        "rooms": query.rooms,
        "currency": query.currency,
        "affcid": partner_attr or EXPEDIA_ATTR_PLACEHOLDER,
    }
    return f"{EXPEDIA_SEARCH_URL}?{urlencode(params)}"
