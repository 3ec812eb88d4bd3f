"""
Shared fixtures for the hotel widget test suite.
"""

import random

import pytest
from fastapi.testclient import TestClient

from app.core.config import settings
from app.main import app
from schemas.search import SearchQuery
from services.hotel_search import HotelSearchService, get_hotel_search


@pytest.fixture
def query() -> SearchQuery:
    return SearchQuery.from_params(
        hotel_name="Test",
        city="Vancouver",
        check_in="2024-01-01",
        check_out="2024-01-02",
    )


@pytest.fixture
def affiliate_ids(monkeypatch):
    """Configure real-looking affiliate ids for the duration of a test."""
    ids = {
        "AGODA_AFFILIATE_CID": "1948292",
        "PRICELINE_REFID": "PLREF42",
        "EXPEDIA_PARTNER_ATTR": "EXP-ATTR-7",
    }
    for key, value in ids.items():
        monkeypatch.setattr(settings, key, value)
    return ids


@pytest.fixture
def no_affiliate_ids(monkeypatch):
    for key in ("AGODA_AFFILIATE_CID", "PRICELINE_REFID", "EXPEDIA_PARTNER_ATTR"):
        monkeypatch.setattr(settings, key, "")


@pytest.fixture
def demo_mode(monkeypatch):
    monkeypatch.setattr(settings, "PROVIDER_MODE", "demo")


@pytest.fixture
def search_service() -> HotelSearchService:
    return HotelSearchService(rng=random.Random(1234))


@pytest.fixture
def client(search_service):
    app.dependency_overrides[get_hotel_search] = lambda: search_service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
