# app/api/v1/endpoints/search.py

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from typing import Optional
import logging

from schemas.search import SearchQuery, SearchResponse
from services.exceptions import SearchValidationError
from services.hotel_search import HotelSearchService, get_hotel_search

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/search", response_model=SearchResponse)
async def search_hotels(
    hotel_name: Optional[str] = Query(None, alias="hotelName", description="Hotel name"),
    city: Optional[str] = Query(None, description="City"),
    check_in: Optional[str] = Query(None, alias="checkIn", description="Check-in date"),
    check_out: Optional[str] = Query(None, alias="checkOut", description="Check-out date"),
    # numeric params stay raw strings so bad input falls back to defaults
    adults: Optional[str] = Query(None, description="Adults, clamped to 1-12 (default 2)"),
    rooms: Optional[str] = Query(None, description="Rooms, clamped to 1-8 (default 1)"),
    currency: Optional[str] = Query(None, description="Currency code (default USD)"),
    search_service: HotelSearchService = Depends(get_hotel_search),
):
    """
    🏨 Compare hotel prices across affiliate providers.

    At least one of **hotelName** / **city** is required, plus **checkIn**
    and **checkOut**. Results are sorted cheapest first; providers without
    a price are listed last.
    """
    try:
        query = SearchQuery.from_params(
            hotel_name=hotel_name,
            city=city,
            check_in=check_in,
            check_out=check_out,
            adults=adults,
            rooms=rooms,
            currency=currency,
        )
    except SearchValidationError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})

    try:
        return await search_service.search(query)
    except Exception:
        logger.exception("Hotel search failed")
        return JSONResponse(status_code=500, content={"error": "Internal server error"})
