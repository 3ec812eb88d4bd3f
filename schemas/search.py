# schemas/search.py
import re

from pydantic import BaseModel, Field, field_validator
from typing import Any, List, Optional

from services.exceptions import SearchValidationError

ADULTS_MIN, ADULTS_MAX, ADULTS_DEFAULT = 1, 12, 2
ROOMS_MIN, ROOMS_MAX, ROOMS_DEFAULT = 1, 8, 1
DEFAULT_CURRENCY = "USD"

INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def clamp_int(value: Any, low: int, high: int, default: int) -> int:
    """
    Coerce a raw query value to an int within [low, high].

    Missing, empty or non-numeric input falls back to ``default``.
    Only plain ASCII integers count as numeric.
    """
    text = "" if value is None else str(value).strip()
    if not INTEGER_RE.fullmatch(text):
        return default
    try:
        number = int(text)
    except ValueError:
        # past the interpreter's int digit limit
        return low if text.startswith("-") else high
    return max(low, min(high, number))


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class SearchQuery(BaseModel):
    """Validated hotel search parameters"""

    hotel_name: Optional[str] = Field(None, description="Hotel name to search for")
    city: Optional[str] = Field(None, description="City to search in")
    check_in: str = Field(..., min_length=1, description="Check-in date")
    check_out: str = Field(..., min_length=1, description="Check-out date")
    adults: int = Field(ADULTS_DEFAULT, ge=ADULTS_MIN, le=ADULTS_MAX)
    rooms: int = Field(ROOMS_DEFAULT, ge=ROOMS_MIN, le=ROOMS_MAX)
    currency: str = Field(DEFAULT_CURRENCY, min_length=1, description="Price currency code")

    @field_validator('currency')
    @classmethod
    def uppercase_currency(cls, v: str) -> str:
        return v.upper()

    @property
    def query_text(self) -> str:
        """Free-text destination sent to providers: hotel name and city."""
        return " ".join(part for part in (self.hotel_name, self.city) if part)

    @classmethod
    def from_params(
        cls,
        hotel_name: Optional[str] = None,
        city: Optional[str] = None,
        check_in: Optional[str] = None,
        check_out: Optional[str] = None,
        adults: Any = None,
        rooms: Any = None,
        currency: Optional[str] = None,
    ) -> "SearchQuery":
        """
        Build a query from raw query-string values.

        Raises:
            SearchValidationError: if neither hotel name nor city is given,
                or a check-in/check-out date is missing.
        """
        hotel_name = _clean(hotel_name)
        city = _clean(city)
        check_in = _clean(check_in)
        check_out = _clean(check_out)

        if not hotel_name and not city:
            raise SearchValidationError("hotelName or city is required")
        if not check_in or not check_out:
            raise SearchValidationError("checkIn and checkOut are required")

        return cls(
            hotel_name=hotel_name,
            city=city,
            check_in=check_in,
            check_out=check_out,
            adults=clamp_int(adults, ADULTS_MIN, ADULTS_MAX, ADULTS_DEFAULT),
            rooms=clamp_int(rooms, ROOMS_MIN, ROOMS_MAX, ROOMS_DEFAULT),
            currency=_clean(currency) or DEFAULT_CURRENCY,
        )


class SearchResultItem(BaseModel):
    """One provider row: price (if known) and outbound deep link"""

    provider: str = Field(..., description="Provider name (e.g., 'Agoda')")
    currency: str = Field(..., description="Price currency code")
    price: Optional[int] = Field(None, description="Nightly price, null when unavailable")
    deeplink: str = Field(..., description="Affiliate URL to the provider's search page")

    class Config:
        json_schema_extra = {
            "example": {
                "provider": "Agoda",
                "currency": "USD",
                "price": 129,
                "deeplink": "https://www.agoda.com/search?cid=YOUR_AGODA_CID&textToSearch=Test+Vancouver"
            }
        }


class SearchResponse(BaseModel):
    currency: str
    items: List[SearchResultItem] = Field(default_factory=list)


class HealthResponse(BaseModel):
    ok: bool = True
    time: str = Field(..., description="Server time, ISO-8601 UTC")
