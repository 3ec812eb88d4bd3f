# app/api/v1/endpoints/health.py

from datetime import datetime, timezone

from fastapi import APIRouter

from schemas.search import HealthResponse

router = APIRouter()


def utc_timestamp() -> str:
    """Current UTC time, e.g. 2024-01-01T12:00:00.000Z"""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(ok=True, time=utc_timestamp())
