# app/api/v1/endpoints/widget.py

from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse, RedirectResponse
import logging

from app.core.config import settings

logger = logging.getLogger(__name__)

router = APIRouter()

WIDGET_FILE = "widget.html"


@router.get("/widget", include_in_schema=False)
async def widget():
    """Serve the embeddable search widget."""
    path = settings.PUBLIC_DIR / WIDGET_FILE
    if not path.is_file():
        logger.error(f"Widget page missing: {path}")
        raise HTTPException(status_code=404, detail="Widget not found")
    return FileResponse(path, media_type="text/html")


@router.get("/", include_in_schema=False)
async def root():
    return RedirectResponse(url="/widget")
