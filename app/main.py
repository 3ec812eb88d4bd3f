import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import settings, validate_provider_settings
from app.api.v1.endpoints import health, search, widget


# ============================================================
# LOGGING
# ============================================================
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

validate_provider_settings()


# ============================================================
# FASTAPI APP SETUP
# ============================================================
app = FastAPI(
    title=settings.PROJECT_NAME,
    description="""
    🏨 **Hotel Price Widget API**

    Embeddable hotel search widget backed by a small price-comparison
    endpoint across affiliate providers.

    ## Features
    * 🔍 Hotel search by name and/or city
    * 💰 Agoda, Priceline and Expedia price rows with affiliate deep links
    * 🧩 Static widget page at `/widget`
    """,
    version=settings.VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
)

# ============================================================
# CORS CONFIG
# ============================================================
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================
# ERROR HANDLERS
# ============================================================
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


# ============================================================
# ROUTERS & STATIC FILES
# ============================================================
app.include_router(health.router, prefix=settings.API_PREFIX, tags=["health"])
app.include_router(search.router, prefix=settings.API_PREFIX, tags=["search"])
app.include_router(widget.router, tags=["widget"])

app.mount("/public", StaticFiles(directory=settings.PUBLIC_DIR), name="public")


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Server listening on {settings.PORT}")
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)
