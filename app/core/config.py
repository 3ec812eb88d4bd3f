import logging
from pathlib import Path
from typing import List, Literal

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()

BASE_DIR = Path(__file__).resolve().parents[2]

AGODA_CID_PLACEHOLDER = "YOUR_AGODA_CID"
PRICELINE_REFID_PLACEHOLDER = "YOUR_PRICELINE_REFID"
EXPEDIA_ATTR_PLACEHOLDER = "YOUR_EXPEDIA_PARTNER_ATTR"


class Settings(BaseSettings):
    # ============================================================
    # APPLICATION INFO
    # ============================================================
    PROJECT_NAME: str = "Hotel Price Widget"
    VERSION: str = "1.0.0"
    API_PREFIX: str = "/api"
    DEBUG: bool = False

    # ============================================================
    # SERVER
    # ============================================================
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # ============================================================
    # AFFILIATE PROVIDERS
    # ============================================================
    AGODA_AFFILIATE_CID: str = ""
    PRICELINE_REFID: str = ""
    EXPEDIA_PARTNER_ATTR: str = ""
    PROVIDER_MODE: Literal["demo", "live"] = "demo"

    # ============================================================
    # FRONTEND / CORS
    # ============================================================
    BACKEND_CORS_ORIGINS: List[str] = ["*"]
    PUBLIC_DIR: Path = BASE_DIR / "public"

    # ============================================================
    # LOGGING
    # ============================================================
    LOG_LEVEL: str = "INFO"

    # ============================================================
    # PYDANTIC CONFIG
    # ============================================================
    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


# ============================================================
# GLOBAL INSTANCE
# ============================================================
settings = Settings()


# ============================================================
# VALIDATION
# ============================================================
def validate_provider_settings() -> List[str]:
    """Return the config warnings for affiliate ids and provider mode."""
    warnings = []

    if not settings.AGODA_AFFILIATE_CID:
        warnings.append(f"AGODA_AFFILIATE_CID not set, using {AGODA_CID_PLACEHOLDER}")
    if not settings.PRICELINE_REFID:
        warnings.append(f"PRICELINE_REFID not set, using {PRICELINE_REFID_PLACEHOLDER}")
    if not settings.EXPEDIA_PARTNER_ATTR:
        warnings.append(f"EXPEDIA_PARTNER_ATTR not set, using {EXPEDIA_ATTR_PLACEHOLDER}")
    if settings.PROVIDER_MODE == "live":
        warnings.append("PROVIDER_MODE=live has no provider integration yet, prices will be null")

    for message in warnings:
        logging.warning(f"Config warning: {message}")
    return warnings
