# navroute/config.py
from __future__ import annotations
from pathlib import Path
import os
from dotenv import load_dotenv

# Load exactly navroute/.env (do NOT call load_dotenv() without a path)
ENV_FILE = Path(__file__).with_name(".env")
load_dotenv(ENV_FILE, override=False)


def _as_bool(value: str | None) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


class Settings:
    VALHALLA_BASE_URL: str = os.getenv(
        "VALHALLA_BASE_URL", "https://maps.earth/valhalla/route"
    )
    VALHALLA_API_KEY: str | None = os.getenv("VALHALLA_API_KEY") or None
    OFFLINE_MODE: bool = _as_bool(os.getenv("OFFLINE_MODE", "0"))
    ROUTE_UNITS: str = os.getenv("ROUTE_UNITS", "kilometers")
    HTTP_TIMEOUT_S: float = float(os.getenv("HTTP_TIMEOUT_S", "15.0"))
    CORS_ALLOW_ORIGINS: str = os.getenv("CORS_ALLOW_ORIGINS", "http://localhost:3000")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings
