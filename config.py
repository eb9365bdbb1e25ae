"""
Runtime configuration for the resilience index backend.
Values come from the environment (optionally a local .env file).
"""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import List

from dotenv import load_dotenv

load_dotenv()

DEFAULT_ORIGINS = [
    "http://localhost:3000",  # Next.js dashboard dev server
    "http://localhost:1420",
    "http://localhost:5050",
]

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@dataclass(frozen=True)
class Settings:
    cors_origins: List[str]
    simulated_latency_ms: int
    default_forecast_days: int
    max_forecast_days: int
    log_level: str
    host: str
    port: int


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Build settings from RESILIENCE_* environment variables"""
    origins = os.getenv("RESILIENCE_CORS_ORIGINS")
    return Settings(
        cors_origins=_split_origins(origins) if origins else list(DEFAULT_ORIGINS),
        simulated_latency_ms=int(os.getenv("RESILIENCE_SIMULATED_LATENCY_MS", "500")),
        default_forecast_days=int(os.getenv("RESILIENCE_DEFAULT_FORECAST_DAYS", "30")),
        max_forecast_days=int(os.getenv("RESILIENCE_MAX_FORECAST_DAYS", "365")),
        log_level=os.getenv("RESILIENCE_LOG_LEVEL", "INFO").upper(),
        host=os.getenv("RESILIENCE_HOST", "0.0.0.0"),
        port=int(os.getenv("RESILIENCE_PORT", "8036")),
    )


def configure_logging(level: str = "INFO") -> None:
    """Install one stream handler on the root logger"""
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(level)
