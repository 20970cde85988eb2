"""
Runtime settings for SolarQuote.

Values come from the environment (a local .env file is loaded first).
Sizing and price constants are NOT configurable; see knowledge/price_tables.py.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class Settings:
    api_url: str = "http://localhost:5000"
    api_timeout: float = 10.0
    currency: str = "PKR"
    usd_rate: float = 280.0
    company_name: str = "ElectroCare"
    log_level: str = "INFO"


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def load_settings(dotenv: bool = True) -> Settings:
    """Read settings from the environment."""
    if dotenv:
        load_dotenv()
    defaults = Settings()
    return Settings(
        api_url=os.getenv("SOLARQUOTE_API_URL", defaults.api_url).rstrip("/"),
        api_timeout=_float_env("SOLARQUOTE_API_TIMEOUT", defaults.api_timeout),
        currency=os.getenv("SOLARQUOTE_CURRENCY", defaults.currency).upper(),
        usd_rate=_float_env("SOLARQUOTE_USD_RATE", defaults.usd_rate),
        company_name=os.getenv("SOLARQUOTE_COMPANY", defaults.company_name),
        log_level=os.getenv("SOLARQUOTE_LOG_LEVEL", defaults.log_level).upper(),
    )


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO), format=LOG_FORMAT)
