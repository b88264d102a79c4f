"""Settings loader driven by environment variables.

``get_settings`` reads the ``TRADER_*`` environment variables and caches the
resulting ``Settings`` object.  Tests may call ``reset_settings_cache`` to
force a reload when they modify environment variables at runtime.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import os
from functools import lru_cache
from typing import Tuple

from .core.catalog import DEFAULT_STOCK_CODES

DEFAULT_RISK_THRESHOLD = 10_000.0


@dataclass
class Settings:
    risk_threshold: float = DEFAULT_RISK_THRESHOLD
    stock_codes: Tuple[str, ...] = field(default_factory=lambda: DEFAULT_STOCK_CODES)
    seed: int | None = None
    log_level: str = "WARNING"


def _parse_codes(raw: str | None) -> Tuple[str, ...]:
    if not raw:
        return DEFAULT_STOCK_CODES
    codes = tuple(c.strip().upper() for c in raw.split(",") if c.strip())
    return codes or DEFAULT_STOCK_CODES


@lru_cache()
def get_settings() -> Settings:
    """Return settings loaded from environment variables."""

    risk_threshold = float(os.getenv("TRADER_RISK_THRESHOLD", str(DEFAULT_RISK_THRESHOLD)))
    stock_codes = _parse_codes(os.getenv("TRADER_STOCK_CODES"))
    seed_raw = os.getenv("TRADER_SEED")
    seed = int(seed_raw) if seed_raw not in (None, "") else None
    log_level = os.getenv("TRADER_LOG_LEVEL", "WARNING").upper()
    return Settings(
        risk_threshold=risk_threshold,
        stock_codes=stock_codes,
        seed=seed,
        log_level=log_level,
    )


def reset_settings_cache() -> None:
    """Clear the settings cache (mainly for tests)."""

    get_settings.cache_clear()
