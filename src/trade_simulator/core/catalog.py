"""Static catalog of tradable stock codes."""
from __future__ import annotations

from typing import Iterable, List, Tuple

DEFAULT_STOCK_CODES: Tuple[str, ...] = (
    "AAPL",
    "AMZN",
    "GOOG",
    "META",
    "MSFT",
    "NVDA",
    "TSLA",
    "BA",
    "BRK-B",
    "DIS",
    "GE",
    "HD",
    "NIKE",
    "SBUX",
    "NFLX",
)


def normalize_code(code: str | None) -> str:
    """Return ``code`` stripped and upper-cased (``""`` for ``None``)."""

    if code is None:
        return ""
    return code.strip().upper()


def is_known_code(code: str | None, catalog: Iterable[str] = DEFAULT_STOCK_CODES) -> bool:
    normalized = normalize_code(code)
    return bool(normalized) and normalized in set(catalog)


def sorted_codes(catalog: Iterable[str] = DEFAULT_STOCK_CODES) -> List[str]:
    return sorted(catalog)
