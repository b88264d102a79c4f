"""Buy-price generation and the daily random walk."""
from __future__ import annotations

import logging
import math
from typing import List

from ..core.random_source import RandomSource

logger = logging.getLogger(__name__)

BUY_PRICE_LOW = 50.0
BUY_PRICE_HIGH = 150.0
MAX_DAILY_MOVE = 0.15
P_UP = 0.5


def round_price(value: float) -> float:
    """Round half-up to the cent."""
    return math.floor(value * 100.0 + 0.5) / 100.0


def generate_buy_price(
    source: RandomSource, low: float = BUY_PRICE_LOW, high: float = BUY_PRICE_HIGH
) -> float:
    return round_price(source.uniform(low, high))


def next_price(
    price: float, source: RandomSource, max_move: float = MAX_DAILY_MOVE, p_up: float = P_UP
) -> float:
    """Return the next day's close from ``price``.

    A coin is flipped first, then an independent move ``u`` in
    ``[0, max_move)`` is drawn: heads gives ``price * (1 + u)``, tails
    ``price * (1 - u)``.  There is no floor.
    """

    up = source.flip(p_up)
    move = source.uniform(0.0, max_move)
    if up:
        return round_price(price * (1 + move))
    return round_price(price * (1 - move))


def simulate_path(start: float, days: int, source: RandomSource) -> List[float]:
    """Return the ``days`` successive daily closes starting from ``start``.

    The starting price itself is not part of the path; ``days <= 0`` gives an
    empty list.
    """

    path: List[float] = []
    price = start
    for day in range(1, days + 1):
        price = next_price(price, source)
        logger.debug("day %d price %.2f", day, price)
        path.append(price)
    return path
