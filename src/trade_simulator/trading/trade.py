"""Single stock trade with a simulated holding period."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from numbers import Integral
from typing import Tuple

from ..core.random_source import RandomSource, default_source
from ..simulation import price_path
from .errors import InvalidTradeArgument

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Trade:
    """A buy of ``shares`` in ``stock_code`` held for ``investment_term`` days.

    Instances are built through :meth:`buy`, which validates the inputs and
    runs the price simulation in one step.  ``price_path`` holds the
    simulated daily closes, its last value being the sell price.
    """

    stock_code: str
    shares: int
    investment_term: int
    buy_price: float
    sell_price: float
    price_path: Tuple[float, ...] = ()

    @classmethod
    def buy(
        cls,
        stock_code: str,
        shares: int,
        investment_term: int,
        source: RandomSource | None = None,
    ) -> "Trade":
        """Buy ``shares`` at a random price and simulate the sell price.

        Raises
        ------
        InvalidTradeArgument
            If ``stock_code`` is missing or blank, or ``shares`` is not a
            positive integer.  Nothing is drawn from ``source`` in that case.
        """

        if stock_code is None or not str(stock_code).strip():
            raise InvalidTradeArgument("stock_code cannot be empty")
        if isinstance(shares, bool) or not isinstance(shares, Integral):
            raise InvalidTradeArgument("shares must be an integer")
        if shares <= 0:
            raise InvalidTradeArgument("shares must be > 0")
        term = max(0, int(investment_term))

        src = source if source is not None else default_source()
        buy_price = price_path.generate_buy_price(src)
        path = tuple(price_path.simulate_path(buy_price, term, src))
        sell_price = path[-1] if path else buy_price
        logger.debug(
            "simulated %s over %d days: buy=%.2f sell=%.2f", stock_code, term, buy_price, sell_price
        )
        return cls(
            stock_code=stock_code,
            shares=int(shares),
            investment_term=term,
            buy_price=buy_price,
            sell_price=sell_price,
            price_path=path,
        )

    @property
    def last_day_price(self) -> float:
        return self.price_path[-1] if self.price_path else self.buy_price

    @property
    def invested_amount(self) -> float:
        return self.buy_price * self.shares

    @property
    def realized_amount(self) -> float:
        return self.sell_price * self.shares

    def profit_or_loss(self) -> float:
        return (self.sell_price - self.buy_price) * self.shares

    def exceeds_risk_threshold(self, threshold: float) -> bool:
        """Return ``True`` when the invested amount is at least ``threshold``."""
        return self.buy_price * self.shares >= threshold
