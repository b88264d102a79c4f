"""In-memory trading session: the trade list and the user-facing flows."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple

from .config import Settings, get_settings
from .core import catalog
from .core.random_source import NumpyRandomSource, RandomSource
from .trading.calculator import PortfolioSummary, profit_or_loss_of, summarize
from .trading.errors import InvalidTradeArgument, UnknownStockCode
from .trading.trade import Trade

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlacedTrade:
    """Outcome of :meth:`TradingSession.place_trade`."""

    trade: Trade
    profit_or_loss: float
    risk_warning: bool


class TradingSession:
    """Holds the trades placed during one run of the tool."""

    def __init__(self, settings: Settings | None = None, source: RandomSource | None = None) -> None:
        self.settings = settings if settings is not None else get_settings()
        self.source = source if source is not None else NumpyRandomSource(self.settings.seed)
        self._trades: List[Trade] = []

    @property
    def trades(self) -> Tuple[Trade, ...]:
        return tuple(self._trades)

    @property
    def risk_threshold(self) -> float:
        return self.settings.risk_threshold

    @property
    def stock_codes(self) -> List[str]:
        return catalog.sorted_codes(self.settings.stock_codes)

    def place_trade(self, stock_code: str, shares: int, investment_term: int) -> PlacedTrade:
        """Validate the order, simulate it and store the resulting trade."""

        code = catalog.normalize_code(stock_code)
        if not catalog.is_known_code(code, self.settings.stock_codes):
            raise UnknownStockCode(code)
        if shares <= 0:
            raise InvalidTradeArgument("shares must be a positive integer")
        if investment_term < 0:
            raise InvalidTradeArgument("investment term must be non-negative")

        trade = Trade.buy(code, shares, investment_term, source=self.source)
        self._trades.append(trade)
        placed = PlacedTrade(
            trade=trade,
            profit_or_loss=profit_or_loss_of(trade),
            risk_warning=trade.exceeds_risk_threshold(self.risk_threshold),
        )
        logger.info(
            "placed %s x%d term=%d pnl=%.2f", code, trade.shares, trade.investment_term, placed.profit_or_loss
        )
        return placed

    def summary(self) -> PortfolioSummary:
        result = summarize(self._trades)
        logger.info("summary over %d trades: %.2f", result.trade_count, result.total_profit_or_loss)
        return result
