"""Trade entity, aggregation and error types."""
from __future__ import annotations

from .calculator import (
    PortfolioSummary,
    PriceSnapshot,
    ProfitLossCalculator,
    profit_or_loss_of,
    snapshot_of,
    summarize,
    total_profit_or_loss,
)
from .errors import InvalidTradeArgument, TradeSimulatorError, UnknownStockCode
from .trade import Trade

__all__ = [
    "InvalidTradeArgument",
    "PortfolioSummary",
    "PriceSnapshot",
    "ProfitLossCalculator",
    "Trade",
    "TradeSimulatorError",
    "UnknownStockCode",
    "profit_or_loss_of",
    "snapshot_of",
    "summarize",
    "total_profit_or_loss",
]
