"""Profit and loss aggregation over trades."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .trade import Trade


@dataclass(frozen=True)
class PriceSnapshot:
    """Buy and sell price of the last trade seen by an aggregation."""

    stock_code: str
    buy_price: float
    sell_price: float


@dataclass(frozen=True)
class PortfolioSummary:
    total_invested: float = 0.0
    total_realized: float = 0.0
    total_profit_or_loss: float = 0.0
    trade_count: int = 0
    last_trade: Optional[PriceSnapshot] = None


def snapshot_of(trade: Trade | None) -> PriceSnapshot | None:
    if trade is None:
        return None
    return PriceSnapshot(
        stock_code=trade.stock_code, buy_price=trade.buy_price, sell_price=trade.sell_price
    )


def profit_or_loss_of(trade: Trade | None) -> float:
    """Return the P/L of a single trade, ``0.0`` when ``trade`` is ``None``."""

    if trade is None:
        return 0.0
    return trade.profit_or_loss()


def summarize(trades: Iterable[Trade] | None) -> PortfolioSummary:
    """Fold ``trades`` in order into portfolio totals.

    ``None`` is treated as an empty sequence.  ``last_trade`` is the
    snapshot of the final trade in iteration order, not a statistic.
    """

    if trades is None:
        return PortfolioSummary()

    bought_total = 0.0
    sold_total = 0.0
    profit_total = 0.0
    count = 0
    last: Trade | None = None
    for t in trades:
        bought = t.buy_price * t.shares
        sold = t.sell_price * t.shares
        bought_total += bought
        sold_total += sold
        profit_total += sold - bought
        count += 1
        last = t
    return PortfolioSummary(
        total_invested=bought_total,
        total_realized=sold_total,
        total_profit_or_loss=profit_total,
        trade_count=count,
        last_trade=snapshot_of(last),
    )


def total_profit_or_loss(trades: Iterable[Trade] | None) -> float:
    return summarize(trades).total_profit_or_loss


class ProfitLossCalculator:
    """Object facade over the aggregation functions.

    The results of the most recent call are kept on ``last_snapshot`` and
    ``last_summary``; they are replaced on every call and never feed back
    into a computation.
    """

    def __init__(self) -> None:
        self._last_snapshot: PriceSnapshot | None = None
        self._last_summary = PortfolioSummary()

    @property
    def last_snapshot(self) -> PriceSnapshot | None:
        return self._last_snapshot

    @property
    def last_summary(self) -> PortfolioSummary:
        return self._last_summary

    def calculate_profit_or_loss(self, trade: Trade | None) -> float:
        # a missing trade leaves the previous snapshot in place
        if trade is not None:
            self._last_snapshot = snapshot_of(trade)
        return profit_or_loss_of(trade)

    def compute_total_profit(self, trades: Iterable[Trade] | None) -> float:
        summary = summarize(trades)
        self._last_summary = summary
        if summary.last_trade is not None:
            self._last_snapshot = summary.last_trade
        return summary.total_profit_or_loss
