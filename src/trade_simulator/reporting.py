"""Tabular views, JSON report models and console formatting."""
from __future__ import annotations

from typing import Iterable, List, Optional

import pandas as pd
from pydantic import BaseModel, Field, PositiveInt

from .trading.calculator import PortfolioSummary
from .trading.trade import Trade

TRADE_COLUMNS = [
    "stock_code",
    "shares",
    "buy_price",
    "sell_price",
    "investment_term",
    "profit_or_loss",
]


class OrderSpec(BaseModel):
    """One order of a batch file."""

    stock_code: str
    shares: PositiveInt
    investment_term: int = Field(0, ge=0)


class OrderBatch(BaseModel):
    orders: List[OrderSpec]


class TradeReport(BaseModel):
    stock_code: str
    shares: int
    buy_price: float
    sell_price: float
    investment_term: int
    profit_or_loss: float
    risk_warning: bool = False
    price_path: List[float] = Field(default_factory=list)

    @classmethod
    def from_trade(cls, trade: Trade, risk_warning: bool = False) -> "TradeReport":
        return cls(
            stock_code=trade.stock_code,
            shares=trade.shares,
            buy_price=trade.buy_price,
            sell_price=trade.sell_price,
            investment_term=trade.investment_term,
            profit_or_loss=round(trade.profit_or_loss(), 2),
            risk_warning=risk_warning,
            price_path=list(trade.price_path),
        )


class PortfolioReport(BaseModel):
    trades: List[TradeReport]
    total_invested: float
    total_realized: float
    total_profit_or_loss: float
    last_trade_code: Optional[str] = None

    @classmethod
    def build(cls, trades: Iterable[TradeReport], summary: PortfolioSummary) -> "PortfolioReport":
        last = summary.last_trade
        return cls(
            trades=list(trades),
            total_invested=round(summary.total_invested, 2),
            total_realized=round(summary.total_realized, 2),
            total_profit_or_loss=round(summary.total_profit_or_loss, 2),
            last_trade_code=last.stock_code if last is not None else None,
        )


def trades_frame(trades: Iterable[Trade]) -> pd.DataFrame:
    rows = [
        {
            "stock_code": t.stock_code,
            "shares": t.shares,
            "buy_price": t.buy_price,
            "sell_price": t.sell_price,
            "investment_term": t.investment_term,
            "profit_or_loss": t.profit_or_loss(),
        }
        for t in trades
    ]
    return pd.DataFrame(rows, columns=TRADE_COLUMNS)


def format_trade_row(trade: Trade) -> str:
    return (
        f"{trade.stock_code} | shares={trade.shares} | buy={trade.buy_price:.2f} | "
        f"sell={trade.sell_price:.2f} | term={trade.investment_term} | "
        f"P/L={trade.profit_or_loss():.2f}"
    )


def format_result(profit_or_loss: float) -> str:
    return f"Display Trade Result → Profit/Loss: {profit_or_loss:.2f}"


def format_summary(total: float) -> str:
    return f"\n=== Summary ===\nTotal Profit/Loss: {total:.2f}"


def format_risk_warning(trade: Trade, threshold: float) -> str:
    return (
        f"⚠ Caution: This trade involves a large investment amount of "
        f"{trade.invested_amount:.2f}, which meets the high-value threshold "
        f"(≥ {threshold:.2f}). Please invest wisely."
    )
