"""Exceptions raised by the trading core and the session controller."""
from __future__ import annotations


class TradeSimulatorError(Exception):
    """Base class for all simulator errors."""


class InvalidTradeArgument(TradeSimulatorError, ValueError):
    """A trade was requested with a missing code or a bad quantity."""


class UnknownStockCode(TradeSimulatorError, ValueError):
    """The requested stock code is not part of the catalog."""

    def __init__(self, code: str) -> None:
        super().__init__(f"unknown stock code: {code!r}")
        self.code = code
