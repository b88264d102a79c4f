import pytest

from trade_simulator.core.random_source import NumpyRandomSource
from trade_simulator.trading import (
    PortfolioSummary,
    PriceSnapshot,
    ProfitLossCalculator,
    Trade,
    profit_or_loss_of,
    snapshot_of,
    summarize,
    total_profit_or_loss,
)


def _trade(code, shares, buy, sell):
    return Trade(stock_code=code, shares=shares, investment_term=1, buy_price=buy, sell_price=sell)


def _book():
    return [
        _trade("AAPL", 10, 100.0, 110.0),
        _trade("MSFT", 5, 80.0, 60.0),
        _trade("NVDA", 3, 120.5, 120.5),
    ]


def test_empty_and_missing_sequences():
    assert total_profit_or_loss([]) == 0.0
    assert total_profit_or_loss(None) == 0.0
    assert summarize(None) == PortfolioSummary()
    assert summarize([]).last_trade is None


def test_totals():
    summary = summarize(_book())
    assert summary.total_invested == pytest.approx(1000.0 + 400.0 + 361.5)
    assert summary.total_realized == pytest.approx(1100.0 + 300.0 + 361.5)
    assert summary.total_profit_or_loss == pytest.approx(0.0)
    assert summary.trade_count == 3
    assert summary.last_trade == PriceSnapshot("NVDA", 120.5, 120.5)


def test_summation_law_on_simulated_trades():
    src = NumpyRandomSource(seed=7)
    trades = [Trade.buy("AAPL", 1 + i, i, source=src) for i in range(25)]
    expected = sum(profit_or_loss_of(t) for t in trades)
    assert total_profit_or_loss(trades) == pytest.approx(expected)


def test_repeated_aggregation_is_identical():
    src = NumpyRandomSource(seed=11)
    trades = [Trade.buy("GE", 7, 12, source=src) for _ in range(10)]
    assert summarize(trades) == summarize(trades)


def test_single_trade_helpers():
    t = _trade("TSLA", 4, 50.0, 55.0)
    assert profit_or_loss_of(t) == 20.0
    assert profit_or_loss_of(None) == 0.0
    assert snapshot_of(t) == PriceSnapshot("TSLA", 50.0, 55.0)
    assert snapshot_of(None) is None


def test_calculator_facade_tracks_last_results():
    calc = ProfitLossCalculator()
    assert calc.last_snapshot is None
    assert calc.calculate_profit_or_loss(None) == 0.0
    assert calc.last_snapshot is None

    single = _trade("DIS", 2, 10.0, 12.0)
    assert calc.calculate_profit_or_loss(single) == 4.0
    assert calc.last_snapshot == PriceSnapshot("DIS", 10.0, 12.0)

    # a missing trade does not clear the previous snapshot
    calc.calculate_profit_or_loss(None)
    assert calc.last_snapshot == PriceSnapshot("DIS", 10.0, 12.0)

    total = calc.compute_total_profit(_book())
    assert total == pytest.approx(0.0)
    assert calc.last_snapshot.stock_code == "NVDA"
    assert calc.last_summary.trade_count == 3

    assert calc.compute_total_profit(None) == 0.0
    assert calc.last_summary == PortfolioSummary()
