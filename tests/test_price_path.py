import numpy as np
import pytest

from trade_simulator.core.random_source import NumpyRandomSource, SequenceRandomSource
from trade_simulator.simulation import price_path


def test_round_price_is_half_up():
    assert price_path.round_price(1.005 + 1e-9) == 1.01
    assert price_path.round_price(2.675 + 1e-9) == 2.68
    assert price_path.round_price(0.125) == 0.13
    assert price_path.round_price(99.994) == 99.99


def test_generate_buy_price_range():
    src = NumpyRandomSource(seed=42)
    prices = [price_path.generate_buy_price(src) for _ in range(2000)]
    assert min(prices) >= 50.0
    assert max(prices) <= 150.0
    assert all(round(p, 2) == p for p in prices)


def test_next_price_up_and_down():
    src = SequenceRandomSource(uniforms=[0.10, 0.05], flips=[True, False])
    assert price_path.next_price(100.0, src) == 110.0
    assert price_path.next_price(110.0, src) == 104.5


def test_simulate_path_scripted():
    src = SequenceRandomSource(uniforms=[0.10, 0.05, 0.02], flips=[True, False, True])
    assert price_path.simulate_path(100.0, 3, src) == [110.0, 104.5, 106.59]


def test_simulate_path_zero_days_draws_nothing():
    src = SequenceRandomSource()
    assert price_path.simulate_path(100.0, 0, src) == []
    assert price_path.simulate_path(100.0, -3, src) == []


def test_daily_moves_bounded():
    src = NumpyRandomSource(rng=np.random.default_rng(123))
    start = 100.0
    path = price_path.simulate_path(start, 250, src)
    prev = start
    for price in path:
        assert abs(price - prev) <= price_path.MAX_DAILY_MOVE * prev + 0.005
        prev = price


def test_sequence_source_exhausted():
    src = SequenceRandomSource(uniforms=[0.1])
    src.uniform(0.0, 1.0)
    with pytest.raises(ValueError):
        src.uniform(0.0, 1.0)
    with pytest.raises(ValueError):
        src.flip()
