from trade_simulator.config import get_settings, reset_settings_cache
from trade_simulator.core.catalog import DEFAULT_STOCK_CODES, is_known_code, sorted_codes


def test_defaults(monkeypatch):
    for var in ("TRADER_RISK_THRESHOLD", "TRADER_STOCK_CODES", "TRADER_SEED", "TRADER_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    reset_settings_cache()
    s = get_settings()
    assert s.risk_threshold == 10_000.0
    assert s.stock_codes == DEFAULT_STOCK_CODES
    assert s.seed is None
    assert s.log_level == "WARNING"
    reset_settings_cache()


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("TRADER_RISK_THRESHOLD", "2500")
    monkeypatch.setenv("TRADER_STOCK_CODES", "aapl, ibm,,")
    monkeypatch.setenv("TRADER_SEED", "99")
    monkeypatch.setenv("TRADER_LOG_LEVEL", "debug")
    reset_settings_cache()
    s = get_settings()
    assert s.risk_threshold == 2500.0
    assert s.stock_codes == ("AAPL", "IBM")
    assert s.seed == 99
    assert s.log_level == "DEBUG"
    reset_settings_cache()


def test_catalog_helpers():
    assert len(DEFAULT_STOCK_CODES) == 15
    assert is_known_code("brk-b")
    assert not is_known_code("")
    assert not is_known_code(None)
    assert sorted_codes()[0] == "AAPL"
    assert sorted_codes(["b", "a"]) == ["a", "b"]
