"""Command line interface entry points."""
from __future__ import annotations

import dataclasses
import json
import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from .. import reporting
from ..config import get_settings
from ..session import TradingSession
from ..trading.errors import TradeSimulatorError

app = typer.Typer(help="Simulate stock trades over a random daily price path.")

MENU = "\n=== CLI Stock Trading System ===\n1. Place Trade\n2. View Summary\n3. Exit"


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING..."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible prices"),
) -> None:
    """Configure logging and the random seed shared by all commands."""

    settings = get_settings()
    if seed is not None:
        settings = dataclasses.replace(settings, seed=seed)
    level = (log_level or settings.log_level).upper()
    logging.basicConfig(level=level, format="%(asctime)s - %(levelname)s - %(message)s")
    ctx.obj = settings


def _session(ctx: typer.Context) -> TradingSession:
    return TradingSession(settings=ctx.obj)


def _parse_int(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        return -1


def _prompt(text: str) -> str:
    return typer.prompt(text, default="", show_default=False)


def _echo_placed(placed, threshold: float) -> None:
    if placed.risk_warning:
        typer.echo(reporting.format_risk_warning(placed.trade, threshold))
    typer.echo(reporting.format_result(placed.profit_or_loss))


def _echo_summary(session: TradingSession) -> None:
    if not session.trades:
        typer.echo("No trades yet.")
        return
    summary = session.summary()
    typer.echo("\n--- Trades ---")
    for t in session.trades:
        typer.echo(reporting.format_trade_row(t))
    typer.echo(reporting.format_summary(summary.total_profit_or_loss))


def _place_from_prompts(session: TradingSession) -> None:
    typer.echo(f"Available stock codes (sorted): {session.stock_codes}")
    code = _prompt("Enter stock code").strip().upper()
    if code not in session.stock_codes:
        typer.echo("Unknown code. Please choose from the list.")
        return
    shares = _parse_int(_prompt("Enter shares (positive integer)"))
    if shares <= 0:
        typer.echo("Invalid shares.")
        return
    term = _parse_int(_prompt("Enter investment term (e.g., days, non-negative)"))
    if term < 0:
        typer.echo("Invalid term.")
        return
    placed = session.place_trade(code, shares, term)
    _echo_placed(placed, session.risk_threshold)


@app.command("menu")
def menu(ctx: typer.Context) -> None:
    """Run the interactive menu until the user exits."""

    session = _session(ctx)
    while True:
        typer.echo(MENU)
        choice = _parse_int(_prompt("Select option"))
        if choice == 1:
            _place_from_prompts(session)
        elif choice == 2:
            _echo_summary(session)
        elif choice == 3:
            typer.echo(
                "Thank you for using the stock trading system. Good luck with your investments!"
            )
            return
        else:
            typer.echo("Invalid option. Try again.")


@app.command("codes")
def codes(ctx: typer.Context) -> None:
    """List the tradable stock codes in alphabetical order."""

    for code in _session(ctx).stock_codes:
        typer.echo(code)


@app.command("trade")
def trade(
    ctx: typer.Context,
    code: str = typer.Option(..., "--code"),
    shares: int = typer.Option(..., "--shares"),
    term: int = typer.Option(0, "--term"),
    as_json: bool = typer.Option(False, "--json/--no-json"),
) -> None:
    """Place a single trade and print its result."""

    session = _session(ctx)
    try:
        placed = session.place_trade(code, shares, term)
    except TradeSimulatorError as e:
        typer.echo(f"Invalid input: {e}")
        raise typer.Exit(1)
    if as_json:
        report = reporting.TradeReport.from_trade(placed.trade, placed.risk_warning)
        typer.echo(report.model_dump_json())
        return
    typer.echo(reporting.format_trade_row(placed.trade))
    _echo_placed(placed, session.risk_threshold)


@app.command("run-local")
def run_local(
    ctx: typer.Context,
    spec: Path = typer.Option(..., "--spec", exists=True, file_okay=True, dir_okay=False),
    as_json: bool = typer.Option(False, "--json/--no-json"),
) -> None:
    """Place every order of a JSON batch file and print the summary."""

    try:
        batch = reporting.OrderBatch.model_validate_json(spec.read_text())
    except ValidationError as e:
        typer.echo(f"Invalid order file: {e.error_count()} error(s)")
        raise typer.Exit(1)

    session = _session(ctx)
    reports = []
    for order in batch.orders:
        try:
            placed = session.place_trade(order.stock_code, order.shares, order.investment_term)
        except TradeSimulatorError as e:
            typer.echo(f"Skipping order {order.stock_code}: {e}")
            continue
        reports.append(reporting.TradeReport.from_trade(placed.trade, placed.risk_warning))

    summary = session.summary()
    if as_json:
        payload = reporting.PortfolioReport.build(reports, summary)
        typer.echo(json.dumps(payload.model_dump(), separators=(",", ":")))
        return
    df = reporting.trades_frame(session.trades)
    if df.empty:
        typer.echo("No trades placed")
    else:
        typer.echo(df.to_string(index=False))
    typer.echo(reporting.format_summary(summary.total_profit_or_loss))


if __name__ == "__main__":
    app()
