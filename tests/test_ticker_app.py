from __future__ import annotations

import re

import pytest

from stockticker.display.render import render_lines
from stockticker.display.ticker_app import TickerApp
from stockticker.fetcher.ticker_state import PriceState, StockTicker


def _ticker(prices: dict[str, float], interval: int = 60) -> StockTicker:
    ticker = StockTicker(interval, fetch=prices.get)
    for symbol in prices:
        ticker.add(symbol)
    return ticker


@pytest.mark.asyncio
async def test_app_refreshes_on_mount() -> None:
    app = TickerApp(_ticker({"MSFT": 47.5, "AAPL": 110.0}))

    async with app.run_test() as pilot:
        await app.workers.wait_for_complete()
        await pilot.pause()

        assert app.refresh_count == 1
        assert app.ticker.snapshot() == [
            ("AAPL", PriceState(current=110.0)),
            ("MSFT", PriceState(current=47.5)),
        ]


@pytest.mark.asyncio
async def test_app_schedules_next_refresh_after_interval() -> None:
    prices = {"AAPL": 110.0}
    app = TickerApp(_ticker(prices, interval=1))

    async with app.run_test() as pilot:
        await app.workers.wait_for_complete()
        prices["AAPL"] = 112.0
        await pilot.pause(1.5)
        await app.workers.wait_for_complete()
        await pilot.pause()

        assert app.refresh_count >= 2
        assert app.ticker.snapshot() == [("AAPL", PriceState(current=112.0, previous=110.0))]


@pytest.mark.asyncio
async def test_any_key_quits() -> None:
    app = TickerApp(_ticker({"AAPL": 110.0}))

    async with app.run_test() as pilot:
        await app.workers.wait_for_complete()
        await pilot.press("x")
        await pilot.pause()

    assert app.return_code == 0


@pytest.mark.asyncio
async def test_redraw_updates_body_and_status() -> None:
    app = TickerApp(_ticker({"MSFT": 47.5, "AAPL": 110.0}, interval=60))

    async with app.run_test() as pilot:
        await app.workers.wait_for_complete()
        await pilot.pause()

        assert app.last_body.plain == "\n".join(render_lines(app.ticker.snapshot()))
        assert app.last_status.startswith("Updated 2/2 at ")
        assert re.search(r"at \d{2}:\d{2}:\d{2} ", app.last_status)
        assert "next in 60s" in app.last_status


@pytest.mark.asyncio
async def test_status_counts_failed_symbols() -> None:
    prices = {"AAPL": 110.0, "MSFT": None}
    ticker = StockTicker(60, fetch=prices.get)
    ticker.add_symbols("AAPL,MSFT")
    app = TickerApp(ticker)

    async with app.run_test() as pilot:
        await app.workers.wait_for_complete()
        await pilot.pause()

        assert app.last_status.startswith("Updated 1/2 at ")
        assert app.last_body.plain.splitlines()[1] == "  MSFT       -       -    -"


@pytest.mark.asyncio
async def test_ctrl_c_quits() -> None:
    app = TickerApp(_ticker({"AAPL": 110.0}))

    async with app.run_test() as pilot:
        await app.workers.wait_for_complete()
        await pilot.press("ctrl+c")
        await pilot.pause()

    assert app.return_code == 0
