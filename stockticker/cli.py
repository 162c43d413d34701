# stockticker/cli.py
# Command line entry point: parses flags, configures logging and runs the ticker.

import logging

import click

from stockticker import config
from stockticker.display.render import render_lines
from stockticker.display.ticker_app import TickerApp
from stockticker.fetcher.ticker_state import StockTicker, parse_symbols

logger = logging.getLogger(__name__)


def configure_logging(level, logfile=config.LOG_FILE):
    logging.basicConfig(
        level=level.upper(),
        filename=logfile,
        format=config.LOG_FORMAT,
        datefmt=config.LOG_DATEFMT,
        force=True,
    )


@click.command()
@click.option("-s", "--symbols", "symbols_flag", required=True, help="Symbols for ticker, comma separated (no spaces)")
@click.option(
    "-i",
    "--interval",
    type=click.IntRange(min=1),
    default=config.DEFAULT_INTERVAL_SECONDS,
    show_default=True,
    help="Interval for stock data to be updated in seconds",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=config.LOG_LEVEL,
    show_default=True,
    help="Logging level for the log file",
)
@click.option("--once", is_flag=True, help="Fetch one round, print it and exit")
def main(symbols_flag, interval, log_level, once):
    """Live terminal stock ticker."""
    symbols = parse_symbols(symbols_flag)
    if not symbols:
        raise click.UsageError("No symbols given; pass e.g. -s AAPL,MSFT")

    configure_logging(log_level)

    ticker = StockTicker(interval)
    for symbol in symbols:
        ticker.add(symbol)
    logger.info(f"Tracking {len(symbols)} symbols: {', '.join(symbols)}")

    if once:
        ticker.refresh()
        for line in render_lines(ticker.snapshot()):
            click.echo(line)
        return

    TickerApp(ticker).run()


if __name__ == "__main__":
    main()
