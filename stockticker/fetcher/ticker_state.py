# stockticker/fetcher/ticker_state.py
# Shared per-symbol price state and the concurrent refresh that fills it.

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass

from stockticker import config
from stockticker.fetcher.fetch_stock_quotes import PriceParseError, fetch_quote

logger = logging.getLogger(__name__)


@dataclass
class PriceState:
    current: float = 0.0
    previous: float = 0.0  # 0.0 means no earlier price


def parse_symbols(raw):
    """Splits a comma-separated symbol list, e.g. "aapl,MSFT, goog"."""
    symbols = []
    for part in (raw or "").split(","):
        symbol = part.strip().upper()
        if symbol and symbol not in symbols:
            symbols.append(symbol)
    return symbols


class StockTicker:
    """Current/previous prices for a set of symbols, guarded by a lock.

    ``fetch`` is called once per symbol on every refresh and must return a
    float price or None.
    """

    def __init__(self, interval, fetch=fetch_quote, max_workers=None):
        self.interval = interval
        self._fetch = fetch
        if max_workers is None:
            max_workers = config.MAX_FETCH_WORKERS
        if max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")
        self._max_workers = max_workers
        self._quotes = {}
        self._lock = threading.Lock()

    def add(self, symbol):
        with self._lock:
            if symbol not in self._quotes:
                self._quotes[symbol] = PriceState()

    def add_symbols(self, raw):
        for symbol in parse_symbols(raw):
            self.add(symbol)

    def update_stock(self, symbol, price):
        with self._lock:
            old = self._quotes.get(symbol, PriceState())
            self._quotes[symbol] = PriceState(current=price, previous=old.current)

    def symbols(self):
        with self._lock:
            return sorted(self._quotes)

    def snapshot(self):
        with self._lock:
            return [
                (symbol, PriceState(state.current, state.previous))
                for symbol, state in sorted(self._quotes.items())
            ]

    def _fetch_one(self, symbol):
        try:
            return self._fetch(symbol)
        except PriceParseError as e:
            logger.error(f"Could not parse price for {symbol}: {e}")
            return None

    def refresh(self):
        """Fetches every symbol concurrently and waits for all of them.

        Returns the number of symbols whose price was updated.
        """
        symbols = self.symbols()
        if not symbols:
            return 0

        logger.info(f"--- Starting refresh for {len(symbols)} symbols ---")
        cycle_start_time = time.time()
        updated = 0

        with ThreadPoolExecutor(max_workers=min(self._max_workers, len(symbols))) as pool:
            futures = {pool.submit(self._fetch_one, symbol): symbol for symbol in symbols}
            for future in as_completed(futures):
                symbol = futures[future]
                price = future.result()
                if price is None:
                    logger.warning(f"Keeping previous state for {symbol}.")
                    continue
                self.update_stock(symbol, price)
                updated += 1

        cycle_duration_seconds = time.time() - cycle_start_time
        logger.info(f"--- Refresh updated {updated}/{len(symbols)} symbols in {cycle_duration_seconds:.2f} seconds. ---")
        return updated
