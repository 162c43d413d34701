# stockticker/display/ticker_app.py
# Terminal screen: refreshes the ticker, redraws, then waits for the timer or a key press.

import datetime
import logging

from textual import work
from textual.app import App
from textual.binding import Binding
from textual.widgets import Header, Static
from textual.worker import get_current_worker

from stockticker.display.render import render_text

logger = logging.getLogger(__name__)


class TickerApp(App):
    TITLE = "stockticker"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", priority=True),
    ]

    CSS = """
    #quotes {
        height: 1fr;
        padding: 1 1;
    }

    #status {
        height: 1;
        padding: 0 1;
        color: $text-muted;
    }
    """

    def __init__(self, ticker):
        super().__init__()
        self.ticker = ticker
        self.refresh_count = 0
        self.last_body = None  # Text shown in #quotes after the latest redraw
        self.last_status = ""
        self._next_refresh = None

    def compose(self):
        yield Header(show_clock=True)
        yield Static("Loading quotes...", id="quotes")
        yield Static("", id="status")

    def on_mount(self):
        logger.info(f"Starting ticker for {', '.join(self.ticker.symbols())} every {self.ticker.interval}s")
        self.refresh_quotes()

    def on_key(self, event):
        logger.info(f"Key {event.key!r} pressed, quitting")
        event.stop()
        self.exit()

    def on_unmount(self):
        if self._next_refresh is not None:
            self._next_refresh.stop()
        logger.info("Ticker shutting down.")

    @work(thread=True, exclusive=True)
    def refresh_quotes(self):
        try:
            updated = self.ticker.refresh()
        except Exception as e:
            logger.critical(f"An unhandled error occurred during refresh: {e}", exc_info=True)
            raise
        if not get_current_worker().is_cancelled:
            self.call_from_thread(self._redraw, updated)

    def _redraw(self, updated):
        self.refresh_count += 1
        snapshot = self.ticker.snapshot()
        self.last_body = render_text(snapshot)
        self.query_one("#quotes", Static).update(self.last_body)
        stamp = datetime.datetime.now().strftime("%H:%M:%S")
        self.last_status = (
            f"Updated {updated}/{len(snapshot)} at {stamp} - next in {self.ticker.interval}s - press any key to quit"
        )
        self.query_one("#status", Static).update(self.last_status)
        self._next_refresh = self.set_timer(self.ticker.interval, self.refresh_quotes)
