# stockticker/display/render.py
# Turns ticker snapshots into display rows.

from rich.text import Text

UP = "\u2191"  # '↑'
DOWN = "\u2193"  # '↓'
FLAT = "-"

ROW_STYLE = {
    "up": "bold green",
    "down": "bold red",
    "flat": "white",
}


def direction(state):
    if state.previous == 0.0 or state.previous == state.current:
        return "flat"
    if state.current > state.previous:
        return "up"
    return "down"


def _price(value):
    return f"{value:.2f}"


def format_row(symbol, state):
    move = direction(state)
    if move == "flat":
        previous, indicator = FLAT, FLAT
    else:
        previous, indicator = _price(state.previous), UP if move == "up" else DOWN
    current = FLAT if state.current == 0.0 else _price(state.current)
    return f"{symbol:>6} {current:>7} {previous:>7} {indicator:>4}"


def styled_row(symbol, state):
    return Text(format_row(symbol, state), style=ROW_STYLE[direction(state)])


def render_lines(snapshot):
    """Plain rows in symbol order, for the headless ``--once`` output."""
    return [format_row(symbol, state) for symbol, state in sorted(snapshot, key=lambda item: item[0])]


def render_text(snapshot):
    """One styled Text block with a row per symbol."""
    rows = [styled_row(symbol, state) for symbol, state in sorted(snapshot, key=lambda item: item[0])]
    return Text("\n").join(rows)
