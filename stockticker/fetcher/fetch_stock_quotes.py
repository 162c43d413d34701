# stockticker/fetcher/fetch_stock_quotes.py
# Fetches a single stock quote from the quote endpoint and extracts its price.

import datetime
import json
import logging
import re
from urllib.parse import quote

import requests

from stockticker import config

logger = logging.getLogger(__name__)

# Keeps at most two decimal places, truncating rather than rounding
PRICE_PATTERN = re.compile(r"^\d+(?:\.\d{1,2})?")


class PriceParseError(ValueError):
    """Raised when a quote's price field cannot be turned into a number."""


# --- Helper Functions ---
def build_quote_url(symbol):
    return config.QUOTE_URL_TEMPLATE.format(symbol=quote(symbol, safe=""))


def fetch_stock_quote(symbol, session=None):
    """
    Fetches the raw JSON quote document for one symbol.

    Args:
        symbol (str): Ticker symbol, e.g. "AAPL".
        session: Optional requests.Session (or anything with a compatible
            ``get``). Defaults to the ``requests`` module itself.

    Returns:
        dict: The decoded JSON document, or None if the request failed.
    """
    http = session if session is not None else requests
    url = build_quote_url(symbol)
    response = None
    try:
        logger.debug(f"Requesting quote for {symbol} from {url}")
        response = http.get(url, timeout=config.REQUEST_TIMEOUT_SECONDS)
        response.raise_for_status()
        return response.json()
    except requests.exceptions.HTTPError as http_err:
        logger.error(f"HTTP error for {symbol}: {http_err} - Status: {response.status_code} - Response: {response.text[:200]}")
    except requests.exceptions.ConnectionError as conn_err:
        logger.error(f"Connection error for {symbol}: {conn_err}")
    except requests.exceptions.Timeout as timeout_err:
        logger.error(f"Timeout error for {symbol}: {timeout_err}")
    except json.JSONDecodeError as json_err:
        body = response.text[:200] if response is not None else ""
        logger.error(f"Error decoding JSON for {symbol}: {json_err} - Response was: {body}")
    except requests.exceptions.RequestException as req_err:
        logger.error(f"API request error for {symbol}: {req_err}")
    return None


def extract_quote_fields(quote_data_raw):
    """Returns the ``fields`` object of the first resource, or None."""
    try:
        resources = quote_data_raw["list"]["resources"]
        fields = resources[0]["resource"]["fields"]
    except (KeyError, IndexError, TypeError):
        return None
    return fields if isinstance(fields, dict) else None


def truncate_price(price_text):
    match = PRICE_PATTERN.match(str(price_text))
    if match is None:
        raise PriceParseError(f"No price found in {price_text!r}")
    return match.group(0)


def parse_price(price_text):
    truncated = truncate_price(price_text)
    try:
        return float(truncated)
    except ValueError as e:
        raise PriceParseError(f"Could not convert {truncated!r} to a price") from e


def process_quote_data(quote_data_raw, symbol_ticker):
    """Processes raw quote data into a structured format.

    The returned dict is keyed by the symbol that was requested; the symbol
    echoed back by the API is kept separately as ``reported_symbol``.
    Raises PriceParseError if the price field is malformed.
    """
    if not quote_data_raw:
        return None

    fields = extract_quote_fields(quote_data_raw)
    if fields is None:
        logger.warning(f"No quote resource in response for {symbol_ticker}: {str(quote_data_raw)[:200]}")
        return None

    return {
        "symbol": symbol_ticker,
        "reported_symbol": fields.get("symbol"),
        "name": fields.get("name"),
        "price": parse_price(fields.get("price", "")),
        "volume": fields.get("volume"),
        "utctime": fields.get("utctime"),
        "fetch_timestamp_utc": datetime.datetime.now(datetime.timezone.utc).isoformat(),
    }


def fetch_quote(symbol, session=None):
    """Fetches and processes one quote. Returns the price as a float, or None."""
    raw_quote_data = fetch_stock_quote(symbol, session=session)
    if raw_quote_data is None:
        logger.warning(f"No data returned from fetch_stock_quote for {symbol}.")
        return None

    processed = process_quote_data(raw_quote_data, symbol)
    if processed is None:
        return None

    logger.info(f"Successfully fetched quote for {symbol}: Current Price {processed['price']}")
    return processed["price"]
