# stockticker/config.py
# Shared configurations for the project

import os

from dotenv import load_dotenv

load_dotenv()

QUOTE_URL_TEMPLATE = os.getenv(
    "STOCKTICKER_QUOTE_URL",
    "http://finance.yahoo.com/webservice/v1/symbols/{symbol}/quote?format=json",
) # Quote endpoint, {symbol} is substituted per request
REQUEST_TIMEOUT_SECONDS = float(os.getenv("STOCKTICKER_TIMEOUT", "10"))
DEFAULT_INTERVAL_SECONDS = int(os.getenv("STOCKTICKER_INTERVAL", "5"))
MAX_FETCH_WORKERS = int(os.getenv("STOCKTICKER_MAX_WORKERS", "8")) # Upper bound on concurrent quote requests

if REQUEST_TIMEOUT_SECONDS <= 0:
    raise ValueError(f"FATAL: STOCKTICKER_TIMEOUT must be greater than 0, got {REQUEST_TIMEOUT_SECONDS}.")
if DEFAULT_INTERVAL_SECONDS < 1:
    raise ValueError(f"FATAL: STOCKTICKER_INTERVAL must be at least 1, got {DEFAULT_INTERVAL_SECONDS}.")
if MAX_FETCH_WORKERS < 1:
    raise ValueError(f"FATAL: STOCKTICKER_MAX_WORKERS must be at least 1, got {MAX_FETCH_WORKERS}.")

# The terminal is owned by the UI, so logs go to a file
LOG_FILE = os.getenv("STOCKTICKER_LOG_FILE", "stockticker.log")
LOG_LEVEL = os.getenv("STOCKTICKER_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"
