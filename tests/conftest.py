from __future__ import annotations

import requests


class FakeResponse:
    def __init__(self, payload=None, status_code: int = 200, text: str | None = None, json_error: Exception | None = None) -> None:
        self._payload = payload
        self.status_code = status_code
        self.text = text if text is not None else str(payload)
        self._json_error = json_error

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Server Error")

    def json(self):
        if self._json_error is not None:
            raise self._json_error
        return self._payload


class FakeSession:
    """Stands in for requests.Session; maps a symbol found in the URL to a response or exception."""

    def __init__(self, responses: dict) -> None:
        self.responses = responses
        self.calls: list[tuple[str, float]] = []

    def get(self, url: str, timeout: float):
        self.calls.append((url, timeout))
        for symbol, outcome in self.responses.items():
            if f"/{symbol}/" in url:
                if isinstance(outcome, Exception):
                    raise outcome
                return outcome
        raise AssertionError(f"unexpected url {url}")


def quote_payload(symbol: str, price: str, name: str = "Example Corp") -> dict:
    return {
        "list": {
            "meta": {"type": "resource-list", "start": 0, "count": 1},
            "resources": [
                {
                    "resource": {
                        "classname": "Quote",
                        "fields": {
                            "name": name,
                            "price": price,
                            "symbol": symbol,
                            "ts": "1444420802",
                            "type": "equity",
                            "utctime": "2015-10-09T20:00:02+0000",
                            "volume": "1234567",
                        },
                    }
                }
            ],
        }
    }
