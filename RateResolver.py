"""
Live currency-rate resolution.

Overview
--------
`RateResolver` fetches a USD-based rate table with a single GET request:

    https://open.er-api.com/v6/latest/USD

and keeps the latest successful result as an immutable `RateSnapshot`
together with the loading/error/last-updated state shown next to currency
results.

Environment variables (optional)
--------------------------------
- CONVERTER_RATES_URL
    Rate provider endpoint. The response must be JSON with a "rates" object
    mapping currency codes to numbers.
- CONVERTER_RATES_TIMEOUT
    Request timeout in seconds. Unset means no timeout, the embedding app is
    expected to impose one if it needs it.

Key points
----------
- `fetch_rates()` performs the request and raises `NetworkError` (transport
  failure, non-2xx status) or `ParseError` (non-JSON body, missing "rates").
- `refresh_currency_rates()` wraps it for the session: it never raises,
  keeps the previous snapshot on failure (stale rates beat no rates) and
  records a user-facing error message.
- Entries that are not positive finite numbers are dropped from the feed.

Caveats
-------
- No caching beyond the last snapshot, no retry and no polling.
- Overlapping refreshes are not deduplicated; the last one to finish wins.
- Weight and length never go through this class; their factors are static.
"""

import math
import os
from datetime import datetime
from types import MappingProxyType

import requests
from dotenv import load_dotenv

from RateSnapshot import RateSnapshot


class RateFetchError(Exception):
    """Base class for rate fetch failures."""


class NetworkError(RateFetchError):
    """Transport failure or a non-success HTTP status."""


class ParseError(RateFetchError):
    """Response body is not a usable rate table."""


class RateResolver:
    """
    Fetch and hold the current currency `RateSnapshot`.

    Attributes
    ----------
    url : str
        Rate provider endpoint.
    timeout : float | None
        Request timeout passed to `requests.get`.
    snapshot : RateSnapshot | None
        Last successfully fetched snapshot.
    loading : bool
        True only while a request is in flight.
    error : str | None
        User-facing message of the last failed refresh.
    last_updated : datetime | None
        Capture time of `snapshot`.
    """
    load_dotenv()
    RATES_URL = os.getenv('CONVERTER_RATES_URL', 'https://open.er-api.com/v6/latest/USD')
    RATES_TIMEOUT = os.getenv('CONVERTER_RATES_TIMEOUT')
    BASE_CURRENCY = 'USD'
    ERROR_MESSAGE = "Unable to connect to currency service."


    def __init__(self, url=None, timeout=None):
        self.url = url or self.RATES_URL
        if timeout is None and self.RATES_TIMEOUT:
            try:
                timeout = float(self.RATES_TIMEOUT)
            except ValueError as e:
                raise ValueError(f"CONVERTER_RATES_TIMEOUT must be a number of seconds, got {self.RATES_TIMEOUT!r}.") from e
        self.timeout = timeout
        self.snapshot = None
        self.loading = False
        self.error = None
        self.last_updated = None


    @property
    def rates(self):
        if self.snapshot is None:
            return MappingProxyType({})
        return self.snapshot.rates


    @property
    def currency_codes(self):
        return self.snapshot.codes() if self.snapshot is not None else []


    def fetch_rates(self):
        """
        Request the rate table and build a new snapshot from it.

        Returns
        -------
        RateSnapshot
            Snapshot holding every valid rate of the response.

        Raises
        ------
        NetworkError
            If the request fails or the status is not 2xx.
        ParseError
            If the body is not JSON or lacks a "rates" object.
        """
        try:
            response = requests.get(self.url, timeout=self.timeout)
        except requests.RequestException as e:
            raise NetworkError(f"Error: {e}") from e

        if not response.ok:
            raise NetworkError(f"Error: {response.status_code} - {response.text}")

        try:
            payload = response.json()
        except ValueError as e:
            raise ParseError(f"Error: response is not JSON - {e}") from e

        rates = payload.get('rates') if isinstance(payload, dict) else None
        if not isinstance(rates, dict):
            raise ParseError("Error: response has no 'rates' object")

        return RateSnapshot(
            rates=self.clean_rates(rates),
            base_currency=self.BASE_CURRENCY,
            captured_at=datetime.now()
        )


    def clean_rates(self, rates):
        # Keep feed order; it is the order currencies are listed in.
        cleaned = {}
        for code, rate in rates.items():
            if isinstance(rate, bool) or not isinstance(rate, (int, float)):
                continue
            if math.isfinite(rate) and rate > 0:
                cleaned[code] = rate
        return cleaned


    def refresh_currency_rates(self):
        """
        Refresh the snapshot once, recording loading and error state.

        Returns
        -------
        RateSnapshot | None
            The snapshot held after the attempt: the new one on success, the
            previous (possibly None) one on failure.
        """
        self.loading = True
        self.error = None
        try:
            snapshot = self.fetch_rates()
        except RateFetchError as e:
            print("API Error:", e)
            self.error = self.ERROR_MESSAGE
        else:
            self.snapshot = snapshot
            self.last_updated = snapshot.captured_at
        finally:
            self.loading = False
        return self.snapshot


if __name__ == "__main__":
    # Example execution: fetch live rates and show a few of them.
    rate_resolver = RateResolver()
    snapshot = rate_resolver.refresh_currency_rates()
    if snapshot is None:
        print(rate_resolver.error)
    else:
        print(f"{len(snapshot.rates)} rates captured at {rate_resolver.last_updated:%H:%M:%S}")
        print({code: snapshot.rates[code] for code in list(snapshot.rates)[:5]})
