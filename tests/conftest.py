"""Shared pytest fixtures for converter tests."""

from unittest.mock import MagicMock

import pytest

from RateSnapshot import RateSnapshot
from UnitCatalog import UnitCatalog


@pytest.fixture
def snapshot():
    """Small USD-based snapshot with an Indian rupee rate."""
    return RateSnapshot(rates={"USD": 1, "EUR": 0.9, "GBP": 0.8, "INR": 83.0})


@pytest.fixture
def unit_catalog():
    return UnitCatalog()


@pytest.fixture
def rates_payload():
    return {
        "result": "success",
        "base_code": "USD",
        "rates": {"USD": 1, "EUR": 0.9, "GBP": 0.8, "INR": 83.0},
    }


@pytest.fixture
def make_response():
    """Build a stand-in for a `requests.Response`."""

    def _make(payload=None, status_code=200, json_error=None):
        response = MagicMock()
        response.status_code = status_code
        response.ok = 200 <= status_code < 300
        response.text = "" if payload is None else str(payload)
        if json_error is not None:
            response.json.side_effect = json_error
        else:
            response.json.return_value = payload
        return response

    return _make
