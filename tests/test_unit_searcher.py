"""Tests for UnitSearcher option filtering."""

import pytest

from RateSnapshot import RateSnapshot
from UnitCatalogEntry import UnitCatalogEntry
from UnitDomain import UnitDomain
from UnitSearcher import UnitSearcher


@pytest.fixture
def searcher(unit_catalog):
    return UnitSearcher(unit_catalog)


@pytest.fixture
def currencies(unit_catalog, snapshot):
    return unit_catalog.list_units(UnitDomain.CURRENCY, snapshot)


class TestMatches:
    @pytest.mark.parametrize("domain", [UnitDomain.WEIGHT, UnitDomain.LENGTH])
    def test_empty_query_matches_everything(self, searcher, unit_catalog, domain):
        entries = unit_catalog.list_units(domain)
        assert all(searcher.matches(entry, "") for entry in entries)

    def test_empty_query_matches_every_currency(self, searcher, currencies):
        assert all(searcher.matches(entry, "") for entry in currencies)

    def test_matches_code_case_insensitively(self, searcher, unit_catalog):
        codes = [entry.code for entry in searcher.filter(unit_catalog.list_units(UnitDomain.WEIGHT), "KG")]
        assert codes == ["kg"]

    def test_matches_physical_label(self, searcher, unit_catalog):
        codes = [entry.code for entry in searcher.filter(unit_catalog.list_units(UnitDomain.WEIGHT), "gram")]
        assert codes == ["kg", "g", "mg"]

    def test_matches_currency_name(self, searcher, currencies):
        assert [entry.code for entry in searcher.filter(currencies, "rupee")] == ["INR"]

    def test_matches_currency_symbol(self, searcher, currencies):
        assert [entry.code for entry in searcher.filter(currencies, "€")] == ["EUR"]

    def test_no_match(self, searcher, currencies):
        assert searcher.filter(currencies, "zzz") == []

    def test_malformed_code_degrades_without_error(self, searcher, unit_catalog):
        snapshot = RateSnapshot(rates={"X1": 2})
        entry = unit_catalog.list_units(UnitDomain.CURRENCY, snapshot)[0]
        assert entry.display_label == "X1"
        assert searcher.matches(entry, "x1")
        assert not searcher.matches(entry, "dollar")

    def test_hand_built_entry(self, searcher):
        entry = UnitCatalogEntry("ft", "Feet", 0.3048, UnitDomain.LENGTH)
        assert searcher.matches(entry, "fee")
