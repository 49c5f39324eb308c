"""Tests for UnitCatalog listings, labels and factors."""

import pytest

from CurrencyNames import CurrencyNames, Resolution
from RateSnapshot import RateSnapshot
from UnitCatalog import UnitCatalog
from UnitCatalogEntry import UnitCatalogEntry
from UnitDomain import UnitDomain


class FailingNames(CurrencyNames):
    """Resolver whose lookups always fail."""

    def resolve_name(self, code):
        return Resolution(ok=False, error="unsupported")

    def resolve_symbol(self, code):
        return Resolution(ok=False, error="unsupported")


class NameOnly(CurrencyNames):
    def resolve_symbol(self, code):
        return Resolution(ok=False, error="no symbol")


class TestListUnits:
    def test_weight_in_declaration_order(self, unit_catalog):
        codes = [entry.code for entry in unit_catalog.list_units(UnitDomain.WEIGHT)]
        assert codes == ["t", "st", "kg", "lb", "oz", "g", "ct", "mg"]

    def test_length_entries_carry_labels_and_factors(self, unit_catalog):
        entries = {entry.code: entry for entry in unit_catalog.list_units("Length")}
        assert entries["km"].display_label == "Kilometers"
        assert entries["km"].conversion_factor == 1000
        assert entries["µm"].display_label == "Micrometers"
        assert entries["km"].domain is UnitDomain.LENGTH

    def test_currency_without_snapshot_is_empty(self, unit_catalog):
        assert unit_catalog.list_units(UnitDomain.CURRENCY) == []

    def test_currency_follows_snapshot(self, unit_catalog, snapshot):
        entries = unit_catalog.list_units(UnitDomain.CURRENCY, snapshot)
        assert [entry.code for entry in entries] == ["USD", "EUR", "GBP", "INR"]
        assert all(entry.conversion_factor is None for entry in entries)
        assert entries[1].display_label == "Euro (€)"


class TestLabelFor:
    def test_physical_label(self, unit_catalog):
        assert unit_catalog.label_for(UnitDomain.WEIGHT, "lb") == "Pounds"

    def test_unknown_physical_code_falls_back_to_code(self, unit_catalog):
        assert unit_catalog.label_for(UnitDomain.WEIGHT, "zz") == "zz"

    def test_currency_label_combines_name_and_symbol(self, unit_catalog):
        assert unit_catalog.label_for(UnitDomain.CURRENCY, "USD") == "US Dollar ($)"
        assert unit_catalog.label_for(UnitDomain.CURRENCY, "INR") == "Indian Rupee (₹)"

    def test_malformed_currency_code_falls_back_to_code(self, unit_catalog):
        assert unit_catalog.label_for(UnitDomain.CURRENCY, "US1") == "US1"

    def test_name_failure_falls_back_to_code(self):
        catalog = UnitCatalog(currency_names=FailingNames())
        assert catalog.label_for(UnitDomain.CURRENCY, "EUR") == "EUR"

    def test_name_failure_is_reported(self, capsys):
        UnitCatalog(currency_names=FailingNames()).label_for(UnitDomain.CURRENCY, "EUR")
        assert "Label Error: unsupported" in capsys.readouterr().out

    def test_symbol_failure_leaves_empty_symbol(self):
        catalog = UnitCatalog(currency_names=NameOnly())
        assert catalog.label_for(UnitDomain.CURRENCY, "EUR") == "Euro ()"


class TestSearchFields:
    def test_full_name_and_symbol_for_currency(self, unit_catalog):
        assert unit_catalog.full_name_for(UnitDomain.CURRENCY, "GBP") == "British Pound"
        assert unit_catalog.symbol_for(UnitDomain.CURRENCY, "GBP") == "£"

    def test_physical_units_have_no_symbol(self, unit_catalog):
        assert unit_catalog.full_name_for(UnitDomain.LENGTH, "ft") == "Feet"
        assert unit_catalog.symbol_for(UnitDomain.LENGTH, "ft") == ""

    def test_failures_degrade_to_empty(self, unit_catalog):
        assert unit_catalog.full_name_for(UnitDomain.CURRENCY, "??") == ""
        assert unit_catalog.symbol_for(UnitDomain.CURRENCY, "??") == ""


class TestFactorFor:
    def test_static_factor(self, unit_catalog):
        assert unit_catalog.factor_for(UnitDomain.WEIGHT, "g") == 0.001

    def test_unknown_static_code(self, unit_catalog):
        assert unit_catalog.factor_for(UnitDomain.LENGTH, "furlong") is None

    def test_currency_factor_from_snapshot(self, unit_catalog, snapshot):
        assert unit_catalog.factor_for(UnitDomain.CURRENCY, "EUR", snapshot) == 0.9
        assert unit_catalog.factor_for(UnitDomain.CURRENCY, "JPY", snapshot) is None

    def test_currency_factor_without_snapshot(self, unit_catalog):
        assert unit_catalog.factor_for(UnitDomain.CURRENCY, "USD") is None

    def test_zero_rate_counts_as_absent(self, unit_catalog):
        snapshot = RateSnapshot(rates={"USD": 1, "XAU": 0})
        assert unit_catalog.factor_for(UnitDomain.CURRENCY, "XAU", snapshot) is None


class TestDefaultUnits:
    def test_currency_defaults(self, unit_catalog):
        assert unit_catalog.default_units(UnitDomain.CURRENCY) == ("USD", "EUR")

    def test_physical_defaults_are_first_two_keys(self, unit_catalog):
        assert unit_catalog.default_units(UnitDomain.WEIGHT) == ("t", "st")
        assert unit_catalog.default_units(UnitDomain.LENGTH) == ("ly", "au")


class TestEntryAndDomain:
    def test_entry_str(self):
        assert str(UnitCatalogEntry("km", "Kilometers", 1000, UnitDomain.LENGTH)) == "km = Kilometers, Factor = 1000"
        assert str(UnitCatalogEntry("EUR", "Euro (€)", None, UnitDomain.CURRENCY)) == "EUR = Euro (€)"

    def test_domain_order_and_lookup(self):
        assert [domain.value for domain in UnitDomain] == ["Currency", "Weight", "Length"]
        assert UnitDomain("Weight") is UnitDomain.WEIGHT
        assert UnitDomain.LENGTH.is_physical()
        assert not UnitDomain.CURRENCY.is_physical()

    def test_entry_requires_domain(self):
        with pytest.raises(TypeError):
            UnitCatalogEntry("ft", "Feet", 0.3048)
