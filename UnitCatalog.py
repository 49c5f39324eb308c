"""
Unit catalog for the three conversion domains.

This module defines `UnitCatalog`, which owns the static weight and length
tables (factor to the domain base unit plus a display label) and derives the
currency catalog from the latest `RateSnapshot`.

Base units used per domain
--------------------------
- Weight: kilograms (kg)
- Length: meters (m)
- Currency: US dollars (USD), with factors taken from the live snapshot

Notes & caveats
---------------
- Table order is significant: the first two keys of a physical table are the
  domain's default from/to units.
- Currency entries carry no static factor; `factor_for` reads the snapshot.
- Label lookups never raise. Unknown physical codes fall back to the raw
  code; currency names fall back to the code and symbols to "".
"""

from CurrencyNames import CurrencyNames
from UnitCatalogEntry import UnitCatalogEntry
from UnitDomain import UnitDomain

FACTORS = {
    UnitDomain.WEIGHT: {
        't': 1000,          # tonnes to kilograms
        'st': 6.35029,      # stones to kilograms
        'kg': 1,            # kilograms to kilograms
        'lb': 0.453592,     # pounds to kilograms
        'oz': 0.0283495,    # ounces to kilograms
        'g': 0.001,         # grams to kilograms
        'ct': 0.0002,       # carats to kilograms
        'mg': 0.000001,     # milligrams to kilograms
    },
    UnitDomain.LENGTH: {
        'ly': 9460730472580.8,  # light years to meters
        'au': 149597870700,     # astronomical units to meters
        'mi': 1609.34,          # miles to meters
        'km': 1000,             # kilometers to meters
        'm': 1,                 # meters to meters
        'ft': 0.3048,           # feet to meters
        'in': 0.0254,           # inches to meters
        'cm': 0.01,             # centimeters to meters
        'mm': 0.001,            # millimeters to meters
        'µm': 0.000001,         # micrometers to meters
        'nm': 0.000000001,      # nanometers to meters
    },
}

LABELS = {
    UnitDomain.WEIGHT: {
        't': 'Tonnes', 'st': 'Stones', 'kg': 'Kilograms', 'lb': 'Pounds',
        'oz': 'Ounces', 'g': 'Grams', 'ct': 'Carats', 'mg': 'Milligrams',
    },
    UnitDomain.LENGTH: {
        'ly': 'Light Years', 'au': 'Astronomical Units', 'mi': 'Miles',
        'km': 'Kilometers', 'm': 'Meters', 'ft': 'Feet', 'in': 'Inches',
        'cm': 'Centimeters', 'mm': 'Millimeters', 'µm': 'Micrometers',
        'nm': 'Nanometers',
    },
}

CURRENCY_DEFAULTS = ('USD', 'EUR')


class UnitCatalog:
    """
    Provide unit listings, labels and factors for each `UnitDomain`.
    """

    def __init__(self, currency_names=None):
        """
        Parameters
        ----------
        currency_names : CurrencyNames, optional
            Name/symbol resolver used for currency labels. Swappable so the
            lookup mechanism can be replaced (or stubbed in tests).
        """
        self.currency_names = currency_names or CurrencyNames()


    def codes(self, domain, snapshot=None):
        domain = UnitDomain(domain)
        if domain is UnitDomain.CURRENCY:
            return snapshot.codes() if snapshot is not None else []
        return list(FACTORS[domain])


    def list_units(self, domain, snapshot=None):
        """
        List the catalog entries of `domain` in declaration (or feed) order.

        Parameters
        ----------
        domain : UnitDomain | str
        snapshot : RateSnapshot, optional
            Required to list currencies; without it the currency catalog is
            empty.

        Returns
        -------
        list[UnitCatalogEntry]
        """
        domain = UnitDomain(domain)
        entries = []
        for code in self.codes(domain, snapshot):
            factor = None if domain is UnitDomain.CURRENCY else FACTORS[domain][code]
            entries.append(UnitCatalogEntry(code, self.label_for(domain, code), factor, domain))
        return entries


    def label_for(self, domain, code):
        """
        Return the human-readable label for `code`.

        Currency labels are composed as "<Name> (<Symbol>)", e.g.
        "Euro (€)". Physical labels come from the fixed tables.
        """
        domain = UnitDomain(domain)
        if domain is UnitDomain.CURRENCY:
            name = self.currency_names.resolve_name(code)
            if not name.ok:
                print(f"Label Error: {name.error}")
                return code
            symbol = self.currency_names.resolve_symbol(code).or_else("")
            return f"{name.value} ({symbol})"
        return LABELS[domain].get(code, code)


    def full_name_for(self, domain, code):
        domain = UnitDomain(domain)
        if domain is UnitDomain.CURRENCY:
            return self.currency_names.resolve_name(code).or_else("")
        return LABELS[domain].get(code, "")


    def symbol_for(self, domain, code):
        if UnitDomain(domain) is UnitDomain.CURRENCY:
            return self.currency_names.resolve_symbol(code).or_else("")
        return ""


    def factor_for(self, domain, code, snapshot=None):
        """
        Return the conversion factor of `code`, or None when it is unknown.

        For currencies the factor is the snapshot rate against USD; a missing
        snapshot, a missing code or a non-positive rate all count as unknown.
        """
        domain = UnitDomain(domain)
        if domain is UnitDomain.CURRENCY:
            return snapshot.rate_for(code) if snapshot is not None else None
        factor = FACTORS[domain].get(code)
        return float(factor) if factor is not None else None


    def default_units(self, domain):
        """
        Return the (from_unit, to_unit) pair used when a domain is activated
        or when the selected units are no longer valid.
        """
        domain = UnitDomain(domain)
        if domain is UnitDomain.CURRENCY:
            return CURRENCY_DEFAULTS
        keys = list(FACTORS[domain])
        return keys[0], keys[1]


if __name__ == "__main__":
    # Example usage / quick sanity checks
    unit_catalog = UnitCatalog()
    for entry in unit_catalog.list_units(UnitDomain.LENGTH):
        print(entry)
    print(unit_catalog.label_for(UnitDomain.CURRENCY, 'EUR'))
