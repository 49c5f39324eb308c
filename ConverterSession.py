"""
Interactive converter session.

`ConverterSession` owns everything the front end changes while the user
works: the active domain, the amount text and the two selected units. It
wires together the catalog, the rate resolver, the conversion engine, the
formatter and the search index, so the front end only forwards input and
reads back display strings and status flags.

Behavior
--------
- `activate(UnitDomain.CURRENCY)` fetches rates the first time currencies are
  shown; later activations only re-validate the selected units.
- Activating a physical domain always selects its two default units.
- Whenever either selected unit is missing from the active catalog, both are
  reset to the domain defaults (USD/EUR for currency). The user's `to_unit`
  is not preserved even when only `from_unit` is invalid.

Caveats
-------
- Construction performs no I/O; call `activate` to start.
- The rate fetch is synchronous and blocks the caller until it completes.
"""

from AmountSanitizer import AmountSanitizer
from ConversionEngine import ConversionEngine
from RateResolver import RateResolver
from ResultFormatter import ResultFormatter
from UnitCatalog import UnitCatalog
from UnitDomain import UnitDomain
from UnitSearcher import UnitSearcher


class ConverterSession:
    """
    State of one interactive conversion session.

    Attributes
    ----------
    domain : UnitDomain
    amount : str
        Amount text as accepted by the sanitizer.
    from_unit, to_unit : str
    rate_resolver : RateResolver
    unit_catalog : UnitCatalog
    """
    DEFAULT_AMOUNT = '1'


    def __init__(self, rate_resolver=None, unit_catalog=None, domain=UnitDomain.CURRENCY):
        self.rate_resolver = rate_resolver or RateResolver()
        self.unit_catalog = unit_catalog or UnitCatalog()
        self.sanitizer = AmountSanitizer()
        self.conversion_engine = ConversionEngine(self.unit_catalog, self.sanitizer)
        self.result_formatter = ResultFormatter()
        self.unit_searcher = UnitSearcher(self.unit_catalog)

        self.domain = UnitDomain(domain)
        self.amount = self.DEFAULT_AMOUNT
        self.from_unit, self.to_unit = self.unit_catalog.default_units(self.domain)


    @property
    def snapshot(self):
        return self.rate_resolver.snapshot


    @property
    def loading(self):
        return self.rate_resolver.loading


    @property
    def error(self):
        return self.rate_resolver.error


    @property
    def last_updated(self):
        return self.rate_resolver.last_updated


    def activate(self, domain):
        """
        Switch the session to `domain` and make the selected units valid.

        Returns
        -------
        tuple[str, str]
            The (from_unit, to_unit) pair selected afterwards.
        """
        self.domain = UnitDomain(domain)
        if self.domain.is_physical():
            self.from_unit, self.to_unit = self.unit_catalog.default_units(self.domain)
        elif not self.rate_resolver.currency_codes:
            self.refresh_rates()
        else:
            self.revalidate_units()
        return self.from_unit, self.to_unit


    def refresh_rates(self):
        snapshot = self.rate_resolver.refresh_currency_rates()
        # A refresh may land after a domain switch; only currency units depend on it.
        if self.domain is UnitDomain.CURRENCY:
            self.revalidate_units()
        return snapshot


    def revalidate_units(self):
        """Reset both units to the domain defaults if either is not in the active catalog."""
        codes = self.unit_catalog.codes(self.domain, self.snapshot)
        if self.from_unit not in codes or self.to_unit not in codes:
            self.from_unit, self.to_unit = self.unit_catalog.default_units(self.domain)
        return self.from_unit, self.to_unit


    def enter_amount(self, raw):
        self.amount = self.sanitizer.accept(self.amount, raw)
        return self.amount


    def select_from_unit(self, code):
        self.from_unit = code


    def select_to_unit(self, code):
        self.to_unit = code


    def swap_units(self):
        self.from_unit, self.to_unit = self.to_unit, self.from_unit


    def result_value(self):
        return self.conversion_engine.convert(self.domain, self.amount, self.from_unit, self.to_unit, self.snapshot)


    def result(self):
        return self.result_formatter.format_result(self.result_value(), self.to_unit)


    def result_label(self):
        return self.unit_catalog.label_for(self.domain, self.to_unit)


    def amount_display(self):
        return self.result_formatter.format_amount(self.amount, self.from_unit)


    def options(self, query=''):
        """
        Return the active domain's catalog entries matching `query`.
        """
        entries = self.unit_catalog.list_units(self.domain, self.snapshot)
        return self.unit_searcher.filter(entries, query)


    def status_text(self):
        """
        Status line shown under currency results.

        Returns
        -------
        str | None
            None outside the currency domain or while an error is shown.
        """
        if self.domain is not UnitDomain.CURRENCY or self.error:
            return None
        if self.loading:
            return "Fetching live rates..."
        updated = self.last_updated.strftime("%H:%M:%S") if self.last_updated else "never"
        return f"Rates Updated: {updated}"


    def __str__(self):
        return (
            f"{self.amount_display()} {self.from_unit} = "
            f"{self.result()} {self.result_label()}"
        )
