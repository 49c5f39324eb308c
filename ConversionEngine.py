"""
Base-normalized conversion between two units of one domain.

`ConversionEngine.convert` normalizes the amount through the domain's base
unit and scales it to the target unit:

- Weight / Length: in_base = amount * factor(from); result = in_base / factor(to)
- Currency:        in_base = amount / rate(from);   result = in_base * rate(to)

Currency rates are "units per USD", which is why the currency path divides
first where the physical path multiplies.

Key points
----------
- Returns the raw float; formatting lives in `ResultFormatter`.
- Every failure degrades to the sentinel `NO_RESULT` ("0"): unparseable
  amounts, codes missing from the catalog or snapshot, zero rates from a
  malformed feed, and overflowing results. Nothing is raised.
- `from_unit == to_unit` returns the parsed amount exactly.
"""

import math

from AmountSanitizer import AmountSanitizer
from UnitCatalog import UnitCatalog
from UnitDomain import UnitDomain

NO_RESULT = "0"


class ConversionEngine:
    """
    Convert amounts using static factors or a currency `RateSnapshot`.
    """

    def __init__(self, catalog=None, sanitizer=None):
        self.catalog = catalog or UnitCatalog()
        self.sanitizer = sanitizer or AmountSanitizer()


    def convert(self, domain, amount_raw, from_unit, to_unit, snapshot=None):
        """
        Convert `amount_raw` from `from_unit` to `to_unit`.

        Parameters
        ----------
        domain : UnitDomain | str
        amount_raw : str | float | int
            Amount as typed (grouping commas allowed) or as a number.
        from_unit, to_unit : str
            Catalog codes of the active domain.
        snapshot : RateSnapshot, optional
            Required for `UnitDomain.CURRENCY`.

        Returns
        -------
        float | str
            Converted value, or `NO_RESULT` when no conversion is possible.
        """
        amount = self.sanitizer.to_number(amount_raw)
        if amount is None:
            return NO_RESULT

        domain = UnitDomain(domain)
        from_factor = self.catalog.factor_for(domain, from_unit, snapshot)
        to_factor = self.catalog.factor_for(domain, to_unit, snapshot)
        if not from_factor or not to_factor:
            return NO_RESULT

        if from_unit == to_unit:
            return amount

        if domain is UnitDomain.CURRENCY:
            in_base = amount / from_factor
            converted_value = in_base * to_factor
        else:
            in_base = amount * from_factor
            converted_value = in_base / to_factor

        if not math.isfinite(converted_value):
            return NO_RESULT
        return converted_value


if __name__ == "__main__":
    # Example usage / quick sanity checks
    conversion_engine = ConversionEngine()
    print(conversion_engine.convert(UnitDomain.WEIGHT, "1,000", 'g', 'kg'))
    print(conversion_engine.convert(UnitDomain.LENGTH, "1", 'km', 'm'))
