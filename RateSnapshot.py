import math
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Mapping

@dataclass(frozen=True)
class RateSnapshot:
    """
    Immutable capture of currency rates against `base_currency`.

    The rates mapping is copied into a read-only view on construction, so a
    snapshot can be shared freely and is only ever replaced as a whole.
    """
    rates: Mapping[str, Any]
    base_currency: str = "USD"
    captured_at: datetime = field(default_factory=datetime.now)


    def __post_init__(self):
        object.__setattr__(self, "rates", MappingProxyType(dict(self.rates)))


    def rate_for(self, code):
        """
        Return the positive rate for `code`, or None when the code is absent
        or its rate is zero, negative or not a finite number.
        """
        rate = self.rates.get(code)
        if isinstance(rate, bool) or not isinstance(rate, (int, float)):
            return None
        if not math.isfinite(rate) or rate <= 0:
            return None
        return float(rate)


    def codes(self):
        return list(self.rates.keys())
