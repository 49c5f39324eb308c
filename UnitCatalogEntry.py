from dataclasses import dataclass
from typing import Optional

from UnitDomain import UnitDomain

@dataclass(frozen=True)
class UnitCatalogEntry:
    code: str
    display_label: str
    conversion_factor: Optional[float]
    domain: UnitDomain


    def __str__(self):
        if self.conversion_factor is None:
            return f"{self.code} = {self.display_label}"
        factor = int(self.conversion_factor) if float(self.conversion_factor).is_integer() else self.conversion_factor
        return f"{self.code} = {self.display_label}, Factor = {factor}"
