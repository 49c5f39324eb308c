from enum import Enum


class UnitDomain(str, Enum):
    """
    Partition of convertible units. Member order is the tab order shown to
    the user; the set is fixed and never extended at runtime.
    """
    CURRENCY = "Currency"
    WEIGHT = "Weight"
    LENGTH = "Length"


    def is_physical(self):
        return self is not UnitDomain.CURRENCY
