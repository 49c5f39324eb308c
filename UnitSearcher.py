from UnitCatalog import UnitCatalog


class UnitSearcher:
    """
    Free-text filter for unit option lists.

    A unit matches when the query is a case-insensitive substring of its
    code, display label, full name or symbol. Fields that cannot be resolved
    (e.g. a malformed currency code) are searched as "".
    """

    def __init__(self, catalog=None):
        self.catalog = catalog or UnitCatalog()


    def matches(self, entry, query):
        if not query:
            return True
        needle = query.lower()
        fields = (
            entry.code,
            entry.display_label,
            self.catalog.full_name_for(entry.domain, entry.code),
            self.catalog.symbol_for(entry.domain, entry.code),
        )
        return any(needle in (field or '').lower() for field in fields)


    def filter(self, entries, query):
        return [entry for entry in entries if self.matches(entry, query)]
