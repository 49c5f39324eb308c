"""
Currency display-name and symbol resolution.

`CurrencyNames` is the small capability the catalog and the search index use
to turn an ISO 4217 code into something readable. Both lookups return a
`Resolution` instead of raising, so callers decide on their own fallback.

Configuration
-------------
- CONVERTER_LOCALE
    Locale used for long currency names (default "en"). Symbols are always
    resolved for "en_US" so "$" stays "$" and "CA$" stays "CA$".

Notes
-----
- Names and symbols come from the CLDR data shipped with Babel.
- A code is only looked up when it is three ASCII letters; anything else is
  reported as a failed resolution.
- A well-formed code unknown to CLDR resolves to the code itself.
"""

import os
import re
from dataclasses import dataclass
from typing import Optional

from babel.core import UnknownLocaleError
from babel.numbers import get_currency_name, get_currency_symbol
from dotenv import load_dotenv

CODE_PATTERN = re.compile(r"^[A-Za-z]{3}$")

@dataclass(frozen=True)
class Resolution:
    ok: bool
    value: str = ""
    error: Optional[str] = None


    def or_else(self, fallback):
        return self.value if self.ok else fallback


class CurrencyNames:
    """
    Resolve currency names and symbols without letting lookup errors escape.
    """
    load_dotenv()
    LOCALE = os.getenv('CONVERTER_LOCALE', 'en')
    SYMBOL_LOCALE = 'en_US'


    def __init__(self, locale=None):
        self.locale = locale or self.LOCALE


    def resolve_name(self, code):
        """
        Resolve the long display name of `code` (e.g. "USD" -> "US Dollar").

        Returns
        -------
        Resolution
            ok=False with an error message for malformed codes or an unknown
            locale.
        """
        if not self.is_well_formed(code):
            return Resolution(ok=False, error=f"Invalid currency code: {code!r}")
        try:
            return Resolution(ok=True, value=get_currency_name(code.upper(), locale=self.locale))
        except (UnknownLocaleError, ValueError) as e:
            return Resolution(ok=False, error=str(e))


    def resolve_symbol(self, code):
        """
        Resolve the display symbol of `code` (e.g. "EUR" -> "€").
        """
        if not self.is_well_formed(code):
            return Resolution(ok=False, error=f"Invalid currency code: {code!r}")
        try:
            return Resolution(ok=True, value=get_currency_symbol(code.upper(), locale=self.SYMBOL_LOCALE))
        except (UnknownLocaleError, ValueError) as e:
            return Resolution(ok=False, error=str(e))


    def is_well_formed(self, code):
        return isinstance(code, str) and bool(CODE_PATTERN.match(code))
