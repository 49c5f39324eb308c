"""
Amount field sanitizing.

`AmountSanitizer` turns raw keystrokes into the canonical amount text (digits
and at most one ".") and parses that text into a number for conversion.
Intermediate states such as "", "." or "12." are kept as typed so the field
stays editable; only a keystroke that would add a second "." is dropped.
"""

import math
import re

NUMBER_PATTERN = re.compile(r'^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$')


class AmountSanitizer:

    def clean(self, raw):
        """Strip everything except digits and '.' from `raw`."""
        return re.sub(r'[^0-9.]', '', str(raw))


    def accept(self, current, raw):
        """
        Apply a keystroke to the amount field.

        Args:
            current (str): Amount text before the keystroke.
            raw (str): Field content after the keystroke, as typed.

        Returns:
            str: The new amount text, or `current` unchanged if the keystroke
            would introduce a second decimal point.
        """
        clean = self.clean(raw)
        if clean.count('.') > 1:
            return current
        return clean


    def to_number(self, amount):
        """
        Parse an amount (text with optional grouping commas, or a number).

        Returns:
            float | None: None for empty, non-numeric or non-finite input.
        """
        if isinstance(amount, bool):
            return None
        if isinstance(amount, (int, float)):
            value = float(amount)
        else:
            text = str(amount).replace(',', '').strip()
            if not NUMBER_PATTERN.match(text):
                return None
            value = float(text)
        return value if math.isfinite(value) else None
