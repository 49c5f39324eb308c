"""
Locale-aware display formatting for results and the amount field.

Result rules (`format_result`), in order
----------------------------------------
1. Anything that is not a finite number -> "0".
2. |value| < 100,000 -> grouped, up to 2 decimals. INR uses Indian grouping
   ("12,34,567" style), everything else thousands grouping.
3. INR >= 1 crore (10,000,000) -> "x.xx Cr"; INR >= 1 lakh -> "x.xx L",
   always with two decimals.
4. Other currencies and units >= 100,000 in magnitude -> short compact
   notation with up to 2 decimals ("150K", "1.23M", "4.5B", "2T"). A
   mantissa that rounds to 1000 moves up a suffix ("1M", not "1000K").
5. Anything left (large negative INR amounts) -> grouped, 2 decimals.

Halves round away from zero throughout ("0.13" for 0.125).

Amount field (`format_amount`)
------------------------------
Grouping only, never compacted, fraction digits shown as typed (at most 10)
so the user keeps seeing what they are editing, trailing "." included.

Dependencies
------------
- Babel provides CLDR digit grouping for both results and amounts.
"""

import math
import re
from decimal import ROUND_HALF_UP, Context, Decimal, localcontext

from babel.numbers import format_decimal

AMOUNT_PATTERN = re.compile(r'^(\d+\.?\d*|\.\d+)$')
INDIAN_GROUPING = '#,##,##0'
STANDARD_GROUPING = '#,##0'
COMPACT_THRESHOLD = 100000
LAKH = 100000
CRORE = 10000000
RESULT_FRACTION_DIGITS = 2
COMPACT_SCALES = (
    (10**3, 'K'),
    (10**6, 'M'),
    (10**9, 'B'),
    (10**12, 'T'),
)
AMOUNT_FRACTION_DIGITS = 10
# Wide enough to keep two decimals of any finite float.
DISPLAY_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)


class ResultFormatter:
    """
    Format converted values and amount text for display.
    """

    def format_result(self, value, unit_code):
        """
        Format a conversion result for the unit it is expressed in.

        Parameters
        ----------
        value : float | int | str
            Raw result from `ConversionEngine.convert` (may be the "0"
            sentinel).
        unit_code : str
            Target unit; "INR" switches to Indian grouping and lakh/crore.

        Returns
        -------
        str
        """
        if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
            return "0"

        if abs(value) < COMPACT_THRESHOLD:
            return self.group(value, unit_code, RESULT_FRACTION_DIGITS)

        if unit_code == 'INR':
            if value >= CRORE:
                return f"{self.scaled(value, CRORE)} Cr"
            elif value >= LAKH:
                return f"{self.scaled(value, LAKH)} L"
        else:
            return self.compact(value)

        return self.group(value, unit_code, RESULT_FRACTION_DIGITS)


    def format_amount(self, text, unit_code):
        """
        Format the amount field text with grouping separators only.

        Text that is not a plain decimal number after removing commas (for
        example a lone ".") is returned unchanged.
        """
        if text is None or text == '':
            return ''
        text = str(text)
        clean = text.replace(',', '')
        if not AMOUNT_PATTERN.match(clean):
            return text

        whole, dot, fraction = clean.partition('.')
        grouped = format_decimal(
            int(whole or '0'),
            format=self.grouping_for(unit_code),
            locale=self.locale_for(unit_code)
        )
        return grouped + dot + fraction[:AMOUNT_FRACTION_DIGITS]


    def compact(self, value):
        """
        Abbreviate `value` with the largest K/M/B/T suffix it reaches.

        A mantissa that rounds up to 1000 moves to the next suffix
        (999,999 -> "1M"); past T the mantissa is grouped ("1,500T").
        """
        number = Decimal(str(value))
        index = 0
        for position, (scale, _) in enumerate(COMPACT_SCALES):
            if abs(number) >= scale:
                index = position

        with localcontext(DISPLAY_CONTEXT):
            mantissa = self.round_half_up(number / COMPACT_SCALES[index][0], RESULT_FRACTION_DIGITS)
            if abs(mantissa) >= 1000 and index + 1 < len(COMPACT_SCALES):
                index += 1
                mantissa = self.round_half_up(number / COMPACT_SCALES[index][0], RESULT_FRACTION_DIGITS)
            grouped = format_decimal(mantissa, format=STANDARD_GROUPING + '.##', locale='en_US')
        return grouped + COMPACT_SCALES[index][1]


    def group(self, value, unit_code, fraction_digits):
        pattern = self.grouping_for(unit_code) + '.' + '#' * fraction_digits
        with localcontext(DISPLAY_CONTEXT):
            rounded = self.round_half_up(Decimal(str(value)), fraction_digits)
            return format_decimal(rounded, format=pattern, locale=self.locale_for(unit_code))


    def scaled(self, value, scale):
        """Return `value / scale` with exactly two decimals ("1.50")."""
        with localcontext(DISPLAY_CONTEXT):
            return str(self.round_half_up(Decimal(str(value)) / scale, RESULT_FRACTION_DIGITS))


    def round_half_up(self, number, fraction_digits):
        # Halves round away from zero (0.125 -> 0.13), as browsers display them.
        return number.quantize(Decimal(1).scaleb(-fraction_digits), rounding=ROUND_HALF_UP)


    def grouping_for(self, unit_code):
        return INDIAN_GROUPING if unit_code == 'INR' else STANDARD_GROUPING


    def locale_for(self, unit_code):
        return 'en_IN' if unit_code == 'INR' else 'en_US'


if __name__ == "__main__":
    result_formatter = ResultFormatter()
    print(result_formatter.format_result(150000, 'USD'))
    print(result_formatter.format_result(15000000, 'INR'))
    print(result_formatter.format_amount('1234567.5', 'INR'))
