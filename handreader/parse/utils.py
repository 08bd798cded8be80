"""
Utility functions for hand history parsing.
Provides the amount codec shared by every line pattern.
"""

import re
import logging

from .errors import FormatError
from .schemas import Amount, FRACTION_MAX, INTEGER_MAX

logger = logging.getLogger(__name__)

_DIGITS = re.compile(r'[0-9]+')


def parse_amount(text: str) -> Amount:
    """
    Parse a monetary amount into an exact fixed-point Amount.

    Handles:
    - Optional leading dollar sign: "$100" -> 100
    - Comma as thousands separator: "1,234.56" -> 1234.56
    - Fraction width is kept as written: "1.5" and "1.50" stay distinct
    - Whole units go up to 2**32-1 and the fraction digits, read as a
      number, up to 255: "1.255" parses, "1.256" does not

    Raises:
        FormatError: if the cleaned text is not ``digits`` or ``digits.digits``
            or a part exceeds its numeric range
    """
    if text is None:
        raise FormatError("amount is missing", text)

    s = text.strip()
    if s.startswith('$'):
        s = s[1:]
    s = s.replace(',', '')

    integer_part, dot, fraction_part = s.partition('.')

    if not _DIGITS.fullmatch(integer_part):
        raise FormatError(f"invalid amount: {text!r}", text)
    if dot and not _DIGITS.fullmatch(fraction_part):
        raise FormatError(f"invalid amount fraction: {text!r}", text)

    integer = int(integer_part)
    fraction = int(fraction_part) if dot else 0

    if integer > INTEGER_MAX:
        raise FormatError(f"amount overflows whole units: {text!r}", text)
    if fraction > FRACTION_MAX:
        raise FormatError(f"amount overflows fraction: {text!r}", text)

    return Amount(
        integer=integer,
        fraction=fraction,
        fraction_digits=len(fraction_part) if dot else 0
    )


def format_amount(amount: Amount) -> str:
    """Render an Amount without currency symbol or separators ("1234.50")."""
    return str(amount)
