"""
Price bracket matching.

Brackets come in two shapes: ``"min-max"`` (inclusive on both ends) and
``"min+"`` (open ended). Non-digit characters are stripped from each bound
before parsing, so ``"₹500-₹1000"`` reads the same as ``"500-1000"``.

The two shapes disagree on malformed input and that is kept on purpose:
a ranged bracket with an unreadable bound rejects every entry, while an
open-ended bracket with an unreadable bound accepts every entry.
"""

import re

from services.exceptions import ParsePriceError

_NON_DIGITS = re.compile(r"[^0-9]")


def parse_price_bound(raw: str) -> int:
    """
    Read one price bound, ignoring currency symbols and other non-digits

    Raises:
        ParsePriceError: when no digits remain
    """
    digits = _NON_DIGITS.sub("", raw or "")
    if not digits:
        raise ParsePriceError(raw)
    return int(digits)


def matches_price_range(price: int, price_range: str) -> bool:
    """Check a price against a bracket string; empty bracket matches everything"""
    if not price_range:
        return True

    if "-" in price_range:
        parts = price_range.split("-")
        try:
            low = parse_price_bound(parts[0])
            high = parse_price_bound(parts[1])
        except ParsePriceError:
            return False
        return low <= price <= high

    try:
        low = parse_price_bound(price_range)
    except ParsePriceError:
        return True
    return price >= low
