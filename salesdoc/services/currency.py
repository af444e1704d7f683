"""Currency display formatting."""

from __future__ import annotations

import math
from typing import Optional

CURRENCY_SYMBOLS = {
    "INR": "₹",
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
}


def _group_indian(digits: str) -> str:
    # Last three digits stay together, the rest go in pairs: 12,34,567
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


def _group_thousands(digits: str) -> str:
    return f"{int(digits):,}"


def currency_symbol(currency_code: str) -> str:
    code = currency_code.upper()
    return CURRENCY_SYMBOLS.get(code, f"{code} ")


def format_currency(amount: Optional[float], locale: str = "en-IN", currency_code: str = "INR") -> str:
    """Format ``amount`` with two decimals and locale grouping.

    ``en-IN`` groups by lakh and crore (``₹12,34,567.50``); any other locale
    groups by thousands. ``None`` renders as ``"-"``, infinities as ``₹∞``
    and NaN as ``"NaN"``.
    """
    if amount is None:
        return "-"

    value = float(amount)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        sign = "-" if value < 0 else ""
        return f"{sign}{currency_symbol(currency_code)}∞"

    fixed = f"{abs(value):.2f}"
    whole, fraction = fixed.split(".")
    if locale.replace("_", "-").lower() == "en-in":
        grouped = _group_indian(whole)
    else:
        grouped = _group_thousands(whole)

    # Sign goes before the symbol, and -0.00 prints as 0.00
    sign = "-" if value < 0 and fixed != "0.00" else ""
    return f"{sign}{currency_symbol(currency_code)}{grouped}.{fraction}"


def format_plain(amount: Optional[float], currency_code: str = "INR") -> str:
    """Print-style amount, e.g. ``INR 1900.00``."""
    value = 0.0 if amount is None else float(amount)
    return f"{currency_code.upper()} {value:.2f}"
