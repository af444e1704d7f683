"""Amount-in-words rendering with Indian numbering (crore, lakh, thousand)."""

from __future__ import annotations

from typing import List, NamedTuple, Tuple

from ..core.exceptions import ValueOutOfRange

MAX_DIGITS = 9

_ONES = [
    "", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine",
    "Ten", "Eleven", "Twelve", "Thirteen", "Fourteen", "Fifteen",
    "Sixteen", "Seventeen", "Eighteen", "Nineteen",
]
_TENS = [
    "", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety",
]


class DigitGroup(NamedTuple):
    width: int
    suffix: str


# Widths add up to MAX_DIGITS; the last group carries no suffix
INDIAN_GROUPS: Tuple[DigitGroup, ...] = (
    DigitGroup(2, "Crore"),
    DigitGroup(2, "Lakh"),
    DigitGroup(2, "Thousand"),
    DigitGroup(1, "Hundred"),
    DigitGroup(2, ""),
)


def split_indian_groups(whole: int) -> List[int]:
    """Split a non-negative integer into crore/lakh/thousand/hundred/units values."""
    digits = str(whole)
    if whole < 0 or len(digits) > MAX_DIGITS:
        raise ValueOutOfRange(
            f"amount must be a non-negative number of at most {MAX_DIGITS} digits",
            amount=whole,
        )
    padded = digits.zfill(MAX_DIGITS)
    values = []
    offset = 0
    for group in INDIAN_GROUPS:
        values.append(int(padded[offset:offset + group.width]))
        offset += group.width
    return values


def two_digit_words(value: int) -> str:
    if value < 20:
        return _ONES[value]
    tens = _TENS[value // 10]
    ones = _ONES[value % 10]
    return f"{tens} {ones}".strip()


def amount_to_words(amount: float, currency_label: str = "Indian Rupee") -> str:
    """Render the whole-unit part of ``amount`` in words.

    Paise are dropped. ``1234`` becomes
    ``"Indian Rupee One Thousand Two Hundred and Thirty Four Only"``.
    Raises :class:`ValueOutOfRange` for negative amounts or more than nine
    integer digits.
    """
    try:
        whole = int(amount)
    except (OverflowError, ValueError) as exc:
        raise ValueOutOfRange("amount is not a finite number", amount=str(amount)) from exc
    if amount < 0:
        raise ValueOutOfRange("amount must not be negative", amount=amount)

    values = split_indian_groups(whole)
    parts: List[str] = []
    for group, value in zip(INDIAN_GROUPS[:-1], values[:-1]):
        if value:
            parts.append(f"{two_digit_words(value)} {group.suffix}")

    units = values[-1]
    if units:
        if parts:
            parts.append("and")
        parts.append(two_digit_words(units))
    if not parts:
        parts.append("Zero")

    words = " ".join(parts + ["Only"])
    if currency_label:
        words = f"{currency_label} {words}"
    return words
