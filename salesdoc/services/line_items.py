"""Line amount and subtotal computation.

Every function here is pure: inputs are read, never mutated, and lists are
returned as new lists. Amounts are left unrounded; rounding to two places is
a display concern (see :mod:`salesdoc.services.currency`).
"""

from __future__ import annotations

import math
import re
from typing import TYPE_CHECKING, Any, Iterable, List, Mapping, Union

from ..core.exceptions import EmptyDocument, InvalidNumericInput
from ..core.logging import get_logger

if TYPE_CHECKING:  # pragma: no cover - avoid circular imports at runtime
    from ..models.documents import LineItem

logger = get_logger(__name__)

# Leading numeric prefix, the way form fields are read ("12kg" -> 12)
_NUMERIC_PREFIX = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

LineLike = Union["LineItem", Mapping[str, Any]]


def parse_number(value: Any) -> float:
    """Strictly read a numeric field, raising :class:`InvalidNumericInput`."""
    if isinstance(value, bool):
        raise InvalidNumericInput("value is a boolean", value=value)
    if isinstance(value, (int, float)):
        if isinstance(value, float) and math.isnan(value):
            raise InvalidNumericInput("value is NaN", value=value)
        return float(value)
    if isinstance(value, str):
        match = _NUMERIC_PREFIX.match(value.strip())
        if match:
            return float(match.group(0))
    raise InvalidNumericInput("value is not numeric", value=repr(value))


def coerce_number(value: Any, default: float = 0.0) -> float:
    """Read a numeric field, substituting ``default`` for malformed input."""
    if value is None:
        return default
    try:
        return parse_number(value)
    except InvalidNumericInput as exc:
        logger.debug("numeric_input_fallback", value=exc.details.get("value"), default=default)
        return default


def compute_line_amount(quantity: Any, rate: Any, discount_percent: Any) -> float:
    qty = coerce_number(quantity)
    unit_rate = coerce_number(rate)
    discount = coerce_number(discount_percent)
    return qty * unit_rate * (1 - discount / 100)


def _field(item: LineLike, name: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(name)
    return getattr(item, name, None)


def compute_sub_total(line_items: Iterable[LineLike]) -> float:
    """Sum the current ``amount`` of each line.

    Amounts are taken as they are; a line whose inputs changed without a
    recompute contributes its old amount.
    """
    total = 0.0
    for item in line_items:
        total += coerce_number(_field(item, "amount"))
    return total


def compute_total_quantity(line_items: Iterable[LineLike]) -> float:
    return sum((coerce_number(_field(item, "quantity")) for item in line_items), 0.0)


def new_line_item() -> "LineItem":
    from ..models.documents import LineItem  # local import to avoid circular dependency

    return LineItem()


def add_line_item(line_items: Iterable["LineItem"]) -> List["LineItem"]:
    return [*line_items, new_line_item()]


def update_line_item(line_items: Iterable["LineItem"], index: int, **changes: Any) -> List["LineItem"]:
    items = list(line_items)
    items[index] = items[index].edit(**changes)
    return items


def remove_line_item(line_items: Iterable["LineItem"], index: int) -> List["LineItem"]:
    items = list(line_items)
    if not -len(items) <= index < len(items):
        raise IndexError(f"line item index {index} out of range")
    if len(items) == 1:
        raise EmptyDocument("a document must keep at least one line item", index=index)
    del items[index]
    return items
