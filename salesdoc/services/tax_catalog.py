"""Selectable tax options, supplied as static configuration."""

from __future__ import annotations

from typing import Iterable, List, Optional

from ..core.config import TaxOptionSetting
from ..models.documents import TaxCategory, TaxOption, TaxSelection


def _format_rate(rate: float) -> str:
    return f"{rate:g}"


def default_label(category: TaxCategory, rate: float) -> str:
    return f"{category.value} ({_format_rate(rate)}%)"


class TaxCatalog:
    """Lookup over the configured GST/TDS/TCS options"""

    def __init__(self, options: Iterable[TaxOptionSetting]):
        self._options: List[TaxOption] = []
        for option in options:
            category = TaxCategory(option.category.upper())
            self._options.append(
                TaxOption(
                    category=category,
                    rate=option.rate,
                    label=option.label or default_label(category, option.rate),
                )
            )

    def options(self) -> List[TaxOption]:
        return list(self._options)

    def lookup(self, category: TaxCategory, rate: float) -> Optional[TaxOption]:
        for option in self._options:
            if option.category == category and option.rate == rate:
                return option
        return None

    def contains(self, selection: TaxSelection) -> bool:
        # Rate 0 is the "no tax selected" entry and is always allowed
        if selection.category == TaxCategory.NONE or selection.rate == 0:
            return True
        return self.lookup(selection.category, selection.rate) is not None

    def label_for(self, selection: TaxSelection) -> str:
        option = self.lookup(selection.category, selection.rate)
        if option is not None:
            return option.label
        if selection.category == TaxCategory.NONE:
            return f"Tax ({_format_rate(selection.rate)}%)"
        return default_label(selection.category, selection.rate)
