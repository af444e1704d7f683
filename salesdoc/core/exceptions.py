"""Errors raised by the document computation engine."""

from __future__ import annotations

from typing import Any


class SalesDocError(Exception):
    """Base class for engine errors; `code` is the API error code."""

    code = "SALESDOC_ERROR"

    def __init__(self, message: str, **details: Any) -> None:
        self.message = message
        self.details = details
        super().__init__(message)


class InvalidNumericInput(SalesDocError):
    """A line field could not be parsed as a number.

    Only the strict parser raises this; callers on the computation path
    recover by substituting zero.
    """

    code = "INVALID_NUMERIC_INPUT"


class ValueOutOfRange(SalesDocError):
    """Amount has more integer digits than the words renderer supports."""

    code = "VALUE_OUT_OF_RANGE"


class EmptyDocument(SalesDocError):
    """A document would be left without any line item."""

    code = "EMPTY_DOCUMENT"


class UnknownTaxOption(SalesDocError):
    """Tax selection is not one of the configured catalog options."""

    code = "UNKNOWN_TAX_OPTION"
