"""Currency and amount-in-words formatting endpoints."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ...core.config import Settings, get_settings
from ...services.currency import format_currency
from ...services.words import amount_to_words

router = APIRouter()


class CurrencyRequest(BaseModel):
    amount: Optional[float] = None
    locale: Optional[str] = None
    currency: Optional[str] = None


class CurrencyResponse(BaseModel):
    formatted: str


class WordsRequest(BaseModel):
    amount: float
    currency_label: Optional[str] = None


class WordsResponse(BaseModel):
    words: str


@router.post("/format/currency", response_model=CurrencyResponse)
async def format_currency_endpoint(
    payload: CurrencyRequest,
    settings: Settings = Depends(get_settings),
) -> CurrencyResponse:
    formatted = format_currency(
        payload.amount,
        locale=payload.locale or settings.default_locale,
        currency_code=payload.currency or settings.default_currency,
    )
    return CurrencyResponse(formatted=formatted)


@router.post("/format/words", response_model=WordsResponse)
async def format_words_endpoint(
    payload: WordsRequest,
    settings: Settings = Depends(get_settings),
) -> WordsResponse:
    label = settings.words_currency_label if payload.currency_label is None else payload.currency_label
    return WordsResponse(words=amount_to_words(payload.amount, label))
