"""Application configuration via pydantic settings."""

from __future__ import annotations

from functools import lru_cache
from typing import List, Optional

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class TaxOptionSetting(BaseModel):
    category: str
    rate: float
    label: Optional[str] = None


DEFAULT_TAX_OPTIONS = [
    TaxOptionSetting(category="GST", rate=5),
    TaxOptionSetting(category="GST", rate=12),
    TaxOptionSetting(category="GST", rate=18),
    TaxOptionSetting(category="GST", rate=28),
    TaxOptionSetting(category="TDS", rate=1),
    TaxOptionSetting(category="TDS", rate=2),
    TaxOptionSetting(category="TDS", rate=5),
    TaxOptionSetting(category="TDS", rate=10),
    TaxOptionSetting(category="TCS", rate=0.1),
    TaxOptionSetting(category="TCS", rate=1),
]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "salesdoc-engine"
    app_version: str = "1.0.0"
    app_env: str = "development"

    default_locale: str = "en-IN"
    default_currency: str = "INR"
    words_currency_label: str = "Indian Rupee"

    # TAX_OPTIONS is read as a JSON list of {"category", "rate", "label"} objects
    tax_options: List[TaxOptionSetting] = list(DEFAULT_TAX_OPTIONS)
    enforce_tax_catalog: bool = False

    api_key: Optional[str] = None
    log_level: str = "INFO"
    log_json: bool = True


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
