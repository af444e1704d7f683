"""Sales document totals engine (line amounts, tax, totals, amount in words)."""
from .main import create_app

__all__ = ["create_app"]
