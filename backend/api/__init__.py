"""API route handlers."""
from . import prices, stocks

__all__ = ["prices", "stocks"]
