"""Pydantic schemas for API request/response validation."""

from .holding import HoldingCreate, HoldingResponse, HoldingUpdate
from .quote import LivePriceResponse

__all__ = ["HoldingCreate", "HoldingResponse", "HoldingUpdate", "LivePriceResponse"]
