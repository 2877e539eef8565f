"""Pydantic schemas for holding records.

The HTTP surface speaks camelCase (``buyPrice``, ``currentPrice``); the
ORM and services use snake_case. The alias generator bridges the two.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class HoldingFields(BaseModel):
    """Fields shared by create and update requests. All are required."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    name: str = Field(min_length=1, max_length=255)
    quantity: Decimal = Field(gt=0)
    buy_price: Decimal = Field(gt=0)
    current_price: Decimal = Field(ge=0)


class HoldingCreate(HoldingFields):
    """Schema for creating a Holding."""

    ticker: str = Field(min_length=1, max_length=32)


class HoldingUpdate(HoldingFields):
    """Schema for replacing a Holding's mutable fields (ticker comes from the path)."""

    pass


class HoldingResponse(BaseModel):
    """Schema for Holding API response."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str
    name: str
    ticker: str
    quantity: float
    buy_price: float
    current_price: float
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
