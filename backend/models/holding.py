"""Holding model - one tracked equity position."""

import uuid
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import Column, DateTime, Numeric, String
from sqlalchemy.dialects import mysql

from database import Base


def generate_uuid() -> str:
    """Generate a UUID string."""
    return str(uuid.uuid4())


class Holding(Base):
    """A tracked position, keyed by its (case-sensitive) ticker.

    ``current_price`` is the last known market price. It is written either
    by an explicit update or by a background refresh after a successful
    live quote, and serves as the fallback when the quote provider is
    unavailable.
    """

    __tablename__ = "stocks"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    # MySQL's default collation folds case; tickers compare byte for byte.
    ticker = Column(
        String(32).with_variant(mysql.VARCHAR(32, collation="utf8mb4_bin"), "mysql", "mariadb"),
        nullable=False,
        unique=True,
        index=True,
    )
    name = Column(String(255), nullable=False)
    quantity = Column(Numeric(18, 8), nullable=False)
    buy_price = Column(Numeric(18, 4), nullable=False)
    current_price = Column(Numeric(18, 4), nullable=False, default=Decimal("0"))
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(
        DateTime,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
