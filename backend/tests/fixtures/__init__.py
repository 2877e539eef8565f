"""Test fixtures and sample data."""
import pytest
from decimal import Decimal

from models import Holding
from sqlalchemy.orm import Session


def create_holding(
    db: Session,
    ticker: str,
    name: str | None = None,
    quantity: Decimal = Decimal("10"),
    buy_price: Decimal = Decimal("150.00"),
    current_price: Decimal = Decimal("160.00"),
) -> Holding:
    """Insert and commit a Holding row.

    This is a helper function (not a fixture) for tests that need several
    holdings or specific prices.
    """
    holding = Holding(
        ticker=ticker,
        name=name or f"{ticker} Inc.",
        quantity=quantity,
        buy_price=buy_price,
        current_price=current_price,
    )
    db.add(holding)
    db.commit()
    db.refresh(holding)
    return holding


@pytest.fixture
def holding(db: Session) -> Holding:
    """An AAPL holding: 10 shares bought at 150, last priced at 160."""
    return create_holding(db, "AAPL", name="Apple")
