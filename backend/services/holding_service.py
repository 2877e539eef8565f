"""Holding service - CRUD and price access for tracked positions."""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from models import Holding
from schemas.holding import HoldingCreate, HoldingUpdate

logger = logging.getLogger(__name__)


class DuplicateTickerError(Exception):
    """Raised when creating a holding whose ticker is already tracked."""

    def __init__(self, ticker: str):
        self.ticker = ticker
        super().__init__(f"Stock with ticker '{ticker}' already exists")


@dataclass(frozen=True)
class HoldingPrice:
    """The persisted prices for one holding."""

    current_price: Decimal
    buy_price: Decimal


class HoldingService:
    """Service for the holding store. Tickers are matched case-sensitively."""

    @staticmethod
    def list_all(db: Session) -> list[Holding]:
        """Get all holdings ordered by ticker."""
        return db.query(Holding).order_by(Holding.ticker).all()

    @staticmethod
    def get_by_ticker(db: Session, ticker: str) -> Optional[Holding]:
        """Get a holding by ticker, or None if not tracked."""
        return db.query(Holding).filter(Holding.ticker == ticker).first()

    @staticmethod
    def get_price(db: Session, ticker: str) -> Optional[HoldingPrice]:
        """Get the persisted current and buy price for a ticker, or None."""
        row = (
            db.query(Holding.current_price, Holding.buy_price)
            .filter(Holding.ticker == ticker)
            .first()
        )
        if row is None:
            return None
        return HoldingPrice(current_price=row.current_price, buy_price=row.buy_price)

    @staticmethod
    def create(db: Session, data: HoldingCreate) -> Holding:
        """Create a new holding.

        Raises:
            DuplicateTickerError: If the ticker is already tracked.
        """
        if HoldingService.get_by_ticker(db, data.ticker) is not None:
            raise DuplicateTickerError(data.ticker)

        holding = Holding(
            ticker=data.ticker,
            name=data.name,
            quantity=data.quantity,
            buy_price=data.buy_price,
            current_price=data.current_price,
        )
        db.add(holding)
        try:
            db.commit()
        except IntegrityError:
            # Lost a race with a concurrent create for the same ticker
            db.rollback()
            raise DuplicateTickerError(data.ticker) from None
        db.refresh(holding)
        logger.info("Created holding: %s (id=%s)", holding.ticker, holding.id)
        return holding

    @staticmethod
    def update(db: Session, ticker: str, data: HoldingUpdate) -> Optional[Holding]:
        """Replace the mutable fields of a holding. Returns None if not tracked."""
        holding = HoldingService.get_by_ticker(db, ticker)
        if holding is None:
            return None

        holding.name = data.name
        holding.quantity = data.quantity
        holding.buy_price = data.buy_price
        holding.current_price = data.current_price
        db.commit()
        db.refresh(holding)
        logger.info("Updated holding: %s", ticker)
        return holding

    @staticmethod
    def delete(db: Session, ticker: str) -> bool:
        """Delete a holding. Returns True if deleted, False if not tracked."""
        holding = HoldingService.get_by_ticker(db, ticker)
        if holding is None:
            return False
        db.delete(holding)
        db.commit()
        logger.info("Deleted holding: %s", ticker)
        return True

    @staticmethod
    def set_current_price(db: Session, ticker: str, price: Decimal) -> bool:
        """Overwrite the persisted current price. Returns False if not tracked."""
        holding = HoldingService.get_by_ticker(db, ticker)
        if holding is None:
            return False
        holding.current_price = price
        db.commit()
        return True
