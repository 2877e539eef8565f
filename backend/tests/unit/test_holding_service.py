"""Tests for HoldingService."""

from decimal import Decimal

import pytest

from models import Holding
from schemas.holding import HoldingCreate, HoldingUpdate
from services.holding_service import DuplicateTickerError, HoldingService
from tests.fixtures import create_holding


def _create_data(**overrides) -> HoldingCreate:
    fields = {
        "name": "Apple",
        "ticker": "AAPL",
        "quantity": Decimal("10"),
        "buy_price": Decimal("150"),
        "current_price": Decimal("160"),
    }
    fields.update(overrides)
    return HoldingCreate(**fields)


class TestHoldingServiceCreate:
    def test_create_assigns_id(self, db):
        holding = HoldingService.create(db, _create_data())

        assert holding.id is not None
        assert holding.ticker == "AAPL"
        assert holding.name == "Apple"
        assert holding.quantity == Decimal("10")
        assert holding.buy_price == Decimal("150")
        assert holding.current_price == Decimal("160")
        assert holding.created_at is not None

    def test_create_duplicate_ticker_raises(self, db, holding):
        with pytest.raises(DuplicateTickerError) as exc_info:
            HoldingService.create(db, _create_data(name="Apple again"))

        assert exc_info.value.ticker == "AAPL"
        assert db.query(Holding).count() == 1

    def test_tickers_are_case_sensitive(self, db, holding):
        """'aapl' is a different ticker from 'AAPL'."""
        HoldingService.create(db, _create_data(ticker="aapl"))
        assert db.query(Holding).count() == 2


class TestHoldingServiceRead:
    def test_list_all_empty(self, db):
        assert HoldingService.list_all(db) == []

    def test_list_all_ordered_by_ticker(self, db):
        create_holding(db, "MSFT")
        create_holding(db, "AAPL")
        create_holding(db, "GOOG")

        tickers = [h.ticker for h in HoldingService.list_all(db)]
        assert tickers == ["AAPL", "GOOG", "MSFT"]

    def test_get_by_ticker(self, db, holding):
        assert HoldingService.get_by_ticker(db, "AAPL").id == holding.id
        assert HoldingService.get_by_ticker(db, "ZZZZ") is None

    def test_get_price(self, db, holding):
        price = HoldingService.get_price(db, "AAPL")
        assert price.current_price == Decimal("160")
        assert price.buy_price == Decimal("150")

    def test_get_price_not_found(self, db):
        assert HoldingService.get_price(db, "ZZZZ") is None


class TestHoldingServiceUpdate:
    def test_update_replaces_fields(self, db, holding):
        data = HoldingUpdate(
            name="Apple Inc.",
            quantity=Decimal("12.5"),
            buy_price=Decimal("148"),
            current_price=Decimal("170"),
        )

        updated = HoldingService.update(db, "AAPL", data)

        assert updated.id == holding.id
        assert updated.ticker == "AAPL"
        assert updated.name == "Apple Inc."
        assert updated.quantity == Decimal("12.5")
        assert updated.buy_price == Decimal("148")
        assert updated.current_price == Decimal("170")

    def test_update_not_found(self, db, holding):
        data = HoldingUpdate(
            name="Nothing", quantity=Decimal("1"), buy_price=Decimal("1"), current_price=Decimal("1")
        )

        assert HoldingService.update(db, "ZZZZ", data) is None
        db.expire_all()
        assert HoldingService.get_by_ticker(db, "AAPL").name == "Apple"


class TestHoldingServiceDelete:
    def test_delete_existing(self, db, holding):
        assert HoldingService.delete(db, "AAPL") is True
        assert HoldingService.get_by_ticker(db, "AAPL") is None

    def test_delete_not_found(self, db):
        assert HoldingService.delete(db, "ZZZZ") is False


class TestHoldingServiceSetCurrentPrice:
    def test_sets_price_only(self, db, holding):
        assert HoldingService.set_current_price(db, "AAPL", Decimal("175.5")) is True

        db.expire_all()
        refreshed = HoldingService.get_by_ticker(db, "AAPL")
        assert refreshed.current_price == Decimal("175.5")
        assert refreshed.buy_price == Decimal("150")
        assert refreshed.name == "Apple"

    def test_not_found(self, db):
        assert HoldingService.set_current_price(db, "ZZZZ", Decimal("1")) is False
