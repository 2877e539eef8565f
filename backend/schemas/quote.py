"""Pydantic schemas for live price responses."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from integrations.market_data_protocol import QuoteSource


class LivePriceResponse(BaseModel):
    """A resolved price for one ticker.

    When ``source`` is ``persisted`` the deltas are always zero, which
    means "no movement data available", not "unchanged".
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    live_price: float
    change: float
    change_percent: float
    source: QuoteSource
