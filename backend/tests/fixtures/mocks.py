"""Mock implementations for external services."""

from decimal import Decimal

from integrations.exceptions import (
    ProviderAPIError,
    ProviderConnectionError,
    ProviderDataError,
)
from integrations.market_data_protocol import ProviderQuote


SAMPLE_QUOTES: dict[str, ProviderQuote] = {
    "AAPL": ProviderQuote(
        symbol="AAPL",
        price=Decimal("175.5000"),
        change=Decimal("2.2500"),
        change_percent=Decimal("1.2987"),
    ),
    "MSFT": ProviderQuote(
        symbol="MSFT",
        price=Decimal("410.1000"),
        change=Decimal("-3.4000"),
        change_percent=Decimal("-0.8223"),
    ),
}


class MockQuoteProvider:
    """Mock quote provider for testing.

    Returns quotes from a fixed mapping. Symbols not in the mapping fail
    with ProviderDataError, the way a real provider reports an unknown
    symbol. With ``should_fail`` every call fails.
    """

    def __init__(
        self,
        quotes: dict[str, ProviderQuote] | None = None,
        should_fail: bool = False,
        failure_type: str = "connection",
        name: str = "mock",
    ):
        self._quotes = quotes or {}
        self._should_fail = should_fail
        self._failure_type = failure_type
        self._name = name
        self.calls: list[str] = []
        self.closed = False

    @property
    def provider_name(self) -> str:
        """Return the provider name."""
        return self._name

    def _raise_failure(self, symbol: str) -> None:
        """Raise the appropriate exception based on failure_type."""
        if self._failure_type == "rate_limit":
            raise ProviderAPIError("Rate limit reached", provider_name=self._name, status_code=429)
        elif self._failure_type == "data":
            raise ProviderDataError(f"Malformed quote for {symbol}", provider_name=self._name)
        else:
            raise ProviderConnectionError("Connection refused", provider_name=self._name)

    async def get_quote(self, symbol: str) -> ProviderQuote:
        """Return the mapped quote or raise a provider error."""
        self.calls.append(symbol)
        if self._should_fail:
            self._raise_failure(symbol)
        if symbol not in self._quotes:
            raise ProviderDataError(f"No quote for {symbol}", provider_name=self._name)
        return self._quotes[symbol]

    async def aclose(self) -> None:
        """Mark the provider closed."""
        self.closed = True
