"""Quote provider protocol definitions.

Defines the interface for live quote providers and the value types that
flow between the provider, the quote resolver and the HTTP layer.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Protocol


class QuoteSource(str, Enum):
    """Where a resolved price came from."""

    external = "external"
    persisted = "persisted"


@dataclass(frozen=True)
class ProviderQuote:
    """A fully parsed quote as returned by an external provider."""

    symbol: str
    price: Decimal
    change: Decimal
    change_percent: Decimal  # Percentage points, e.g. Decimal("1.25") for 1.25%


@dataclass(frozen=True)
class Quote:
    """One price observation returned for a resolution request. Never persisted."""

    symbol: str
    price: Decimal
    change: Decimal
    change_percent: Decimal
    source: QuoteSource


class QuoteProvider(Protocol):
    """Protocol for live quote providers."""

    @property
    def provider_name(self) -> str:
        """Return the provider name (e.g., 'alphavantage')."""
        ...

    async def get_quote(self, symbol: str) -> ProviderQuote:
        """Fetch the latest quote for a symbol.

        Raises:
            ProviderError: On any failure to produce a complete, parsed
                quote. Implementations never return partial data.
        """
        ...

    async def aclose(self) -> None:
        """Release network resources held by the provider."""
        ...
