"""External API integrations.

This package contains:
- Quote provider protocol and value types
- Provider exception hierarchy
- Alpha Vantage client: live quotes via GLOBAL_QUOTE
"""

from integrations.alpha_vantage_client import AlphaVantageClient
from integrations.market_data_protocol import ProviderQuote, Quote, QuoteProvider, QuoteSource

__all__ = [
    "AlphaVantageClient",
    "ProviderQuote",
    "Quote",
    "QuoteProvider",
    "QuoteSource",
]
