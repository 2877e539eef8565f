"""Alpha Vantage quote provider using the GLOBAL_QUOTE endpoint."""

import logging
from typing import Optional

import httpx

from integrations.exceptions import (
    ProviderAPIError,
    ProviderAuthError,
    ProviderConnectionError,
    ProviderDataError,
)
from integrations.market_data_protocol import ProviderQuote
from integrations.parsing_utils import parse_decimal, parse_percent

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.alphavantage.co"
DEFAULT_TIMEOUT_SECONDS = 5.0

_QUOTE_KEY = "Global Quote"
_PRICE_FIELD = "05. price"
_CHANGE_FIELD = "09. change"
_CHANGE_PERCENT_FIELD = "10. change percent"

# Alpha Vantage reports quota exhaustion with HTTP 200 and one of these keys.
_RATE_LIMIT_KEYS = ("Note", "Information")


class AlphaVantageClient:
    """Live quote provider backed by Alpha Vantage.

    Every failure mode (missing key, transport error, timeout, non-2xx,
    quota note, error payload, missing, unparseable or negative quote) is raised as
    a :class:`~integrations.exceptions.ProviderError` subclass. A
    successful return is always a fully parsed quote.
    """

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            api_key: Alpha Vantage API key. If empty, every lookup fails
                     with ProviderAuthError without touching the network.
            base_url: API root, overridable for testing.
            timeout: Upper bound in seconds for a single quote request.
            transport: Optional httpx transport (used by tests).
        """
        self._api_key = api_key or ""
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    @property
    def provider_name(self) -> str:
        return "alphavantage"

    def is_configured(self) -> bool:
        """Check whether an API key is available."""
        return bool(self._api_key)

    async def get_quote(self, symbol: str) -> ProviderQuote:
        """Fetch and parse the latest quote for ``symbol``.

        Args:
            symbol: Ticker symbol, passed through unchanged.

        Returns:
            The parsed quote.

        Raises:
            ProviderAuthError: No API key configured.
            ProviderConnectionError: Timeout or transport failure.
            ProviderAPIError: Non-2xx status or a quota/rate-limit body.
            ProviderDataError: Error payload, missing/empty quote, a
                field that does not parse as a number, or a negative price.
        """
        if not self.is_configured():
            raise ProviderAuthError(
                "Alpha Vantage API key is not configured",
                provider_name=self.provider_name,
            )

        try:
            response = await self._client.get(
                "/query",
                params={
                    "function": "GLOBAL_QUOTE",
                    "symbol": symbol,
                    "apikey": self._api_key,
                },
            )
        except httpx.TimeoutException as e:
            raise ProviderConnectionError(
                f"Alpha Vantage request timed out for {symbol}",
                provider_name=self.provider_name,
            ) from e
        except httpx.HTTPError as e:
            raise ProviderConnectionError(
                f"Alpha Vantage request failed for {symbol}: {e}",
                provider_name=self.provider_name,
            ) from e

        if not response.is_success:
            raise ProviderAPIError(
                f"Alpha Vantage returned HTTP {response.status_code} for {symbol}",
                provider_name=self.provider_name,
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ProviderDataError(
                f"Alpha Vantage returned a non-JSON body for {symbol}",
                provider_name=self.provider_name,
            ) from e

        return self._parse_quote(symbol, data)

    def _parse_quote(self, symbol: str, data) -> ProviderQuote:
        """Turn a GLOBAL_QUOTE payload into a ProviderQuote."""
        if not isinstance(data, dict):
            raise ProviderDataError(
                f"Alpha Vantage returned an unexpected payload for {symbol}",
                provider_name=self.provider_name,
            )

        for key in _RATE_LIMIT_KEYS:
            if key in data:
                raise ProviderAPIError(
                    f"Alpha Vantage rate limit: {data[key]}",
                    provider_name=self.provider_name,
                    status_code=429,
                )

        if "Error Message" in data:
            raise ProviderDataError(
                f"Alpha Vantage error for {symbol}: {data['Error Message']}",
                provider_name=self.provider_name,
            )

        quote = data.get(_QUOTE_KEY)
        if not quote or not isinstance(quote, dict):
            # An empty "Global Quote" object means the symbol is unknown
            raise ProviderDataError(
                f"Alpha Vantage returned no quote for {symbol}",
                provider_name=self.provider_name,
            )

        try:
            price = parse_decimal(quote.get(_PRICE_FIELD))
            change = parse_decimal(quote.get(_CHANGE_FIELD))
            change_percent = parse_percent(quote.get(_CHANGE_PERCENT_FIELD))
        except ValueError as e:
            raise ProviderDataError(
                f"Alpha Vantage returned a malformed quote for {symbol}: {e}",
                provider_name=self.provider_name,
            ) from e

        if price < 0:
            raise ProviderDataError(
                f"Alpha Vantage returned a negative price for {symbol}: {price}",
                provider_name=self.provider_name,
            )

        return ProviderQuote(
            symbol=symbol,
            price=price,
            change=change,
            change_percent=change_percent,
        )
