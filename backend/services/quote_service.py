"""Quote service - resolves a ticker to a price with a persisted fallback."""

import logging
from decimal import Decimal
from typing import Any, Callable

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.orm import Session, sessionmaker

from integrations.exceptions import ProviderAPIError, ProviderError
from integrations.market_data_protocol import Quote, QuoteProvider, QuoteSource
from services.holding_service import HoldingService

logger = logging.getLogger(__name__)

# Signature of BackgroundTasks.add_task: dispatch(func, *args)
Dispatch = Callable[..., Any]


class QuoteNotFoundError(LookupError):
    """The ticker is unknown to both the quote provider and the holding store."""

    def __init__(self, ticker: str):
        self.ticker = ticker
        super().__init__(f"No price available for {ticker}")


class QuoteService:
    """Resolves live prices, falling back to the holding store.

    The provider is consulted first. On success the quote is returned
    with ``source=external`` and a refresh of the persisted price is
    handed to ``dispatch`` without being awaited. On any provider error
    the last persisted price is returned with ``source=persisted`` and
    zero deltas. The service holds no per-request state.
    """

    def __init__(self, provider: QuoteProvider, session_factory: sessionmaker):
        """Initialize with injected collaborators.

        Args:
            provider: Live quote provider.
            session_factory: Opens sessions for background refresh writes,
                which outlive the request-scoped session.
        """
        self._provider = provider
        self._session_factory = session_factory

    async def resolve_price(self, db: Session, ticker: str, dispatch: Dispatch) -> Quote:
        """Resolve the current price for ``ticker``.

        Args:
            db: Request-scoped session, used only for the fallback read.
            ticker: Case-sensitive ticker symbol.
            dispatch: Schedules the refresh write, e.g.
                ``BackgroundTasks.add_task``. Must not block.

        Returns:
            The resolved quote.

        Raises:
            QuoteNotFoundError: Provider failed and the store has no holding.
            SQLAlchemyError: The store could not be read during fallback.
        """
        try:
            provider_quote = await self._provider.get_quote(ticker)
        except ProviderError as e:
            provider_name = e.provider_name or self._provider.provider_name
            if isinstance(e, ProviderAPIError) and e.rate_limited:
                logger.warning(
                    "%s quota exhausted for %s, using stored price: %s",
                    provider_name, ticker, e,
                )
            else:
                logger.warning(
                    "%s quote failed for %s, using stored price: %s",
                    provider_name, ticker, e,
                )
        else:
            dispatch(self.refresh_current_price, ticker, provider_quote.price)
            return Quote(
                symbol=ticker,
                price=provider_quote.price,
                change=provider_quote.change,
                change_percent=provider_quote.change_percent,
                source=QuoteSource.external,
            )

        stored = await run_in_threadpool(HoldingService.get_price, db, ticker)
        if stored is None:
            raise QuoteNotFoundError(ticker)

        logger.info("Serving stored price for %s", ticker)
        return Quote(
            symbol=ticker,
            price=stored.current_price,
            change=Decimal("0"),
            change_percent=Decimal("0"),
            source=QuoteSource.persisted,
        )

    def refresh_current_price(self, ticker: str, price: Decimal) -> None:
        """Persist a freshly fetched price. Best effort: never raises.

        Runs after the response has been sent, in its own session.
        Concurrent refreshes for the same ticker race; the last write wins.
        """
        try:
            with self._session_factory() as session:
                updated = HoldingService.set_current_price(session, ticker, price)
        except Exception:
            logger.warning("Failed to refresh stored price for %s", ticker, exc_info=True)
            return

        if updated:
            logger.debug("Refreshed stored price for %s: %s", ticker, price)
        else:
            logger.debug("Price refresh skipped, %s is not a tracked holding", ticker)
