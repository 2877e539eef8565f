"""Live price API endpoint."""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from database import get_db, get_session_factory
from integrations.market_data_protocol import QuoteProvider
from schemas.quote import LivePriceResponse
from services.quote_service import QuoteNotFoundError, QuoteService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["prices"])


def get_quote_provider(request: Request) -> QuoteProvider:
    """Get the process-wide quote provider created by the app lifespan."""
    return request.app.state.quote_provider


def get_quote_service(
    provider: QuoteProvider = Depends(get_quote_provider),
    session_factory: sessionmaker = Depends(get_session_factory),
) -> QuoteService:
    """Build a QuoteService from the injected provider and session factory."""
    return QuoteService(provider, session_factory)


@router.get("/live-price/{ticker}", response_model=LivePriceResponse)
async def get_live_price(
    ticker: str,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    service: QuoteService = Depends(get_quote_service),
):
    """
    Get the current price for a ticker.

    Tries the live quote provider first and falls back to the last stored
    price. A successful live quote also refreshes the stored price after
    the response is sent.

    Returns:
        livePrice, change, changePercent and source ("external" or "persisted")
    """
    try:
        quote = await service.resolve_price(db, ticker, background_tasks.add_task)
    except QuoteNotFoundError:
        raise HTTPException(status_code=404, detail="Stock not found in database")
    except SQLAlchemyError:
        logger.exception("Database error resolving price for %s", ticker)
        raise HTTPException(status_code=500, detail="Failed to fetch stock price")

    return LivePriceResponse(
        live_price=quote.price,
        change=quote.change,
        change_percent=quote.change_percent,
        source=quote.source,
    )
