"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from api import prices, stocks
from api.helpers import database_exception_handler, validation_exception_handler
from config import settings
from database import Base, get_engine
from integrations.alpha_vantage_client import AlphaVantageClient
from logging_config import setup_logging

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Acquire the store and quote provider at startup, release them at shutdown."""
    engine = get_engine()
    Base.metadata.create_all(bind=engine)

    provider = AlphaVantageClient(
        api_key=settings.ALPHA_VANTAGE_API_KEY,
        base_url=settings.ALPHA_VANTAGE_BASE_URL,
        timeout=settings.QUOTE_TIMEOUT_SECONDS,
    )
    if not provider.is_configured():
        logger.warning("ALPHA_VANTAGE_API_KEY is not set; live prices will use stored values")
    app.state.quote_provider = provider

    try:
        yield
    finally:
        await provider.aclose()
        engine.dispose()
        logger.info("Quote provider closed and database engine disposed")


app = FastAPI(
    title="Portfolio Tracker",
    description="Equity holdings with live prices and a stored-price fallback",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS configuration for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)

app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(SQLAlchemyError, database_exception_handler)

# Include API routers
app.include_router(prices.router)
app.include_router(stocks.router)


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT)
