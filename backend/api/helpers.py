"""Shared API helpers for route handlers and app-level exception handlers."""

import logging

from fastapi import HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models import Holding
from services.holding_service import HoldingService

logger = logging.getLogger(__name__)

MISSING_FIELDS_DETAIL = "All fields are required"
INVALID_FIELDS_DETAIL = "Invalid field values"


def get_holding_or_404(db: Session, ticker: str, detail: str = "Stock not found") -> Holding:
    """Fetch a holding by ticker or raise 404.

    Raises:
        HTTPException: 404 if the ticker is not tracked.
    """
    holding = HoldingService.get_by_ticker(db, ticker)
    if holding is None:
        raise HTTPException(status_code=404, detail=detail)
    return holding


def _is_missing(error: dict) -> bool:
    """A required field that was absent, explicitly null, or blank."""
    if error.get("type") == "missing":
        return True
    if error.get("loc", ())[:1] != ("body",):
        return False
    # Strings are stripped before validation, so "   " fails min_length too
    return error.get("input") is None or error.get("type") == "string_too_short"


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report request validation failures as 400 instead of FastAPI's 422."""
    errors = exc.errors()
    detail = MISSING_FIELDS_DETAIL if any(_is_missing(e) for e in errors) else INVALID_FIELDS_DETAIL
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": detail,
            "errors": jsonable_encoder(
                [{"loc": e.get("loc"), "msg": e.get("msg"), "type": e.get("type")} for e in errors]
            ),
        },
    )


async def database_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Surface unexpected store errors as 500 with the underlying message."""
    logger.error("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    message = str(getattr(exc, "orig", None) or exc)
    return JSONResponse(status_code=500, content={"detail": message})
