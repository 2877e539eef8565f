"""Stock holdings API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from api.helpers import get_holding_or_404
from database import get_db
from schemas.holding import HoldingCreate, HoldingResponse, HoldingUpdate
from services.holding_service import DuplicateTickerError, HoldingService

router = APIRouter(prefix="/stocks", tags=["stocks"])


@router.get("", response_model=list[HoldingResponse])
def list_stocks(db: Session = Depends(get_db)):
    """List all tracked holdings, ordered by ticker."""
    return HoldingService.list_all(db)


@router.post("", response_model=HoldingResponse, status_code=201)
def create_stock(data: HoldingCreate, db: Session = Depends(get_db)):
    """
    Add a holding.

    All of name, ticker, quantity, buyPrice and currentPrice are required.

    Returns:
        The created holding, including its assigned id
    """
    try:
        return HoldingService.create(db, data)
    except DuplicateTickerError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.put("/{ticker}", response_model=HoldingResponse)
def update_stock(ticker: str, data: HoldingUpdate, db: Session = Depends(get_db)):
    """Replace a holding's name, quantity, buyPrice and currentPrice."""
    holding = HoldingService.update(db, ticker, data)
    if holding is None:
        raise HTTPException(status_code=404, detail="Stock not found")
    return holding


@router.delete("/{ticker}", status_code=204)
def delete_stock(ticker: str, db: Session = Depends(get_db)):
    """Remove a holding."""
    get_holding_or_404(db, ticker)
    HoldingService.delete(db, ticker)
    return Response(status_code=204)
