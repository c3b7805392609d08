"""Stock Balance API endpoints"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from stockstar.api import deps
from stockstar.schemas.common import PaginatedResponse
from stockstar.schemas.inventory import StockBalance, StockBalanceValue
from stockstar.services.inventory import BalanceAggregator

router = APIRouter()


@router.get("", response_model=PaginatedResponse[StockBalance])
async def list_balances(
    item_name: Optional[str] = Query(None, description="Item name contains (case-insensitive)"),
    site_id: Optional[int] = Query(None, description="Filter by site"),
    pagination: dict = Depends(deps.get_pagination_params),
    db: Session = Depends(deps.get_db),
):
    """
    List non-zero stock balances.

    Ordered by site name, then item name.
    """
    rows, total = BalanceAggregator(db).list_balances(
        item_name=item_name, site_id=site_id, **pagination
    )
    return PaginatedResponse[StockBalance].build(
        items=rows, total=total, page=pagination["page"], page_size=pagination["limit"]
    )


@router.get("/items/{item_id}", response_model=List[StockBalance])
async def get_item_balances(item_id: int, db: Session = Depends(deps.get_db)):
    """Balance of one item at every site, zero balances included."""
    return BalanceAggregator(db).list_item_balances_across_sites(item_id)


@router.get("/sites/{site_id}", response_model=List[StockBalance])
async def get_site_balances(site_id: int, db: Session = Depends(deps.get_db)):
    """Non-zero balances of every item held at one site."""
    return BalanceAggregator(db).list_site_balances(site_id)


@router.get("/{site_id}/{item_id}", response_model=StockBalanceValue)
async def get_balance(site_id: int, item_id: int, db: Session = Depends(deps.get_db)):
    """Current balance of one item at one site."""
    balance = BalanceAggregator(db).get_balance(site_id=site_id, item_id=item_id)
    return StockBalanceValue(site_id=site_id, item_id=item_id, balance=balance)
