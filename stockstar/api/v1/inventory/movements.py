"""Stock Movement Ledger API endpoints"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from stockstar.api import deps
from stockstar.schemas.common import PaginatedResponse
from stockstar.schemas.inventory import StockMovementHistory
from stockstar.services.inventory import LedgerReplayer

router = APIRouter()


@router.get("", response_model=PaginatedResponse[StockMovementHistory])
async def get_movement_history(
    item_id: Optional[int] = Query(None, description="Filter by item"),
    site_id: Optional[int] = Query(None, description="Filter by site"),
    voucher_type_id: Optional[int] = Query(None, description="Filter by transaction type"),
    from_date: Optional[date] = Query(None, description="Voucher date from (inclusive)"),
    to_date: Optional[date] = Query(None, description="Voucher date to (inclusive)"),
    pagination: dict = Depends(deps.get_pagination_params),
    db: Session = Depends(deps.get_db),
):
    """
    Chronological stock movement ledger.

    When filtered by item, each row carries the running balance, carried
    over from earlier dates and earlier pages.
    """
    rows, total = LedgerReplayer(db).get_movement_history(
        item_id=item_id,
        site_id=site_id,
        voucher_type_id=voucher_type_id,
        from_date=from_date,
        to_date=to_date,
        **pagination
    )
    return PaginatedResponse[StockMovementHistory].build(
        items=rows, total=total, page=pagination["page"], page_size=pagination["limit"]
    )
