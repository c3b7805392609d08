"""Transaction type API endpoints"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from stockstar.api import deps
from stockstar.schemas.inventory import TransactionType
from stockstar.services.inventory import DashboardService

router = APIRouter()


@router.get("", response_model=List[TransactionType])
async def list_transaction_types(db: Session = Depends(deps.get_db)):
    """List the seeded transaction types."""
    return DashboardService(db).list_transaction_types()
