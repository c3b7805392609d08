"""Dashboard API endpoints"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from stockstar.api import deps
from stockstar.schemas.inventory import DashboardStats
from stockstar.services.inventory import DashboardService

router = APIRouter()


@router.get("/stats", response_model=DashboardStats)
async def get_dashboard_stats(db: Session = Depends(deps.get_db)):
    """Active item and site counts and recent voucher count"""
    return DashboardService(db).get_stats()
