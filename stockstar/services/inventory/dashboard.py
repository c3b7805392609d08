"""Dashboard summary counts"""

from datetime import date, timedelta
from typing import Dict, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from stockstar.core.config import settings
from stockstar.models.inventory import InventoryVoucher, InventoryTransactionType
from stockstar.models.master import Item, Site


class DashboardService:

    def __init__(self, db: Session):
        self.db = db

    def get_stats(self, today: Optional[date] = None) -> Dict[str, int]:
        """Active item and site counts, and vouchers dated in the recent window"""
        today = today or date.today()
        since = today - timedelta(days=settings.RECENT_TRANSACTION_DAYS)

        return {
            "active_items_count": self.db.scalar(
                select(func.count(Item.id)).where(Item.is_active.is_(True))
            ),
            "active_sites_count": self.db.scalar(
                select(func.count(Site.id)).where(Site.is_active.is_(True))
            ),
            "recent_transactions_count": self.db.scalar(
                select(func.count(InventoryVoucher.id)).where(InventoryVoucher.voucher_date >= since)
            ),
        }

    def list_transaction_types(self):
        return self.db.scalars(
            select(InventoryTransactionType).order_by(InventoryTransactionType.id)
        ).all()
