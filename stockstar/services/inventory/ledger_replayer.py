"""
Ledger Replayer
Chronological movement history with a running balance that stays correct
across paginated windows
"""
from datetime import date
from typing import Dict, List, Optional, Tuple

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from stockstar.core.exceptions import ValidationError
from stockstar.models.inventory import InventoryTransactionType, InventoryVoucher, StockMovement
from stockstar.models.master import Brand, Item, ItemModel, Site
from stockstar.services.pagination import page_offset


class LedgerReplayer:
    """
    Stock movement ledger

    Rows are replayed in (voucher date, movement id) order. A running balance
    only makes sense for a single item, so it is reported as 0 unless an item
    filter is given.
    """

    def __init__(self, db: Session):
        self.db = db

    def get_movement_history(
        self,
        item_id: Optional[int] = None,
        site_id: Optional[int] = None,
        voucher_type_id: Optional[int] = None,
        from_date: Optional[date] = None,
        to_date: Optional[date] = None,
        page: int = 1,
        limit: int = 10
    ) -> Tuple[List[Dict], int]:
        """
        One page of the movement ledger

        The first row's running balance starts from the opening balance (all
        movements of the item, and site if given, dated before from_date) plus
        every row the page offset skips, folded in the same order and under
        the same filter as the displayed rows.

        Returns:
            (rows for the page, total matching rows)
        """
        if from_date and to_date and to_date < from_date:
            raise ValidationError("to_date must be greater than or equal to from_date")

        offset = page_offset(page, limit)
        conditions = self._conditions(item_id, site_id, voucher_type_id, from_date, to_date)

        total = self.db.scalar(
            select(func.count(StockMovement.id))
            .join(InventoryVoucher, StockMovement.voucher_id == InventoryVoucher.id)
            .where(*conditions)
        )

        query = (
            select(
                StockMovement.id,
                StockMovement.voucher_id,
                InventoryVoucher.transaction_number,
                InventoryVoucher.voucher_date,
                InventoryTransactionType.name.label("voucher_type_name"),
                Item.id.label("item_id"),
                Item.code.label("item_code"),
                Item.name.label("item_name"),
                Brand.name.label("brand_name"),
                ItemModel.name.label("model_name"),
                Site.id.label("site_id"),
                Site.code.label("site_code"),
                Site.name.label("site_name"),
                StockMovement.stock_in,
                StockMovement.stock_out,
                InventoryVoucher.remarks,
                StockMovement.created_at,
            )
            .join(InventoryVoucher, StockMovement.voucher_id == InventoryVoucher.id)
            .join(InventoryTransactionType, InventoryVoucher.voucher_type_id == InventoryTransactionType.id)
            .join(Item, StockMovement.item_id == Item.id)
            .join(Site, StockMovement.site_id == Site.id)
            .outerjoin(Brand, Item.brand_id == Brand.id)
            .outerjoin(ItemModel, Item.model_id == ItemModel.id)
            .where(*conditions)
            .order_by(*self._ordering())
            .offset(offset)
            .limit(limit)
        )

        running_balance = 0.0
        if item_id is not None:
            running_balance = self._opening_balance(item_id, site_id, from_date)
            running_balance += self._skipped_balance(conditions, offset)

        rows = []
        for row in self.db.execute(query).mappings():
            row = dict(row)
            row["stock_in"] = float(row["stock_in"] or 0)
            row["stock_out"] = float(row["stock_out"] or 0)
            if item_id is not None:
                running_balance += row["stock_in"] - row["stock_out"]
                row["running_balance"] = running_balance
            else:
                row["running_balance"] = 0.0
            rows.append(row)

        return rows, total

    def _conditions(self, item_id, site_id, voucher_type_id, from_date, to_date) -> list:
        conditions = []
        if item_id is not None:
            conditions.append(StockMovement.item_id == item_id)
        if site_id is not None:
            conditions.append(StockMovement.site_id == site_id)
        if voucher_type_id is not None:
            conditions.append(InventoryVoucher.voucher_type_id == voucher_type_id)
        if from_date is not None:
            conditions.append(InventoryVoucher.voucher_date >= from_date)
        if to_date is not None:
            conditions.append(InventoryVoucher.voucher_date <= to_date)
        return conditions

    def _ordering(self) -> tuple:
        return (InventoryVoucher.voucher_date.asc(), StockMovement.id.asc())

    def _opening_balance(self, item_id: int, site_id: Optional[int], from_date: Optional[date]) -> float:
        """Net movement of the item (at the site, if given) dated strictly before from_date"""
        if from_date is None:
            return 0.0

        query = (
            select(func.coalesce(func.sum(StockMovement.stock_in - StockMovement.stock_out), 0))
            .join(InventoryVoucher, StockMovement.voucher_id == InventoryVoucher.id)
            .where(StockMovement.item_id == item_id, InventoryVoucher.voucher_date < from_date)
        )
        if site_id is not None:
            query = query.where(StockMovement.site_id == site_id)
        return float(self.db.scalar(query) or 0)

    def _skipped_balance(self, conditions: list, offset: int) -> float:
        """Net movement of the rows before the page, under the page's filter and order"""
        if offset <= 0:
            return 0.0

        skipped = (
            select(StockMovement.stock_in, StockMovement.stock_out)
            .join(InventoryVoucher, StockMovement.voucher_id == InventoryVoucher.id)
            .where(*conditions)
            .order_by(*self._ordering())
            .limit(offset)
            .subquery()
        )
        total = self.db.scalar(
            select(func.coalesce(func.sum(skipped.c.stock_in - skipped.c.stock_out), 0))
        )
        return float(total or 0)
