"""
Balance Aggregator
Current stock balances per item and site, summed from stock movements
"""
from typing import Dict, List, Optional, Tuple

from sqlalchemy import and_, func, select, true
from sqlalchemy.orm import Session

from stockstar.models.inventory import StockMovement
from stockstar.models.master import Brand, Item, ItemModel, Site
from stockstar.services.pagination import page_offset


class BalanceAggregator:
    """
    Stock balance queries

    A balance is defined for every (item, site) pair as
    sum(stock_in) - sum(stock_out). The list views build the items x sites
    grid and join the per-pair movement totals onto it, so pairs without
    movements show up with a zero balance and are then filtered out.
    """

    def __init__(self, db: Session):
        self.db = db

    def get_balance(self, site_id: int, item_id: int) -> float:
        """Balance of one item at one site; zero when nothing has moved"""
        balance = self.db.scalar(
            select(
                func.coalesce(func.sum(StockMovement.stock_in) - func.sum(StockMovement.stock_out), 0)
            ).where(
                StockMovement.site_id == site_id,
                StockMovement.item_id == item_id
            )
        )
        return float(balance or 0)

    def list_balances(
        self,
        item_name: Optional[str] = None,
        site_id: Optional[int] = None,
        page: int = 1,
        limit: int = 10
    ) -> Tuple[List[Dict], int]:
        """
        Non-zero balances across the inventory, ordered by site then item name

        Args:
            item_name: case-insensitive substring of the item name
            site_id: restrict to one site

        Returns:
            (rows for the page, total matching rows)
        """
        offset = page_offset(page, limit)
        query, balance = self._grid_query()

        query = query.where(balance != 0)
        if item_name:
            query = query.where(Item.name.ilike(f"%{item_name}%"))
        if site_id is not None:
            query = query.where(Site.id == site_id)

        total = self.db.scalar(select(func.count()).select_from(query.subquery()))

        query = query.order_by(Site.name, Item.name, Site.id, Item.id).offset(offset).limit(limit)
        return self._rows(query), total

    def list_item_balances_across_sites(self, item_id: int) -> List[Dict]:
        """Balance of one item at every site, zero balances included, ordered by site name"""
        query, _ = self._grid_query()
        query = query.where(Item.id == item_id).order_by(Site.name, Site.id)
        return self._rows(query)

    def list_site_balances(self, site_id: int) -> List[Dict]:
        """Non-zero balances of every item at one site, ordered by item name"""
        query, balance = self._grid_query()
        query = query.where(Site.id == site_id, balance != 0).order_by(Item.name, Item.id)
        return self._rows(query)

    def _grid_query(self):
        totals = (
            select(
                StockMovement.item_id,
                StockMovement.site_id,
                (func.sum(StockMovement.stock_in) - func.sum(StockMovement.stock_out)).label("balance")
            )
            .group_by(StockMovement.item_id, StockMovement.site_id)
            .subquery()
        )
        balance = func.coalesce(totals.c.balance, 0)

        query = (
            select(
                Item.id.label("item_id"),
                Item.code.label("item_code"),
                Item.name.label("item_name"),
                Brand.name.label("brand_name"),
                ItemModel.name.label("model_name"),
                Site.id.label("site_id"),
                Site.code.label("site_code"),
                Site.name.label("site_name"),
                Site.type.label("site_type"),
                balance.label("balance"),
            )
            .select_from(Item)
            .join(Site, true())
            .outerjoin(totals, and_(totals.c.item_id == Item.id, totals.c.site_id == Site.id))
            .outerjoin(Brand, Item.brand_id == Brand.id)
            .outerjoin(ItemModel, Item.model_id == ItemModel.id)
        )
        return query, balance

    def _rows(self, query) -> List[Dict]:
        rows = []
        for row in self.db.execute(query).mappings():
            row = dict(row)
            row["balance"] = float(row["balance"] or 0)
            rows.append(row)
        return rows
