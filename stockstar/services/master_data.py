"""
Master Data Service
Brands, models, items and sites
"""
from typing import Dict, List, Type

from sqlalchemy import select
from sqlalchemy.orm import Session

from stockstar.core.database import Base, transactional
from stockstar.core.exceptions import NotFoundError
from stockstar.core.logging import get_logger
from stockstar.models.master import Brand, Item, ItemModel, Site

logger = get_logger("business")


class MasterDataService:
    """
    Record maintenance for the reference tables

    Uniqueness and foreign keys are enforced by the store; an IntegrityError
    propagates to the caller after the transaction is rolled back.
    """

    def __init__(self, db: Session):
        self.db = db

    # Brands
    def create_brand(self, data: Dict) -> int:
        return self._create(Brand, data)

    def list_brands(self) -> List[Brand]:
        return self.db.scalars(select(Brand).order_by(Brand.name)).all()

    def update_brand(self, brand_id: int, data: Dict) -> Brand:
        return self._update(Brand, brand_id, data)

    def delete_brand(self, brand_id: int) -> bool:
        return self._delete(Brand, brand_id)

    # Models
    def create_model(self, data: Dict) -> int:
        return self._create(ItemModel, data)

    def list_models(self) -> List[ItemModel]:
        return self.db.scalars(select(ItemModel).order_by(ItemModel.name)).all()

    def update_model(self, model_id: int, data: Dict) -> ItemModel:
        return self._update(ItemModel, model_id, data)

    def delete_model(self, model_id: int) -> bool:
        return self._delete(ItemModel, model_id)

    # Items
    def create_item(self, data: Dict) -> int:
        return self._create(Item, data)

    def list_items(self) -> List[Dict]:
        """Items with their brand and model names"""
        query = (
            select(
                Item.id, Item.code, Item.name, Item.brand_id, Item.model_id, Item.is_active,
                Brand.name.label("brand_name"),
                ItemModel.name.label("model_name"),
            )
            .outerjoin(Brand, Item.brand_id == Brand.id)
            .outerjoin(ItemModel, Item.model_id == ItemModel.id)
            .order_by(Item.name, Item.id)
        )
        return [dict(row) for row in self.db.execute(query).mappings()]

    def get_item(self, item_id: int) -> Item:
        return self._get(Item, item_id)

    def update_item(self, item_id: int, data: Dict) -> Item:
        return self._update(Item, item_id, data)

    def delete_item(self, item_id: int) -> bool:
        return self._delete(Item, item_id)

    # Sites
    def create_site(self, data: Dict) -> int:
        return self._create(Site, data)

    def list_sites(self) -> List[Site]:
        return self.db.scalars(select(Site).order_by(Site.name, Site.id)).all()

    def get_site(self, site_id: int) -> Site:
        return self._get(Site, site_id)

    def update_site(self, site_id: int, data: Dict) -> Site:
        return self._update(Site, site_id, data)

    def delete_site(self, site_id: int) -> bool:
        return self._delete(Site, site_id)

    def _get(self, model: Type[Base], record_id: int):
        record = self.db.get(model, record_id)
        if record is None:
            raise NotFoundError(f"{model.__name__} {record_id} not found")
        return record

    def _create(self, model: Type[Base], data: Dict) -> int:
        with transactional(self.db):
            record = model(**data)
            self.db.add(record)
            self.db.flush()
            record_id = record.id
        logger.info(f"Created {model.__name__} {record_id}")
        return record_id

    def _update(self, model: Type[Base], record_id: int, data: Dict):
        with transactional(self.db):
            record = self._get(model, record_id)
            for field, value in data.items():
                setattr(record, field, value)
        self.db.refresh(record)
        return record

    def _delete(self, model: Type[Base], record_id: int) -> bool:
        with transactional(self.db):
            record = self._get(model, record_id)
            self.db.delete(record)
        logger.info(f"Deleted {model.__name__} {record_id}")
        return True
