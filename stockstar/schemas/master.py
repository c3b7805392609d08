"""Master data schemas: brands, models, items and sites"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class BrandBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)


class BrandCreate(BrandBase):
    pass


class Brand(BrandBase):
    model_config = ConfigDict(from_attributes=True)

    id: int


class ItemModelBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)


class ItemModelCreate(ItemModelBase):
    pass


class ItemModel(ItemModelBase):
    model_config = ConfigDict(from_attributes=True)

    id: int


class ItemBase(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    code: str = Field(..., min_length=1, max_length=50)
    name: str = Field(..., min_length=1, max_length=200)
    brand_id: Optional[int] = None
    model_id: Optional[int] = None
    is_active: bool = True


class ItemCreate(ItemBase):
    pass


class Item(ItemBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    brand_name: Optional[str] = None
    model_name: Optional[str] = None


class SiteBase(BaseModel):
    code: str = Field(..., min_length=1, max_length=50)
    name: str = Field(..., min_length=1, max_length=200)
    address: Optional[str] = None
    type: str = Field(..., min_length=1, max_length=50, description="Site category, e.g. Warehouse or Site")
    is_active: bool = True


class SiteCreate(SiteBase):
    pass


class Site(SiteBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
