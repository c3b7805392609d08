"""Item Master API endpoints"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from stockstar.api import deps
from stockstar.schemas.common import CreatedResponse, SuccessResponse
from stockstar.schemas.master import Item, ItemCreate
from stockstar.services.master_data import MasterDataService

router = APIRouter()


@router.get("", response_model=List[Item])
async def list_items(db: Session = Depends(deps.get_db)):
    """
    List items with their brand and model names.
    """
    return MasterDataService(db).list_items()


@router.get("/{item_id}", response_model=Item)
async def get_item(item_id: int, db: Session = Depends(deps.get_db)):
    """Get item details."""
    return MasterDataService(db).get_item(item_id)


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_item(item: ItemCreate, db: Session = Depends(deps.get_db)):
    """
    Create a new item.

    Item codes must be unique; brand and model must exist when given.
    """
    return CreatedResponse(id=MasterDataService(db).create_item(item.model_dump()))


@router.put("/{item_id}", response_model=Item)
async def update_item(item_id: int, item: ItemCreate, db: Session = Depends(deps.get_db)):
    """Replace item details."""
    return MasterDataService(db).update_item(item_id, item.model_dump())


@router.delete("/{item_id}", response_model=SuccessResponse)
async def delete_item(item_id: int, db: Session = Depends(deps.get_db)):
    """
    Delete an item.

    Items referenced by vouchers or movements cannot be deleted.
    """
    MasterDataService(db).delete_item(item_id)
    return SuccessResponse(message=f"Item {item_id} deleted")
