"""Item model (product model) API endpoints"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from stockstar.api import deps
from stockstar.schemas.common import CreatedResponse, SuccessResponse
from stockstar.schemas.master import ItemModel, ItemModelCreate
from stockstar.services.master_data import MasterDataService

router = APIRouter()


@router.get("", response_model=List[ItemModel])
async def list_models(db: Session = Depends(deps.get_db)):
    return MasterDataService(db).list_models()


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_model(model: ItemModelCreate, db: Session = Depends(deps.get_db)):
    return CreatedResponse(id=MasterDataService(db).create_model(model.model_dump()))


@router.put("/{model_id}", response_model=ItemModel)
async def update_model(model_id: int, model: ItemModelCreate, db: Session = Depends(deps.get_db)):
    return MasterDataService(db).update_model(model_id, model.model_dump())


@router.delete("/{model_id}", response_model=SuccessResponse)
async def delete_model(model_id: int, db: Session = Depends(deps.get_db)):
    MasterDataService(db).delete_model(model_id)
    return SuccessResponse(message=f"Model {model_id} deleted")
