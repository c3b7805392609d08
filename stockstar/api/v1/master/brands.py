"""Brand API endpoints"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from stockstar.api import deps
from stockstar.schemas.common import CreatedResponse, SuccessResponse
from stockstar.schemas.master import Brand, BrandCreate
from stockstar.services.master_data import MasterDataService

router = APIRouter()


@router.get("", response_model=List[Brand])
async def list_brands(db: Session = Depends(deps.get_db)):
    return MasterDataService(db).list_brands()


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_brand(brand: BrandCreate, db: Session = Depends(deps.get_db)):
    return CreatedResponse(id=MasterDataService(db).create_brand(brand.model_dump()))


@router.put("/{brand_id}", response_model=Brand)
async def update_brand(brand_id: int, brand: BrandCreate, db: Session = Depends(deps.get_db)):
    return MasterDataService(db).update_brand(brand_id, brand.model_dump())


@router.delete("/{brand_id}", response_model=SuccessResponse)
async def delete_brand(brand_id: int, db: Session = Depends(deps.get_db)):
    MasterDataService(db).delete_brand(brand_id)
    return SuccessResponse(message=f"Brand {brand_id} deleted")
