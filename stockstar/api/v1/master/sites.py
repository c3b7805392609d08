"""Site API endpoints"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from stockstar.api import deps
from stockstar.schemas.common import CreatedResponse, SuccessResponse
from stockstar.schemas.master import Site, SiteCreate
from stockstar.services.master_data import MasterDataService

router = APIRouter()


@router.get("", response_model=List[Site])
async def list_sites(db: Session = Depends(deps.get_db)):
    """List sites and godowns by name."""
    return MasterDataService(db).list_sites()


@router.get("/{site_id}", response_model=Site)
async def get_site(site_id: int, db: Session = Depends(deps.get_db)):
    return MasterDataService(db).get_site(site_id)


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_site(site: SiteCreate, db: Session = Depends(deps.get_db)):
    return CreatedResponse(id=MasterDataService(db).create_site(site.model_dump()))


@router.put("/{site_id}", response_model=Site)
async def update_site(site_id: int, site: SiteCreate, db: Session = Depends(deps.get_db)):
    return MasterDataService(db).update_site(site_id, site.model_dump())


@router.delete("/{site_id}", response_model=SuccessResponse)
async def delete_site(site_id: int, db: Session = Depends(deps.get_db)):
    """
    Delete a site.

    Sites referenced by vouchers or movements cannot be deleted.
    """
    MasterDataService(db).delete_site(site_id)
    return SuccessResponse(message=f"Site {site_id} deleted")
