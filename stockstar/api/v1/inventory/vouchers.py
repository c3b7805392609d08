"""Inventory Voucher API endpoints"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from stockstar.api import deps
from stockstar.core.exceptions import ValidationError
from stockstar.schemas.common import CreatedResponse, ErrorResponse, PaginatedResponse, SuccessResponse
from stockstar.schemas.inventory import InventoryVoucher, InventoryVoucherDisplay, InventoryVoucherIn
from stockstar.services.inventory import VoucherPostingService

router = APIRouter(responses={
    400: {"model": ErrorResponse, "description": "Rejected input"},
    404: {"model": ErrorResponse, "description": "Voucher not found"},
    409: {"model": ErrorResponse, "description": "Constraint violation"},
})


@router.get("", response_model=PaginatedResponse[InventoryVoucherDisplay])
async def list_vouchers(
    pagination: dict = Depends(deps.get_pagination_params),
    db: Session = Depends(deps.get_db),
):
    """
    List voucher headers, newest first.

    Site and transaction type names are resolved for display.
    """
    rows, total = VoucherPostingService(db).list_vouchers(**pagination)
    return PaginatedResponse[InventoryVoucherDisplay].build(
        items=rows, total=total, page=pagination["page"], page_size=pagination["limit"]
    )


@router.get("/next-number")
async def get_next_transaction_number(db: Session = Depends(deps.get_db)):
    """Transaction number the next posted voucher will receive."""
    return {"transaction_number": VoucherPostingService(db).next_transaction_number()}


@router.get("/{voucher_id}", response_model=InventoryVoucher)
async def get_voucher(voucher_id: int, db: Session = Depends(deps.get_db)):
    """Get a voucher with its lines."""
    return VoucherPostingService(db).get_voucher(voucher_id)


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
async def post_voucher(voucher: InventoryVoucherIn, db: Session = Depends(deps.get_db)):
    """
    Post a new voucher.

    The header, its lines and the derived stock movements are written
    in a single transaction.
    """
    voucher_id = VoucherPostingService(db).post(voucher)
    return CreatedResponse(id=voucher_id)


@router.put("/{voucher_id}", response_model=SuccessResponse)
async def update_voucher(
    voucher_id: int,
    voucher: InventoryVoucherIn,
    user_id: Optional[int] = Query(None, description="User recorded as the updater"),
    db: Session = Depends(deps.get_db),
):
    """Replace a voucher's header, lines and movements."""
    if voucher.id is not None and voucher.id != voucher_id:
        raise ValidationError(f"Voucher id {voucher.id} does not match path id {voucher_id}")
    voucher.id = voucher_id

    VoucherPostingService(db).update(voucher, user_id=user_id)
    return SuccessResponse(message=f"Voucher {voucher_id} updated")


@router.delete("/{voucher_id}", response_model=SuccessResponse)
async def delete_voucher(voucher_id: int, db: Session = Depends(deps.get_db)):
    """Delete a voucher with its lines and movements."""
    VoucherPostingService(db).delete(voucher_id)
    return SuccessResponse(message=f"Voucher {voucher_id} deleted")
