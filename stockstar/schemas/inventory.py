"""Inventory schemas: vouchers, balances and movement history"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from datetime import date, datetime


class TransactionType(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


# Voucher Schemas
class VoucherLineIn(BaseModel):
    item_id: int
    quantity: float = Field(..., description="Quantity, must be greater than zero")


class VoucherLine(VoucherLineIn):
    model_config = ConfigDict(from_attributes=True)

    id: int
    inventory_voucher_id: int


class InventoryVoucherIn(BaseModel):
    """Voucher as submitted for posting or update"""
    id: Optional[int] = None
    voucher_date: date
    source_site_id: Optional[int] = None
    destination_site_id: Optional[int] = None
    voucher_type_id: int
    remarks: Optional[str] = None
    created_by: Optional[int] = None
    items: List[VoucherLineIn] = Field(default_factory=list)


class InventoryVoucher(BaseModel):
    """Voucher header with its lines"""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    transaction_number: str
    voucher_date: date
    source_site_id: Optional[int] = None
    destination_site_id: Optional[int] = None
    voucher_type_id: int
    remarks: Optional[str] = None
    created_by: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_by: Optional[int] = None
    updated_at: Optional[datetime] = None
    items: List[VoucherLine] = Field(default_factory=list, validation_alias="lines")


class InventoryVoucherDisplay(BaseModel):
    """Voucher list row with resolved names"""
    id: int
    transaction_number: str
    voucher_date: date
    source_site_id: Optional[int] = None
    source_site_name: Optional[str] = None
    destination_site_id: Optional[int] = None
    destination_site_name: Optional[str] = None
    voucher_type_id: int
    voucher_type_name: str
    remarks: Optional[str] = None
    created_at: Optional[datetime] = None


# Balance Schemas
class StockBalance(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    item_id: int
    item_code: str
    item_name: str
    brand_name: Optional[str] = None
    model_name: Optional[str] = None
    site_id: int
    site_code: str
    site_name: str
    site_type: str
    balance: float


class StockBalanceValue(BaseModel):
    site_id: int
    item_id: int
    balance: float


# Ledger Schemas
class StockMovementHistory(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    id: int
    voucher_id: int
    transaction_number: str
    voucher_date: date
    voucher_type_name: str
    item_id: int
    item_code: str
    item_name: str
    brand_name: Optional[str] = None
    model_name: Optional[str] = None
    site_id: int
    site_code: str
    site_name: str
    stock_in: float
    stock_out: float
    running_balance: float
    remarks: Optional[str] = None
    created_at: Optional[datetime] = None


class DashboardStats(BaseModel):
    active_items_count: int
    active_sites_count: int
    recent_transactions_count: int
