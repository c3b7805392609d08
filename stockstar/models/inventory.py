"""
StockStar Inventory Models
Vouchers, voucher lines and the stock movements derived from them
"""
import enum

from sqlalchemy import (
    CheckConstraint, Column, Date, DateTime, Float, ForeignKey, Index,
    Integer, String, Text
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from stockstar.core.database import Base


class TransactionTypeName(str, enum.Enum):
    """Seeded transaction type vocabulary"""
    PURCHASE_INWARD = "Purchase Inward"
    OPENING_STOCK = "Opening Stock"
    GODOWN_TO_SITE = "Godown → Site"
    SITE_TO_GODOWN = "Site → Godown"
    SITE_TO_SITE = "Site → Site"
    MATERIAL_USAGE = "Material Usage"
    STOCK_ADJUSTMENT = "Stock Adjustment"
    DAMAGED_STOCK = "Damaged Stock"


class InventoryTransactionType(Base):
    """Transaction type, drives movement derivation by name"""
    __tablename__ = "inventory_transaction_types"

    id = Column(Integer, primary_key=True, autoincrement=True, doc="Type ID")
    name = Column(String(100), unique=True, nullable=False, doc="Type name")


class InventoryVoucher(Base):
    """Inventory voucher header"""
    __tablename__ = "inventory_vouchers"

    id = Column(Integer, primary_key=True, autoincrement=True, doc="Voucher ID")
    transaction_number = Column(String(20), unique=True, nullable=False, doc="Sequential transaction number")
    voucher_date = Column(Date, nullable=False, doc="Voucher date")

    # Sites
    source_site_id = Column(Integer, ForeignKey("sites.id"), nullable=True, doc="Source site")
    destination_site_id = Column(Integer, ForeignKey("sites.id"), nullable=True, doc="Destination site")

    voucher_type_id = Column(Integer, ForeignKey("inventory_transaction_types.id"), nullable=False, doc="Transaction type")
    remarks = Column(Text, nullable=True, doc="Free-text remarks")

    # Audit Trail
    created_by = Column(Integer, nullable=True, doc="Created by user")
    created_at = Column(DateTime, server_default=func.current_timestamp())
    updated_by = Column(Integer, nullable=True, doc="Last updated by user")
    updated_at = Column(DateTime, nullable=True)

    # Relationships
    voucher_type = relationship("InventoryTransactionType")
    source_site = relationship("Site", foreign_keys=[source_site_id])
    destination_site = relationship("Site", foreign_keys=[destination_site_id])
    lines = relationship(
        "InventoryVoucherItem",
        order_by="InventoryVoucherItem.id",
        viewonly=True,
    )


class InventoryVoucherItem(Base):
    """Voucher line: one item and its quantity"""
    __tablename__ = "inventory_voucher_items"
    __table_args__ = (
        CheckConstraint("quantity > 0", name="quantity_positive"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True, doc="Line ID")
    inventory_voucher_id = Column(Integer, ForeignKey("inventory_vouchers.id"), nullable=False, index=True, doc="Owning voucher")
    item_id = Column(Integer, ForeignKey("items.id"), nullable=False, doc="Item")
    quantity = Column(Float, nullable=False, doc="Quantity")
    created_at = Column(DateTime, server_default=func.current_timestamp())


class StockMovement(Base):
    """Signed stock movement at one site, derived from a voucher line"""
    __tablename__ = "stock_movements"
    __table_args__ = (
        CheckConstraint("stock_in >= 0", name="stock_in_non_negative"),
        CheckConstraint("stock_out >= 0", name="stock_out_non_negative"),
        Index("ix_stock_movements_item_site", "item_id", "site_id"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True, doc="Movement ID")
    voucher_id = Column(Integer, ForeignKey("inventory_vouchers.id"), nullable=False, index=True, doc="Owning voucher")
    voucher_item_id = Column(Integer, ForeignKey("inventory_voucher_items.id"), nullable=False, doc="Owning voucher line")
    item_id = Column(Integer, ForeignKey("items.id"), nullable=False, doc="Item")
    site_id = Column(Integer, ForeignKey("sites.id"), nullable=False, doc="Site")
    stock_in = Column(Float, nullable=False, default=0, server_default="0", doc="Quantity in")
    stock_out = Column(Float, nullable=False, default=0, server_default="0", doc="Quantity out")
    created_at = Column(DateTime, server_default=func.current_timestamp())
