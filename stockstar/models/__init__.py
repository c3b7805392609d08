"""
StockStar SQLAlchemy Models
"""

# Import all models to ensure they are registered with SQLAlchemy
from .master import Brand, ItemModel, Item, Site
from .inventory import (
    TransactionTypeName, InventoryTransactionType, InventoryVoucher,
    InventoryVoucherItem, StockMovement
)

__all__ = [
    "Brand",
    "ItemModel",
    "Item",
    "Site",
    "TransactionTypeName",
    "InventoryTransactionType",
    "InventoryVoucher",
    "InventoryVoucherItem",
    "StockMovement",
]
