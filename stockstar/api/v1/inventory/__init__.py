"""Inventory API endpoints"""

from . import balances, movements, transaction_types, vouchers

__all__ = ["balances", "movements", "transaction_types", "vouchers"]
