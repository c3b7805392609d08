"""
Main API Router - Consolidates all module routes
"""

from fastapi import APIRouter

from stockstar.api.v1 import dashboard
from stockstar.api.v1.inventory import balances, movements, transaction_types, vouchers
from stockstar.api.v1.master import brands, item_models, items, sites

api_router = APIRouter()

# Dashboard routes
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])

# Master data routes
api_router.include_router(brands.router, prefix="/brands", tags=["brands"])
api_router.include_router(item_models.router, prefix="/models", tags=["models"])
api_router.include_router(items.router, prefix="/items", tags=["items"])
api_router.include_router(sites.router, prefix="/sites", tags=["sites"])

# Inventory routes
api_router.include_router(transaction_types.router, prefix="/inventory/transaction-types", tags=["inventory-transaction-types"])
api_router.include_router(vouchers.router, prefix="/inventory/vouchers", tags=["inventory-vouchers"])
api_router.include_router(balances.router, prefix="/inventory/balances", tags=["inventory-balances"])
api_router.include_router(movements.router, prefix="/inventory/movements", tags=["inventory-movements"])
