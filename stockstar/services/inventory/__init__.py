"""Inventory services: voucher posting, balances and the movement ledger"""

from .movement_deriver import DerivedMovement, derive_movements
from .voucher_posting import VoucherPostingService
from .balance_aggregator import BalanceAggregator
from .ledger_replayer import LedgerReplayer
from .dashboard import DashboardService

__all__ = [
    "DerivedMovement",
    "derive_movements",
    "VoucherPostingService",
    "BalanceAggregator",
    "LedgerReplayer",
    "DashboardService",
]
