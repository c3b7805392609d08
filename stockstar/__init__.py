"""StockStar: voucher-driven inventory tracking across sites"""

__version__ = "1.0.0"
