"""
Custom Application Exceptions
"""


class StockStarException(Exception):
    """Base exception for StockStar application"""
    pass


class ValidationError(StockStarException):
    """Raised when caller input is rejected before any write"""
    pass


class NotFoundError(StockStarException):
    """Raised when a referenced record does not exist"""
    pass
