"""Offset/limit helpers shared by the list services"""

from stockstar.core.config import settings
from stockstar.core.exceptions import ValidationError


def page_offset(page: int, limit: int) -> int:
    """
    Convert a 1-based page number and page size into a row offset.

    Raises:
        ValidationError: page below 1, or limit outside 1..MAX_PAGE_SIZE
    """
    if page is None or page < 1:
        raise ValidationError(f"Page must be 1 or greater, got {page}")
    if limit is None or limit < 1 or limit > settings.MAX_PAGE_SIZE:
        raise ValidationError(f"Limit must be between 1 and {settings.MAX_PAGE_SIZE}, got {limit}")
    return (page - 1) * limit
