"""
API Dependencies
Common dependencies for API endpoints
"""

from fastapi import Query

from stockstar.core.config import settings
from stockstar.core.database import get_db  # noqa: F401


def get_pagination_params(
    page: int = Query(1, ge=1, description="Page number (1-based)"),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, description="Rows per page"),
) -> dict:
    """
    Common pagination parameters.
    """
    return {"page": page, "limit": limit}
