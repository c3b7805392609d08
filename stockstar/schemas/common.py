"""
StockStar Common Schemas
Shared Pydantic models for common API structures
"""
import math
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

# Generic type for paginated responses
T = TypeVar('T')


class PaginatedResponse(BaseModel, Generic[T]):
    """
    Generic paginated response model

    Used for all list endpoints that support pagination
    """
    items: List[T] = Field(..., description="List of items for current page")
    total: int = Field(..., description="Total number of items across all pages")
    page: int = Field(..., description="Current page number (1-based)")
    page_size: int = Field(..., description="Number of items per page")
    total_pages: int = Field(..., description="Total number of pages")
    has_next: bool = Field(..., description="Whether there is a next page")
    has_previous: bool = Field(..., description="Whether there is a previous page")

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "items": [],
            "total": 150,
            "page": 1,
            "page_size": 25,
            "total_pages": 6,
            "has_next": True,
            "has_previous": False
        }
    })

    @classmethod
    def build(cls, items: list, total: int, page: int, page_size: int) -> "PaginatedResponse":
        total_pages = math.ceil(total / page_size) if page_size else 0
        return cls(
            items=items,
            total=total,
            page=page,
            page_size=page_size,
            total_pages=total_pages,
            has_next=page < total_pages,
            has_previous=page > 1
        )


class ErrorResponse(BaseModel):
    """
    Standard error response model

    Used for all API error responses
    """
    error: str = Field(..., description="Error type or category")
    detail: Optional[str] = Field(None, description="Human-readable error details")

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "error": "validation_error",
            "detail": "Quantity must be greater than zero, got 0"
        }
    })


class SuccessResponse(BaseModel):
    """
    Standard success response model

    Used for operations that don't return specific data
    """
    success: bool = Field(True, description="Operation success flag")
    message: str = Field(..., description="Success message")


class CreatedResponse(BaseModel):
    """Identifier of a newly created record"""
    id: int
