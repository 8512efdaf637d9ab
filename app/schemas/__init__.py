"""
Schemas package for API request/response validation.
These models define the structure of data sent to and from the API endpoints.
"""

# Product schemas
from .product import ProductRequest, DeletedProductResponse

# Review schemas
from .review import CreateReviewRequest, UpdateReviewRequest

# Common schemas
from .common import HealthCheckResponse, RootResponse, ErrorResponse

__all__ = [
    # Product schemas
    "ProductRequest",
    "DeletedProductResponse",

    # Review schemas
    "CreateReviewRequest",
    "UpdateReviewRequest",

    # Common schemas
    "HealthCheckResponse",
    "RootResponse",
    "ErrorResponse",
]
