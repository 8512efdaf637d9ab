"""
Review API schemas for request validation.
Field types are checked by the review store, not here.
"""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class CreateReviewRequest(BaseModel):
    """Request schema for adding a review to a product."""
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[Any] = Field(None, description="Review title")
    reviewer_name: Optional[Any] = Field(None, alias="reviewerName", description="Name of the reviewer")
    review: Optional[Any] = Field(None, description="Review body")
    rating: Optional[Any] = Field(None, description="Rating from 1 to 5, one decimal place")


class UpdateReviewRequest(CreateReviewRequest):
    """Request schema for a partial review update; only the sent fields change."""
