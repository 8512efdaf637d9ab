"""
Product and review data models for database documents.
These represent the structure of documents stored in MongoDB after serialization.
"""
from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field


class ReviewDocument(BaseModel):
    """Review embedded in a product document."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", description="Review ID")
    title: str = Field(..., description="Review title")
    reviewer_name: str = Field(..., alias="reviewerName", description="Name of the reviewer")
    review: str = Field(..., description="Review body")
    rating: Union[int, float] = Field(..., ge=1, le=5, description="Rating from 1 to 5")
    review_date: str = Field(..., alias="reviewDate", description="Date of the last change, MM/DD/YYYY")


class ProductDocument(BaseModel):
    """
    Product document model representing the MongoDB document structure.
    averageRating is derived from the embedded reviews.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", description="Product ID")
    product_name: str = Field(..., alias="productName", description="Product name")
    product_description: str = Field(..., alias="productDescription", description="Product description")
    model_number: str = Field(..., alias="modelNumber", description="Manufacturer model number")
    price: Union[int, float] = Field(..., gt=0, description="Product price")
    manufacturer: str = Field(..., description="Manufacturer name")
    manufacturer_website: str = Field(..., alias="manufacturerWebsite", description="Manufacturer website")
    keywords: List[str] = Field(..., description="Search keywords")
    categories: List[str] = Field(..., description="Product categories")
    date_released: str = Field(..., alias="dateReleased", description="Release date")
    discontinued: bool = Field(..., description="Whether the product is discontinued")
    reviews: List[ReviewDocument] = Field(default_factory=list, description="Embedded reviews")
    average_rating: Union[int, float] = Field(0, alias="averageRating", description="Mean rating of the reviews")


class ProductSummary(BaseModel):
    """Lightweight product listing entry."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", description="Product ID")
    product_name: str = Field(..., alias="productName", description="Product name")
