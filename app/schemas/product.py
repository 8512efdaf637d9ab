"""
Product API schemas for request/response validation.
These models define the structure of data sent to and from the API.

Request fields accept any JSON value; presence, type and content rules are
enforced by the product store so every caller gets the same checks and the
same 400 error body.
"""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


# Request Schemas

class ProductRequest(BaseModel):
    """Request schema for creating or fully replacing a product."""
    model_config = ConfigDict(populate_by_name=True)

    product_name: Optional[Any] = Field(None, alias="productName", description="Product name")
    product_description: Optional[Any] = Field(None, alias="productDescription", description="Product description")
    model_number: Optional[Any] = Field(None, alias="modelNumber", description="Manufacturer model number")
    price: Optional[Any] = Field(None, description="Price, at most two decimal places")
    manufacturer: Optional[Any] = Field(None, description="Manufacturer name")
    manufacturer_website: Optional[Any] = Field(
        None, alias="manufacturerWebsite", description="Website, http://www.<name>.com"
    )
    keywords: Optional[Any] = Field(None, description="At least one keyword")
    categories: Optional[Any] = Field(None, description="At least one category")
    date_released: Optional[Any] = Field(None, alias="dateReleased", description="Release date")
    discontinued: Optional[Any] = Field(None, description="Whether the product is discontinued")


# Response Schemas

class DeletedProductResponse(BaseModel):
    """Response schema for a deleted product."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", description="Deleted product ID")
    deleted: bool = Field(True, description="Deletion confirmation")
