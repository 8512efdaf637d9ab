"""
Product endpoints. Request bodies are handed to the product store as-is;
store errors are turned into responses by the app's CatalogError handler.
"""
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException

from ..models import ProductDocument, ProductSummary
from ..schemas import DeletedProductResponse, ProductRequest
from ..stores import ProductStore
from ..utils.dependencies import get_product_store

router = APIRouter(prefix="/products", tags=["Products"])


def _require_body(body: Optional[ProductRequest]) -> ProductRequest:
    if body is None or not body.model_fields_set:
        raise HTTPException(status_code=400, detail="There are no fields in the request body.")
    return body


@router.get("", response_model=List[ProductSummary])
async def list_products(store: ProductStore = Depends(get_product_store)):
    """List every product as id and name"""
    return await store.get_all()


@router.post("", response_model=ProductDocument)
async def create_product(
    body: Optional[ProductRequest] = Body(None),
    store: ProductStore = Depends(get_product_store),
):
    """Create a new product"""
    body = _require_body(body)
    return await store.create(
        body.product_name,
        body.product_description,
        body.model_number,
        body.price,
        body.manufacturer,
        body.manufacturer_website,
        body.keywords,
        body.categories,
        body.date_released,
        body.discontinued,
    )


@router.get("/{product_id}", response_model=ProductDocument)
async def get_product(product_id: str, store: ProductStore = Depends(get_product_store)):
    """Get a specific product by ID"""
    return await store.get(product_id)


@router.put("/{product_id}", response_model=ProductDocument)
async def update_product(
    product_id: str,
    body: Optional[ProductRequest] = Body(None),
    store: ProductStore = Depends(get_product_store),
):
    """Replace every field of a product"""
    body = _require_body(body)
    return await store.update(
        product_id,
        body.product_name,
        body.product_description,
        body.model_number,
        body.price,
        body.manufacturer,
        body.manufacturer_website,
        body.keywords,
        body.categories,
        body.date_released,
        body.discontinued,
    )


@router.delete("/{product_id}", response_model=DeletedProductResponse)
async def delete_product(product_id: str, store: ProductStore = Depends(get_product_store)):
    """Delete a product"""
    deleted_product = await store.remove(product_id)
    return {"_id": deleted_product["_id"], "deleted": True}
