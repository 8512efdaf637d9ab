"""
Review endpoints.
"""
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException

from ..models import ProductDocument, ReviewDocument
from ..schemas import CreateReviewRequest, UpdateReviewRequest
from ..stores import ProductStore, ReviewStore
from ..utils.dependencies import get_product_store, get_review_store

router = APIRouter(prefix="/reviews", tags=["Reviews"])


@router.get("/{product_id}", response_model=List[ReviewDocument])
async def list_reviews(product_id: str, store: ReviewStore = Depends(get_review_store)):
    """Get all reviews of a product"""
    reviews = await store.get_all_reviews(product_id)
    if not reviews:
        raise HTTPException(status_code=404, detail="No reviews found for this product.")
    return reviews


@router.post("/{product_id}", response_model=ProductDocument)
async def create_review(
    product_id: str,
    body: Optional[CreateReviewRequest] = Body(None),
    store: ReviewStore = Depends(get_review_store),
    products: ProductStore = Depends(get_product_store),
):
    """Add a review and return the refreshed product"""
    if body is None or not body.model_fields_set:
        raise HTTPException(status_code=400, detail="There are no fields in the request body.")

    await store.create_review(product_id, body.title, body.reviewer_name, body.review, body.rating)
    return await products.get(product_id)


@router.get("/review/{review_id}", response_model=ReviewDocument)
async def get_review(review_id: str, store: ReviewStore = Depends(get_review_store)):
    """Get a specific review by ID"""
    return await store.get_review(review_id)


@router.patch("/review/{review_id}", response_model=ProductDocument)
async def update_review(
    review_id: str,
    body: Optional[UpdateReviewRequest] = Body(None),
    store: ReviewStore = Depends(get_review_store),
):
    """Update the sent fields of a review and return the refreshed product"""
    update_fields = body.model_dump(by_alias=True, exclude_unset=True) if body is not None else {}
    return await store.update_review(review_id, update_fields)


@router.delete("/review/{review_id}", response_model=ProductDocument)
async def delete_review(review_id: str, store: ReviewStore = Depends(get_review_store)):
    """Remove a review and return the refreshed product"""
    return await store.remove_review(review_id)
