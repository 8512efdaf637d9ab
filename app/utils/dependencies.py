"""
FastAPI dependencies wiring the stores to the shared database connection
"""
from fastapi import Depends, HTTPException
from motor.motor_asyncio import AsyncIOMotorCollection

from ..config.database import DatabaseManager, get_database_manager
from ..stores import ProductStore, RatingAggregator, ReviewStore


def get_products_collection(
    manager: DatabaseManager = Depends(get_database_manager),
) -> AsyncIOMotorCollection:
    """
    Dependency to get the products collection

    Raises:
        HTTPException: If database connection is not available
    """
    if not manager.is_connected():
        raise HTTPException(
            status_code=503,
            detail="Database connection not available. Please check your MongoDB connection."
        )
    return manager.get_products_collection()


def get_product_store(
    collection: AsyncIOMotorCollection = Depends(get_products_collection),
) -> ProductStore:
    return ProductStore(collection)


def get_rating_aggregator(
    collection: AsyncIOMotorCollection = Depends(get_products_collection),
) -> RatingAggregator:
    return RatingAggregator(collection)


def get_review_store(
    collection: AsyncIOMotorCollection = Depends(get_products_collection),
    products: ProductStore = Depends(get_product_store),
    ratings: RatingAggregator = Depends(get_rating_aggregator),
) -> ReviewStore:
    return ReviewStore(collection, products, ratings)
