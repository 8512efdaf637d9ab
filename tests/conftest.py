"""
Shared fixtures: stores wired to an in-memory MongoDB collection.
"""
import pytest
from mongomock_motor import AsyncMongoMockClient

from app.stores import ProductStore, RatingAggregator, ReviewStore


@pytest.fixture
def collection():
    client = AsyncMongoMockClient()
    return client["product_reviews_test"]["products"]


@pytest.fixture
def product_store(collection):
    return ProductStore(collection)


@pytest.fixture
def rating_aggregator(collection):
    return RatingAggregator(collection)


@pytest.fixture
def review_store(collection, product_store, rating_aggregator):
    return ReviewStore(collection, product_store, rating_aggregator)


@pytest.fixture
def product_fields():
    """Valid arguments for ProductStore.create, in order."""
    return dict(
        product_name="  83 inch LG C3 OLED TV  ",
        product_description="The advanced LG OLED evo C-Series is better than ever.",
        model_number=" OLED83C3PUA ",
        price=4757.29,
        manufacturer="LG",
        manufacturer_website="http://www.lgelectronics.com",
        keywords=["TV", " Smart TV ", "OLED"],
        categories=["Electronics", "Television & Video"],
        date_released="02/27/2023",
        discontinued=False,
    )


@pytest.fixture
async def product(product_store, product_fields):
    return await product_store.create(**product_fields)
