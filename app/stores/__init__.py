"""
Data layer for products and their embedded reviews.
Each store receives the products collection instead of reaching for a global handle.
"""
from .products import ProductStore
from .ratings import RatingAggregator
from .reviews import ReviewStore

__all__ = [
    "ProductStore",
    "RatingAggregator",
    "ReviewStore",
]
