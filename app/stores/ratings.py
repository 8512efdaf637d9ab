"""
Average rating maintenance for products.
"""
import logging
from typing import Any, Dict, List

from motor.motor_asyncio import AsyncIOMotorCollection

from ..utils.exceptions import NotFoundError
from ..utils.identifiers import check_id

logger = logging.getLogger(__name__)


def average_rating(reviews: List[Dict[str, Any]]) -> float:
    """Arithmetic mean of the review ratings, 0 when there are no reviews."""
    if not reviews:
        return 0
    return sum(review["rating"] for review in reviews) / len(reviews)


class RatingAggregator:
    """Recomputes ``averageRating`` from a product's embedded reviews.

    Review mutations and the recompute are two separate single-document
    updates, so a reader running between them sees the previous average.
    """

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def recompute(self, product_id: str) -> float:
        """
        Recompute and store the average rating of a product

        Args:
            product_id: Product ID whose reviews changed

        Returns:
            The stored average

        Raises:
            InvalidIdError: If the product ID is malformed
            NotFoundError: If no product matches the ID
        """
        object_id = check_id(product_id)

        product = await self.collection.find_one({"_id": object_id}, projection={"reviews": 1})
        if product is None:
            raise NotFoundError("product", object_id)

        average = average_rating(product.get("reviews", []))

        result = await self.collection.update_one(
            {"_id": object_id},
            {"$set": {"averageRating": average}}
        )
        if result.matched_count == 0:
            raise NotFoundError("product", object_id)

        logger.debug(f"Average rating for product {object_id} set to {average}")
        return average
