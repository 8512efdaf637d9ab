"""
Reviews embedded in product documents.

A review has no document of its own: it lives in the ``reviews`` array of its
product and is located through the ``reviews._id`` query path. Every mutation
is followed by an awaited recompute of the product's average rating.
"""
import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument

from ..utils.dates import current_date
from ..utils.exceptions import NotFoundError, ValidationError
from ..utils.identifiers import check_id
from ..utils.serializers import serialize_doc, serialize_docs
from ..utils.validation import NUMBER, STRING, trim_text, validate
from .products import ProductStore
from .ratings import RatingAggregator

logger = logging.getLogger(__name__)

REVIEW_FIELDS = (
    ("title", STRING),
    ("reviewerName", STRING),
    ("review", STRING),
    ("rating", NUMBER),
)
REVIEW_FIELD_NAMES = tuple(name for name, _ in REVIEW_FIELDS)


def clean_review_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    """Validate all four caller-supplied review fields and trim the text ones."""
    cleaned = {}
    for name, kind in REVIEW_FIELDS:
        value = fields.get(name)
        validate(value, kind, name)
        cleaned[name] = trim_text(value) if kind == STRING else value
    return cleaned


def find_embedded_review(product: Dict[str, Any], review_id: ObjectId) -> Optional[Dict[str, Any]]:
    for review in product.get("reviews", []):
        if review.get("_id") == review_id:
            return review
    return None


class ReviewStore:
    """Owns the review sub-documents of the products in one collection."""

    def __init__(
        self,
        collection: AsyncIOMotorCollection,
        products: ProductStore,
        ratings: RatingAggregator,
    ):
        self.collection = collection
        self.products = products
        self.ratings = ratings

    async def create_review(
        self,
        product_id: str,
        title: str,
        reviewer_name: str,
        review: str,
        rating: float,
    ) -> Dict[str, Any]:
        """
        Add a review to a product and refresh its average rating

        Returns:
            The new review, with its generated ID and today's reviewDate

        Raises:
            InvalidIdError: If the product ID is malformed
            ValidationError: If any review field is missing or malformed
            NotFoundError: If no product matches the ID
        """
        product_object_id = check_id(product_id)
        fields = clean_review_fields({
            "title": title,
            "reviewerName": reviewer_name,
            "review": review,
            "rating": rating,
        })

        review_id = ObjectId()
        new_review = {"_id": review_id, **fields, "reviewDate": current_date()}

        product = await self.collection.find_one_and_update(
            {"_id": product_object_id},
            {"$addToSet": {"reviews": new_review}},
            return_document=ReturnDocument.AFTER
        )
        if product is None:
            raise NotFoundError("product", product_object_id)

        await self.ratings.recompute(str(product_object_id))

        logger.info(f"Review created: {review_id} on product {product_object_id}")
        return serialize_doc(find_embedded_review(product, review_id))

    async def get_all_reviews(self, product_id: str) -> List[Dict[str, Any]]:
        """
        Get every review of a product; the list may be empty

        Raises:
            InvalidIdError: If the product ID is malformed
            NotFoundError: If no product matches the ID
        """
        product_object_id = check_id(product_id)

        product = await self.collection.find_one({"_id": product_object_id}, projection={"reviews": 1})
        if product is None:
            raise NotFoundError("product", product_object_id)

        return serialize_docs(product.get("reviews", []))

    async def get_review(self, review_id: str) -> Dict[str, Any]:
        """
        Get a single review by its ID, searching across all products

        Raises:
            InvalidIdError: If the review ID is malformed
            NotFoundError: If no product holds a review with this ID
        """
        review_object_id = check_id(review_id)

        _, review = await self._find_review(review_object_id)
        return serialize_doc(review)

    async def update_review(self, review_id: str, update_fields: Dict[str, Any]) -> Dict[str, Any]:
        """
        Partially update a review

        Fields missing from ``update_fields`` keep their stored value and
        reviewDate is always reset to today.

        Args:
            review_id: Review ID
            update_fields: Any of title, reviewerName, review and rating

        Returns:
            The refreshed parent product

        Raises:
            InvalidIdError: If the review ID is malformed
            ValidationError: If the update is empty or a present field is malformed
            NotFoundError: If no product holds a review with this ID
        """
        review_object_id = check_id(review_id)

        if not isinstance(update_fields, dict):
            raise ValidationError("updateObject", "The update object must be an object.")
        if not update_fields:
            raise ValidationError("updateObject", "The update object cannot be empty.")

        for name in update_fields:
            if name not in REVIEW_FIELD_NAMES:
                raise ValidationError(name, f"The field ({name}) cannot be updated on a review.")

        for name, kind in REVIEW_FIELDS:
            if name in update_fields:
                validate(update_fields[name], kind, name)

        product, current = await self._find_review(review_object_id)

        merged = {name: update_fields.get(name, current.get(name)) for name in REVIEW_FIELD_NAMES}
        updated = clean_review_fields(merged)
        updated["reviewDate"] = current_date()

        result = await self.collection.update_one(
            {"_id": product["_id"], "reviews._id": review_object_id},
            {"$set": {f"reviews.$.{name}": value for name, value in updated.items()}}
        )
        if result.matched_count == 0:
            raise NotFoundError("review", review_object_id)

        product_id = str(product["_id"])
        await self.ratings.recompute(product_id)

        logger.info(f"Review updated: {review_object_id} on product {product_id}")
        return await self.products.get(product_id)

    async def remove_review(self, review_id: str) -> Dict[str, Any]:
        """
        Remove a review from its product; the product itself is kept

        Returns:
            The refreshed parent product

        Raises:
            InvalidIdError: If the review ID is malformed
            NotFoundError: If the review or its product cannot be found
        """
        review_object_id = check_id(review_id)

        product, _ = await self._find_review(review_object_id)

        result = await self.collection.find_one_and_update(
            {"_id": product["_id"]},
            {"$pull": {"reviews": {"_id": review_object_id}}},
            return_document=ReturnDocument.AFTER
        )
        if result is None:
            raise NotFoundError("product", product["_id"])

        product_id = str(product["_id"])
        await self.ratings.recompute(product_id)

        logger.info(f"Review removed: {review_object_id} from product {product_id}")
        return await self.products.get(product_id)

    async def _find_review(self, review_object_id: ObjectId):
        """Return the (product, review) raw documents holding ``review_object_id``."""
        product = await self.collection.find_one({"reviews._id": review_object_id})
        if product is None:
            raise NotFoundError("review", review_object_id)

        review = find_embedded_review(product, review_object_id)
        if review is None:
            raise NotFoundError("review", review_object_id)

        return product, review
