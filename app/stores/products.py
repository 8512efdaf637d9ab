"""
Product documents: create, read, full update and delete.
"""
import logging
from typing import Any, Dict, List

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument

from ..utils.exceptions import NotFoundError, PersistenceError
from ..utils.identifiers import check_id
from ..utils.serializers import serialize_doc, serialize_docs
from ..utils.validation import ARRAY, BOOLEAN, NUMBER, STRING, trim_list, trim_text, validate

logger = logging.getLogger(__name__)

# Mutable product fields in stored (camelCase) form
PRODUCT_FIELDS = (
    ("productName", STRING),
    ("productDescription", STRING),
    ("modelNumber", STRING),
    ("price", NUMBER),
    ("manufacturer", STRING),
    ("manufacturerWebsite", STRING),
    ("keywords", ARRAY),
    ("categories", ARRAY),
    ("dateReleased", STRING),
    ("discontinued", BOOLEAN),
)


def clean_product_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate every mutable product field and return the trimmed values

    Raises:
        ValidationError: On the first field that breaks its rule
    """
    cleaned = {}
    for name, kind in PRODUCT_FIELDS:
        value = fields.get(name)
        validate(value, kind, name)
        if kind == STRING:
            value = trim_text(value)
        elif kind == ARRAY:
            value = trim_list(value)
        cleaned[name] = value
    return cleaned


class ProductStore:
    """Owns the product documents of one collection."""

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def create(
        self,
        product_name: str,
        product_description: str,
        model_number: str,
        price: float,
        manufacturer: str,
        manufacturer_website: str,
        keywords: List[str],
        categories: List[str],
        date_released: str,
        discontinued: bool,
    ) -> Dict[str, Any]:
        """
        Create a product with no reviews and an average rating of 0

        Returns:
            The product as read back from the store, including its generated ID

        Raises:
            ValidationError: If any field is missing or malformed
            PersistenceError: If the insert is not acknowledged
        """
        fields = clean_product_fields({
            "productName": product_name,
            "productDescription": product_description,
            "modelNumber": model_number,
            "price": price,
            "manufacturer": manufacturer,
            "manufacturerWebsite": manufacturer_website,
            "keywords": keywords,
            "categories": categories,
            "dateReleased": date_released,
            "discontinued": discontinued,
        })

        product_doc = {**fields, "reviews": [], "averageRating": 0}

        result = await self.collection.insert_one(product_doc)
        if not result.acknowledged or result.inserted_id is None:
            logger.error(f"Insert not acknowledged for product {fields['productName']}")
            raise PersistenceError("The product could not be added.")

        logger.info(f"Product created: {fields['productName']} (ID: {result.inserted_id})")
        return await self.get(str(result.inserted_id))

    async def get_all(self) -> List[Dict[str, Any]]:
        """List every product as ``{_id, productName}``."""
        cursor = self.collection.find({}, projection={"_id": 1, "productName": 1})
        products = await cursor.to_list(length=None)
        return serialize_docs(products)

    async def get(self, product_id: str) -> Dict[str, Any]:
        """
        Get a product by ID

        Raises:
            InvalidIdError: If the ID is malformed
            NotFoundError: If no product matches the ID
        """
        object_id = check_id(product_id)

        product = await self.collection.find_one({"_id": object_id})
        if product is None:
            raise NotFoundError("product", object_id)

        return serialize_doc(product)

    async def update(
        self,
        product_id: str,
        product_name: str,
        product_description: str,
        model_number: str,
        price: float,
        manufacturer: str,
        manufacturer_website: str,
        keywords: List[str],
        categories: List[str],
        date_released: str,
        discontinued: bool,
    ) -> Dict[str, Any]:
        """
        Replace every mutable field of a product

        Reviews and the average rating are left untouched.

        Returns:
            The product after the update

        Raises:
            InvalidIdError: If the ID is malformed
            ValidationError: If any field is missing or malformed
            NotFoundError: If no product matches the ID
        """
        object_id = check_id(product_id)
        fields = clean_product_fields({
            "productName": product_name,
            "productDescription": product_description,
            "modelNumber": model_number,
            "price": price,
            "manufacturer": manufacturer,
            "manufacturerWebsite": manufacturer_website,
            "keywords": keywords,
            "categories": categories,
            "dateReleased": date_released,
            "discontinued": discontinued,
        })

        updated_product = await self.collection.find_one_and_update(
            {"_id": object_id},
            {"$set": fields},
            return_document=ReturnDocument.AFTER
        )
        if updated_product is None:
            raise NotFoundError("product", object_id)

        logger.info(f"Product updated: {object_id}")
        return serialize_doc(updated_product)

    async def remove(self, product_id: str) -> Dict[str, Any]:
        """
        Delete a product and its embedded reviews

        Returns:
            The deleted product document

        Raises:
            InvalidIdError: If the ID is malformed
            NotFoundError: If no product matches the ID
        """
        object_id = check_id(product_id)

        deleted_product = await self.collection.find_one_and_delete({"_id": object_id})
        if deleted_product is None:
            raise NotFoundError("product", object_id)

        logger.info(f"Product deleted: {object_id}")
        return serialize_doc(deleted_product)
