"""
Identifier parsing for product and review ids.
"""
from typing import Any

from bson import ObjectId

from .exceptions import InvalidIdError

OBJECT_ID_LENGTH = 24


def check_id(value: Any) -> ObjectId:
    """
    Validate a product or review id and convert it to an ObjectId

    Args:
        value: String representation of the id; surrounding whitespace is ignored

    Returns:
        ObjectId built from the trimmed string

    Raises:
        InvalidIdError: If the value is not a 24 character hex ObjectId string
    """
    if not isinstance(value, str):
        raise InvalidIdError(value, "The id must be a string.")

    object_id = value.strip()
    if not object_id:
        raise InvalidIdError(value, "The id cannot be an empty string.")

    # ObjectId.is_valid also accepts any 12 byte string, only hex form is an id here
    if len(object_id) != OBJECT_ID_LENGTH or not ObjectId.is_valid(object_id):
        raise InvalidIdError(value)

    return ObjectId(object_id)
