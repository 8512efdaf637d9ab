"""
Field validation rules shared by the product and review stores.

``validate`` only inspects the value; trimming is done by the caller once the
value has been accepted.
"""
import math
from datetime import datetime
from decimal import Decimal
from typing import Any, List

from dateutil import parser as date_parser

from .exceptions import ValidationError

STRING = "string"
NUMBER = "number"
BOOLEAN = "boolean"
ARRAY = "array"

KINDS = (STRING, NUMBER, BOOLEAN, ARRAY)

WEBSITE_PREFIX = "http://www."
WEBSITE_SUFFIX = ".com"
WEBSITE_MIN_DOMAIN_LENGTH = 5

# Signed 64-bit range, the widest integer BSON stores
BSON_INT64_MIN = -(2 ** 63)
BSON_INT64_MAX = 2 ** 63 - 1

# Fills date parts missing from dateReleased so parsing does not depend on today
DATE_DEFAULT = datetime(2000, 1, 1)


def validate(value: Any, kind: str, field_name: str) -> None:
    """
    Check ``value`` against the rules for ``kind`` and ``field_name``.

    Args:
        value: Raw value supplied by the caller
        kind: One of ``string``, ``number``, ``boolean`` or ``array``
        field_name: Stored field name; selects the field-specific rules

    Raises:
        ValidationError: If the value is missing or breaks a rule
    """
    if kind not in KINDS:
        raise ValueError(f"Unknown validation kind: {kind}")

    if value is None:
        raise ValidationError(field_name, f"The argument ({field_name}) is missing.")

    if kind == STRING:
        _check_text(value, field_name)
    elif kind == BOOLEAN:
        if not isinstance(value, bool):
            raise ValidationError(field_name, f"The argument ({field_name}) is not a boolean.")
    elif kind == NUMBER:
        _check_number(value, field_name)
    elif kind == ARRAY:
        _check_array(value, field_name)

    if kind == STRING:
        if field_name == "manufacturerWebsite":
            _check_website(value.strip())
        elif field_name == "dateReleased":
            _check_date(value.strip())
    elif kind == NUMBER:
        if field_name == "price":
            _check_price(value)
        elif field_name == "rating":
            _check_rating(value)


def trim_text(value: str) -> str:
    return value.strip()


def trim_list(values: List[str]) -> List[str]:
    """Return a new list with every element trimmed."""
    return [value.strip() for value in values]


def fraction_digits(number: float) -> int:
    """Number of digits after the decimal point in the shortest repr of ``number``."""
    exponent = Decimal(str(number)).as_tuple().exponent
    return max(0, -exponent)


def _check_text(value: Any, field_name: str) -> None:
    if not isinstance(value, str):
        raise ValidationError(field_name, f"The argument ({field_name}) is not a string.")
    if not value.strip():
        raise ValidationError(
            field_name,
            f"The argument ({field_name}) only includes spaces and is therefore considered an empty string."
        )


def _check_number(value: Any, field_name: str) -> None:
    # bool is an int subclass, reject it explicitly
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(field_name, f"The argument ({field_name}) is not a number.")
    if isinstance(value, int):
        if not BSON_INT64_MIN <= value <= BSON_INT64_MAX:
            raise ValidationError(field_name, f"The argument ({field_name}) is too large to be stored.")
    elif not math.isfinite(value):
        raise ValidationError(field_name, f"The argument ({field_name}) must be a finite number.")


def _check_array(value: Any, field_name: str) -> None:
    if not isinstance(value, list):
        raise ValidationError(field_name, f"({field_name}) is not a valid array.")
    if not value:
        raise ValidationError(field_name, f"The ({field_name}) array must have at least one item.")

    for item in value:
        if not isinstance(item, str):
            raise ValidationError(field_name, f"The values within the {field_name} array must be strings.")
        if not item.strip():
            raise ValidationError(
                field_name,
                f"The values within the {field_name} array cannot be strings with just spaces."
            )


def _check_website(url: str) -> None:
    if not url.startswith(WEBSITE_PREFIX):
        raise ValidationError("manufacturerWebsite", "The website's url must start with 'http://www.'")
    if not url.endswith(WEBSITE_SUFFIX):
        raise ValidationError("manufacturerWebsite", "The website's url must end with '.com'")

    domain = url[len(WEBSITE_PREFIX):-len(WEBSITE_SUFFIX)]
    if len(domain) < WEBSITE_MIN_DOMAIN_LENGTH:
        raise ValidationError(
            "manufacturerWebsite",
            "The website's url must have at least 5 characters in-between the 'http://www.' and '.com'"
        )


def _check_date(text: str) -> None:
    try:
        date_parser.parse(text, default=DATE_DEFAULT)
    except (ValueError, OverflowError):
        raise ValidationError(
            "dateReleased",
            "The 'dateReleased' is not a valid date or is not formatted properly."
        )


def _check_price(price: float) -> None:
    if price <= 0:
        raise ValidationError("price", "The price (price) must be greater than $0.")
    if fraction_digits(price) > 2:
        raise ValidationError("price", "The price (price) can only have two decimal places for the cents.")


def _check_rating(rating: float) -> None:
    if rating < 1 or rating > 5:
        raise ValidationError("rating", "The (rating) must be within the range of 1 to 5, inclusive.")
    if fraction_digits(rating) > 1:
        raise ValidationError("rating", "The (rating) can only have one decimal place.")
