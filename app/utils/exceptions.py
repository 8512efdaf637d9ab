"""
Error taxonomy for the product/review data layer.

Every store operation either returns a fully-formed document or raises exactly
one of these. ``status_code`` is the response code the route layer answers with.
"""
from typing import Any, Optional


class CatalogError(Exception):
    """Base class for all data-layer errors."""

    status_code: int = 500
    error: str = "catalog_error"

    def __init__(self, message: str, detail: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.detail = detail


class ValidationError(CatalogError):
    """Malformed or missing input for a named field."""

    status_code = 400
    error = "validation_error"

    def __init__(self, field_name: str, reason: str):
        super().__init__(reason, detail=field_name)
        self.field_name = field_name
        self.reason = reason


class InvalidIdError(CatalogError):
    """An identifier that is not a valid document id."""

    status_code = 400
    error = "invalid_id"

    def __init__(self, value: Any, message: str = "Invalid object ID."):
        super().__init__(message, detail=repr(value))
        self.value = value


class NotFoundError(CatalogError):
    """A well-formed id with no matching product or review."""

    status_code = 404
    error = "not_found"

    def __init__(self, resource: str, identifier: Any):
        super().__init__(f"No {resource} found with id {identifier}.", detail=str(identifier))
        self.resource = resource
        self.identifier = identifier


class PersistenceError(CatalogError):
    """The store did not acknowledge a write that should have succeeded."""

    status_code = 500
    error = "persistence_error"
