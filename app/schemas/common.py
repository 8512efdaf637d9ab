"""
Common schemas used across the API.
"""
from typing import Optional
from pydantic import BaseModel, Field


class HealthCheckResponse(BaseModel):
    """Liveness report, including whether the products collection is reachable."""
    status: str = Field(..., description="Service status, always 'healthy' when the app answers")
    database: str = Field(..., description="MongoDB state: connected, disconnected or the ping error")
    timestamp: str = Field(..., description="UTC time of the check, ISO 8601")
    version: str = Field(..., description="Service version")


class RootResponse(BaseModel):
    """Service banner returned at '/'."""
    message: str = Field(..., description="Service greeting")
    version: str = Field(..., description="Service version")
    docs: str = Field(..., description="Path of the interactive API docs")
    health: str = Field(..., description="Path of the health endpoint")
    status: str = Field(..., description="Service status")
    timestamp: str = Field(..., description="UTC time of the response, ISO 8601")


class ErrorResponse(BaseModel):
    """Body of every data-layer error response."""
    error: str = Field(..., description="Error kind, e.g. validation_error or not_found")
    message: str = Field(..., description="Human-readable reason")
    detail: Optional[str] = Field(None, description="Offending field name or identifier")
