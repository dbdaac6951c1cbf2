"""
Base models for API responses.
"""
from typing import Optional, Any, Dict, List, TypeVar, Generic
from datetime import datetime
from enum import Enum
from pydantic import BaseModel, Field, ConfigDict

from ..utils.datetime import utc_now


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        use_enum_values=True,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


T = TypeVar('T')


class APIResponse(BaseSchema, Generic[T]):
    """Standard API response wrapper used for error envelopes."""
    success: bool = Field(description="Operation success flag")
    data: Optional[T] = Field(None, description="Response data")
    message: Optional[str] = Field(None, description="Response message")
    errors: Optional[List[Dict[str, Any]]] = Field(None, description="Error details")

    @classmethod
    def error_response(
        cls,
        message: str,
        errors: Optional[List[Dict[str, Any]]] = None,
    ) -> "APIResponse[T]":
        """Create an error response."""
        return cls(success=False, data=None, message=message, errors=errors or [])


class HealthStatus(str, Enum):
    """Health check status."""
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"


class HealthCheckResponse(BaseSchema):
    """Health check response."""
    status: HealthStatus = Field(description="Overall health status")
    version: str = Field(description="Application version")
    environment: str = Field(description="Environment name")
    timestamp: datetime = Field(default_factory=utc_now, description="Check timestamp")
    database: HealthStatus = Field(description="Database health")
