"""Shared API models."""

from .base import APIResponse, BaseSchema, HealthCheckResponse, HealthStatus, utc_now

__all__ = ["APIResponse", "BaseSchema", "HealthCheckResponse", "HealthStatus", "utc_now"]
