"""Shared helpers for rental-admin."""

from .datetime import is_expired, parse_iso8601, utc_now
from .uuid import is_valid_uuid

__all__ = ["utc_now", "is_expired", "parse_iso8601", "is_valid_uuid"]
