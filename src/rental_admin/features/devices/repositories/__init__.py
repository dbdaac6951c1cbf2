"""Device repositories."""

from .device_repository import DeviceDatabaseRepository

__all__ = ["DeviceDatabaseRepository"]
