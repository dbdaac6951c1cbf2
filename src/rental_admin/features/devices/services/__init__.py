"""Device services."""

from .device_service import DeviceService

__all__ = ["DeviceService"]
