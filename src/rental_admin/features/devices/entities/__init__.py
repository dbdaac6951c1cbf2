"""Device entities."""

from .device import DEFAULT_DEVICE_STATUS, DEVICE_STATUSES, Device
from .protocols import DeviceRepository

__all__ = ["Device", "DeviceRepository", "DEVICE_STATUSES", "DEFAULT_DEVICE_STATUS"]
