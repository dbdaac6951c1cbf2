"""Repository protocols for the devices feature."""

from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from .device import Device


@runtime_checkable
class DeviceRepository(Protocol):
    """Persistence operations the device service relies on."""

    async def get_by_id(self, device_id: str) -> Optional[Device]:
        ...

    async def list_all(self) -> List[Device]:
        ...

    async def exists_with_value(
        self, column: str, value: str, exclude_id: Optional[str] = None
    ) -> bool:
        """Case-insensitive uniqueness probe on ``utid_device`` or ``serial_number``."""
        ...

    async def create(self, values: Dict[str, Any]) -> Device:
        ...

    async def update(self, device_id: str, values: Dict[str, Any]) -> Optional[Device]:
        ...

    async def delete(self, device_id: str) -> bool:
        ...
