"""Device service for equipment business logic."""

from typing import Any, Dict, List

from loguru import logger

from ....core.exceptions import NotFoundError, ValidationError
from ....utils.uuid import is_valid_uuid
from ..entities.device import DEVICE_STATUSES, Device
from ..entities.protocols import DeviceRepository

REQUIRED_FIELDS = {
    "email_acc": "ACC account email",
    "utid_device": "Device UTID",
    "serial_number": "Serial number",
    "serial_number_router": "Router serial number",
    "model": "Device model",
}

UNIQUE_FIELDS = {
    "utid_device": "UTID",
    "serial_number": "serial number",
}


class DeviceService:
    """Device service implementation."""

    def __init__(self, repository: DeviceRepository):
        """Initialize service with repository."""
        self.repository = repository

    async def create(self, values: Dict[str, Any]) -> Device:
        """Register a device after validating required and unique fields."""
        values = dict(values)
        for field_name, label in REQUIRED_FIELDS.items():
            if not values.get(field_name):
                raise ValidationError(
                    message=f"{label} was not provided or is invalid.",
                    action=f"Provide a valid {label.lower()} to perform this operation.",
                    details={"field": field_name},
                )

        for column, label in UNIQUE_FIELDS.items():
            await self._validate_unique(column, label, values[column])

        if values.get("status"):
            self._validate_status(values["status"])
        else:
            values.pop("status", None)

        return await self.repository.create(values)

    async def find_one_by_id(self, device_id: str) -> Device:
        if not is_valid_uuid(device_id):
            raise ValidationError(
                message="The informed device id is invalid.",
                action="Check the device id and try again.",
                details={"field": "id"},
            )

        device = await self.repository.get_by_id(str(device_id))
        if not device:
            raise NotFoundError(
                message="Device not found.",
                action="Check the device id and try again.",
            )
        return device

    async def list_all(self) -> List[Device]:
        return await self.repository.list_all()

    async def update(self, device_id: str, values: Dict[str, Any]) -> Device:
        """Update an existing device with already filtered values."""
        if not values:
            raise ValidationError(
                message="No values were provided to update.",
                action="Provide at least one valid field to perform this operation.",
            )

        current = await self.find_one_by_id(device_id)

        if "status" in values:
            self._validate_status(values["status"])

        for column, label in UNIQUE_FIELDS.items():
            if column not in values:
                continue
            if not isinstance(values[column], str) or not values[column].strip():
                raise ValidationError(
                    message=f"The {label} cannot be empty.",
                    action=f"Provide a valid {label} to perform this operation.",
                    details={"field": column},
                )
            if values[column].lower() != getattr(current, column).lower():
                await self._validate_unique(column, label, values[column], exclude_id=current.id)

        updated = await self.repository.update(current.id, dict(values))
        if not updated:
            raise NotFoundError(
                message="Device not found.",
                action="Check the device id and try again.",
            )
        return updated

    async def delete(self, device_id: str) -> None:
        current = await self.find_one_by_id(device_id)
        await self.repository.delete(current.id)
        logger.info(f"Device {current.id} removed")

    async def _validate_unique(self, column: str, label: str, value: str, exclude_id: str = None) -> None:
        if await self.repository.exists_with_value(column, value, exclude_id=exclude_id):
            raise ValidationError(
                message=f"The informed {label} is already in use.",
                action=f"Use another {label} to perform this operation.",
                details={"field": column},
            )

    @staticmethod
    def _validate_status(value: Any) -> None:
        if value not in DEVICE_STATUSES:
            raise ValidationError(
                message="Status value is not valid.",
                action=f"Choose one of {', '.join(DEVICE_STATUSES)} to continue.",
                details={"field": "status", "allowed": list(DEVICE_STATUSES)},
            )
