"""Devices API v1 router."""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, Response, status

from ....api.dependencies import (
    get_authorization_service,
    get_current_user,
    get_device_service,
    require_feature,
)
from ....core.exceptions import ForbiddenError
from ...authorization import AuthorizationService
from ..services.device_service import DeviceService

router = APIRouter(
    prefix="/devices",
    tags=["Devices"],
    responses={
        403: {"description": "Insufficient permissions"},
        404: {"description": "Device not found"},
    },
)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create device",
    dependencies=[Depends(require_feature("create:devices"))],
)
async def create_device(
    body: Dict[str, Any] = Body(...),
    caller=Depends(get_current_user),
    devices: DeviceService = Depends(get_device_service),
    authorization: AuthorizationService = Depends(get_authorization_service),
) -> Dict[str, Any]:
    values = authorization.filter_input(caller, "create:devices", body)
    device = await devices.create(values)
    return device.to_dict()


@router.get(
    "",
    summary="List devices",
    dependencies=[Depends(require_feature("read:devices"))],
)
async def list_devices(
    devices: DeviceService = Depends(get_device_service),
) -> List[Dict[str, Any]]:
    return [device.to_dict() for device in await devices.list_all()]


@router.get(
    "/{device_id}",
    summary="Get device",
    dependencies=[Depends(require_feature("read:devices"))],
)
async def get_device(
    device_id: str,
    devices: DeviceService = Depends(get_device_service),
) -> Dict[str, Any]:
    device = await devices.find_one_by_id(device_id)
    return device.to_dict()


@router.patch("/{device_id}", summary="Update device")
async def update_device(
    device_id: str,
    body: Dict[str, Any] = Body(...),
    caller=Depends(get_current_user),
    devices: DeviceService = Depends(get_device_service),
    authorization: AuthorizationService = Depends(get_authorization_service),
) -> Dict[str, Any]:
    """Full update with ``update:devices``, status-only with ``update:devices:status``."""
    if authorization.can(caller, "update:devices"):
        feature = "update:devices"
    elif authorization.can(caller, "update:devices:status"):
        feature = "update:devices:status"
    else:
        raise ForbiddenError(
            message="You do not have permission to update devices.",
            action='Check the "update:devices" or "update:devices:status" feature.',
        )

    values = authorization.filter_input(caller, feature, body)
    device = await devices.update(device_id, values)
    return device.to_dict()


@router.delete(
    "/{device_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete device",
    dependencies=[Depends(require_feature("delete:devices"))],
)
async def delete_device(
    device_id: str,
    devices: DeviceService = Depends(get_device_service),
) -> Response:
    await devices.delete(device_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
