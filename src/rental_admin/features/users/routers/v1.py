"""Users API v1 router."""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, status

from ....api.dependencies import (
    get_authorization_service,
    get_current_user,
    get_user_service,
    require_feature,
)
from ....core.exceptions import ForbiddenError
from ...authorization import AuthorizationService
from ..services.user_service import UserService

router = APIRouter(
    prefix="/users",
    tags=["Users"],
    responses={
        403: {"description": "Insufficient permissions"},
        404: {"description": "User not found"},
    },
)


async def _resolve_target(username: str, caller: Any, users: UserService):
    if caller.username and username.lower() == caller.username.lower():
        return caller
    return await users.find_one_by_username(username)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
    dependencies=[Depends(require_feature("create:user"))],
)
async def create_user(
    body: Dict[str, Any] = Body(...),
    caller=Depends(get_current_user),
    users: UserService = Depends(get_user_service),
    authorization: AuthorizationService = Depends(get_authorization_service),
) -> Dict[str, Any]:
    """Register a new account. It starts with the activation feature only."""
    values = authorization.filter_input(caller, "create:user", body)
    user = await users.create(values)
    return user.to_public_dict()


@router.get(
    "/{username}",
    summary="Get user",
    dependencies=[Depends(require_feature("read:user"))],
)
async def get_user(
    username: str,
    caller=Depends(get_current_user),
    users: UserService = Depends(get_user_service),
    authorization: AuthorizationService = Depends(get_authorization_service),
) -> Dict[str, Any]:
    target = await _resolve_target(username, caller, users)

    if not authorization.can(caller, "read:user", target):
        raise ForbiddenError(
            message="You do not have permission to read this user.",
            action='Check the "read:user" or "read:user:others" feature.',
        )

    return target.to_public_dict()


@router.patch(
    "/{username}",
    summary="Update user",
    dependencies=[Depends(require_feature("update:user"))],
)
async def update_user(
    username: str,
    body: Dict[str, Any] = Body(...),
    caller=Depends(get_current_user),
    users: UserService = Depends(get_user_service),
    authorization: AuthorizationService = Depends(get_authorization_service),
) -> Dict[str, Any]:
    target = await _resolve_target(username, caller, users)

    if not authorization.can(caller, "update:user", target):
        raise ForbiddenError(
            message="You do not have permission to update this user.",
            action='Check the "update:user" or "update:user:others" feature.',
        )

    values = authorization.filter_input(caller, "update:user", body, target)
    updated = await users.update(username, values)
    return updated.to_public_dict()
