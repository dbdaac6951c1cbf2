"""Customer orders API v1 router."""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, Response, status

from ....api.dependencies import (
    get_authorization_service,
    get_current_user,
    get_order_service,
    get_user_service,
    require_feature,
)
from ....core.exceptions import ForbiddenError
from ....utils.uuid import is_valid_uuid
from ...authorization import AuthorizationService
from ...users.services.user_service import UserService
from ..entities.customer_order import DEFAULT_ORDER_STATUS
from ..services.customer_order_service import CustomerOrderService

CUSTOMER_CANCEL_STATUS = "canceled"

router = APIRouter(
    prefix="/customerorder",
    tags=["Customer Orders"],
    responses={
        403: {"description": "Insufficient permissions"},
        404: {"description": "Customer order not found"},
    },
)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create customer order",
    dependencies=[Depends(require_feature("create:orders"))],
)
async def create_order(
    body: Dict[str, Any] = Body(...),
    caller=Depends(get_current_user),
    orders: CustomerOrderService = Depends(get_order_service),
    users: UserService = Depends(get_user_service),
    authorization: AuthorizationService = Depends(get_authorization_service),
) -> Dict[str, Any]:
    """Place an order for the caller, or for another customer with ``create:orders:others``."""
    customer_id = body.get("customer_id")
    target = None
    if customer_id and str(customer_id) == str(caller.id):
        target = caller
    elif customer_id and is_valid_uuid(customer_id):
        target = await users.find_one_by_id(str(customer_id))

    if not authorization.can(caller, "create:orders", target):
        raise ForbiddenError(
            action='Check the "create:orders" or "create:orders:others" feature.',
        )

    values = authorization.filter_input(caller, "create:orders", body, target)
    order = await orders.create(values)
    return order.to_dict()


@router.get("", summary="List customer orders")
async def list_orders(
    caller=Depends(get_current_user),
    orders: CustomerOrderService = Depends(get_order_service),
    authorization: AuthorizationService = Depends(get_authorization_service),
) -> List[Dict[str, Any]]:
    """Every order with ``read:orders``, the caller's own with ``read:orders:self``."""
    if authorization.can(caller, "read:orders"):
        found = await orders.list_all()
    elif authorization.can(caller, "read:orders:self"):
        found = await orders.list_by_customer_id(caller.id)
    else:
        raise ForbiddenError(
            action='Check the "read:orders" or "read:orders:self" feature.',
        )
    return [order.to_dict() for order in found]


@router.get("/{order_id}", summary="Get customer order")
async def get_order(
    order_id: str,
    caller=Depends(get_current_user),
    orders: CustomerOrderService = Depends(get_order_service),
    authorization: AuthorizationService = Depends(get_authorization_service),
) -> Dict[str, Any]:
    read_any = authorization.can(caller, "read:orders")
    if not read_any and not authorization.can(caller, "read:orders:self"):
        raise ForbiddenError(
            action='Check the "read:orders" or "read:orders:self" feature.',
        )

    order = await orders.find_one_by_id(order_id)
    if not read_any and not authorization.can(caller, "read:orders:self", order):
        raise ForbiddenError(
            action='Check the "read:orders" or "read:orders:self" feature.',
        )
    return order.to_dict()


@router.patch("/{order_id}", summary="Update customer order")
async def update_order(
    order_id: str,
    body: Dict[str, Any] = Body(...),
    caller=Depends(get_current_user),
    orders: CustomerOrderService = Depends(get_order_service),
    authorization: AuthorizationService = Depends(get_authorization_service),
) -> Dict[str, Any]:
    """Update an order.

    Callers without ``update:orders:status`` may only touch their own pending
    orders, and the only status they may set is ``canceled``.
    """
    if authorization.can(caller, "update:orders"):
        feature = "update:orders"
    elif authorization.can(caller, "update:orders:status"):
        feature = "update:orders:status"
    else:
        raise ForbiddenError(
            action='Check the "update:orders" or "update:orders:status" feature.',
        )

    order = await orders.find_one_by_id(order_id)
    if not authorization.can(caller, feature, order):
        raise ForbiddenError(
            action='Check the "update:orders:others" or "update:orders:self" feature.',
        )

    if feature == "update:orders:status" or authorization.can(caller, "update:orders:status", order):
        values = authorization.filter_input(caller, feature, body, order)
        return (await orders.update(order.id, values)).to_dict()

    if order.status != DEFAULT_ORDER_STATUS:
        raise ForbiddenError(
            message="You can no longer update this order.",
            action="Only orders under review can be updated by the customer.",
        )

    body = dict(body)
    cancel = body.get("status") == CUSTOMER_CANCEL_STATUS
    if cancel:
        body.pop("status")

    values = authorization.filter_input(caller, feature, body, order) if body else {}
    if cancel:
        values["status"] = CUSTOMER_CANCEL_STATUS

    return (await orders.update(order.id, values)).to_dict()


@router.delete(
    "/{order_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete customer order",
    dependencies=[Depends(require_feature("delete:orders"))],
)
async def delete_order(
    order_id: str,
    caller=Depends(get_current_user),
    orders: CustomerOrderService = Depends(get_order_service),
    authorization: AuthorizationService = Depends(get_authorization_service),
) -> Response:
    order = await orders.find_one_by_id(order_id)
    if order.status == "completed" and not authorization.can(caller, "delete:orders:completed"):
        raise ForbiddenError(
            message="Completed orders cannot be deleted.",
            action='Check the "delete:orders:completed" feature.',
        )

    await orders.delete(order.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
