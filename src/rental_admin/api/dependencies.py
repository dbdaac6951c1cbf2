"""FastAPI dependencies wiring repositories, services and the calling user."""

import logging
from typing import Callable

from fastapi import Depends, Request

from ..core.exceptions import ForbiddenError, UnauthorizedError
from ..database.connection import DatabaseManager
from ..features.authorization import AuthorizationService, Principal, default_authorization
from ..features.devices.repositories import DeviceDatabaseRepository
from ..features.devices.services import DeviceService
from ..features.expenses.repositories import FinancialExpenseDatabaseRepository
from ..features.expenses.services import FinancialExpenseService
from ..features.orders.repositories import CustomerOrderDatabaseRepository
from ..features.orders.services import CustomerOrderService
from ..features.sessions.repositories import SessionDatabaseRepository
from ..features.users.entities import AnonymousUser
from ..features.users.repositories import UserDatabaseRepository
from ..features.users.services import UserService

logger = logging.getLogger(__name__)

ANONYMOUS_ROLE = "anonymous"


# Infrastructure

async def get_database(request: Request) -> DatabaseManager:
    """Database manager opened by the application lifespan."""
    return request.app.state.database


def get_authorization_service() -> AuthorizationService:
    """Authorization engine bound to the built-in catalog and roles."""
    return default_authorization


# Repositories

async def get_user_repository(database: DatabaseManager = Depends(get_database)):
    return UserDatabaseRepository(database)


async def get_session_repository(database: DatabaseManager = Depends(get_database)):
    return SessionDatabaseRepository(database)


async def get_device_repository(database: DatabaseManager = Depends(get_database)):
    return DeviceDatabaseRepository(database)


async def get_order_repository(database: DatabaseManager = Depends(get_database)):
    return CustomerOrderDatabaseRepository(database)


async def get_expense_repository(database: DatabaseManager = Depends(get_database)):
    return FinancialExpenseDatabaseRepository(database)


# Services

async def get_user_service(
    repository=Depends(get_user_repository),
    authorization: AuthorizationService = Depends(get_authorization_service),
) -> UserService:
    return UserService(repository, authorization=authorization)


async def get_device_service(repository=Depends(get_device_repository)) -> DeviceService:
    return DeviceService(repository)


async def get_order_service(repository=Depends(get_order_repository)) -> CustomerOrderService:
    return CustomerOrderService(repository)


async def get_expense_service(
    repository=Depends(get_expense_repository),
) -> FinancialExpenseService:
    return FinancialExpenseService(repository)


# Calling user

async def get_current_user(
    request: Request,
    sessions=Depends(get_session_repository),
    users=Depends(get_user_repository),
    authorization: AuthorizationService = Depends(get_authorization_service),
) -> Principal:
    """Resolve the caller from the session cookie.

    Requests without a cookie act as an anonymous user holding the
    ``anonymous`` role features. A cookie that matches no valid session,
    or a session whose user is gone, is rejected.
    """
    token = request.cookies.get(request.app.state.settings.session_cookie_name)
    if not token:
        return AnonymousUser(features=authorization.features_for(ANONYMOUS_ROLE))

    session = await sessions.find_valid_by_token(token)
    if not session:
        raise UnauthorizedError()

    user = await users.get_by_id(session.user_id)
    if not user:
        logger.warning(f"Session {session.id} points to a missing user")
        raise UnauthorizedError()

    return user


def require_feature(feature: str) -> Callable:
    """Dependency factory rejecting callers that lack ``feature``."""

    async def dependency(
        caller=Depends(get_current_user),
        authorization: AuthorizationService = Depends(get_authorization_service),
    ):
        if not authorization.can(caller, feature):
            raise ForbiddenError(
                action=f'Check that your user holds the feature "{feature}".',
                details={"feature": feature},
            )
        return caller

    return dependency
