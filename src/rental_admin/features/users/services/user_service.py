"""User service for account business logic."""

from typing import Any, Dict, List, Optional

from loguru import logger

from ....core.exceptions import NotFoundError, UnknownFeatureError, ValidationError
from ...authorization import AuthorizationService, INACTIVE_USER_FEATURES, default_authorization
from ..entities.protocols import UserRepository
from ..entities.user import User
from .password import PasswordHasher

REQUIRED_FIELDS = {
    "username": "Username",
    "email": "Email",
    "password": "Password",
    "cpf": "CPF",
    "phone": "Phone number",
    "address": "Address",
}

TEXT_FIELDS = ("username", "email", "password", "cpf")


class UserService:
    """User service implementation."""

    def __init__(
        self,
        repository: UserRepository,
        password_hasher: Optional[PasswordHasher] = None,
        authorization: Optional[AuthorizationService] = None,
    ):
        """Initialize service with repository and collaborators."""
        self.repository = repository
        self.password_hasher = password_hasher or PasswordHasher()
        self.authorization = authorization or default_authorization

    async def create(self, values: Dict[str, Any]) -> User:
        """Create an inactive account holding only the activation feature."""
        values = dict(values)
        for field_name, label in REQUIRED_FIELDS.items():
            value = values.get(field_name)
            if not value or (field_name in TEXT_FIELDS and not isinstance(value, str)):
                raise ValidationError(
                    message=f"{label} was not provided or is invalid.",
                    action=f"Provide a valid {label.lower()} to perform this operation.",
                    details={"field": field_name},
                )

        for column in ("username", "email", "cpf"):
            await self._validate_unique(column, values[column])

        values["password"] = self.password_hasher.hash(values["password"])
        values["features"] = list(INACTIVE_USER_FEATURES)

        return await self.repository.create(values)

    async def find_one_by_id(self, user_id: str) -> User:
        user = await self.repository.get_by_id(user_id)
        if not user:
            raise NotFoundError(
                message="The informed id was not found in the system.",
                action="Check that the id is typed correctly.",
            )
        return user

    async def find_one_by_username(self, username: str) -> User:
        user = await self.repository.get_by_username(username)
        if not user:
            raise NotFoundError(
                message="The informed username was not found in the system.",
                action="Check that the username is typed correctly.",
            )
        return user

    async def find_one_by_email(self, email: str) -> User:
        user = await self.repository.get_by_email(email)
        if not user:
            raise NotFoundError(
                message="The informed email was not found in the system.",
                action="Check that the email is typed correctly.",
            )
        return user

    async def update(self, username: str, values: Dict[str, Any]) -> User:
        """Update account data of the user named ``username``."""
        current = await self.find_one_by_username(username)
        values = dict(values)
        if not values:
            raise ValidationError(
                message="No data was provided to update this user.",
                action="Provide the data you want to update and try again.",
            )

        for field_name in TEXT_FIELDS:
            if field_name in values:
                self._validate_text(field_name, values[field_name])

        if "username" in values and values["username"].lower() != current.username.lower():
            await self._validate_unique("username", values["username"])
        if "email" in values and values["email"].lower() != current.email.lower():
            await self._validate_unique("email", values["email"])
        if "cpf" in values and values["cpf"] != current.cpf:
            await self._validate_unique("cpf", values["cpf"])

        if "password" in values:
            values["password"] = self.password_hasher.hash(values["password"])

        return await self.repository.update(current.id, values)

    async def set_features(self, user_id: str, features: List[str]) -> User:
        """Replace the feature list granted to a user."""
        for feature in features:
            if not self.authorization.catalog.exists(feature):
                raise UnknownFeatureError(
                    message=f'Feature "{feature}" does not exist.',
                    details={"feature": feature},
                )

        user = await self.repository.set_features(user_id, list(features))
        if not user:
            raise NotFoundError(
                message="The informed id was not found in the system.",
                action="Check that the id is typed correctly.",
            )
        logger.info(f"Set {len(features)} features on user {user_id}")
        return user

    async def apply_role(self, user_id: str, role: str) -> User:
        """Grant the feature list of ``role`` to a user."""
        return await self.set_features(user_id, self.authorization.features_for(role))

    def _validate_text(self, field_name: str, value: Any) -> None:
        if not isinstance(value, str) or not value.strip():
            label = REQUIRED_FIELDS[field_name]
            raise ValidationError(
                message=f"{label} was not provided or is invalid.",
                action=f"Provide a valid {label.lower()} to perform this operation.",
                details={"field": field_name},
            )

    async def _validate_unique(self, column: str, value: str) -> None:
        if await self.repository.exists_with_value(column, value):
            raise ValidationError(
                message=f"The informed {column} is already in use.",
                action=f"Use another {column} to perform this operation.",
                details={"field": column},
            )
