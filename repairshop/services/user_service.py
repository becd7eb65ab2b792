"""User Service — create, look up, update and delete users.

Invariants:
    - username and email are unique; a collision raises AlreadyExistsError
    - update only checks uniqueness for values that actually changed
    - update replaces the password only when a non-empty one is supplied
    - delete cascades to owned devices and their repairs (see repositories/users.py)
"""

import logging

from repairshop.core.domain_types import EntityKind, Role, UserId
from repairshop.core.errors import AlreadyExistsError, ResourceNotFoundError
from repairshop.core.repository_protocols import UserStore
from repairshop.models.user import User
from repairshop.schemas.user import UserCreate, UserResponse, UserUpdate

logger = logging.getLogger(__name__)


def to_user_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id, username=user.username, email=user.email, role=user.role,
    )


class UserService:
    """User use cases on top of a UserStore."""

    def __init__(self, users: UserStore):
        self.users = users

    async def create(self, body: UserCreate) -> UserResponse:
        if await self.users.exists_by_username(body.username):
            raise AlreadyExistsError(
                EntityKind.USER.value, "username", body.username,
            )
        if await self.users.exists_by_email(body.email):
            raise AlreadyExistsError(EntityKind.USER.value, "email", body.email)

        user = await self.users.save(User(
            username=body.username,
            email=body.email,
            password=body.password,
            role=body.role,
        ))
        logger.info(
            f"User created: {user.username}",
            extra={"entity": EntityKind.USER.value, "entity_id": str(user.id)},
        )
        return to_user_response(user)

    async def get_by_id(self, user_id: UserId) -> UserResponse:
        return to_user_response(await self._require(user_id))

    async def get_by_username(self, username: str) -> UserResponse:
        user = await self.users.find_by_username(username)
        if not user:
            raise ResourceNotFoundError(EntityKind.USER.value, username)
        return to_user_response(user)

    async def get_by_email(self, email: str) -> UserResponse:
        user = await self.users.find_by_email(email)
        if not user:
            raise ResourceNotFoundError(EntityKind.USER.value, email)
        return to_user_response(user)

    async def list_by_role(self, role: Role) -> list[UserResponse]:
        return [to_user_response(u) for u in await self.users.find_by_role(role)]

    async def list_all(self) -> list[UserResponse]:
        return [to_user_response(u) for u in await self.users.find_all()]

    async def update(self, user_id: UserId, body: UserUpdate) -> UserResponse:
        user = await self._require(user_id)

        if body.username != user.username and await self.users.exists_by_username(
            body.username,
        ):
            raise AlreadyExistsError(
                EntityKind.USER.value, "username", body.username,
            )
        if body.email != user.email and await self.users.exists_by_email(
            body.email,
        ):
            raise AlreadyExistsError(EntityKind.USER.value, "email", body.email)

        user.username = body.username
        user.email = body.email
        user.role = body.role
        if body.password:
            user.password = body.password

        user = await self.users.save(user)
        logger.info(
            f"User updated: {user.username}",
            extra={"entity": EntityKind.USER.value, "entity_id": str(user.id)},
        )
        return to_user_response(user)

    async def delete(self, user_id: UserId) -> None:
        if not await self.users.exists_by_id(user_id):
            raise ResourceNotFoundError(EntityKind.USER.value, str(user_id))
        await self.users.delete_by_id(user_id)
        logger.info(
            "User deleted",
            extra={"entity": EntityKind.USER.value, "entity_id": str(user_id)},
        )

    async def exists_by_username(self, username: str) -> bool:
        return await self.users.exists_by_username(username)

    async def exists_by_email(self, email: str) -> bool:
        return await self.users.exists_by_email(email)

    async def _require(self, user_id: UserId) -> User:
        user = await self.users.find_by_id(user_id)
        if not user:
            raise ResourceNotFoundError(EntityKind.USER.value, str(user_id))
        return user
