"""User store — persistence and lookups for users, plus the user-rooted cascade.

Invariants:
    - Deleting a user removes, in order: repairs on the user's devices, the
      user's devices, then the user
    - Repairs on other users' devices that name the deleted user as technician
      are kept, with the technician cleared
    - A UNIQUE violation on username/email is reported as AlreadyExistsError
"""

import logging

from sqlalchemy import delete, exists, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from repairshop.core.domain_types import EntityKind, Role, UserId
from repairshop.core.errors import AlreadyExistsError, DatabaseError
from repairshop.models.device import Device
from repairshop.models.repair import Repair
from repairshop.models.user import User
from repairshop.repositories.base import SQLAlchemyStore

logger = logging.getLogger(__name__)


class SQLAlchemyUserStore(SQLAlchemyStore):
    """UserStore backed by an AsyncSession."""

    async def save(self, user: User) -> User:
        # Captured up front: rollback expires persistent instances
        username, email = user.username, user.email
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            raise _conflict_from(e, username, email)
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Store save failed: {e}", extra={"operation": "save"})
            raise DatabaseError("Could not persist changes", "save")
        return await self.find_by_id(user.id)

    async def find_by_id(self, user_id: UserId) -> User | None:
        result = await self.db.execute(
            select(User)
            .where(User.id == user_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def exists_by_id(self, user_id: UserId) -> bool:
        return await self._exists(User.id == user_id)

    async def delete_by_id(self, user_id: UserId) -> bool:
        owned_devices = select(Device.id).where(Device.owner_id == user_id)
        await self.db.execute(
            delete(Repair)
            .where(Repair.device_id.in_(owned_devices))
            .execution_options(synchronize_session=False)
        )
        await self.db.execute(
            update(Repair)
            .where(Repair.technician_id == user_id)
            .values(technician_id=None)
            .execution_options(synchronize_session=False)
        )
        await self.db.execute(
            delete(Device)
            .where(Device.owner_id == user_id)
            .execution_options(synchronize_session=False)
        )
        result = await self.db.execute(
            delete(User)
            .where(User.id == user_id)
            .execution_options(synchronize_session=False)
        )
        await self._commit("delete")
        return result.rowcount > 0

    async def find_all(self) -> list[User]:
        result = await self.db.execute(select(User).order_by(User.username))
        return list(result.scalars().all())

    async def find_by_username(self, username: str) -> User | None:
        result = await self.db.execute(
            select(User).where(User.username == username)
        )
        return result.scalar_one_or_none()

    async def find_by_email(self, email: str) -> User | None:
        result = await self.db.execute(
            select(User).where(User.email == email)
        )
        return result.scalar_one_or_none()

    async def find_by_role(self, role: Role) -> list[User]:
        result = await self.db.execute(
            select(User).where(User.role == role).order_by(User.username)
        )
        return list(result.scalars().all())

    async def exists_by_username(self, username: str) -> bool:
        return await self._exists(User.username == username)

    async def exists_by_email(self, email: str) -> bool:
        return await self._exists(User.email == email)

    async def _exists(self, condition) -> bool:
        result = await self.db.execute(select(exists().where(condition)))
        return bool(result.scalar())


def _conflict_from(
    error: IntegrityError, username: str, email: str,
) -> AlreadyExistsError:
    """Map a UNIQUE violation onto the field that collided."""
    detail = str(error.orig).lower()
    logger.warning(
        f"Unique constraint rejected user insert: {detail}",
        extra={"entity": EntityKind.USER.value, "operation": "save"},
    )
    if "email" in detail:
        return AlreadyExistsError(EntityKind.USER.value, "email", email)
    return AlreadyExistsError(EntityKind.USER.value, "username", username)
