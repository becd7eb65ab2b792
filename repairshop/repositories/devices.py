"""Device store — persistence and lookups for devices, plus the device-rooted cascade.

Invariants:
    - Every returned Device has its owner loaded (joinedload), so mapping never lazy-loads
    - Deleting a device removes its repairs first, then the device
"""

from sqlalchemy import delete, exists, func, select
from sqlalchemy.orm import joinedload

from repairshop.core.domain_types import DeviceId, UserId
from repairshop.models.device import Device
from repairshop.models.repair import Repair
from repairshop.models.user import User
from repairshop.repositories.base import SQLAlchemyStore


def _select_devices():
    return (
        select(Device)
        .options(joinedload(Device.owner))
        .execution_options(populate_existing=True)
    )


class SQLAlchemyDeviceStore(SQLAlchemyStore):
    """DeviceStore backed by an AsyncSession."""

    async def save(self, device: Device) -> Device:
        self.db.add(device)
        await self._commit("save")
        return await self.find_by_id(device.id)

    async def find_by_id(self, device_id: DeviceId) -> Device | None:
        result = await self.db.execute(
            _select_devices().where(Device.id == device_id)
        )
        return result.scalar_one_or_none()

    async def exists_by_id(self, device_id: DeviceId) -> bool:
        result = await self.db.execute(
            select(exists().where(Device.id == device_id))
        )
        return bool(result.scalar())

    async def delete_by_id(self, device_id: DeviceId) -> bool:
        await self.db.execute(
            delete(Repair)
            .where(Repair.device_id == device_id)
            .execution_options(synchronize_session=False)
        )
        result = await self.db.execute(
            delete(Device)
            .where(Device.id == device_id)
            .execution_options(synchronize_session=False)
        )
        await self._commit("delete")
        return result.rowcount > 0

    async def find_all(self) -> list[Device]:
        return await self._all(_select_devices())

    async def find_by_owner(self, owner: User) -> list[Device]:
        return await self.find_by_owner_id(owner.id)

    async def find_by_owner_id(self, owner_id: UserId) -> list[Device]:
        return await self._all(
            _select_devices().where(Device.owner_id == owner_id)
        )

    async def find_by_brand(self, brand: str) -> list[Device]:
        return await self._all(_select_devices().where(Device.brand == brand))

    async def find_by_brand_and_model(
        self, brand: str, model: str,
    ) -> list[Device]:
        return await self._all(
            _select_devices()
            .where(Device.brand == brand)
            .where(Device.model == model)
        )

    async def count_by_owner(self, owner: User) -> int:
        result = await self.db.execute(
            select(func.count())
            .select_from(Device)
            .where(Device.owner_id == owner.id)
        )
        return result.scalar_one()

    async def _all(self, query) -> list[Device]:
        result = await self.db.execute(query)
        return list(result.scalars().all())
