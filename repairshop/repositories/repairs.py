"""Repair store — persistence, finders and aggregates for repairs.

Invariants:
    - Every returned Repair has device (with owner) and technician loaded
    - request_date is stamped here on first insert and never touched on update
    - total_cost_by_device sums COMPLETED repairs only and returns 0.0, never None
    - Date range bounds are inclusive
"""

from datetime import date

from sqlalchemy import delete, exists, func, select
from sqlalchemy.orm import joinedload

from repairshop.core.domain_types import (
    DeviceId, RepairId, RepairStatus, UserId,
)
from repairshop.models.device import Device
from repairshop.models.repair import Repair
from repairshop.models.user import User
from repairshop.repositories.base import SQLAlchemyStore


def _select_repairs():
    return (
        select(Repair)
        .options(
            joinedload(Repair.device).joinedload(Device.owner),
            joinedload(Repair.technician),
        )
        .execution_options(populate_existing=True)
    )


class SQLAlchemyRepairStore(SQLAlchemyStore):
    """RepairStore backed by an AsyncSession."""

    async def save(self, repair: Repair) -> Repair:
        if repair.request_date is None:
            repair.request_date = date.today()
        self.db.add(repair)
        await self._commit("save")
        return await self.find_by_id(repair.id)

    async def find_by_id(self, repair_id: RepairId) -> Repair | None:
        result = await self.db.execute(
            _select_repairs().where(Repair.id == repair_id)
        )
        return result.scalar_one_or_none()

    async def exists_by_id(self, repair_id: RepairId) -> bool:
        result = await self.db.execute(
            select(exists().where(Repair.id == repair_id))
        )
        return bool(result.scalar())

    async def delete_by_id(self, repair_id: RepairId) -> bool:
        result = await self.db.execute(
            delete(Repair)
            .where(Repair.id == repair_id)
            .execution_options(synchronize_session=False)
        )
        await self._commit("delete")
        return result.rowcount > 0

    async def find_all(self) -> list[Repair]:
        return await self._all(_select_repairs())

    # ─── By device / owner ──────────────────────────────────────

    async def find_by_device(self, device: Device) -> list[Repair]:
        return await self.find_by_device_id(device.id)

    async def find_by_device_id(self, device_id: DeviceId) -> list[Repair]:
        return await self._all(
            _select_repairs().where(Repair.device_id == device_id)
        )

    async def find_by_device_owner_id(self, owner_id: UserId) -> list[Repair]:
        owned_devices = select(Device.id).where(Device.owner_id == owner_id)
        return await self._all(
            _select_repairs().where(Repair.device_id.in_(owned_devices))
        )

    # ─── By status / technician ─────────────────────────────────

    async def find_by_status(self, status: RepairStatus) -> list[Repair]:
        return await self._all(_select_repairs().where(Repair.status == status))

    async def find_by_technician(self, technician: User) -> list[Repair]:
        return await self.find_by_technician_id(technician.id)

    async def find_by_technician_id(
        self, technician_id: UserId,
    ) -> list[Repair]:
        return await self._all(
            _select_repairs().where(Repair.technician_id == technician_id)
        )

    async def find_by_status_and_technician(
        self, status: RepairStatus, technician: User,
    ) -> list[Repair]:
        return await self._all(
            _select_repairs()
            .where(Repair.status == status)
            .where(Repair.technician_id == technician.id)
        )

    async def find_by_technician_is_null(self) -> list[Repair]:
        return await self._all(
            _select_repairs().where(Repair.technician_id.is_(None))
        )

    async def find_by_technician_is_not_null(self) -> list[Repair]:
        return await self._all(
            _select_repairs().where(Repair.technician_id.isnot(None))
        )

    async def count_by_technician_and_status(
        self, technician: User, status: RepairStatus,
    ) -> int:
        result = await self.db.execute(
            select(func.count())
            .select_from(Repair)
            .where(Repair.technician_id == technician.id)
            .where(Repair.status == status)
        )
        return result.scalar_one()

    # ─── Dates, ordering, aggregates ────────────────────────────

    async def find_by_request_date_between(
        self, start: date, end: date,
    ) -> list[Repair]:
        return await self._all(
            _select_repairs().where(Repair.request_date.between(start, end))
        )

    async def find_by_status_order_by_request_date_desc(
        self, status: RepairStatus,
    ) -> list[Repair]:
        return await self._all(
            _select_repairs()
            .where(Repair.status == status)
            .order_by(Repair.request_date.desc())
        )

    async def find_all_order_by_cost_desc(self) -> list[Repair]:
        return await self._all(_select_repairs().order_by(Repair.cost.desc()))

    async def total_cost_by_device(self, device_id: DeviceId) -> float:
        result = await self.db.execute(
            select(func.coalesce(func.sum(Repair.cost), 0.0))
            .where(Repair.device_id == device_id)
            .where(Repair.status == RepairStatus.COMPLETED)
        )
        total = result.scalar_one()
        return float(total) if total is not None else 0.0

    async def _all(self, query) -> list[Repair]:
        result = await self.db.execute(query)
        return list(result.scalars().all())
