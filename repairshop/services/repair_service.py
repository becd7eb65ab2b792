"""Repair Service — repair jobs, technician assignment and the status workflow.

Invariants:
    - A repair is only created for an existing device; a supplied technician must exist
    - request_date is stamped by the store on insert and never changed afterwards
    - update is a full-field replace: the technician is overwritten, or cleared when omitted;
      an omitted status keeps the current one
    - assign_technician advances PENDING -> IN_PROGRESS and leaves other statuses alone
    - update_status overrides unconditionally
    - total_cost_by_device is 0.0 for a device without completed repairs

Design Decisions:
    - Status rules live in core/repair_workflow.py (pure); this module only sequences IO
"""

import logging
from datetime import date

from repairshop.core.domain_types import (
    DeviceId, EntityKind, RepairId, RepairStatus, UserId,
)
from repairshop.core.errors import ResourceNotFoundError
from repairshop.core.repair_workflow import (
    ensure_positive_cost,
    ensure_valid_date_range,
    initial_status,
    status_after_assignment,
)
from repairshop.core.repository_protocols import (
    DeviceStore, RepairStore, UserStore,
)
from repairshop.models.device import Device
from repairshop.models.repair import Repair
from repairshop.models.user import User
from repairshop.schemas.repair import RepairRequest, RepairResponse

logger = logging.getLogger(__name__)


def to_repair_response(repair: Repair) -> RepairResponse:
    technician = repair.technician
    return RepairResponse(
        id=repair.id,
        description=repair.description,
        request_date=repair.request_date,
        estimated_date=repair.estimated_date,
        status=repair.status,
        cost=repair.cost,
        device_id=repair.device_id,
        device_brand=repair.device.brand,
        device_model=repair.device.model,
        technician_id=technician.id if technician else None,
        technician_username=technician.username if technician else None,
    )


def _responses(repairs: list[Repair]) -> list[RepairResponse]:
    return [to_repair_response(r) for r in repairs]


class RepairService:
    """Repair use cases; devices and technicians are resolved through their stores."""

    def __init__(
        self, repairs: RepairStore, devices: DeviceStore, users: UserStore,
    ):
        self.repairs = repairs
        self.devices = devices
        self.users = users

    # ─── Writes ──────────────────────────────────────────────────

    async def create(self, body: RepairRequest) -> RepairResponse:
        device = await self._require_device(body.device_id)
        technician_id = None
        if body.technician_id is not None:
            technician_id = (await self._require_technician(body.technician_id)).id

        repair = await self.repairs.save(Repair(
            description=body.description,
            estimated_date=body.estimated_date,
            status=initial_status(body.status),
            cost=ensure_positive_cost(body.cost),
            device_id=device.id,
            technician_id=technician_id,
        ))
        logger.info(
            f"Repair created on device {device.id} ({repair.status.value})",
            extra={"entity": EntityKind.REPAIR.value, "entity_id": str(repair.id)},
        )
        return to_repair_response(repair)

    async def update(
        self, repair_id: RepairId, body: RepairRequest,
    ) -> RepairResponse:
        repair = await self._require(repair_id)
        if body.device_id != repair.device_id:
            repair.device_id = (await self._require_device(body.device_id)).id
        if body.technician_id is not None:
            repair.technician_id = (
                await self._require_technician(body.technician_id)
            ).id
        else:
            repair.technician_id = None

        repair.description = body.description
        repair.estimated_date = body.estimated_date
        repair.cost = ensure_positive_cost(body.cost)
        if body.status is not None:
            repair.status = body.status

        repair = await self.repairs.save(repair)
        logger.info(
            "Repair updated",
            extra={"entity": EntityKind.REPAIR.value, "entity_id": str(repair.id)},
        )
        return to_repair_response(repair)

    async def assign_technician(
        self, repair_id: RepairId, technician_id: UserId,
    ) -> RepairResponse:
        repair = await self._require(repair_id)
        technician = await self._require_technician(technician_id)
        repair.technician_id = technician.id
        repair.status = status_after_assignment(repair.status)

        repair = await self.repairs.save(repair)
        logger.info(
            f"Technician {technician.username} assigned "
            f"(status {repair.status.value})",
            extra={"entity": EntityKind.REPAIR.value, "entity_id": str(repair.id)},
        )
        return to_repair_response(repair)

    async def update_status(
        self, repair_id: RepairId, status: RepairStatus,
    ) -> RepairResponse:
        repair = await self._require(repair_id)
        previous = repair.status
        repair.status = status

        repair = await self.repairs.save(repair)
        logger.info(
            f"Repair status changed: {previous.value} -> {repair.status.value}",
            extra={"entity": EntityKind.REPAIR.value, "entity_id": str(repair.id)},
        )
        return to_repair_response(repair)

    async def delete(self, repair_id: RepairId) -> None:
        if not await self.repairs.exists_by_id(repair_id):
            raise ResourceNotFoundError(EntityKind.REPAIR.value, str(repair_id))
        await self.repairs.delete_by_id(repair_id)
        logger.info(
            "Repair deleted",
            extra={"entity": EntityKind.REPAIR.value, "entity_id": str(repair_id)},
        )

    # ─── Reads ───────────────────────────────────────────────────

    async def get_by_id(self, repair_id: RepairId) -> RepairResponse:
        return to_repair_response(await self._require(repair_id))

    async def list_all(self) -> list[RepairResponse]:
        return _responses(await self.repairs.find_all())

    async def list_by_device_id(
        self, device_id: DeviceId,
    ) -> list[RepairResponse]:
        device = await self._require_device(device_id)
        return _responses(await self.repairs.find_by_device(device))

    async def list_by_status(self, status: RepairStatus) -> list[RepairResponse]:
        return _responses(await self.repairs.find_by_status(status))

    async def list_by_status_newest_first(
        self, status: RepairStatus,
    ) -> list[RepairResponse]:
        return _responses(
            await self.repairs.find_by_status_order_by_request_date_desc(status)
        )

    async def list_by_technician_id(
        self, technician_id: UserId,
    ) -> list[RepairResponse]:
        technician = await self._require_technician(technician_id)
        return _responses(await self.repairs.find_by_technician(technician))

    async def list_by_status_and_technician(
        self, status: RepairStatus, technician_id: UserId,
    ) -> list[RepairResponse]:
        technician = await self._require_technician(technician_id)
        return _responses(
            await self.repairs.find_by_status_and_technician(status, technician)
        )

    async def count_by_technician_and_status(
        self, technician_id: UserId, status: RepairStatus,
    ) -> int:
        technician = await self._require_technician(technician_id)
        return await self.repairs.count_by_technician_and_status(
            technician, status,
        )

    async def list_by_owner_id(self, owner_id: UserId) -> list[RepairResponse]:
        if not await self.users.exists_by_id(owner_id):
            raise ResourceNotFoundError(EntityKind.OWNER.value, str(owner_id))
        return _responses(await self.repairs.find_by_device_owner_id(owner_id))

    async def list_unassigned(self) -> list[RepairResponse]:
        return _responses(await self.repairs.find_by_technician_is_null())

    async def list_assigned(self) -> list[RepairResponse]:
        return _responses(await self.repairs.find_by_technician_is_not_null())

    async def list_by_date_range(
        self, start: date, end: date,
    ) -> list[RepairResponse]:
        ensure_valid_date_range(start, end)
        return _responses(
            await self.repairs.find_by_request_date_between(start, end)
        )

    async def list_by_cost_desc(self) -> list[RepairResponse]:
        return _responses(await self.repairs.find_all_order_by_cost_desc())

    async def total_cost_by_device(self, device_id: DeviceId) -> float:
        await self._require_device(device_id)
        total = await self.repairs.total_cost_by_device(device_id)
        return total if total is not None else 0.0

    # ─── Lookups ─────────────────────────────────────────────────

    async def _require(self, repair_id: RepairId) -> Repair:
        repair = await self.repairs.find_by_id(repair_id)
        if not repair:
            raise ResourceNotFoundError(EntityKind.REPAIR.value, str(repair_id))
        return repair

    async def _require_device(self, device_id: DeviceId) -> Device:
        device = await self.devices.find_by_id(device_id)
        if not device:
            raise ResourceNotFoundError(EntityKind.DEVICE.value, str(device_id))
        return device

    async def _require_technician(self, technician_id: UserId) -> User:
        technician = await self.users.find_by_id(technician_id)
        if not technician:
            raise ResourceNotFoundError(
                EntityKind.TECHNICIAN.value, str(technician_id),
            )
        return technician
