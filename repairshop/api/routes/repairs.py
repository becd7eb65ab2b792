"""Repair Routes — CRUD, workflow actions and reporting queries for repairs.

Invariants:
    - Workflow actions are PATCH sub-resources: /{id}/technician/{tid}, /{id}/status/{status}
    - Unknown status strings in a path are rejected with 400 before reaching the service
    - /date-range requires both start and end (ISO dates), inclusive
"""

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from repairshop.api.deps import get_repair_service
from repairshop.core.domain_types import DeviceId, RepairId, RepairStatus, UserId
from repairshop.schemas.common import DeletedResponse
from repairshop.schemas.repair import (
    RepairRequest, RepairResponse, StatusCountResponse, TotalCostResponse,
)
from repairshop.services.repair_service import RepairService

router = APIRouter(prefix="/api/v1/repairs", tags=["repairs"])


# ─── CRUD ────────────────────────────────────────────────────────

@router.post(
    "", response_model=RepairResponse, status_code=status.HTTP_201_CREATED,
)
async def create_repair(
    body: RepairRequest, service: RepairService = Depends(get_repair_service),
):
    return await service.create(body)


@router.get("", response_model=list[RepairResponse])
async def list_repairs(service: RepairService = Depends(get_repair_service)):
    return await service.list_all()


# ─── Queries ─────────────────────────────────────────────────────

@router.get("/device/{device_id}", response_model=list[RepairResponse])
async def list_repairs_by_device(
    device_id: UUID, service: RepairService = Depends(get_repair_service),
):
    return await service.list_by_device_id(DeviceId(device_id))


@router.get("/device/{device_id}/total-cost", response_model=TotalCostResponse)
async def total_cost_by_device(
    device_id: UUID, service: RepairService = Depends(get_repair_service),
):
    total = await service.total_cost_by_device(DeviceId(device_id))
    return TotalCostResponse(device_id=device_id, total_cost=total)


@router.get("/status/{repair_status}", response_model=list[RepairResponse])
async def list_repairs_by_status(
    repair_status: RepairStatus,
    service: RepairService = Depends(get_repair_service),
):
    return await service.list_by_status(repair_status)


@router.get(
    "/status/{repair_status}/recent", response_model=list[RepairResponse],
)
async def list_recent_repairs_by_status(
    repair_status: RepairStatus,
    service: RepairService = Depends(get_repair_service),
):
    return await service.list_by_status_newest_first(repair_status)


@router.get("/technician/{technician_id}", response_model=list[RepairResponse])
async def list_repairs_by_technician(
    technician_id: UUID, service: RepairService = Depends(get_repair_service),
):
    return await service.list_by_technician_id(UserId(technician_id))


@router.get(
    "/technician/{technician_id}/status/{repair_status}",
    response_model=list[RepairResponse],
)
async def list_repairs_by_technician_and_status(
    technician_id: UUID, repair_status: RepairStatus,
    service: RepairService = Depends(get_repair_service),
):
    return await service.list_by_status_and_technician(
        repair_status, UserId(technician_id),
    )


@router.get(
    "/technician/{technician_id}/status/{repair_status}/count",
    response_model=StatusCountResponse,
)
async def count_repairs_by_technician_and_status(
    technician_id: UUID, repair_status: RepairStatus,
    service: RepairService = Depends(get_repair_service),
):
    count = await service.count_by_technician_and_status(
        UserId(technician_id), repair_status,
    )
    return StatusCountResponse(
        technician_id=technician_id, status=repair_status, count=count,
    )


@router.get("/owner/{owner_id}", response_model=list[RepairResponse])
async def list_repairs_by_owner(
    owner_id: UUID, service: RepairService = Depends(get_repair_service),
):
    return await service.list_by_owner_id(UserId(owner_id))


@router.get("/unassigned", response_model=list[RepairResponse])
async def list_unassigned_repairs(
    service: RepairService = Depends(get_repair_service),
):
    return await service.list_unassigned()


@router.get("/assigned", response_model=list[RepairResponse])
async def list_assigned_repairs(
    service: RepairService = Depends(get_repair_service),
):
    return await service.list_assigned()


@router.get("/date-range", response_model=list[RepairResponse])
async def list_repairs_by_date_range(
    start: date = Query(...),
    end: date = Query(...),
    service: RepairService = Depends(get_repair_service),
):
    return await service.list_by_date_range(start, end)


@router.get("/by-cost", response_model=list[RepairResponse])
async def list_repairs_by_cost(
    service: RepairService = Depends(get_repair_service),
):
    return await service.list_by_cost_desc()


# ─── Single repair ───────────────────────────────────────────────

@router.get("/{repair_id}", response_model=RepairResponse)
async def get_repair(
    repair_id: UUID, service: RepairService = Depends(get_repair_service),
):
    return await service.get_by_id(RepairId(repair_id))


@router.put("/{repair_id}", response_model=RepairResponse)
async def update_repair(
    repair_id: UUID, body: RepairRequest,
    service: RepairService = Depends(get_repair_service),
):
    return await service.update(RepairId(repair_id), body)


@router.patch(
    "/{repair_id}/technician/{technician_id}", response_model=RepairResponse,
)
async def assign_technician(
    repair_id: UUID, technician_id: UUID,
    service: RepairService = Depends(get_repair_service),
):
    return await service.assign_technician(
        RepairId(repair_id), UserId(technician_id),
    )


@router.patch("/{repair_id}/status/{repair_status}", response_model=RepairResponse)
async def update_repair_status(
    repair_id: UUID, repair_status: RepairStatus,
    service: RepairService = Depends(get_repair_service),
):
    return await service.update_status(RepairId(repair_id), repair_status)


@router.delete("/{repair_id}", response_model=DeletedResponse)
async def delete_repair(
    repair_id: UUID, service: RepairService = Depends(get_repair_service),
):
    await service.delete(RepairId(repair_id))
    return DeletedResponse(message="Repair deleted successfully", id=repair_id)
