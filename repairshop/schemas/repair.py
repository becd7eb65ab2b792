"""Repair Schemas — repair payloads and the flattened repair response.

Invariants:
    - description: 1-500 chars, stripped
    - cost > 0 (checked again by core.repair_workflow for callers that bypass HTTP)
    - request_date is never accepted from the caller; the store stamps it
    - status omitted on create means PENDING; omitted on update keeps the current status
    - technician_id omitted on update clears the assignment

Design Decisions:
    - Single request model for create and update: both are full-field replace
"""

from datetime import date
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from repairshop.core.domain_types import RepairStatus


class RepairRequest(BaseModel):
    """Repair create/update payload."""
    description: str = Field(min_length=1, max_length=500)
    estimated_date: date | None = None
    status: RepairStatus | None = None
    cost: float = Field(gt=0, allow_inf_nan=False)
    device_id: UUID
    technician_id: UUID | None = None

    @field_validator("description", mode="before")
    @classmethod
    def strip_description(cls, v):
        if isinstance(v, str):
            v = v.strip()
            if not v:
                raise ValueError("description cannot be empty or whitespace")
        return v


class RepairResponse(BaseModel):
    id: UUID
    description: str
    request_date: date
    estimated_date: date | None = None
    status: RepairStatus
    cost: float
    device_id: UUID
    device_brand: str
    device_model: str
    technician_id: UUID | None = None
    technician_username: str | None = None


class TotalCostResponse(BaseModel):
    device_id: UUID
    total_cost: float


class StatusCountResponse(BaseModel):
    technician_id: UUID
    status: RepairStatus
    count: int
