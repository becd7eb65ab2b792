"""Repair ORM — persists a repair job on a device.

Invariants:
    - Always belongs to a Device (device_id FK, ON DELETE CASCADE)
    - technician_id optional; ON DELETE SET NULL so it never dangles
    - request_date set once on insert, never modified
    - status is one of PENDING, IN_PROGRESS, COMPLETED, CANCELLED
    - cost > 0 (enforced by core.repair_workflow before save)

Design Decisions:
    - Date (not DateTime) for request/estimated dates: the shop tracks days
    - technician relationship has no back-populating collection on User:
      assignment is not ownership
"""

import uuid
from datetime import date
from typing import Optional

from sqlalchemy import String, Float, Date, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from repairshop.core.domain_types import RepairStatus
from repairshop.db.base import Base
from repairshop.db.types import EnumString


class Repair(Base):
    """Repair entity — a job on a device, optionally assigned to a technician."""
    __tablename__ = "repairs"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    description: Mapped[str] = mapped_column(String(500), nullable=False)
    request_date: Mapped[date] = mapped_column(
        Date, nullable=False, default=date.today,
    )
    estimated_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    status: Mapped[RepairStatus] = mapped_column(
        EnumString(RepairStatus), nullable=False, default=RepairStatus.PENDING,
    )
    cost: Mapped[float] = mapped_column(Float, nullable=False)
    device_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("devices.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    technician_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True, index=True,
    )

    # Relationships
    device: Mapped["Device"] = relationship(
        "Device", back_populates="repairs", lazy="raise",
    )
    technician: Mapped[Optional["User"]] = relationship(
        "User", foreign_keys=[technician_id], lazy="raise",
    )
