"""Device ORM — persists a phone or other device brought in by its owner.

Invariants:
    - Always belongs to a User (owner_id FK, ON DELETE CASCADE)
    - brand <= 50 chars, model <= 100 chars, both non-nullable

Design Decisions:
    - owner loaded explicitly by the store (joinedload option), never on access
    - repairs collection: cascade delete + delete-orphan
"""

import uuid

from sqlalchemy import String, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from repairshop.db.base import Base


class Device(Base):
    """Device entity — owned by exactly one user."""
    __tablename__ = "devices"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    brand: Mapped[str] = mapped_column(String(50), nullable=False)
    model: Mapped[str] = mapped_column(String(100), nullable=False)
    owner_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )

    # Relationships
    owner: Mapped["User"] = relationship(
        "User", back_populates="devices", lazy="raise",
    )
    repairs: Mapped[list["Repair"]] = relationship(
        "Repair", back_populates="device",
        cascade="all, delete-orphan", passive_deletes=True, lazy="raise",
    )
