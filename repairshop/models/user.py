"""User ORM — persists customers, technicians and administrators.

Invariants:
    - id is UUID primary key
    - username (3-50 chars) and email are each unique across all users
    - password stored as given (no hashing in scope)
    - role is one of ADMIN, USER, TECH

Design Decisions:
    - devices collection: cascade delete + delete-orphan, never lazy-loaded
      (lazy="raise"); stores fetch owned devices with an explicit query
"""

import uuid

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from repairshop.core.domain_types import Role
from repairshop.db.base import Base
from repairshop.db.types import EnumString


class User(Base):
    """User entity — owner of devices, optionally a repair technician."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    username: Mapped[str] = mapped_column(
        String(50), nullable=False, unique=True,
    )
    email: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True,
    )
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[Role] = mapped_column(EnumString(Role), nullable=False)

    # Relationships
    devices: Mapped[list["Device"]] = relationship(
        "Device", back_populates="owner",
        cascade="all, delete-orphan", passive_deletes=True, lazy="raise",
    )
