"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId, DeviceId, RepairId wrap UUIDs — never use bare UUID in domain logic
    - Role and RepairStatus are closed sets; values persist as their string form
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)
DeviceId = NewType("DeviceId", UUID)
RepairId = NewType("RepairId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class Role(str, Enum):
    """User roles. Stored but not enforced anywhere."""
    ADMIN = "ADMIN"
    USER = "USER"
    TECH = "TECH"


class RepairStatus(str, Enum):
    """Repair lifecycle states — maps to DB `status` column."""
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class EntityKind(str, Enum):
    """Names used when reporting unresolved references."""
    USER = "User"
    OWNER = "Owner"
    TECHNICIAN = "Technician"
    DEVICE = "Device"
    REPAIR = "Repair"
