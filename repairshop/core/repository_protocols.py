"""Boundary Protocols — the Query Store contract between services and storage.

Invariants:
    - Services depend only on these Protocols, never on a concrete store
    - Finders return an empty list (never raise) when nothing matches
    - delete_by_id applies cascade rules transitively and reports whether a row was removed
    - save assigns an id on first insert and commits

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO; the pure rules that services
      apply around these calls are never async themselves
    - Typed against the ORM entities (TYPE_CHECKING import only, core stays
      free of runtime DB imports): a second set of domain dataclasses would
      only duplicate them
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Protocol

from repairshop.core.domain_types import (
    DeviceId, RepairId, RepairStatus, Role, UserId,
)

if TYPE_CHECKING:
    from repairshop.models.device import Device
    from repairshop.models.repair import Repair
    from repairshop.models.user import User


class UserStore(Protocol):
    """Contract for user persistence — implemented by repositories/."""
    async def save(self, user: User) -> User: ...
    async def find_by_id(self, user_id: UserId) -> User | None: ...
    async def exists_by_id(self, user_id: UserId) -> bool: ...
    async def delete_by_id(self, user_id: UserId) -> bool: ...
    async def find_all(self) -> list[User]: ...
    async def find_by_username(self, username: str) -> User | None: ...
    async def find_by_email(self, email: str) -> User | None: ...
    async def find_by_role(self, role: Role) -> list[User]: ...
    async def exists_by_username(self, username: str) -> bool: ...
    async def exists_by_email(self, email: str) -> bool: ...


class DeviceStore(Protocol):
    """Contract for device persistence — implemented by repositories/."""
    async def save(self, device: Device) -> Device: ...
    async def find_by_id(self, device_id: DeviceId) -> Device | None: ...
    async def exists_by_id(self, device_id: DeviceId) -> bool: ...
    async def delete_by_id(self, device_id: DeviceId) -> bool: ...
    async def find_all(self) -> list[Device]: ...
    async def find_by_owner(self, owner: User) -> list[Device]: ...
    async def find_by_owner_id(self, owner_id: UserId) -> list[Device]: ...
    async def find_by_brand(self, brand: str) -> list[Device]: ...
    async def find_by_brand_and_model(
        self, brand: str, model: str,
    ) -> list[Device]: ...
    async def count_by_owner(self, owner: User) -> int: ...


class RepairStore(Protocol):
    """Contract for repair persistence — implemented by repositories/."""
    async def save(self, repair: Repair) -> Repair: ...
    async def find_by_id(self, repair_id: RepairId) -> Repair | None: ...
    async def exists_by_id(self, repair_id: RepairId) -> bool: ...
    async def delete_by_id(self, repair_id: RepairId) -> bool: ...
    async def find_all(self) -> list[Repair]: ...
    async def find_by_device(self, device: Device) -> list[Repair]: ...
    async def find_by_device_id(self, device_id: DeviceId) -> list[Repair]: ...
    async def find_by_status(self, status: RepairStatus) -> list[Repair]: ...
    async def find_by_technician(self, technician: User) -> list[Repair]: ...
    async def find_by_technician_id(
        self, technician_id: UserId,
    ) -> list[Repair]: ...
    async def find_by_device_owner_id(self, owner_id: UserId) -> list[Repair]: ...
    async def find_by_status_and_technician(
        self, status: RepairStatus, technician: User,
    ) -> list[Repair]: ...
    async def find_by_request_date_between(
        self, start: date, end: date,
    ) -> list[Repair]: ...
    async def find_by_technician_is_null(self) -> list[Repair]: ...
    async def find_by_technician_is_not_null(self) -> list[Repair]: ...
    async def count_by_technician_and_status(
        self, technician: User, status: RepairStatus,
    ) -> int: ...
    async def find_by_status_order_by_request_date_desc(
        self, status: RepairStatus,
    ) -> list[Repair]: ...
    async def find_all_order_by_cost_desc(self) -> list[Repair]: ...
    async def total_cost_by_device(self, device_id: DeviceId) -> float: ...
