"""Shop Scenarios — one customer's repair from sign-up to account deletion.

Walks the full lifecycle through the services in order: register, duplicate
rejection, device intake, repair intake, assignment, completion and billing,
then cascade deletion of the customer.
"""

from datetime import date

import pytest

from repairshop.core.domain_types import RepairStatus, Role
from repairshop.core.errors import AlreadyExistsError, ResourceNotFoundError
from repairshop.schemas.device import DeviceRequest
from repairshop.schemas.repair import RepairRequest
from repairshop.schemas.user import UserCreate


async def test_customer_lifecycle(user_service, device_service, repair_service):
    alice = await user_service.create(UserCreate(
        username="alice", email="a@x.com", password="secret1", role=Role.USER,
    ))
    assert alice.id is not None

    with pytest.raises(AlreadyExistsError) as exc_info:
        await user_service.create(UserCreate(
            username="alice", email="other@x.com", password="secret1",
            role=Role.USER,
        ))
    assert "alice" in exc_info.value.message

    device = await device_service.create(DeviceRequest(
        brand="Samsung", model="S21", owner_id=alice.id,
    ))
    assert device.owner_username == "alice"

    repair = await repair_service.create(RepairRequest(
        description="Cracked screen", cost=50.0, device_id=device.id,
    ))
    assert repair.status == RepairStatus.PENDING
    assert repair.request_date == date.today()
    assert repair.cost == 50.0

    tech = await user_service.create(UserCreate(
        username="tom", email="tom@shop.com", password="wrench1", role=Role.TECH,
    ))
    assigned = await repair_service.assign_technician(repair.id, tech.id)
    assert assigned.technician_id == tech.id
    assert assigned.status == RepairStatus.IN_PROGRESS

    await repair_service.update_status(repair.id, RepairStatus.COMPLETED)
    assert await repair_service.total_cost_by_device(device.id) == 50.0

    await user_service.delete(alice.id)
    with pytest.raises(ResourceNotFoundError):
        await device_service.get_by_id(device.id)
    with pytest.raises(ResourceNotFoundError):
        await repair_service.get_by_id(repair.id)
    assert (await user_service.get_by_id(tech.id)).username == "tom"
