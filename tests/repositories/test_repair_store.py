"""Repair Store — finders, ordering, date ranges and the cost aggregate.

Tests cover:
    - request_date stamped on insert
    - Assigned/unassigned and technician/status finders
    - Owner finder joins through Device
    - Inclusive date range, newest-first and cost-descending ordering
    - total_cost_by_device sums COMPLETED repairs only and is 0.0 without them
"""

from datetime import date, timedelta

from repairshop.core.domain_types import RepairStatus
from repairshop.models.device import Device
from repairshop.models.repair import Repair


async def _repair(store, device, cost=10.0, status=RepairStatus.PENDING,
                  technician=None, request_date=None):
    return await store.save(Repair(
        description=f"Job {cost}", cost=cost, status=status,
        device_id=device.id,
        technician_id=technician.id if technician else None,
        request_date=request_date,
    ))


async def test_request_date_stamped_on_insert(screen_repair):
    assert screen_repair.request_date == date.today()
    assert screen_repair.device.brand == "Samsung"
    assert screen_repair.technician is None


async def test_assigned_and_unassigned(repair_store, phone, tech):
    open_job = await _repair(repair_store, phone)
    taken = await _repair(repair_store, phone, technician=tech)

    assert [r.id for r in await repair_store.find_by_technician_is_null()] == [open_job.id]
    assigned = await repair_store.find_by_technician_is_not_null()
    assert [r.id for r in assigned] == [taken.id]
    assert assigned[0].technician.username == "tom"


async def test_technician_and_status_finders(repair_store, phone, tech):
    await _repair(repair_store, phone, status=RepairStatus.IN_PROGRESS, technician=tech)
    await _repair(repair_store, phone, status=RepairStatus.COMPLETED, technician=tech)
    await _repair(repair_store, phone, status=RepairStatus.COMPLETED)

    assert len(await repair_store.find_by_technician(tech)) == 2
    assert len(await repair_store.find_by_technician_id(tech.id)) == 2
    assert len(await repair_store.find_by_status(RepairStatus.COMPLETED)) == 2
    done = await repair_store.find_by_status_and_technician(
        RepairStatus.COMPLETED, tech,
    )
    assert len(done) == 1
    assert await repair_store.count_by_technician_and_status(
        tech, RepairStatus.COMPLETED,
    ) == 1
    assert await repair_store.count_by_technician_and_status(
        tech, RepairStatus.CANCELLED,
    ) == 0


async def test_find_by_device_owner_joins_devices(
    repair_store, device_store, alice, tech, phone,
):
    tablet = await device_store.save(Device(
        brand="Apple", model="iPad", owner_id=tech.id,
    ))
    mine = await _repair(repair_store, phone)
    await _repair(repair_store, tablet)

    owned = await repair_store.find_by_device_owner_id(alice.id)
    assert [r.id for r in owned] == [mine.id]
    assert [r.id for r in await repair_store.find_by_device(phone)] == [mine.id]


async def test_date_range_is_inclusive(repair_store, phone):
    today = date.today()
    old = await _repair(repair_store, phone, request_date=today - timedelta(days=10))
    edge = await _repair(repair_store, phone, request_date=today - timedelta(days=5))
    recent = await _repair(repair_store, phone, request_date=today)

    found = await repair_store.find_by_request_date_between(
        today - timedelta(days=5), today,
    )
    assert {r.id for r in found} == {edge.id, recent.id}
    assert old.id not in {r.id for r in found}


async def test_status_newest_first(repair_store, phone):
    today = date.today()
    older = await _repair(repair_store, phone, request_date=today - timedelta(days=3))
    newer = await _repair(repair_store, phone, request_date=today)

    ordered = await repair_store.find_by_status_order_by_request_date_desc(
        RepairStatus.PENDING,
    )
    assert [r.id for r in ordered] == [newer.id, older.id]


async def test_all_by_cost_descending(repair_store, phone):
    for cost in (20.0, 75.5, 5.0):
        await _repair(repair_store, phone, cost=cost)

    costs = [r.cost for r in await repair_store.find_all_order_by_cost_desc()]
    assert costs == [75.5, 20.0, 5.0]


async def test_total_cost_counts_completed_only(repair_store, phone):
    await _repair(repair_store, phone, cost=50.0, status=RepairStatus.COMPLETED)
    await _repair(repair_store, phone, cost=25.0, status=RepairStatus.COMPLETED)
    await _repair(repair_store, phone, cost=999.0, status=RepairStatus.IN_PROGRESS)

    assert await repair_store.total_cost_by_device(phone.id) == 75.0


async def test_total_cost_without_completed_is_zero(repair_store, phone, screen_repair):
    assert await repair_store.total_cost_by_device(phone.id) == 0.0


async def test_finders_return_empty_lists(repair_store):
    assert await repair_store.find_all() == []
    assert await repair_store.find_by_status(RepairStatus.CANCELLED) == []
    assert await repair_store.find_by_technician_is_null() == []
