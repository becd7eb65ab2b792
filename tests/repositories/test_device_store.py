"""Device Store — owner/brand finders, counting and the device-rooted cascade."""

from uuid import uuid4

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from repairshop.models.device import Device
from repairshop.models.repair import Repair


async def test_saved_device_has_owner_loaded(device_store, alice, phone):
    found = await device_store.find_by_id(phone.id)
    assert found.owner.username == "alice"


async def test_find_by_owner_and_count(device_store, alice, tech, phone):
    await device_store.save(Device(brand="Nokia", model="3310", owner_id=alice.id))

    assert len(await device_store.find_by_owner(alice)) == 2
    assert len(await device_store.find_by_owner_id(alice.id)) == 2
    assert await device_store.count_by_owner(alice) == 2
    assert await device_store.count_by_owner(tech) == 0
    assert await device_store.find_by_owner_id(tech.id) == []


async def test_find_by_brand_and_model(device_store, alice, phone):
    await device_store.save(Device(brand="Samsung", model="S22", owner_id=alice.id))

    assert len(await device_store.find_by_brand("Samsung")) == 2
    matches = await device_store.find_by_brand_and_model("Samsung", "S21")
    assert [d.id for d in matches] == [phone.id]
    assert await device_store.find_by_brand("Apple") == []


async def test_delete_removes_only_own_repairs(
    device_store, repair_store, alice, phone, screen_repair,
):
    other = await device_store.save(Device(
        brand="Apple", model="iPhone 12", owner_id=alice.id,
    ))
    kept = await repair_store.save(Repair(
        description="Speaker", cost=30.0, device_id=other.id,
    ))

    assert await device_store.delete_by_id(phone.id) is True

    assert await device_store.find_by_id(phone.id) is None
    assert await repair_store.find_by_id(screen_repair.id) is None
    assert await repair_store.find_by_id(kept.id) is not None
    assert await device_store.exists_by_id(other.id)


async def test_delete_missing_device_reports_false(device_store):
    assert await device_store.delete_by_id(uuid4()) is False


async def test_detached_repairs_are_deleted(
    test_db, device_store, repair_store, phone, screen_repair,
):
    result = await test_db.execute(
        select(Device)
        .where(Device.id == phone.id)
        .options(selectinload(Device.repairs))
        .execution_options(populate_existing=True)
    )
    device = result.scalar_one()
    assert [r.id for r in device.repairs] == [screen_repair.id]

    device.repairs.clear()
    await test_db.commit()

    assert await device_store.exists_by_id(phone.id)
    assert await repair_store.find_by_id(screen_repair.id) is None
