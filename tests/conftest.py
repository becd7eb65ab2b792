"""Root conftest — shared database, store and HTTP client fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database with foreign keys enforced
    - get_db dependency overridden to use the test session factory
    - db_manager patched so the readiness probe sees the test database

Design Decisions:
    - SQLite in-memory through DatabaseSessionManager: same engine setup the app
      uses (FK pragma, create_schema), no external dependency
"""

import os

# Must be set before repairshop.main builds its settings
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
from httpx import ASGITransport, AsyncClient

import repairshop.infrastructure.database as db_module
from repairshop.core.domain_types import RepairStatus, Role
from repairshop.infrastructure.database import DatabaseSessionManager, get_db
from repairshop.main import app
from repairshop.models.device import Device
from repairshop.models.repair import Repair
from repairshop.models.user import User
from repairshop.repositories.devices import SQLAlchemyDeviceStore
from repairshop.repositories.repairs import SQLAlchemyRepairStore
from repairshop.repositories.users import SQLAlchemyUserStore


@pytest.fixture
async def test_manager():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    await manager.create_schema()
    yield manager
    await manager.close()


@pytest.fixture
async def test_db(test_manager):
    async with test_manager._session_factory() as session:
        yield session


@pytest.fixture
def user_store(test_db):
    return SQLAlchemyUserStore(test_db)


@pytest.fixture
def device_store(test_db):
    return SQLAlchemyDeviceStore(test_db)


@pytest.fixture
def repair_store(test_db):
    return SQLAlchemyRepairStore(test_db)


@pytest.fixture
async def client(test_manager):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    db_module.db_manager = test_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


# ─── Seed data ───────────────────────────────────────────────────

@pytest.fixture
async def alice(user_store):
    return await user_store.save(User(
        username="alice", email="a@x.com", password="secret1", role=Role.USER,
    ))


@pytest.fixture
async def tech(user_store):
    return await user_store.save(User(
        username="tom", email="tom@shop.com", password="wrench1", role=Role.TECH,
    ))


@pytest.fixture
async def phone(device_store, alice):
    return await device_store.save(Device(
        brand="Samsung", model="S21", owner_id=alice.id,
    ))


@pytest.fixture
async def screen_repair(repair_store, phone):
    return await repair_store.save(Repair(
        description="Cracked screen", cost=50.0,
        status=RepairStatus.PENDING, device_id=phone.id,
    ))
