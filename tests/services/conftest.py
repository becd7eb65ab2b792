"""Service fixtures — services wired to the test stores the same way api/deps.py wires them."""

import pytest

from repairshop.services.device_service import DeviceService
from repairshop.services.repair_service import RepairService
from repairshop.services.user_service import UserService


@pytest.fixture
def user_service(user_store):
    return UserService(user_store)


@pytest.fixture
def device_service(device_store, user_store):
    return DeviceService(device_store, user_store)


@pytest.fixture
def repair_service(repair_store, device_store, user_store):
    return RepairService(repair_store, device_store, user_store)
