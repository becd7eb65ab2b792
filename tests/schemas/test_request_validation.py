"""Request Schemas — field-level validation at the API boundary.

Invariants:
    - username 3-50 chars, stripped; email must look like an address
    - password min 6 on create; empty allowed on update, short non-empty rejected
    - repair cost strictly positive; unknown status/role strings rejected
"""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from repairshop.core.domain_types import RepairStatus, Role
from repairshop.schemas.device import DeviceRequest
from repairshop.schemas.repair import RepairRequest
from repairshop.schemas.user import UserCreate, UserUpdate


# --- Users ---------------------------------------------------------------------

def test_user_create_strips_username():
    body = UserCreate(username="  alice ", email="a@x.com", password="secret1", role="USER")
    assert body.username == "alice"
    assert body.role is Role.USER


@pytest.mark.parametrize("username", ["ab", "x" * 51, "    "])
def test_user_create_rejects_bad_username(username):
    with pytest.raises(ValidationError):
        UserCreate(username=username, email="a@x.com", password="secret1", role="USER")


def test_user_create_rejects_bad_email():
    with pytest.raises(ValidationError):
        UserCreate(username="alice", email="not-an-email", password="secret1", role="USER")


def test_user_create_requires_six_char_password():
    with pytest.raises(ValidationError):
        UserCreate(username="alice", email="a@x.com", password="12345", role="USER")


def test_user_create_rejects_unknown_role():
    with pytest.raises(ValidationError):
        UserCreate(username="alice", email="a@x.com", password="secret1", role="ROOT")


def test_user_update_allows_blank_password():
    body = UserUpdate(username="alice", email="a@x.com", role="TECH")
    assert body.password == ""


def test_user_update_rejects_short_password():
    with pytest.raises(ValidationError):
        UserUpdate(username="alice", email="a@x.com", password="abc", role="TECH")


# --- Devices -------------------------------------------------------------------

def test_device_request_limits():
    owner = uuid4()
    assert DeviceRequest(brand=" Apple ", model="iPad", owner_id=owner).brand == "Apple"
    with pytest.raises(ValidationError):
        DeviceRequest(brand="x" * 51, model="iPad", owner_id=owner)
    with pytest.raises(ValidationError):
        DeviceRequest(brand="Apple", model="", owner_id=owner)


# --- Repairs -------------------------------------------------------------------

def test_repair_request_defaults():
    body = RepairRequest(description="Battery", cost=10, device_id=uuid4())
    assert body.status is None
    assert body.technician_id is None
    assert body.estimated_date is None


@pytest.mark.parametrize("cost", [0, -1.5])
def test_repair_request_rejects_non_positive_cost(cost):
    with pytest.raises(ValidationError):
        RepairRequest(description="Battery", cost=cost, device_id=uuid4())


def test_repair_request_parses_status_and_date():
    body = RepairRequest(
        description="Battery", cost=10, device_id=uuid4(),
        status="COMPLETED", estimated_date="2024-05-01",
    )
    assert body.status is RepairStatus.COMPLETED
    assert body.estimated_date.isoformat() == "2024-05-01"


def test_repair_request_rejects_unknown_status():
    with pytest.raises(ValidationError):
        RepairRequest(description="Battery", cost=10, device_id=uuid4(), status="ON_HOLD")


def test_repair_request_rejects_long_description():
    with pytest.raises(ValidationError):
        RepairRequest(description="x" * 501, cost=10, device_id=uuid4())


@pytest.mark.parametrize("cost", [float("nan"), float("inf")])
def test_repair_request_rejects_non_finite_cost(cost):
    with pytest.raises(ValidationError):
        RepairRequest(description="Battery", cost=cost, device_id=uuid4())


def test_user_create_rejects_blank_password():
    with pytest.raises(ValidationError):
        UserCreate(username="alice", email="a@x.com", password="", role="USER")
