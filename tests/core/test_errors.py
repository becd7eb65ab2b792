"""Error Hierarchy — codes, HTTP statuses and the REST envelope.

Tests cover:
    - Each error class carries its code, category and HTTP status
    - NotFound/Conflict messages name the entity and value
    - to_response() exposes entity context but no debug info
"""

from repairshop.core.errors import (
    AlreadyExistsError,
    DataIntegrityError,
    DatabaseError,
    ErrorCategory,
    InvalidFieldError,
    RepairShopError,
    ResourceNotFoundError,
)


def test_not_found_carries_kind_and_id():
    err = ResourceNotFoundError("Device", "abc")
    assert err.code == "RESOURCE_NOT_FOUND"
    assert err.http_status == 404
    assert err.message == "Device 'abc' not found"
    assert err.context.entity == "Device"
    assert err.context.entity_id == "abc"


def test_already_exists_is_conflict():
    err = AlreadyExistsError("User", "username", "alice")
    assert err.code == "ALREADY_EXISTS"
    assert err.category == ErrorCategory.CONFLICT
    assert err.http_status == 409
    assert "alice" in err.message
    assert err.field == "username"


def test_invalid_field_is_validation_error():
    err = InvalidFieldError("bad cost", "cost")
    assert err.code == "VALIDATION_ERROR"
    assert err.http_status == 400
    assert err.context.field == "cost"


def test_infrastructure_errors_are_server_side():
    assert DatabaseError("boom", "commit").http_status == 503
    assert DataIntegrityError("bad enum").http_status == 500


def test_all_errors_share_base_class():
    for err in (
        ResourceNotFoundError("User", "1"),
        AlreadyExistsError("User", "email", "a@x.com"),
        InvalidFieldError("x", "f"),
        DatabaseError("x", "save"),
        DataIntegrityError("x"),
    ):
        assert isinstance(err, RepairShopError)


def test_to_response_envelope():
    body = ResourceNotFoundError("Repair", "42").to_response()
    error = body["error"]
    assert error["code"] == "RESOURCE_NOT_FOUND"
    assert error["category"] == "resource_not_found"
    assert error["severity"] == "warning"
    assert error["context"] == {
        "entity": "Repair", "entity_id": "42", "field": None,
    }
    assert "timestamp" in error
    assert "debug_info" not in error["context"]


def test_database_error_message_names_operation():
    err = DatabaseError("Could not persist changes", "save")
    assert err.message == "Database save failed: Could not persist changes"
