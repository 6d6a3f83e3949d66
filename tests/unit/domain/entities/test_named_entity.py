"""Unit tests for Department and Role entities."""

from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

from orgadmin.domain.entities import Department, NamedEntity, Role


def test_department_creation():
    department = Department(id="dep-1", name="Engineering", description="Builds things")

    assert department.id == "dep-1"
    assert department.name == "Engineering"
    assert department.description == "Builds things"
    assert department.created_at is None
    assert isinstance(department, NamedEntity)


def test_description_is_optional():
    role = Role(id="role-1", name="Manager")
    assert role.description is None


@pytest.mark.parametrize(
    ("entity_cls", "kwargs", "message"),
    [
        (Department, {"id": "", "name": "Engineering"}, "Department ID is required"),
        (Department, {"id": "dep-1", "name": ""}, "Department name is required"),
        (Role, {"id": "", "name": "Manager"}, "Role ID is required"),
        (Role, {"id": "role-1", "name": ""}, "Role name is required"),
    ],
)
def test_required_fields(entity_cls, kwargs, message):
    with pytest.raises(ValueError, match=message):
        entity_cls(**kwargs)


def test_from_record():
    now = datetime.now(timezone.utc)
    record = SimpleNamespace(
        id="role-1",
        name="Manager",
        description=None,
        created_at=now,
        updated_at=now,
    )

    role = Role.from_record(record)

    assert isinstance(role, Role)
    assert role.to_dict() == {
        "id": "role-1",
        "name": "Manager",
        "description": None,
        "created_at": now,
        "updated_at": now,
    }


def test_department_and_role_with_same_fields_are_not_equal():
    assert Department(id="x", name="Sales") != Role(id="x", name="Sales")
