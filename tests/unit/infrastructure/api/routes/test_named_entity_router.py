"""Unit tests for the department and role routers with a mocked service."""

from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from fastapi import status
from httpx import ASGITransport, AsyncClient

from orgadmin.domain.entities import Department, Role
from orgadmin.domain.services import SuccessMessages, department_descriptor
from orgadmin.infrastructure.api.app import CORRELATION_HEADER, app
from orgadmin.infrastructure.api.dependencies import (
    get_department_service,
    get_role_service,
)

NOW = datetime(2026, 1, 1, 12, 0, 0)


@pytest.fixture
def department_service():
    """Mock department service."""
    service = MagicMock()
    service.messages = SuccessMessages.for_label("Department", "departments")
    service.errors = department_descriptor().errors
    for method in ("create", "list_all", "get_by_id", "update", "delete"):
        setattr(service, method, AsyncMock())
    app.dependency_overrides[get_department_service] = lambda: service
    return service


@pytest.fixture
def role_service():
    """Mock role service."""
    service = MagicMock()
    service.messages = SuccessMessages.for_label("Role", "roles")
    service.create = AsyncMock()
    app.dependency_overrides[get_role_service] = lambda: service
    return service


@pytest_asyncio.fixture
async def async_client():
    """Create a custom AsyncClient for testing."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture(autouse=True)
def clear_overrides():
    """Clear dependency overrides after each test."""
    app.dependency_overrides = {}
    yield
    app.dependency_overrides = {}


@pytest.mark.asyncio
async def test_create_department(async_client, department_service):
    department_service.create.return_value = Department(
        id="dep-1", name="Engineering", created_at=NOW, updated_at=NOW
    )

    response = await async_client.post(
        "/api/v1/departments", json={"name": " Engineering "}
    )

    assert response.status_code == status.HTTP_201_CREATED
    body = response.json()
    assert body["status"] == 201
    assert body["message"] == "Department created successfully"
    assert body["data"]["id"] == "dep-1"
    assert body["data"]["name"] == "Engineering"
    department_service.create.assert_awaited_once_with("Engineering", None)


@pytest.mark.asyncio
async def test_create_role_uses_role_service(async_client, role_service):
    role_service.create.return_value = Role(id="role-1", name="Manager")

    response = await async_client.post(
        "/api/v1/roles", json={"name": "Manager", "description": "Leads"}
    )

    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["message"] == "Role created successfully"
    role_service.create.assert_awaited_once_with("Manager", "Leads")


@pytest.mark.asyncio
async def test_list_departments(async_client, department_service):
    department_service.list_all.return_value = [
        Department(id="dep-1", name="Engineering"),
        Department(id="dep-2", name="Sales"),
    ]

    response = await async_client.get("/api/v1/departments")

    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["message"] == "All departments fetched"
    assert [d["name"] for d in body["data"]] == ["Engineering", "Sales"]


@pytest.mark.asyncio
async def test_get_department_not_found(async_client, department_service):
    department_service.get_by_id.side_effect = (
        department_service.errors.get_not_found.to_exception()
    )

    response = await async_client.get("/api/v1/departments/missing")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {
        "status": 404,
        "action": "GET_DEPARTMENT",
        "code": "NOT_FOUND",
        "message": "Department not found",
    }


@pytest.mark.asyncio
@pytest.mark.parametrize("method", ["put", "patch"])
async def test_update_passes_only_sent_fields(async_client, department_service, method):
    department_service.update.return_value = Department(
        id="dep-1", name="Engineering", description="Infra"
    )

    response = await async_client.request(
        method.upper(), "/api/v1/departments/dep-1", json={"description": "Infra"}
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["message"] == "Department updated successfully"
    department_service.update.assert_awaited_once_with("dep-1", description="Infra")


@pytest.mark.asyncio
async def test_update_conflict(async_client, department_service):
    department_service.update.side_effect = (
        department_service.errors.update_conflict.to_exception()
    )

    response = await async_client.patch(
        "/api/v1/departments/dep-1", json={"name": "Sales"}
    )

    assert response.status_code == status.HTTP_409_CONFLICT
    assert response.json()["action"] == "UPDATE_DEPARTMENT"
    assert response.json()["code"] == "ALREADY_EXISTS"


@pytest.mark.asyncio
async def test_delete_returns_deleted_record(async_client, department_service):
    department_service.delete.return_value = Department(id="dep-1", name="Engineering")

    response = await async_client.delete("/api/v1/departments/dep-1")

    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["message"] == "Department deleted successfully"
    assert body["data"]["id"] == "dep-1"


@pytest.mark.asyncio
async def test_blank_name_is_rejected_before_service(async_client, department_service):
    response = await async_client.post("/api/v1/departments", json={"name": "  "})

    assert response.status_code == 422
    body = response.json()
    assert body["action"] == "VALIDATE_REQUEST"
    assert body["code"] == "VALIDATION_ERROR"
    assert body["details"][0]["field"] == "body.name"
    department_service.create.assert_not_called()


@pytest.mark.asyncio
async def test_unhandled_error_is_enveloped(async_client, department_service):
    department_service.list_all.side_effect = RuntimeError("boom")

    response = await async_client.get(
        "/api/v1/departments", headers={CORRELATION_HEADER: "cid_abc"}
    )

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.headers[CORRELATION_HEADER] == "cid_abc"
    assert response.json() == {
        "status": 500,
        "action": "UNHANDLED",
        "code": "INTERNAL_SERVER_ERROR",
        "message": "An unexpected error occurred",
    }


@pytest.mark.asyncio
async def test_unhandled_error_gets_generated_correlation_id(async_client, department_service):
    department_service.delete.side_effect = RuntimeError("boom")

    response = await async_client.delete("/api/v1/departments/dep-1")

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.headers[CORRELATION_HEADER].startswith("cid_")


@pytest.mark.asyncio
async def test_too_long_name_is_rejected_before_service(async_client, department_service):
    response = await async_client.post("/api/v1/departments", json={"name": "x" * 101})

    assert response.status_code == 422
    assert response.json()["details"][0]["field"] == "body.name"
    department_service.create.assert_not_called()
