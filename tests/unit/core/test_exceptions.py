"""Unit tests for API error exceptions."""

from http import HTTPStatus

from orgadmin.core.exceptions import (
    ApiError,
    ConflictError,
    NotFoundError,
    error_class_for_status,
)


def test_conflict_error_defaults_to_409():
    error = ConflictError("CREATE_ROLE", "ALREADY_EXISTS", "Role already exists")

    assert error.status_code == HTTPStatus.CONFLICT
    assert error.action == "CREATE_ROLE"
    assert error.code == "ALREADY_EXISTS"
    assert str(error) == "Role already exists"
    assert isinstance(error, ApiError)


def test_not_found_error_defaults_to_404():
    error = NotFoundError("GET_DEPARTMENT", "NOT_FOUND", "Department not found")
    assert error.status_code == HTTPStatus.NOT_FOUND


def test_explicit_status_overrides_class_default():
    error = ApiError("X", "Y", "z", status_code=418)
    assert error.status_code == 418
    assert ApiError.status_code == HTTPStatus.INTERNAL_SERVER_ERROR


def test_repr_includes_all_fields():
    error = NotFoundError("GET_ROLE", "NOT_FOUND", "Role not found")
    assert repr(error) == (
        "NotFoundError(action='GET_ROLE', status_code=404, "
        "code='NOT_FOUND', message='Role not found')"
    )


def test_error_class_for_status():
    assert error_class_for_status(409) is ConflictError
    assert error_class_for_status(404) is NotFoundError
    assert error_class_for_status(400) is ApiError
