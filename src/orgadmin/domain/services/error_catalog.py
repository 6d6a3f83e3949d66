"""Error catalog for department and role operations.

Each failure branch of each operation maps to an action tag, an HTTP status,
a machine-readable code and a message. The normalized tables are used by
default. The legacy tables reproduce the codes historically emitted by the
API, including the swapped department update branches and the role literals,
for clients that still branch on them.
"""

from dataclasses import dataclass
from http import HTTPStatus

from orgadmin.core.exceptions import ApiError, error_class_for_status

ALREADY_EXISTS = "ALREADY_EXISTS"
NOT_FOUND = "NOT_FOUND"


@dataclass(frozen=True)
class ErrorEntry:
    """One row of the catalog.

    Attributes:
        action: Operation that was attempted (e.g. ``CREATE_DEPARTMENT``).
        status_code: HTTP status of the error response.
        code: Machine-readable error code.
        message: Human-readable message.
    """

    action: str
    status_code: int
    code: str
    message: str

    def to_exception(self) -> ApiError:
        """Build the exception carrying this entry."""
        error_cls = error_class_for_status(self.status_code)
        return error_cls(
            action=self.action,
            code=self.code,
            message=self.message,
            status_code=self.status_code,
        )


@dataclass(frozen=True)
class EntityErrorTable:
    """Errors for every failure branch of one entity type."""

    create_conflict: ErrorEntry
    get_not_found: ErrorEntry
    update_conflict: ErrorEntry
    update_not_found: ErrorEntry
    delete_not_found: ErrorEntry


def build_error_table(label: str) -> EntityErrorTable:
    """Build the normalized error table for an entity label.

    Args:
        label: Entity label, e.g. ``Department``.

    Returns:
        Table with Conflict (409) for name clashes and Not Found (404) for
        unknown identifiers.
    """
    suffix = label.upper()
    conflict = f"{label} already exists"
    missing = f"{label} not found"
    return EntityErrorTable(
        create_conflict=ErrorEntry(f"CREATE_{suffix}", HTTPStatus.CONFLICT, ALREADY_EXISTS, conflict),
        get_not_found=ErrorEntry(f"GET_{suffix}", HTTPStatus.NOT_FOUND, NOT_FOUND, missing),
        update_conflict=ErrorEntry(f"UPDATE_{suffix}", HTTPStatus.CONFLICT, ALREADY_EXISTS, conflict),
        update_not_found=ErrorEntry(f"UPDATE_{suffix}", HTTPStatus.NOT_FOUND, NOT_FOUND, missing),
        delete_not_found=ErrorEntry(f"DELETE_{suffix}", HTTPStatus.NOT_FOUND, NOT_FOUND, missing),
    )


DEPARTMENT_ERRORS = build_error_table("Department")
ROLE_ERRORS = build_error_table("Role")

LEGACY_DEPARTMENT_ERRORS = EntityErrorTable(
    create_conflict=DEPARTMENT_ERRORS.create_conflict,
    get_not_found=DEPARTMENT_ERRORS.get_not_found,
    update_conflict=ErrorEntry(
        "UPDATE_DEPARTMENT", HTTPStatus.NOT_FOUND, NOT_FOUND, ROLE_ERRORS.get_not_found.message
    ),
    update_not_found=ErrorEntry(
        "UPDATE_ROLE", HTTPStatus.CONFLICT, ALREADY_EXISTS, ROLE_ERRORS.create_conflict.message
    ),
    delete_not_found=ErrorEntry(
        "GET_DEPARTMENT", HTTPStatus.NOT_FOUND, NOT_FOUND, DEPARTMENT_ERRORS.get_not_found.message
    ),
)

LEGACY_ROLE_ERRORS = EntityErrorTable(
    create_conflict=ErrorEntry("CREATE_ROLE", HTTPStatus.CONFLICT, "CREATE_ROLE", ALREADY_EXISTS),
    get_not_found=ErrorEntry("GET_ROLE", HTTPStatus.NOT_FOUND, "GET_ROLE", NOT_FOUND),
    update_conflict=ErrorEntry("UPDATE_ROLE", HTTPStatus.CONFLICT, "UPDATE_ROLE", ALREADY_EXISTS),
    update_not_found=ErrorEntry("UPDATE_ROLE", HTTPStatus.NOT_FOUND, "UPDATE_ROLE", NOT_FOUND),
    delete_not_found=ErrorEntry("DELETE_DEPARTMENT", HTTPStatus.NOT_FOUND, "DELETE_ROLE", NOT_FOUND),
)
