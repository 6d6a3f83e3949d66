"""Descriptors binding the named-entity service to departments and roles."""

from orgadmin.domain.entities import Department, Role
from orgadmin.domain.services.error_catalog import (
    DEPARTMENT_ERRORS,
    LEGACY_DEPARTMENT_ERRORS,
    LEGACY_ROLE_ERRORS,
    ROLE_ERRORS,
)
from orgadmin.domain.services.named_entity_service import EntityDescriptor, SuccessMessages
from orgadmin.infrastructure.persistence.repositories import (
    DepartmentRepository,
    RoleRepository,
)


def department_descriptor(legacy_errors: bool = False) -> EntityDescriptor:
    """Descriptor for departments.

    Args:
        legacy_errors: Use the historical error codes instead of the normalized ones.
    """
    return EntityDescriptor(
        key="department",
        entity_cls=Department,
        repository_cls=DepartmentRepository,
        errors=LEGACY_DEPARTMENT_ERRORS if legacy_errors else DEPARTMENT_ERRORS,
        messages=SuccessMessages.for_label("Department", "departments"),
    )


def role_descriptor(legacy_errors: bool = False) -> EntityDescriptor:
    """Descriptor for roles.

    Args:
        legacy_errors: Use the historical error codes instead of the normalized ones.
    """
    return EntityDescriptor(
        key="role",
        entity_cls=Role,
        repository_cls=RoleRepository,
        errors=LEGACY_ROLE_ERRORS if legacy_errors else ROLE_ERRORS,
        messages=SuccessMessages.for_label("Role", "roles"),
    )
