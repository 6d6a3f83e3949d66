"""Domain services for OrgAdmin.

Services contain business logic that doesn't naturally fit within a single entity.
"""

from orgadmin.domain.services.entity_descriptors import (
    department_descriptor,
    role_descriptor,
)
from orgadmin.domain.services.error_catalog import (
    DEPARTMENT_ERRORS,
    LEGACY_DEPARTMENT_ERRORS,
    LEGACY_ROLE_ERRORS,
    ROLE_ERRORS,
    EntityErrorTable,
    ErrorEntry,
    build_error_table,
)
from orgadmin.domain.services.named_entity_service import (
    EntityDescriptor,
    NamedEntityService,
    SuccessMessages,
)

__all__ = [
    "DEPARTMENT_ERRORS",
    "EntityDescriptor",
    "EntityErrorTable",
    "ErrorEntry",
    "LEGACY_DEPARTMENT_ERRORS",
    "LEGACY_ROLE_ERRORS",
    "NamedEntityService",
    "ROLE_ERRORS",
    "SuccessMessages",
    "build_error_table",
    "department_descriptor",
    "role_descriptor",
]
