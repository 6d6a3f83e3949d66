"""Persistence repositories for database operations."""

from orgadmin.infrastructure.persistence.repositories.department_repository import (
    DepartmentRepository,
)
from orgadmin.infrastructure.persistence.repositories.named_entity_repository import (
    NamedEntityRepository,
)
from orgadmin.infrastructure.persistence.repositories.role_repository import (
    RoleRepository,
)

__all__ = [
    "DepartmentRepository",
    "NamedEntityRepository",
    "RoleRepository",
]
