"""Domain entities for OrgAdmin.

Entities are pure Python dataclasses that represent core business concepts.
They have no dependencies on infrastructure or external frameworks.
"""

from orgadmin.domain.entities.department import Department
from orgadmin.domain.entities.named_entity import NamedEntity
from orgadmin.domain.entities.role import Role

__all__ = [
    "Department",
    "NamedEntity",
    "Role",
]
