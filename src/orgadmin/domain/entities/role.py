"""Role entity.

Roles describe job functions within the organization. Names are unique
across all roles.
"""

from dataclasses import dataclass
from typing import ClassVar

from orgadmin.domain.entities.named_entity import NamedEntity


@dataclass
class Role(NamedEntity):
    """Role entity."""

    label: ClassVar[str] = "Role"
