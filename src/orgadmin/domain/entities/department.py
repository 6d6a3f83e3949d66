"""Department entity.

Departments are organizational units. Names are unique across all departments.
"""

from dataclasses import dataclass
from typing import ClassVar

from orgadmin.domain.entities.named_entity import NamedEntity


@dataclass
class Department(NamedEntity):
    """Department entity."""

    label: ClassVar[str] = "Department"
