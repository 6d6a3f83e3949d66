"""Named entity base shared by departments and roles.

A named entity is a record with a store-generated identifier, a name that is
unique within its entity type, and an optional free-text description.
"""

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any, ClassVar


@dataclass
class NamedEntity:
    """Base entity for administrative resources identified by a unique name.

    Attributes:
        id: Unique identifier (UUID string) generated by the store.
        name: Name, unique across all records of the same type.
        description: Optional description.
        created_at: Timestamp when the record was created.
        updated_at: Timestamp when the record was last updated.
    """

    label: ClassVar[str] = "Entity"

    id: str
    name: str
    description: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate entity data after initialization."""
        if not self.id:
            raise ValueError(f"{self.label} ID is required")
        if not self.name:
            raise ValueError(f"{self.label} name is required")

    @classmethod
    def from_record(cls, record: Any) -> "NamedEntity":
        """Build an entity from any object exposing the entity attributes.

        Args:
            record: ORM model or other attribute container.

        Returns:
            A detached entity instance.
        """
        return cls(
            id=record.id,
            name=record.name,
            description=record.description,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert the entity to a plain dictionary."""
        return asdict(self)
