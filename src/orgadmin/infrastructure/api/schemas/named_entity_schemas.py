"""Request/response schemas shared by departments and roles."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _clean_name(v: str | None) -> str:
    if v is None:
        raise ValueError("Name cannot be null")
    if not v.strip():
        raise ValueError("Name cannot be empty")
    return v.strip()


class CreateNamedEntityRequest(BaseModel):
    """Request schema for creating a department or role.

    Attributes:
        name: Unique name.
        description: Optional description.
    """

    name: str = Field(..., max_length=100)
    description: str | None = Field(None, max_length=500)

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        """Validate that name is not empty."""
        return _clean_name(v)


class UpdateNamedEntityRequest(BaseModel):
    """Request schema for updating a department or role.

    Fields left out of the body are not changed.

    Attributes:
        name: New name.
        description: New description.
    """

    name: str | None = Field(None, max_length=100)
    description: str | None = Field(None, max_length=500)

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: str | None) -> str:
        """Validate that an explicitly supplied name is not null or empty."""
        return _clean_name(v)

    def changes(self) -> dict[str, str | None]:
        """Return only the fields present in the request body."""
        return self.model_dump(exclude_unset=True)


class NamedEntityResponse(BaseModel):
    """Response schema for a department or role.

    Attributes:
        id: Record ID.
        name: Record name.
        description: Record description.
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
    """

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
