"""Generic repository for named-entity tables.

Departments and roles share the same shape (id, unique name, description,
timestamps), so a single repository implementation serves both; concrete
subclasses only bind the model class.
"""

import uuid
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from orgadmin.infrastructure.persistence.models import DepartmentModel, RoleModel

ModelT = TypeVar("ModelT", DepartmentModel, RoleModel)

UPDATABLE_FIELDS = frozenset({"name", "description"})


class NamedEntityRepository(Generic[ModelT]):
    """Repository for named-entity database operations."""

    model: ClassVar[type]

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, name: str, description: str | None = None) -> ModelT:
        """Insert a new record with a generated identifier.

        Args:
            name: Record name.
            description: Optional description.

        Returns:
            The created model, refreshed with server-generated timestamps.

        Raises:
            IntegrityError: If the name violates the unique constraint.
        """
        record = self.model(
            id=str(uuid.uuid4()),
            name=name,
            description=description,
        )
        self.session.add(record)
        await self.session.flush()
        await self.session.refresh(record)
        return record

    async def get_by_id(self, entity_id: str) -> ModelT | None:
        """Get a record by ID.

        Args:
            entity_id: Record ID.

        Returns:
            Model if found, None otherwise.
        """
        result = await self.session.execute(
            select(self.model).where(self.model.id == entity_id)
        )
        return result.scalar_one_or_none()

    async def get_by_name(self, name: str) -> ModelT | None:
        """Get a record by name.

        Args:
            name: Record name.

        Returns:
            Model if found, None otherwise.
        """
        result = await self.session.execute(
            select(self.model).where(self.model.name == name)
        )
        return result.scalar_one_or_none()

    async def name_exists(self, name: str) -> bool:
        """Check whether any record already uses a name."""
        return await self.get_by_name(name) is not None

    async def name_taken_by_other(self, name: str, entity_id: str) -> bool:
        """Check whether a record other than ``entity_id`` uses a name.

        Args:
            name: Record name.
            entity_id: ID of the record being updated.

        Returns:
            True if a different record holds the name.
        """
        result = await self.session.execute(
            select(self.model.id).where(
                (self.model.name == name) & (self.model.id != entity_id)
            )
        )
        return result.first() is not None

    async def list_all(self) -> list[ModelT]:
        """List every record in store order."""
        result = await self.session.execute(select(self.model))
        return list(result.scalars().all())

    async def count(self) -> int:
        """Count all records."""
        result = await self.session.execute(
            select(func.count()).select_from(self.model)
        )
        return result.scalar_one()

    async def update(self, record: ModelT, **fields: Any) -> ModelT:
        """Apply field changes to a record.

        Args:
            record: Model to update.
            **fields: Fields to change; only name and description are accepted.

        Returns:
            The updated model, refreshed with the new timestamps.

        Raises:
            ValueError: If an unknown field is supplied.
            IntegrityError: If the new name violates the unique constraint.
        """
        unknown = set(fields) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update fields: {', '.join(sorted(unknown))}")

        if not fields:
            return record

        for key, value in fields.items():
            setattr(record, key, value)

        await self.session.flush()
        await self.session.refresh(record)
        return record

    async def delete(self, record: ModelT) -> None:
        """Delete a record.

        Args:
            record: Model to delete.
        """
        await self.session.delete(record)
        await self.session.flush()
