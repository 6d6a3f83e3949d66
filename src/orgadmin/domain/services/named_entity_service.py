"""Named-entity service for business logic.

One service implements create/list/get/update/delete for every entity type
that has a unique name. It is parameterized by an ``EntityDescriptor``
and instantiated for departments and roles.
"""

from dataclasses import dataclass
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from orgadmin.core.logging import get_logger
from orgadmin.domain.entities import NamedEntity
from orgadmin.domain.services.error_catalog import EntityErrorTable
from orgadmin.infrastructure.persistence.repositories import NamedEntityRepository

logger = get_logger(__name__)


@dataclass(frozen=True)
class SuccessMessages:
    """Envelope messages for successful operations."""

    created: str
    listed: str
    found: str
    updated: str
    deleted: str

    @classmethod
    def for_label(cls, label: str, plural: str) -> "SuccessMessages":
        """Build the standard messages for an entity label.

        Args:
            label: Singular label, e.g. ``Department``.
            plural: Lower-case plural, e.g. ``departments``.
        """
        return cls(
            created=f"{label} created successfully",
            listed=f"All {plural} fetched",
            found=f"{label} found",
            updated=f"{label} updated successfully",
            deleted=f"{label} deleted successfully",
        )


@dataclass(frozen=True)
class EntityDescriptor:
    """Everything that differs between named-entity types.

    Attributes:
        key: Lower-case identifier used in logs, e.g. ``department``.
        entity_cls: Domain entity returned to callers.
        repository_cls: Repository bound to the entity's table.
        errors: Error table for the failure branches.
        messages: Envelope messages for the success branches.
    """

    key: str
    entity_cls: type[NamedEntity]
    repository_cls: type[NamedEntityRepository]
    errors: EntityErrorTable
    messages: SuccessMessages


class NamedEntityService:
    """Service for named-entity business logic.

    Uniqueness is pre-checked before every write, and a unique-constraint
    violation raised by the write itself is mapped to the same conflict.
    """

    def __init__(self, session: AsyncSession, descriptor: EntityDescriptor) -> None:
        """Initialize the service.

        Args:
            session: SQLAlchemy async session.
            descriptor: Entity type the service operates on.
        """
        self.session = session
        self.descriptor = descriptor
        self.errors = descriptor.errors
        self.messages = descriptor.messages
        self.repository = descriptor.repository_cls(session)

    def _to_entity(self, record: Any) -> NamedEntity:
        return self.descriptor.entity_cls.from_record(record)

    async def create(self, name: str, description: str | None = None) -> NamedEntity:
        """Create a record.

        Args:
            name: Unique name.
            description: Optional description.

        Returns:
            The created entity.

        Raises:
            ConflictError: If the name is already in use.
        """
        if await self.repository.name_exists(name):
            logger.info(
                "Create failed: name already exists",
                entity=self.descriptor.key,
                name=name,
            )
            raise self.errors.create_conflict.to_exception()

        try:
            record = await self.repository.create(name=name, description=description)
            entity = self._to_entity(record)
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            logger.info(
                "Create failed: unique constraint violated",
                entity=self.descriptor.key,
                name=name,
            )
            raise self.errors.create_conflict.to_exception()

        logger.info(
            "Created",
            entity=self.descriptor.key,
            entity_id=entity.id,
            name=entity.name,
        )
        return entity

    async def list_all(self) -> list[NamedEntity]:
        """List every record in store order."""
        records = await self.repository.list_all()
        logger.debug("Listed", entity=self.descriptor.key, count=len(records))
        return [self._to_entity(record) for record in records]

    async def get_by_id(self, entity_id: str) -> NamedEntity:
        """Get a record by ID.

        Raises:
            NotFoundError: If no record has this ID.
        """
        record = await self.repository.get_by_id(entity_id)
        if record is None:
            logger.info("Not found", entity=self.descriptor.key, entity_id=entity_id)
            raise self.errors.get_not_found.to_exception()
        return self._to_entity(record)

    async def update(self, entity_id: str, **changes: Any) -> NamedEntity:
        """Update a record.

        The name check runs before the existence check, so a request that
        both renames onto a taken name and targets an unknown ID reports
        the conflict.

        Args:
            entity_id: Record ID.
            **changes: Fields to change (``name`` and/or ``description``).

        Returns:
            The updated entity.

        Raises:
            ConflictError: If another record already holds the new name.
            NotFoundError: If no record has this ID.
        """
        name = changes.get("name")
        if name is not None and await self.repository.name_taken_by_other(name, entity_id):
            logger.info(
                "Update failed: name already exists",
                entity=self.descriptor.key,
                entity_id=entity_id,
                name=name,
            )
            raise self.errors.update_conflict.to_exception()

        record = await self.repository.get_by_id(entity_id)
        if record is None:
            logger.info(
                "Update failed: not found",
                entity=self.descriptor.key,
                entity_id=entity_id,
            )
            raise self.errors.update_not_found.to_exception()

        try:
            record = await self.repository.update(record, **changes)
            entity = self._to_entity(record)
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            logger.info(
                "Update failed: unique constraint violated",
                entity=self.descriptor.key,
                entity_id=entity_id,
                name=name,
            )
            raise self.errors.update_conflict.to_exception()

        logger.info(
            "Updated",
            entity=self.descriptor.key,
            entity_id=entity_id,
            fields=sorted(changes),
        )
        return entity

    async def delete(self, entity_id: str) -> NamedEntity:
        """Delete a record.

        Returns:
            The deleted entity's last known value.

        Raises:
            NotFoundError: If no record has this ID.
        """
        record = await self.repository.get_by_id(entity_id)
        if record is None:
            logger.info(
                "Delete failed: not found",
                entity=self.descriptor.key,
                entity_id=entity_id,
            )
            raise self.errors.delete_not_found.to_exception()

        entity = self._to_entity(record)
        await self.repository.delete(record)
        await self.session.commit()

        logger.info("Deleted", entity=self.descriptor.key, entity_id=entity_id)
        return entity
