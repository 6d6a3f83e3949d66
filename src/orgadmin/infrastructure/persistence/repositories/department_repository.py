"""Department repository for database operations."""

from orgadmin.infrastructure.persistence.models import DepartmentModel
from orgadmin.infrastructure.persistence.repositories.named_entity_repository import (
    NamedEntityRepository,
)


class DepartmentRepository(NamedEntityRepository[DepartmentModel]):
    """Repository for department database operations."""

    model = DepartmentModel
