"""Role repository for database operations."""

from orgadmin.infrastructure.persistence.models import RoleModel
from orgadmin.infrastructure.persistence.repositories.named_entity_repository import (
    NamedEntityRepository,
)


class RoleRepository(NamedEntityRepository[RoleModel]):
    """Repository for role database operations."""

    model = RoleModel
