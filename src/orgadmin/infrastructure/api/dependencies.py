"""FastAPI dependencies providing request-scoped services."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from orgadmin.core.config import get_settings
from orgadmin.domain.services import (
    NamedEntityService,
    department_descriptor,
    role_descriptor,
)
from orgadmin.infrastructure.persistence.database import get_db_session


async def get_department_service(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> NamedEntityService:
    """Build the department service for the current request."""
    settings = get_settings()
    return NamedEntityService(session, department_descriptor(settings.legacy_error_codes))


async def get_role_service(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> NamedEntityService:
    """Build the role service for the current request."""
    settings = get_settings()
    return NamedEntityService(session, role_descriptor(settings.legacy_error_codes))

