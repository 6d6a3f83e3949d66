"""Roles API routes."""

from orgadmin.infrastructure.api.dependencies import get_role_service
from orgadmin.infrastructure.api.routes.named_entity_router import create_named_entity_router

router = create_named_entity_router(get_role_service)
