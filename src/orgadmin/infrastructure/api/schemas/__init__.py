"""API Schemas for request/response validation."""

from orgadmin.infrastructure.api.schemas.envelope_schemas import (
    ApiErrorResponse,
    ApiResponse,
    ValidationErrorDetail,
)
from orgadmin.infrastructure.api.schemas.named_entity_schemas import (
    CreateNamedEntityRequest,
    NamedEntityResponse,
    UpdateNamedEntityRequest,
)

__all__ = [
    "ApiErrorResponse",
    "ApiResponse",
    "CreateNamedEntityRequest",
    "NamedEntityResponse",
    "UpdateNamedEntityRequest",
    "ValidationErrorDetail",
]
