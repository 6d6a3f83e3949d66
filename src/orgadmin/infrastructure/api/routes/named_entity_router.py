"""Router factory for named-entity resources.

Departments and roles expose the same five endpoints; the factory builds
them around a service dependency so each resource only supplies which
service to inject.
"""

from collections.abc import Awaitable, Callable
from typing import Annotated

from fastapi import APIRouter, Depends, status

from orgadmin.domain.services import NamedEntityService
from orgadmin.infrastructure.api.schemas import (
    ApiErrorResponse,
    ApiResponse,
    CreateNamedEntityRequest,
    NamedEntityResponse,
    UpdateNamedEntityRequest,
)

ServiceDependency = Callable[..., Awaitable[NamedEntityService]]

CONFLICT_RESPONSE = {"model": ApiErrorResponse, "description": "Name already exists"}
NOT_FOUND_RESPONSE = {"model": ApiErrorResponse, "description": "Record not found"}
VALIDATION_RESPONSE = {"model": ApiErrorResponse, "description": "Validation error"}


def create_named_entity_router(get_service: ServiceDependency) -> APIRouter:
    """Build the CRUD router for one named-entity resource.

    Args:
        get_service: FastAPI dependency returning the resource's service.

    Returns:
        Router with create, list, get, update and delete endpoints.
    """
    router = APIRouter()
    Service = Annotated[NamedEntityService, Depends(get_service)]

    @router.post(
        "",
        status_code=status.HTTP_201_CREATED,
        response_model=ApiResponse[NamedEntityResponse],
        responses={409: CONFLICT_RESPONSE, 422: VALIDATION_RESPONSE},
    )
    async def create(
        request: CreateNamedEntityRequest,
        service: Service,
    ) -> ApiResponse[NamedEntityResponse]:
        """Create a record with a unique name."""
        entity = await service.create(request.name, request.description)
        return ApiResponse(
            status=status.HTTP_201_CREATED,
            data=NamedEntityResponse.model_validate(entity),
            message=service.messages.created,
        )

    @router.get(
        "",
        status_code=status.HTTP_200_OK,
        response_model=ApiResponse[list[NamedEntityResponse]],
    )
    async def list_all(service: Service) -> ApiResponse[list[NamedEntityResponse]]:
        """List every record."""
        entities = await service.list_all()
        return ApiResponse(
            status=status.HTTP_200_OK,
            data=[NamedEntityResponse.model_validate(entity) for entity in entities],
            message=service.messages.listed,
        )

    @router.get(
        "/{entity_id}",
        status_code=status.HTTP_200_OK,
        response_model=ApiResponse[NamedEntityResponse],
        responses={404: NOT_FOUND_RESPONSE},
    )
    async def get(entity_id: str, service: Service) -> ApiResponse[NamedEntityResponse]:
        """Get a record by ID."""
        entity = await service.get_by_id(entity_id)
        return ApiResponse(
            status=status.HTTP_200_OK,
            data=NamedEntityResponse.model_validate(entity),
            message=service.messages.found,
        )

    update_responses = {404: NOT_FOUND_RESPONSE, 409: CONFLICT_RESPONSE, 422: VALIDATION_RESPONSE}

    @router.put(
        "/{entity_id}",
        status_code=status.HTTP_200_OK,
        response_model=ApiResponse[NamedEntityResponse],
        responses=update_responses,
    )
    @router.patch(
        "/{entity_id}",
        status_code=status.HTTP_200_OK,
        response_model=ApiResponse[NamedEntityResponse],
        responses=update_responses,
    )
    async def update(
        entity_id: str,
        request: UpdateNamedEntityRequest,
        service: Service,
    ) -> ApiResponse[NamedEntityResponse]:
        """Update a record's name and/or description."""
        entity = await service.update(entity_id, **request.changes())
        return ApiResponse(
            status=status.HTTP_200_OK,
            data=NamedEntityResponse.model_validate(entity),
            message=service.messages.updated,
        )

    @router.delete(
        "/{entity_id}",
        status_code=status.HTTP_200_OK,
        response_model=ApiResponse[NamedEntityResponse],
        responses={404: NOT_FOUND_RESPONSE},
    )
    async def delete(entity_id: str, service: Service) -> ApiResponse[NamedEntityResponse]:
        """Delete a record and return its last known value."""
        entity = await service.delete(entity_id)
        return ApiResponse(
            status=status.HTTP_200_OK,
            data=NamedEntityResponse.model_validate(entity),
            message=service.messages.deleted,
        )

    return router
