"""API routes for workflow status administration."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from solicitudes.application.lending.use_cases import StatusAdministrationUseCase
from solicitudes.core import container
from solicitudes.domain.common.value_objects import StatusId
from solicitudes.domain.lending.entities import Status
from solicitudes.infrastructure.common.di import inject_use_case
from solicitudes.infrastructure.lending.schemas import (
    StatusDescriptionUpdateRequest,
    StatusResponse,
)

router = APIRouter(prefix="/estados", tags=["estados"])

get_status_administration_use_case = inject_use_case(container.status_administration_use_case)


def to_response(status_entity: Status) -> StatusResponse:
    return StatusResponse(
        id=status_entity.id.value,
        name=status_entity.name,
        description=status_entity.description,
        version=status_entity.version,
    )


@router.get("", response_model=list[StatusResponse], status_code=status.HTTP_200_OK)
async def search_statuses(
    nombre: str | None = Query(None, description="Status name, case-insensitive"),
    descripcion: str | None = Query(None, description="Text contained in the description"),
    use_case: StatusAdministrationUseCase = Depends(get_status_administration_use_case),
) -> list[StatusResponse]:
    """Search statuses by name and/or description; all statuses without filters."""
    statuses = await use_case.search(name=nombre, description=descripcion)
    return [to_response(s) for s in statuses]


@router.patch("/{status_id}", response_model=StatusResponse, status_code=status.HTTP_200_OK)
async def update_status_description(
    status_id: UUID,
    request: StatusDescriptionUpdateRequest,
    use_case: StatusAdministrationUseCase = Depends(get_status_administration_use_case),
) -> StatusResponse:
    """
    Update a status description.

    Args:
        status_id: Status to update
        request: New description and the version the caller last read

    Returns:
        The updated status with its new version

    Raises:
        DomainError: 404 when the status is missing, 409 on a version conflict
    """
    updated = await use_case.update_description(
        StatusId(status_id), request.description, request.version
    )
    return to_response(updated)
