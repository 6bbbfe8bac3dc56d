"""Mapper for Status ORM ↔ Domain conversion."""

from solicitudes.domain.common.value_objects import StatusId
from solicitudes.domain.lending.entities import Status
from solicitudes.infrastructure.lending.models import Status as StatusORM


class StatusMapper:
    """Mapper for Status ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: StatusORM) -> Status:
        return Status.reconstruct(
            id=StatusId(orm_model.id),
            name=orm_model.name,
            description=orm_model.description or "",
            version=orm_model.version,
        )

    def to_orm(self, domain_entity: Status, orm_model: StatusORM | None = None) -> StatusORM:
        if orm_model:
            orm_model.name = domain_entity.name
            orm_model.description = domain_entity.description
            return orm_model

        return StatusORM(
            id=domain_entity.id.value,
            name=domain_entity.name,
            description=domain_entity.description,
        )
