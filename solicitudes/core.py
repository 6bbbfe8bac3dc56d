from uuid import uuid4

from dependency_injector import containers, providers
from sqlalchemy.ext.asyncio import AsyncSession

from solicitudes.application.lending.use_cases import (
    CreateLoanApplicationUseCase,
    ListPendingApplicationsUseCase,
    StatusAdministrationUseCase,
)
from solicitudes.config import get_settings
from solicitudes.infrastructure.lending.repositories import (
    LoanApplicationRepository,
    LoanTypeRepository,
    StatusRepository,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare session as a dependency that will be provided at runtime
    session = providers.Dependency(instance_of=AsyncSession)

    settings = providers.Singleton(get_settings)
    id_generator = providers.Object(uuid4)

    # Repositories
    loan_type_repository = providers.Factory(LoanTypeRepository, db=session)
    status_repository = providers.Factory(StatusRepository, db=session)
    loan_application_repository = providers.Factory(LoanApplicationRepository, db=session)

    # Lending module, application use cases
    create_loan_application_use_case = providers.Factory(
        CreateLoanApplicationUseCase,
        loan_type_repository=loan_type_repository,
        status_repository=status_repository,
        application_repository=loan_application_repository,
        id_generator=id_generator,
        initial_status_name=settings.provided.INITIAL_STATUS_NAME,
    )

    list_pending_applications_use_case = providers.Factory(
        ListPendingApplicationsUseCase,
        status_repository=status_repository,
        application_repository=loan_application_repository,
        initial_status_name=settings.provided.INITIAL_STATUS_NAME,
    )

    status_administration_use_case = providers.Factory(
        StatusAdministrationUseCase,
        status_repository=status_repository,
    )


# Initialize container
container = Container()
