"""Use case for listing applications waiting for review."""

import structlog

from solicitudes.application.lending.protocols import (
    LoanApplicationRepositoryProtocol,
    StatusRepositoryProtocol,
)
from solicitudes.application.lending.use_cases.create_loan_application_use_case import (
    DEFAULT_INITIAL_STATUS_NAME,
)
from solicitudes.domain.lending.entities import LoanApplication

logger = structlog.get_logger(__name__)


class ListPendingApplicationsUseCase:
    """Return every application still in the initial (pending review) status."""

    def __init__(
        self,
        status_repository: StatusRepositoryProtocol,
        application_repository: LoanApplicationRepositoryProtocol,
        initial_status_name: str = DEFAULT_INITIAL_STATUS_NAME,
    ) -> None:
        self.status_repository = status_repository
        self.application_repository = application_repository
        self.initial_status_name = initial_status_name.strip()

    async def execute(self) -> list[LoanApplication]:
        """
        List pending applications.

        Returns:
            Applications in the initial status, or an empty list when that
            status is not configured
        """
        status = await self.status_repository.find_by_name(self.initial_status_name)
        if status is None:
            logger.warning("initial_status_not_configured", status_name=self.initial_status_name)
            return []

        applications = await self.application_repository.find_by_status(status.id)
        logger.debug("listed_pending_applications", count=len(applications))
        return applications
