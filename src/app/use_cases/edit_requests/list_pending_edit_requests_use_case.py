"""
List Pending Edit Requests Use Case

Reviewer inbox: pending requests of the organization, newest first.
"""

from uuid import UUID

from src.app.services.authorization import AuthorizationService
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import AuthorizationError
from src.libs.result import Result, Return

from .dtos import EditRequestResponse, PendingEditRequestsResponse


class ListPendingEditRequestsUseCase:
    """Only reviewers see the pending queue"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.authorization = AuthorizationService(uow)

    async def execute(
        self, user_id: UUID, organization_id: UUID
    ) -> Result[PendingEditRequestsResponse]:
        async with self.uow:
            if not await self.authorization.is_privileged(user_id, organization_id):
                return Return.err(
                    AuthorizationError(
                        "INSUFFICIENT_ROLE", "Only reviewers can view pending edit requests"
                    )
                )

            pending = await self.uow.edit_requests.list_pending_by_organization(organization_id)
            return Return.ok(
                PendingEditRequestsResponse(
                    requests=[EditRequestResponse.model_validate(r) for r in pending]
                )
            )
