"""
Get Edit Request Use Case

Detail lookup of one edit request, scoped to the caller's organization.
"""

from uuid import UUID

from src.app.services.authorization import AuthorizationService
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import AuthorizationError, NotFoundError
from src.libs.result import Result, Return

from .dtos import EditRequestResponse


class GetEditRequestUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.authorization = AuthorizationService(uow)

    async def execute(
        self, user_id: UUID, organization_id: UUID, request_id: UUID
    ) -> Result[EditRequestResponse]:
        async with self.uow:
            if await self.authorization.get_membership(user_id, organization_id) is None:
                return Return.err(
                    AuthorizationError("NOT_A_MEMBER", "You are not a member of this organization")
                )

            edit_request = await self.uow.edit_requests.get_by_id(request_id)
            if edit_request is None or edit_request.organization_id != organization_id:
                return Return.err(NotFoundError())

            return Return.ok(EditRequestResponse.model_validate(edit_request))
