"""
Get Active Edit Request Use Case

Lock status of a finance record, used to render the "locked by" banner and to
decide whether the edit form is enabled.
"""

from uuid import UUID

from src.app.services.authorization import AuthorizationService
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import EditRequestStatus, EditRequestTable
from src.domain.errors import AuthorizationError, ValidationError
from src.libs.result import Result, Return

from .dtos import ActiveEditRequestResponse, EditRequestResponse


class GetActiveEditRequestUseCase:
    """
    Use case for reading the active edit request of a record.

    Business Rules:
    - Caller must be an active member of the organization
    - can_edit is true only for the requester of an approved request
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.authorization = AuthorizationService(uow)

    async def execute(
        self, user_id: UUID, organization_id: UUID, table_name: str, record_id: str
    ) -> Result[ActiveEditRequestResponse]:
        try:
            table = EditRequestTable(table_name)
        except ValueError:
            return Return.err(ValidationError(f"Unsupported record type: {table_name}"))

        record_id = (record_id or "").strip()
        if not record_id:
            return Return.err(ValidationError("Record ID is required"))

        async with self.uow:
            membership = await self.authorization.get_membership(user_id, organization_id)
            if membership is None:
                return Return.err(
                    AuthorizationError("NOT_A_MEMBER", "You are not a member of this organization")
                )

            active = await self.uow.edit_requests.get_active_for_record(table, record_id)
            response = EditRequestResponse.model_validate(active) if active else None

            return Return.ok(
                ActiveEditRequestResponse(
                    edit_request=response,
                    can_edit=can_edit(response, user_id),
                    is_requester=response is not None and response.requester_id == user_id,
                    is_reviewer=self.authorization.has_reviewer_role(membership),
                )
            )


def can_edit(active_request, user_id: UUID) -> bool:
    """True iff the active request is approved and held by user_id"""
    return (
        active_request is not None
        and active_request.status == EditRequestStatus.approved
        and active_request.requester_id == user_id
    )
