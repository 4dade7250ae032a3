"""
Request Edit Access Use Case

Creates the edit lock on a finance record: pending for regular members,
approved straight away for reviewers.
"""

import logging
from datetime import datetime
from uuid import UUID

from src.app.services.authorization import AuthorizationService
from src.app.services.edit_request_side_effects import EditRequestSideEffects
from src.app.services.unit_of_work import UnitOfWork
from src.domain.edit_request_state import initial_status
from src.domain.entities import (
    ActivityAction,
    EditRequest,
    EditRequestStatus,
    EditRequestTable,
    MAX_REASON_LENGTH,
    MAX_RECORD_ID_LENGTH,
)
from src.domain.errors import (
    ActiveEditRequestExistsError,
    AuthorizationError,
    ConflictError,
    ValidationError,
)
from src.libs.result import Result, Return

from .dtos import EditRequestResponse, RequestAccessResponse

logger = logging.getLogger(__name__)

class RequestAccessUseCase:
    """
    Use case for requesting edit access to a finance record.

    Business Rules:
    - Reason is required (non-empty after trimming)
    - Requester must be an active member of the organization
    - Reviewers are auto-approved (reviewer = requester, no pending interval)
    - At most one pending/approved request per record; a second request gets
      EDIT_REQUEST_CONFLICT with the current holder and is never retried
    - Pending requests notify every reviewer; every request is audited
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.authorization = AuthorizationService(uow)
        self.side_effects = EditRequestSideEffects(uow, self.authorization)

    async def execute(
        self,
        user_id: UUID,
        organization_id: UUID,
        table_name: str,
        record_id: str,
        reason: str,
    ) -> Result[RequestAccessResponse]:
        """
        Execute request access use case.

        Args:
            user_id: Member asking for edit access
            organization_id: Organization owning the record
            table_name: income, expense, pledge_payment or pledge_record
            record_id: ID of the finance record
            reason: Justification shown to reviewers

        Returns:
            Result with RequestAccessResponse DTO, or ValidationError,
            AuthorizationError, ConflictError
        """
        try:
            table = EditRequestTable(table_name)
        except ValueError:
            return Return.err(ValidationError(f"Unsupported record type: {table_name}"))

        record_id = (record_id or "").strip()
        if not record_id:
            return Return.err(ValidationError("Record ID is required"))
        if len(record_id) > MAX_RECORD_ID_LENGTH:
            return Return.err(
                ValidationError(f"Record ID must be at most {MAX_RECORD_ID_LENGTH} characters")
            )

        reason = (reason or "").strip()
        if not reason:
            return Return.err(ValidationError("A reason is required to request edit access"))
        if len(reason) > MAX_REASON_LENGTH:
            return Return.err(
                ValidationError(f"Reason must be at most {MAX_REASON_LENGTH} characters")
            )

        async with self.uow:
            membership = await self.authorization.get_membership(user_id, organization_id)
            if membership is None:
                return Return.err(
                    AuthorizationError("NOT_A_MEMBER", "You are not a member of this organization")
                )

            auto_approved = self.authorization.has_reviewer_role(membership)
            status = initial_status(auto_approved)
            now = datetime.utcnow()

            edit_request = EditRequest(
                organization_id=organization_id,
                table_name=table,
                record_id=record_id,
                requester_id=user_id,
                reason=reason,
                status=status,
                reviewer_id=user_id if auto_approved else None,
                reviewed_at=now if auto_approved else None,
            )

            try:
                edit_request = await self.uow.edit_requests.create(edit_request)
            except ActiveEditRequestExistsError:
                active = await self.uow.edit_requests.get_active_for_record(table, record_id)
                return Return.err(
                    ConflictError(
                        active_request=(
                            EditRequestResponse.model_validate(active) if active else None
                        )
                    )
                )

            await self.uow.commit()
            response = EditRequestResponse.model_validate(edit_request)

            logger.info(
                "Edit request %s created for %s/%s by %s (%s)",
                response.id,
                table.value,
                record_id,
                user_id,
                status.value,
            )

            if status == EditRequestStatus.pending:
                await self.side_effects.notify_reviewers(response)

            await self.side_effects.record_activity(
                response,
                ActivityAction.request_edit,
                user_id,
                {"request_id": str(response.id), "reason": reason, "auto_approved": auto_approved},
            )
            if auto_approved:
                await self.side_effects.record_activity(
                    response,
                    ActivityAction.approve_edit,
                    user_id,
                    {"request_id": str(response.id), "auto_approved": True},
                )

            return Return.ok(
                RequestAccessResponse(edit_request=response, auto_approved=auto_approved)
            )
