"""
Cancel Edit Request Use Case

Requester withdraws their own request, or a reviewer revokes someone else's.
"""

import logging
from uuid import UUID

from src.app.services.authorization import AuthorizationService
from src.app.services.edit_request_side_effects import EditRequestSideEffects
from src.app.services.unit_of_work import UnitOfWork
from src.domain.edit_request_state import EditAction, transition
from src.domain.entities import ActivityAction
from src.domain.errors import InvalidTransitionError, NotFoundError
from src.libs.result import Result, Return

from .dtos import CancelEditRequestResponse, EditRequestResponse

logger = logging.getLogger(__name__)


class CancelEditRequestUseCase:
    """
    Use case for cancelling (self) or revoking (reviewer) an edit request.

    Business Rules:
    - Pending and approved requests can be cancelled; the row is deleted,
      freeing the record immediately
    - The requester may always cancel their own request
    - Anyone else must be a reviewer; this is a revoke and the requester is
      notified exactly once
    - Terminal requests (rejected, completed, expired) cannot be cancelled
    - Every cancellation is audited
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.authorization = AuthorizationService(uow)
        self.side_effects = EditRequestSideEffects(uow, self.authorization)

    async def execute(
        self, actor_id: UUID, organization_id: UUID, request_id: UUID
    ) -> Result[CancelEditRequestResponse]:
        """
        Execute cancel edit request use case.

        Args:
            actor_id: Member cancelling or revoking
            organization_id: Actor's current organization
            request_id: Edit request to remove

        Returns:
            Result with CancelEditRequestResponse DTO, or Error
        """
        async with self.uow:
            edit_request = await self.uow.edit_requests.get_by_id(request_id)
            if edit_request is None or edit_request.organization_id != organization_id:
                return Return.err(NotFoundError())

            is_requester = edit_request.requester_id == actor_id
            is_privileged = not is_requester and await self.authorization.is_privileged(
                actor_id, edit_request.organization_id
            )

            allowed = transition(
                edit_request.status,
                EditAction.cancel,
                actor_is_privileged=is_privileged,
                actor_is_requester=is_requester,
            )
            if allowed.is_err():
                return allowed

            deleted = await self.uow.edit_requests.delete_active(request_id)
            if deleted is None:
                return Return.err(
                    InvalidTransitionError("Edit request is no longer active")
                )

            await self.uow.commit()
            response = EditRequestResponse.model_validate(deleted)
            revoked = response.requester_id != actor_id

            logger.info(
                "Edit request %s %s by %s",
                response.id,
                "revoked" if revoked else "cancelled",
                actor_id,
            )

            if revoked:
                await self.side_effects.notify_revoked(response)
            await self.side_effects.record_activity(
                response,
                ActivityAction.cancel_edit,
                actor_id,
                {"request_id": str(response.id), "revoked": revoked},
            )

            return Return.ok(
                CancelEditRequestResponse(
                    status="revoked" if revoked else "cancelled",
                    edit_request=response,
                )
            )
