"""
Resolve Edit Request Use Case

Reviewer approves or rejects a pending edit request.
"""

import logging
from typing import Optional
from uuid import UUID

from src.app.services.authorization import AuthorizationService
from src.app.services.edit_request_side_effects import EditRequestSideEffects
from src.app.services.unit_of_work import UnitOfWork
from src.domain.edit_request_state import Decision, EditAction, transition
from src.domain.entities import ActivityAction, EditRequestStatus, MAX_NOTE_LENGTH
from src.domain.errors import (
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)
from src.libs.result import Result, Return

from .dtos import EditRequestResponse

logger = logging.getLogger(__name__)


class ResolveEditRequestUseCase:
    """
    Use case for approving or rejecting a pending edit request.

    Business Rules:
    - Only reviewers of the request's organization may resolve
    - Only pending requests can be resolved; the write is compare-and-set so
      two reviewers racing on one request produce exactly one winner
    - The requester is notified of the decision; the decision is audited
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.authorization = AuthorizationService(uow)
        self.side_effects = EditRequestSideEffects(uow, self.authorization)

    async def execute(
        self,
        reviewer_id: UUID,
        organization_id: UUID,
        request_id: UUID,
        decision: str,
        note: Optional[str] = None,
    ) -> Result[EditRequestResponse]:
        """
        Execute resolve edit request use case.

        Args:
            reviewer_id: Member approving/rejecting
            organization_id: Reviewer's current organization
            request_id: Edit request to resolve
            decision: "approve" or "reject"
            note: Optional note passed on to the requester

        Returns:
            Result with the resolved EditRequestResponse, or Error
        """
        try:
            decision_value = Decision(decision)
        except ValueError:
            return Return.err(
                ValidationError(f"Invalid decision: {decision}. Must be one of: approve, reject")
            )

        note = (note or "").strip() or None
        if note and len(note) > MAX_NOTE_LENGTH:
            return Return.err(
                ValidationError(f"Note must be at most {MAX_NOTE_LENGTH} characters")
            )

        async with self.uow:
            edit_request = await self.uow.edit_requests.get_by_id(request_id)
            if edit_request is None or edit_request.organization_id != organization_id:
                return Return.err(NotFoundError())

            is_privileged = await self.authorization.is_privileged(
                reviewer_id, edit_request.organization_id
            )

            next_status = transition(
                edit_request.status,
                EditAction.resolve,
                actor_is_privileged=is_privileged,
                decision=decision_value,
            )
            if next_status.is_err():
                return next_status

            updated = await self.uow.edit_requests.resolve(
                request_id, next_status.value, reviewer_id, note
            )
            if updated is None:
                return Return.err(
                    InvalidTransitionError("Edit request has already been resolved")
                )

            await self.uow.commit()
            response = EditRequestResponse.model_validate(updated)

            logger.info(
                "Edit request %s %s by %s", response.id, response.status.value, reviewer_id
            )

            await self.side_effects.notify_resolution(response, note)
            await self.side_effects.record_activity(
                response,
                ActivityAction.approve_edit
                if response.status == EditRequestStatus.approved
                else ActivityAction.reject_edit,
                reviewer_id,
                {"request_id": str(response.id), "note": note},
            )

            return Return.ok(response)
