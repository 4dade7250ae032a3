"""
Complete Edit Request Use Case

Holder releases the edit lock once the record has been edited.
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

from .dtos import EditRequestResponse

logger = logging.getLogger(__name__)


class CompleteEditRequestUseCase:
    """
    Use case for completing an approved edit request.

    Business Rules:
    - Only the requester (current holder) can complete
    - Only approved requests can be completed
    - Completion is audited; nobody is notified
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.side_effects = EditRequestSideEffects(uow, AuthorizationService(uow))

    async def execute(
        self, actor_id: UUID, organization_id: UUID, request_id: UUID
    ) -> Result[EditRequestResponse]:
        async with self.uow:
            edit_request = await self.uow.edit_requests.get_by_id(request_id)
            if edit_request is None or edit_request.organization_id != organization_id:
                return Return.err(NotFoundError())

            allowed = transition(
                edit_request.status,
                EditAction.complete,
                actor_is_requester=edit_request.requester_id == actor_id,
            )
            if allowed.is_err():
                return allowed

            completed = await self.uow.edit_requests.complete(request_id)
            if completed is None:
                return Return.err(
                    InvalidTransitionError("Edit request is no longer approved")
                )

            await self.uow.commit()
            response = EditRequestResponse.model_validate(completed)

            logger.info("Edit request %s completed by %s", response.id, actor_id)

            await self.side_effects.record_activity(
                response,
                ActivityAction.complete_edit,
                actor_id,
                {"request_id": str(response.id)},
            )

            return Return.ok(response)
