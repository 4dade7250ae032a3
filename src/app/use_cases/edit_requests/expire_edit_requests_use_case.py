"""
Expire Edit Requests Use Case

Optional lease expiry. Pending or approved requests untouched for longer than
EDIT_REQUEST_TTL_HOURS are moved to the terminal "expired" status, which frees
the record for a new request. Does nothing when no TTL is configured.
"""

import logging
from datetime import datetime, timedelta
from typing import Optional
from uuid import UUID

from config import ApplicationConfig
from src.app.services.authorization import AuthorizationService
from src.app.services.edit_request_side_effects import EditRequestSideEffects
from src.app.services.unit_of_work import UnitOfWork
from src.domain.edit_request_state import EditAction, transition
from src.domain.entities import ActivityAction
from src.libs.result import Result, Return

from .dtos import EditRequestResponse, ExpireEditRequestsResponse

logger = logging.getLogger(__name__)

# Actor recorded on activity entries written by the expiry sweep
SYSTEM_ACTOR_ID = UUID(int=0)


class ExpireEditRequestsUseCase:
    """
    Use case for expiring stale edit requests.

    Business Rules:
    - Disabled unless a TTL is configured
    - Each stale request must accept the expire transition and is written
      with a compare-and-set, so a request resolved, completed or cancelled
      concurrently is left alone
    - Requesters are notified; each expiry is audited as expire_edit
    """

    def __init__(self, uow: UnitOfWork, ttl_hours: Optional[float] = None):
        self.uow = uow
        self.ttl_hours = ApplicationConfig.EDIT_REQUEST_TTL_HOURS if ttl_hours is None else ttl_hours
        self.side_effects = EditRequestSideEffects(uow, AuthorizationService(uow))

    async def execute(self, now: Optional[datetime] = None) -> Result[ExpireEditRequestsResponse]:
        if not self.ttl_hours:
            return Return.ok(ExpireEditRequestsResponse(expired=[]))

        cutoff = (now or datetime.utcnow()) - timedelta(hours=self.ttl_hours)

        async with self.uow:
            stale = await self.uow.edit_requests.list_stale(cutoff)

            expired = []
            for candidate in stale:
                if transition(candidate.status, EditAction.expire).is_err():
                    continue
                updated = await self.uow.edit_requests.expire(candidate.id)
                if updated is not None:
                    expired.append(updated)

            await self.uow.commit()
            responses = [EditRequestResponse.model_validate(r) for r in expired]

            if responses:
                logger.info("Expired %d edit requests older than %s", len(responses), cutoff)

            for response in responses:
                await self.side_effects.notify_expired(response)
                await self.side_effects.record_activity(
                    response,
                    ActivityAction.expire_edit,
                    SYSTEM_ACTOR_ID,
                    {"request_id": str(response.id), "ttl_hours": self.ttl_hours},
                )

            return Return.ok(ExpireEditRequestsResponse(expired=responses))
