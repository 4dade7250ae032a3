"""
Edit Request Side Effects

Notification fan-out and finance activity logging that follow a committed
edit request transition. Every effect is best-effort: it commits on its own,
and a failure is logged and rolled back without touching the caller's result.
"""

import logging
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Dict, List, Optional, Tuple
from uuid import UUID

from config import ApplicationConfig
from src.app.services.authorization import AuthorizationService
from src.app.services.record_details import describe_record, record_metadata
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import (
    ActivityAction,
    EditRequestStatus,
    FinanceActivityLog,
    Notification,
    NotificationType,
)

if TYPE_CHECKING:
    from src.app.use_cases.edit_requests.dtos import EditRequestResponse

logger = logging.getLogger(__name__)

RESOURCE_TYPE = "edit_request"

_STRIPPED_KEYS = {"id", "created_by", "updated_by", "actor_id", "organization_id", "branch_id", "approved_by"}


def sanitize_metadata(value: Any) -> Any:
    """Recursively drop identifier keys (``id``, ``*_id``, ``created_by``...) from log metadata"""
    if isinstance(value, list):
        return [sanitize_metadata(item) for item in value]
    if isinstance(value, dict):
        return {
            key: sanitize_metadata(item)
            for key, item in value.items()
            if not (key.lower() in _STRIPPED_KEYS or key.lower().endswith("_id"))
        }
    return value


class EditRequestSideEffects:
    """Post-commit notifications and activity log entries"""

    def __init__(
        self,
        uow: UnitOfWork,
        authorization: AuthorizationService,
        currency: Optional[str] = None,
    ):
        self.uow = uow
        self.authorization = authorization
        self.currency = currency or ApplicationConfig.CURRENCY

    async def notify_reviewers(self, edit_request: "EditRequestResponse") -> bool:
        """Fan a new pending request out to every reviewer of the organization"""

        async def send():
            reviewer_ids = await self.authorization.list_reviewers(edit_request.organization_id)
            if not reviewer_ids:
                logger.warning(
                    "No reviewers to notify for edit request %s in organization %s",
                    edit_request.id,
                    edit_request.organization_id,
                )
                return
            details, metadata = await self._describe(edit_request)
            message = (
                f"Request to edit {edit_request.table_name.value}: {details}. "
                f"Reason: {edit_request.reason}"
            )
            await self._notify(
                edit_request,
                reviewer_ids,
                NotificationType.edit_request_created,
                "New Edit Request",
                message,
                metadata,
            )

        return await self._best_effort("notify_reviewers", edit_request, send)

    async def notify_resolution(
        self, edit_request: "EditRequestResponse", note: Optional[str]
    ) -> bool:
        """Tell the requester their request was approved or rejected"""

        async def send():
            approved = edit_request.status == EditRequestStatus.approved
            status_word = edit_request.status.value
            _, metadata = await self._describe(edit_request)
            message = f"Your request to edit {edit_request.table_name.value} has been {status_word}."
            if note:
                message = f"{message} Note: {note}"
            await self._notify(
                edit_request,
                [edit_request.requester_id],
                NotificationType.edit_request_approved if approved else NotificationType.edit_request_rejected,
                f"Edit Request {'Approved' if approved else 'Rejected'}",
                message,
                metadata,
            )

        return await self._best_effort("notify_resolution", edit_request, send)

    async def notify_revoked(self, edit_request: "EditRequestResponse") -> bool:
        """Tell the requester a reviewer removed their request"""

        async def send():
            details, metadata = await self._describe(edit_request)
            await self._notify(
                edit_request,
                [edit_request.requester_id],
                NotificationType.edit_request_revoked,
                "Edit Access Revoked",
                f"Your edit access to {edit_request.table_name.value} record ({details}) has been revoked.",
                metadata,
            )

        return await self._best_effort("notify_revoked", edit_request, send)

    async def notify_expired(self, edit_request: "EditRequestResponse") -> bool:
        """Tell the requester their request lapsed without being finished"""

        async def send():
            details, metadata = await self._describe(edit_request)
            await self._notify(
                edit_request,
                [edit_request.requester_id],
                NotificationType.edit_request_expired,
                "Edit Request Expired",
                f"Your edit request for {edit_request.table_name.value} record ({details}) has expired.",
                metadata,
            )

        return await self._best_effort("notify_expired", edit_request, send)

    async def record_activity(
        self,
        edit_request: "EditRequestResponse",
        action: ActivityAction,
        actor_id: UUID,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> bool:
        """Append one finance activity log entry for the protected record"""

        async def write():
            entry = FinanceActivityLog(
                organization_id=edit_request.organization_id,
                entity_type=edit_request.table_name.value,
                entity_id=edit_request.record_id,
                action_type=action.value,
                actor_id=actor_id,
                activity_metadata=sanitize_metadata(metadata) if metadata else None,
            )
            await self.uow.activity_logs.create(entry)

        return await self._best_effort(f"record_activity:{action.value}", edit_request, write)

    async def _notify(
        self,
        edit_request: "EditRequestResponse",
        recipient_ids: List[UUID],
        notification_type: NotificationType,
        title: str,
        message: str,
        metadata: Dict[str, str],
    ) -> None:
        notifications = [
            Notification(
                organization_id=edit_request.organization_id,
                recipient_id=recipient_id,
                type=notification_type.value,
                title=title,
                message=message,
                resource_type=RESOURCE_TYPE,
                resource_id=edit_request.id,
                notification_metadata=metadata,
            )
            for recipient_id in recipient_ids
        ]
        await self.uow.notifications.create_many(notifications)

    async def _describe(self, edit_request: "EditRequestResponse") -> Tuple[str, Dict[str, str]]:
        """Record description and metadata; empty when the record cannot be read"""
        try:
            record = await self.uow.records.get_record(
                edit_request.table_name, edit_request.record_id
            )
        except Exception:
            logger.warning(
                "Could not load %s record %s for edit request %s",
                edit_request.table_name.value,
                edit_request.record_id,
                edit_request.id,
                exc_info=True,
            )
            await self.uow.rollback()
            record = None
        return (
            describe_record(edit_request.table_name, record, self.currency),
            record_metadata(edit_request.table_name, record, self.currency),
        )

    async def _best_effort(
        self,
        label: str,
        edit_request: "EditRequestResponse",
        effect: Callable[[], Awaitable[None]],
    ) -> bool:
        try:
            await effect()
            await self.uow.commit()
            return True
        except Exception:
            logger.exception(
                "Edit request side effect %s failed for request %s", label, edit_request.id
            )
            try:
                await self.uow.rollback()
            except Exception:
                logger.exception("Rollback after failed side effect %s also failed", label)
            return False
