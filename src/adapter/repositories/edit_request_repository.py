import logging
from datetime import datetime
from typing import Iterable, List, Optional
from uuid import UUID

from sqlalchemy import delete, update
from sqlalchemy.exc import IntegrityError
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.edit_request_repository import IEditRequestRepository
from src.domain.entities import (
    ACTIVE_STATUSES,
    EditRequest,
    EditRequestStatus,
    EditRequestTable,
)
from src.domain.errors import ActiveEditRequestExistsError

logger = logging.getLogger(__name__)


class EditRequestRepository(IEditRequestRepository):
    """EditRequest repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, edit_request: EditRequest) -> EditRequest:
        """Insert; the partial unique index turns a lost race into a conflict"""
        self.session.add(edit_request)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            await self.session.rollback()
            logger.info(
                "Active edit request already exists for %s/%s",
                edit_request.table_name.value,
                edit_request.record_id,
            )
            raise ActiveEditRequestExistsError(
                f"{edit_request.table_name.value}/{edit_request.record_id}"
            ) from exc
        await self.session.refresh(edit_request)
        return edit_request

    async def get_by_id(self, request_id: UUID) -> Optional[EditRequest]:
        """Get edit request by ID"""
        stmt = (
            select(EditRequest)
            .where(EditRequest.id == request_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_active_for_record(
        self, table_name: EditRequestTable, record_id: str
    ) -> Optional[EditRequest]:
        """Get the pending or approved request for a target, if any"""
        stmt = (
            select(EditRequest)
            .where(
                EditRequest.table_name == table_name,
                EditRequest.record_id == record_id,
                col(EditRequest.status).in_(ACTIVE_STATUSES),
            )
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_pending_by_organization(
        self, organization_id: UUID
    ) -> List[EditRequest]:
        """Get pending requests for an organization, newest first"""
        stmt = (
            select(EditRequest)
            .where(
                EditRequest.organization_id == organization_id,
                EditRequest.status == EditRequestStatus.pending,
            )
            .order_by(col(EditRequest.created_at).desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def resolve(
        self,
        request_id: UUID,
        status: EditRequestStatus,
        reviewer_id: UUID,
        note: Optional[str],
    ) -> Optional[EditRequest]:
        """Compare-and-set pending -> approved/rejected"""
        now = datetime.utcnow()
        return await self._compare_and_set(
            request_id,
            (EditRequestStatus.pending,),
            status=status,
            reviewer_id=reviewer_id,
            reviewer_note=note,
            reviewed_at=now,
            updated_at=now,
        )

    async def complete(self, request_id: UUID) -> Optional[EditRequest]:
        """Compare-and-set approved -> completed"""
        return await self._compare_and_set(
            request_id,
            (EditRequestStatus.approved,),
            status=EditRequestStatus.completed,
            updated_at=datetime.utcnow(),
        )

    async def delete_active(self, request_id: UUID) -> Optional[EditRequest]:
        """Delete a pending/approved request and hand back the removed row"""
        edit_request = await self.get_by_id(request_id)
        if edit_request is None or not edit_request.is_active:
            return None

        stmt = (
            delete(EditRequest)
            .where(
                EditRequest.id == request_id,
                col(EditRequest.status).in_(ACTIVE_STATUSES),
            )
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        if result.rowcount == 0:
            return None

        self.session.expunge(edit_request)
        return edit_request

    async def list_stale(self, cutoff: datetime) -> List[EditRequest]:
        """Get pending or approved requests untouched since cutoff, oldest first"""
        stmt = (
            select(EditRequest)
            .where(
                col(EditRequest.status).in_(ACTIVE_STATUSES),
                col(EditRequest.updated_at) < cutoff,
            )
            .order_by(col(EditRequest.updated_at))
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def expire(self, request_id: UUID) -> Optional[EditRequest]:
        """Compare-and-set pending|approved -> expired"""
        return await self._compare_and_set(
            request_id,
            ACTIVE_STATUSES,
            status=EditRequestStatus.expired,
            updated_at=datetime.utcnow(),
        )

    async def _compare_and_set(
        self, request_id: UUID, expected: Iterable[EditRequestStatus], **values
    ) -> Optional[EditRequest]:
        """Single UPDATE guarded by the expected source status; None when stale"""
        stmt = (
            update(EditRequest)
            .where(
                EditRequest.id == request_id,
                col(EditRequest.status).in_(tuple(expected)),
            )
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        if result.rowcount == 0:
            return None
        return await self.get_by_id(request_id)
