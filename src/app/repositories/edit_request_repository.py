from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.domain.entities import EditRequest, EditRequestStatus, EditRequestTable


class IEditRequestRepository(ABC):
    """EditRequest repository interface - application layer"""

    @abstractmethod
    async def create(self, edit_request: EditRequest) -> EditRequest:
        """
        Insert a new edit request in one atomic statement.

        Raises:
            ActiveEditRequestExistsError: another pending/approved request
                already holds the same target
        """
        pass

    @abstractmethod
    async def get_by_id(self, request_id: UUID) -> Optional[EditRequest]:
        """Get edit request by ID"""
        pass

    @abstractmethod
    async def get_active_for_record(
        self, table_name: EditRequestTable, record_id: str
    ) -> Optional[EditRequest]:
        """Get the pending or approved request for a target, if any"""
        pass

    @abstractmethod
    async def list_pending_by_organization(
        self, organization_id: UUID
    ) -> List[EditRequest]:
        """Get pending requests for an organization, newest first"""
        pass

    @abstractmethod
    async def resolve(
        self,
        request_id: UUID,
        status: EditRequestStatus,
        reviewer_id: UUID,
        note: Optional[str],
    ) -> Optional[EditRequest]:
        """
        Compare-and-set pending -> approved/rejected.

        Returns:
            Updated request, or None if the request is no longer pending
        """
        pass

    @abstractmethod
    async def complete(self, request_id: UUID) -> Optional[EditRequest]:
        """Compare-and-set approved -> completed; None if no longer approved"""
        pass

    @abstractmethod
    async def delete_active(self, request_id: UUID) -> Optional[EditRequest]:
        """
        Delete a request that is still pending or approved.

        Returns:
            The deleted row, or None if it was missing or already terminal
        """
        pass

    @abstractmethod
    async def list_stale(self, cutoff: datetime) -> List[EditRequest]:
        """Get pending or approved requests untouched since cutoff"""
        pass

    @abstractmethod
    async def expire(self, request_id: UUID) -> Optional[EditRequest]:
        """Compare-and-set pending|approved -> expired; None if no longer active"""
        pass
