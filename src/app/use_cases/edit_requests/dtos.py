"""
Edit Request Use Case DTOs (Data Transfer Objects)

Response classes for the edit request domain. Use cases convert entities
into these before leaving the unit of work, so nothing returned to callers
is bound to a database session.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from src.domain.entities import EditRequestStatus, EditRequestTable


# ============================================================================
# Response DTOs
# ============================================================================


class EditRequestResponse(BaseModel):
    """Snapshot of one edit request"""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    organization_id: UUID
    table_name: EditRequestTable
    record_id: str
    requester_id: UUID
    reason: str
    status: EditRequestStatus
    reviewer_id: Optional[UUID] = None
    reviewer_note: Optional[str] = None
    reviewed_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


class RequestAccessResponse(BaseModel):
    """Response for request edit access use case"""

    edit_request: EditRequestResponse
    auto_approved: bool


class ActiveEditRequestResponse(BaseModel):
    """Lock status of one finance record for the current member"""

    edit_request: Optional[EditRequestResponse]
    can_edit: bool
    is_requester: bool
    is_reviewer: bool


class PendingEditRequestsResponse(BaseModel):
    """Response for list pending edit requests use case"""

    requests: List[EditRequestResponse]


class CancelEditRequestResponse(BaseModel):
    """Response for cancel/revoke edit request use case"""

    status: str  # "cancelled" (by requester) or "revoked" (by reviewer)
    edit_request: EditRequestResponse


class ExpireEditRequestsResponse(BaseModel):
    """Response for expire stale edit requests use case"""

    expired: List[EditRequestResponse]
