"""
EditRequest Entity

Request for, or grant of, exclusive edit permission on one finance record.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import text
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import EditRequestStatus, EditRequestTable

ACTIVE_STATUSES = (EditRequestStatus.pending, EditRequestStatus.approved)
TERMINAL_STATUSES = (
    EditRequestStatus.rejected,
    EditRequestStatus.completed,
    EditRequestStatus.expired,
)

MAX_RECORD_ID_LENGTH = 64
MAX_REASON_LENGTH = 1000
MAX_NOTE_LENGTH = 1000

_ACTIVE_TARGET_FILTER = text("status IN ('pending', 'approved')")


class EditRequest(SQLModel, table=True):
    """
    EditRequest entity - the edit lock on a (table_name, record_id) target.

    Business Rules:
    - At most one pending/approved request per target (partial unique index)
    - Owners are auto-approved at creation (reviewer = requester)
    - Rejected, completed and expired requests are never mutated
    - Cancelling or revoking deletes the row and frees the target
    """

    __tablename__ = "edit_requests"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    organization_id: UUID = Field(nullable=False, index=True)
    table_name: EditRequestTable = Field(nullable=False)
    record_id: str = Field(max_length=MAX_RECORD_ID_LENGTH, nullable=False)

    requester_id: UUID = Field(nullable=False, index=True)
    reason: str = Field(max_length=MAX_REASON_LENGTH, nullable=False)

    status: EditRequestStatus = Field(default=EditRequestStatus.pending)

    reviewer_id: Optional[UUID] = Field(default=None)
    reviewer_note: Optional[str] = Field(default=None, max_length=MAX_NOTE_LENGTH)
    reviewed_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index(
            "uq_edit_requests_active_target",
            "table_name",
            "record_id",
            unique=True,
            sqlite_where=_ACTIVE_TARGET_FILTER,
            postgresql_where=_ACTIVE_TARGET_FILTER,
        ),
        Index("idx_edit_request_target", "table_name", "record_id"),
        Index("idx_edit_request_org_status", "organization_id", "status"),
    )

    @property
    def is_active(self) -> bool:
        return self.status in ACTIVE_STATUSES
