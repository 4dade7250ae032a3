"""
Notification Entity

In-app message addressed to one organization member.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel


class Notification(SQLModel, table=True):
    """
    Notification entity - message delivered to a single recipient.

    Business Rules:
    - Fan-out to several recipients creates one row per recipient
    - resource_type/resource_id point at the edit request that triggered it
    - Delivery is best-effort; a failed insert never fails the transition
    """

    __tablename__ = "notifications"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    organization_id: UUID = Field(nullable=False, index=True)
    recipient_id: UUID = Field(nullable=False, index=True)

    type: str = Field(max_length=100)
    title: str = Field(max_length=255)
    message: Optional[str] = Field(default=None)
    resource_type: Optional[str] = Field(default=None, max_length=100)
    resource_id: Optional[UUID] = Field(default=None)
    is_read: bool = Field(default=False)
    notification_metadata: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("idx_notification_recipient_read", "recipient_id", "is_read"),
    )
