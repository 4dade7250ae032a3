"""
FinanceActivityLog Entity

Immutable audit trail of actions on finance records.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel


class FinanceActivityLog(SQLModel, table=True):
    """
    FinanceActivityLog entity - immutable log of finance record activity.

    Business Rules:
    - Immutable (never updated or deleted)
    - entity_type/entity_id reference the protected record, not the edit request
    - Metadata is sanitized: identifier keys are stripped before insert
    """

    __tablename__ = "finance_activity_logs"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    organization_id: UUID = Field(nullable=False, index=True)
    entity_type: str = Field(max_length=50)
    entity_id: str = Field(max_length=64)

    action_type: str = Field(max_length=50)  # e.g., "request_edit"
    actor_id: UUID = Field(nullable=False)
    activity_metadata: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("idx_activity_entity", "entity_type", "entity_id"),
        Index("idx_activity_org_created_at", "organization_id", "created_at"),
    )
