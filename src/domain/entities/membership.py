"""
OrganizationMember Entity

Links a user to an organization with a role.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import MemberRole, MemberStatus


class OrganizationMember(SQLModel, table=True):
    """
    OrganizationMember entity - links user to organization with a role.

    Business Rules:
    - (user_id, organization_id) must be unique
    - Revoked memberships grant no access
    - Reviewer roles (owner by default) approve, reject and revoke edit requests
    """

    __tablename__ = "organization_members"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(nullable=False, index=True)
    organization_id: UUID = Field(nullable=False, index=True)

    role: MemberRole = Field(nullable=False)
    status: MemberStatus = Field(default=MemberStatus.active)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("idx_member_user_org", "user_id", "organization_id", unique=True),
        Index("idx_member_org_role", "organization_id", "role"),
    )
