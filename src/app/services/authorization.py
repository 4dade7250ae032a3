"""
Authorization Service

Answers "may this member review edit requests in this organization?" by
querying memberships on every call. Reviewer sets are never cached so a
fan-out always reflects current membership.
"""

from typing import FrozenSet, Iterable, List, Optional
from uuid import UUID

from config import ApplicationConfig
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import MemberRole, MemberStatus, OrganizationMember


class AuthorizationService:
    """Role checks for the edit request workflow"""

    def __init__(self, uow: UnitOfWork, reviewer_roles: Optional[Iterable[str]] = None):
        self.uow = uow
        roles = ApplicationConfig.EDIT_REVIEWER_ROLES if reviewer_roles is None else reviewer_roles
        self.reviewer_roles: FrozenSet[MemberRole] = frozenset(MemberRole(r) for r in roles)

    async def get_membership(
        self, user_id: UUID, organization_id: UUID
    ) -> Optional[OrganizationMember]:
        """Active membership of the user, or None"""
        membership = await self.uow.memberships.get_by_user_and_organization(
            user_id, organization_id
        )
        if membership is None or membership.status != MemberStatus.active:
            return None
        return membership

    def has_reviewer_role(self, membership: Optional[OrganizationMember]) -> bool:
        return membership is not None and membership.role in self.reviewer_roles

    async def is_privileged(self, user_id: UUID, organization_id: UUID) -> bool:
        membership = await self.get_membership(user_id, organization_id)
        return self.has_reviewer_role(membership)

    async def list_reviewers(self, organization_id: UUID) -> List[UUID]:
        """User IDs of every active reviewer in the organization"""
        members = await self.uow.memberships.list_active_by_roles(
            organization_id, self.reviewer_roles
        )
        return [member.user_id for member in members]
