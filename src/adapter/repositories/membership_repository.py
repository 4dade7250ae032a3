from typing import Iterable, List, Optional
from uuid import UUID

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.membership_repository import IMembershipRepository
from src.domain.entities import MemberRole, MemberStatus, OrganizationMember


class MembershipRepository(IMembershipRepository):
    """OrganizationMember repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_user_and_organization(
        self, user_id: UUID, organization_id: UUID
    ) -> Optional[OrganizationMember]:
        """Get membership by user and organization"""
        stmt = select(OrganizationMember).where(
            OrganizationMember.user_id == user_id,
            OrganizationMember.organization_id == organization_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_active_by_roles(
        self, organization_id: UUID, roles: Iterable[MemberRole]
    ) -> List[OrganizationMember]:
        """Get active members of an organization holding any of the roles"""
        stmt = select(OrganizationMember).where(
            OrganizationMember.organization_id == organization_id,
            OrganizationMember.status == MemberStatus.active,
            col(OrganizationMember.role).in_(list(roles)),
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, membership: OrganizationMember) -> OrganizationMember:
        """Create a new membership"""
        self.session.add(membership)
        await self.session.flush()
        await self.session.refresh(membership)
        return membership
