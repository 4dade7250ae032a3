from abc import ABC, abstractmethod
from typing import Iterable, List, Optional
from uuid import UUID

from src.domain.entities import MemberRole, OrganizationMember


class IMembershipRepository(ABC):
    """OrganizationMember repository interface - application layer"""

    @abstractmethod
    async def get_by_user_and_organization(
        self, user_id: UUID, organization_id: UUID
    ) -> Optional[OrganizationMember]:
        """Get membership by user and organization"""
        pass

    @abstractmethod
    async def list_active_by_roles(
        self, organization_id: UUID, roles: Iterable[MemberRole]
    ) -> List[OrganizationMember]:
        """Get active members of an organization holding any of the roles"""
        pass

    @abstractmethod
    async def create(self, membership: OrganizationMember) -> OrganizationMember:
        """Create a new membership"""
        pass
