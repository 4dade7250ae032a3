from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.activity_log_repository import IActivityLogRepository
from src.domain.entities import FinanceActivityLog


class ActivityLogRepository(IActivityLogRepository):
    """FinanceActivityLog repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, entry: FinanceActivityLog) -> FinanceActivityLog:
        """Create a new activity log entry (immutable)"""
        self.session.add(entry)
        await self.session.flush()
        await self.session.refresh(entry)
        return entry
