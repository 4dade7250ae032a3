from typing import List

from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.notification_repository import INotificationRepository
from src.domain.entities import Notification


class NotificationRepository(INotificationRepository):
    """Notification repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_many(self, notifications: List[Notification]) -> List[Notification]:
        """Insert one notification per recipient in a single flush"""
        self.session.add_all(notifications)
        await self.session.flush()
        return notifications
