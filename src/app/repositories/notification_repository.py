from abc import ABC, abstractmethod
from typing import List

from src.domain.entities import Notification


class INotificationRepository(ABC):
    """Notification repository interface - application layer"""

    @abstractmethod
    async def create_many(self, notifications: List[Notification]) -> List[Notification]:
        """Insert one notification per recipient"""
        pass
