from abc import ABC, abstractmethod

from src.domain.entities import FinanceActivityLog


class IActivityLogRepository(ABC):
    """FinanceActivityLog repository interface - application layer"""

    @abstractmethod
    async def create(self, entry: FinanceActivityLog) -> FinanceActivityLog:
        """Create a new activity log entry (immutable)"""
        pass
