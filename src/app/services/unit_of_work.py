from abc import ABC, abstractmethod

from src.app.repositories.activity_log_repository import IActivityLogRepository
from src.app.repositories.edit_request_repository import IEditRequestRepository
from src.app.repositories.membership_repository import IMembershipRepository
from src.app.repositories.notification_repository import INotificationRepository
from src.app.repositories.record_repository import IRecordRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    edit_requests: IEditRequestRepository
    memberships: IMembershipRepository
    notifications: INotificationRepository
    activity_logs: IActivityLogRepository
    records: IRecordRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
