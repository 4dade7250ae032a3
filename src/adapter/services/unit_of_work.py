from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.activity_log_repository import ActivityLogRepository
from src.adapter.repositories.edit_request_repository import EditRequestRepository
from src.adapter.repositories.membership_repository import MembershipRepository
from src.adapter.repositories.notification_repository import NotificationRepository
from src.adapter.repositories.record_repository import RecordRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.edit_requests = EditRequestRepository(self.session)
        self.memberships = MembershipRepository(self.session)
        self.notifications = NotificationRepository(self.session)
        self.activity_logs = ActivityLogRepository(self.session)
        self.records = RecordRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
