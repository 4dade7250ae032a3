import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.edit_requests = MagicMock()
    uow.edit_requests.create = AsyncMock(side_effect=lambda edit_request: edit_request)
    uow.edit_requests.get_by_id = AsyncMock(return_value=None)
    uow.edit_requests.get_active_for_record = AsyncMock(return_value=None)
    uow.edit_requests.list_pending_by_organization = AsyncMock(return_value=[])
    uow.edit_requests.resolve = AsyncMock()
    uow.edit_requests.complete = AsyncMock()
    uow.edit_requests.delete_active = AsyncMock()
    uow.edit_requests.list_stale = AsyncMock(return_value=[])
    uow.edit_requests.expire = AsyncMock()

    uow.memberships = MagicMock()
    uow.memberships.get_by_user_and_organization = AsyncMock(return_value=None)
    uow.memberships.list_active_by_roles = AsyncMock(return_value=[])

    uow.notifications = MagicMock()
    uow.notifications.create_many = AsyncMock(side_effect=lambda notifications: notifications)

    uow.activity_logs = MagicMock()
    uow.activity_logs.create = AsyncMock(side_effect=lambda entry: entry)

    uow.records = MagicMock()
    uow.records.get_record = AsyncMock(return_value=None)

    return uow
