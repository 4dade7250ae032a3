from uuid import uuid4

import pytest

from src.app.use_cases.edit_requests import CompleteEditRequestUseCase
from src.domain.entities import EditRequestStatus
from tests.fixtures.edit_requests import activity_actions, make_edit_request, with_status


@pytest.fixture
def org_id():
    return uuid4()


@pytest.fixture
def requester_id():
    return uuid4()


@pytest.fixture
def approved_request(org_id, requester_id):
    return make_edit_request(org_id, requester_id, status=EditRequestStatus.approved)


@pytest.mark.asyncio
async def test_requester_completes_approved_request(mock_uow, org_id, requester_id, approved_request):
    # Arrange
    mock_uow.edit_requests.get_by_id.return_value = approved_request
    mock_uow.edit_requests.complete.return_value = with_status(
        approved_request, EditRequestStatus.completed
    )

    # Act
    result = await CompleteEditRequestUseCase(mock_uow).execute(
        requester_id, org_id, approved_request.id
    )

    # Assert
    assert result.is_ok()
    assert result.value.status == EditRequestStatus.completed
    mock_uow.edit_requests.complete.assert_awaited_once_with(approved_request.id)
    mock_uow.commit.assert_awaited()
    mock_uow.notifications.create_many.assert_not_called()
    assert activity_actions(mock_uow) == ["complete_edit"]


@pytest.mark.asyncio
async def test_only_requester_can_complete(mock_uow, org_id, approved_request):
    mock_uow.edit_requests.get_by_id.return_value = approved_request

    result = await CompleteEditRequestUseCase(mock_uow).execute(
        uuid4(), org_id, approved_request.id
    )

    assert result.error.code == "NOT_REQUESTER"
    mock_uow.edit_requests.complete.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "status",
    [EditRequestStatus.pending, EditRequestStatus.completed, EditRequestStatus.rejected],
)
async def test_only_approved_requests_complete(
    mock_uow, org_id, requester_id, approved_request, status
):
    mock_uow.edit_requests.get_by_id.return_value = with_status(approved_request, status)

    result = await CompleteEditRequestUseCase(mock_uow).execute(
        requester_id, org_id, approved_request.id
    )

    assert result.error.code == "INVALID_TRANSITION"
    mock_uow.edit_requests.complete.assert_not_called()


@pytest.mark.asyncio
async def test_revoked_before_write_is_invalid_transition(
    mock_uow, org_id, requester_id, approved_request
):
    mock_uow.edit_requests.get_by_id.return_value = approved_request
    mock_uow.edit_requests.complete.return_value = None

    result = await CompleteEditRequestUseCase(mock_uow).execute(
        requester_id, org_id, approved_request.id
    )

    assert result.error.code == "INVALID_TRANSITION"
    mock_uow.activity_logs.create.assert_not_called()
