from uuid import uuid4

import pytest

from src.app.use_cases.edit_requests import ResolveEditRequestUseCase
from src.domain.entities import EditRequestStatus, MemberRole
from src.domain.errors import InvalidTransitionError
from tests.fixtures.edit_requests import (
    activity_actions,
    make_edit_request,
    make_member,
    members_by_user,
    notifications_sent,
    with_status,
)


@pytest.fixture
def org_id():
    return uuid4()


@pytest.fixture
def member(org_id):
    return make_member(org_id, MemberRole.member)


@pytest.fixture
def owner(org_id):
    return make_member(org_id, MemberRole.owner)


@pytest.fixture
def pending_request(org_id, member):
    return make_edit_request(org_id, member.user_id)


@pytest.fixture
def setup(mock_uow, member, owner, pending_request):
    mock_uow.memberships.get_by_user_and_organization.side_effect = members_by_user(member, owner)
    mock_uow.edit_requests.get_by_id.return_value = pending_request
    return mock_uow


@pytest.mark.asyncio
async def test_owner_approves_pending_request(setup, org_id, owner, member, pending_request):
    """Owner approves with a note: approved, requester notified, audited"""
    # Arrange
    setup.edit_requests.resolve.return_value = with_status(
        pending_request,
        EditRequestStatus.approved,
        reviewer_id=owner.user_id,
        reviewer_note="ok",
    )

    # Act
    result = await ResolveEditRequestUseCase(setup).execute(
        owner.user_id, org_id, pending_request.id, "approve", note="ok"
    )

    # Assert
    assert result.is_ok()
    assert result.value.status == EditRequestStatus.approved
    assert result.value.reviewer_id == owner.user_id

    setup.edit_requests.resolve.assert_awaited_once_with(
        pending_request.id, EditRequestStatus.approved, owner.user_id, "ok"
    )

    (notification,) = notifications_sent(setup)
    assert notification.recipient_id == member.user_id
    assert notification.type == "edit_request_approved"
    assert notification.title == "Edit Request Approved"
    assert notification.message == "Your request to edit income has been approved. Note: ok"

    assert activity_actions(setup) == ["approve_edit"]
    entry = setup.activity_logs.create.call_args.args[0]
    assert entry.actor_id == owner.user_id
    assert entry.activity_metadata == {"note": "ok"}


@pytest.mark.asyncio
async def test_owner_rejects_pending_request(setup, org_id, owner, member, pending_request):
    setup.edit_requests.resolve.return_value = with_status(
        pending_request, EditRequestStatus.rejected, reviewer_id=owner.user_id
    )

    result = await ResolveEditRequestUseCase(setup).execute(
        owner.user_id, org_id, pending_request.id, "reject"
    )

    assert result.is_ok()
    assert result.value.status == EditRequestStatus.rejected
    setup.edit_requests.resolve.assert_awaited_once_with(
        pending_request.id, EditRequestStatus.rejected, owner.user_id, None
    )
    (notification,) = notifications_sent(setup)
    assert notification.type == "edit_request_rejected"
    assert notification.title == "Edit Request Rejected"
    assert notification.message == "Your request to edit income has been rejected."
    assert activity_actions(setup) == ["reject_edit"]


@pytest.mark.asyncio
async def test_member_cannot_resolve(setup, org_id, member, pending_request):
    result = await ResolveEditRequestUseCase(setup).execute(
        member.user_id, org_id, pending_request.id, "approve"
    )

    assert result.is_err()
    assert result.error.code == "INSUFFICIENT_ROLE"
    setup.edit_requests.resolve.assert_not_called()
    setup.notifications.create_many.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "status",
    [EditRequestStatus.approved, EditRequestStatus.rejected, EditRequestStatus.completed],
)
async def test_only_pending_requests_can_be_resolved(setup, org_id, owner, pending_request, status):
    setup.edit_requests.get_by_id.return_value = with_status(pending_request, status)

    result = await ResolveEditRequestUseCase(setup).execute(
        owner.user_id, org_id, pending_request.id, "reject"
    )

    assert isinstance(result.error, InvalidTransitionError)
    setup.edit_requests.resolve.assert_not_called()
    setup.commit.assert_not_called()


@pytest.mark.asyncio
async def test_lost_race_is_invalid_transition(setup, org_id, owner, pending_request):
    """Another reviewer resolved it between load and write"""
    setup.edit_requests.resolve.return_value = None

    result = await ResolveEditRequestUseCase(setup).execute(
        owner.user_id, org_id, pending_request.id, "approve"
    )

    assert result.error.code == "INVALID_TRANSITION"
    setup.commit.assert_not_called()
    setup.notifications.create_many.assert_not_called()


@pytest.mark.asyncio
async def test_unknown_decision_is_validation_error(setup, org_id, owner, pending_request):
    result = await ResolveEditRequestUseCase(setup).execute(
        owner.user_id, org_id, pending_request.id, "maybe"
    )

    assert result.error.code == "VALIDATION_ERROR"
    setup.edit_requests.get_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_request_from_other_organization_is_not_found(setup, owner, pending_request):
    result = await ResolveEditRequestUseCase(setup).execute(
        owner.user_id, uuid4(), pending_request.id, "approve"
    )

    assert result.error.code == "EDIT_REQUEST_NOT_FOUND"


@pytest.mark.asyncio
async def test_missing_request_is_not_found(setup, org_id, owner):
    setup.edit_requests.get_by_id.return_value = None

    result = await ResolveEditRequestUseCase(setup).execute(
        owner.user_id, org_id, uuid4(), "approve"
    )

    assert result.error.code == "EDIT_REQUEST_NOT_FOUND"


@pytest.mark.asyncio
async def test_requester_resolving_completed_request_is_invalid_transition(
    setup, org_id, member, pending_request
):
    """A finished request reports its state before the caller's role"""
    setup.edit_requests.get_by_id.return_value = with_status(
        pending_request, EditRequestStatus.completed
    )

    result = await ResolveEditRequestUseCase(setup).execute(
        member.user_id, org_id, pending_request.id, "reject"
    )

    assert isinstance(result.error, InvalidTransitionError)
    setup.edit_requests.resolve.assert_not_called()


@pytest.mark.asyncio
async def test_note_longer_than_column_is_validation_error(setup, org_id, owner, pending_request):
    result = await ResolveEditRequestUseCase(setup).execute(
        owner.user_id, org_id, pending_request.id, "approve", note="n" * 1001
    )

    assert result.error.code == "VALIDATION_ERROR"
    setup.edit_requests.get_by_id.assert_not_called()
