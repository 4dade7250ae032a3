from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from src.domain.entities import (
    EditRequest,
    EditRequestStatus,
    EditRequestTable,
    MemberRole,
    MemberStatus,
    OrganizationMember,
)


def make_member(
    organization_id: UUID,
    role: MemberRole = MemberRole.member,
    user_id: Optional[UUID] = None,
    status: MemberStatus = MemberStatus.active,
) -> OrganizationMember:
    return OrganizationMember(
        id=uuid4(),
        user_id=user_id or uuid4(),
        organization_id=organization_id,
        role=role,
        status=status,
    )


def make_edit_request(
    organization_id: UUID,
    requester_id: UUID,
    status: EditRequestStatus = EditRequestStatus.pending,
    table_name: EditRequestTable = EditRequestTable.income,
    record_id: str = "R1",
    reason: str = "fix amount",
    **overrides,
) -> EditRequest:
    return EditRequest(
        id=overrides.pop("id", uuid4()),
        organization_id=organization_id,
        table_name=table_name,
        record_id=record_id,
        requester_id=requester_id,
        reason=reason,
        status=status,
        created_at=overrides.pop("created_at", datetime.utcnow()),
        updated_at=overrides.pop("updated_at", datetime.utcnow()),
        **overrides,
    )


def with_status(edit_request: EditRequest, status: EditRequestStatus, **changes) -> EditRequest:
    """Copy of an edit request as the store would return it after a transition"""
    data = {
        "id": edit_request.id,
        "reviewer_id": edit_request.reviewer_id,
        "reviewer_note": edit_request.reviewer_note,
        "reviewed_at": edit_request.reviewed_at,
        "created_at": edit_request.created_at,
        "updated_at": datetime.utcnow(),
    }
    data.update(changes)
    return make_edit_request(
        edit_request.organization_id,
        edit_request.requester_id,
        status=status,
        table_name=edit_request.table_name,
        record_id=edit_request.record_id,
        reason=edit_request.reason,
        **data,
    )


def members_by_user(*memberships):
    """side_effect for memberships.get_by_user_and_organization"""
    index = {(m.user_id, m.organization_id): m for m in memberships}

    async def lookup(user_id, organization_id):
        return index.get((user_id, organization_id))

    return lookup


def notifications_sent(uow):
    """Flatten every Notification passed to notifications.create_many"""
    return [n for call in uow.notifications.create_many.call_args_list for n in call.args[0]]


def activity_actions(uow):
    return [call.args[0].action_type for call in uow.activity_logs.create.call_args_list]
