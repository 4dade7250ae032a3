"""
Edit Request API Routes

Request, review, revoke and release edit access to finance records.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel, Field

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.edit_requests import (
    ActiveEditRequestResponse,
    CancelEditRequestResponse,
    CancelEditRequestUseCase,
    CompleteEditRequestUseCase,
    EditRequestResponse,
    GetActiveEditRequestUseCase,
    GetEditRequestUseCase,
    ListPendingEditRequestsUseCase,
    PendingEditRequestsResponse,
    RequestAccessResponse,
    RequestAccessUseCase,
    ResolveEditRequestUseCase,
)
from src.depends import CurrentUser, get_current_user, get_unit_of_work
from src.domain.errors import ConflictError
from src.libs.result import Error

router = APIRouter(prefix="/edit-requests", tags=["Edit Requests"])

BAD_REQUEST_CODES = ("VALIDATION_ERROR", "INVALID_ID")
FORBIDDEN_CODES = ("NOT_A_MEMBER", "INSUFFICIENT_ROLE", "NOT_REQUESTER")
CONFLICT_CODES = ("EDIT_REQUEST_CONFLICT", "INVALID_TRANSITION")


class RequestAccessRequest(BaseModel):
    """Request edit access HTTP request payload"""

    table_name: str = Field(..., description="income, expense, pledge_payment or pledge_record")
    record_id: str = Field(..., description="ID of the finance record")
    reason: str = Field(..., description="Why the record needs to be edited")


class ResolveEditRequestRequest(BaseModel):
    """Resolve edit request HTTP request payload"""

    decision: str = Field(..., description="approve or reject")
    note: Optional[str] = Field(None, description="Note passed on to the requester")


def raise_for_error(error: Error):
    """Map a use case error onto an HTTP error response"""
    if error.code in BAD_REQUEST_CODES:
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    if error.code in FORBIDDEN_CODES:
        raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
    if error.code == "EDIT_REQUEST_NOT_FOUND":
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    if isinstance(error, ConflictError):
        raise ClientError(
            error,
            status_code=status.HTTP_409_CONFLICT,
            details={"active_request": jsonable_encoder(error.active_request)},
        )
    if error.code in CONFLICT_CODES:
        raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
    raise ServerError(error)


def parse_request_id(request_id: str) -> UUID:
    try:
        return UUID(request_id)
    except ValueError:
        raise ClientError(
            Error("INVALID_ID", "Invalid edit request ID format"),
            status_code=status.HTTP_400_BAD_REQUEST,
        )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=RequestAccessResponse,
)
async def request_access(
    request: RequestAccessRequest,
    current_user: CurrentUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Request Edit Access

    Members get a pending request that reviewers are notified about.
    Reviewers are auto-approved.

    Raises:
        - 400 Bad Request: VALIDATION_ERROR (missing reason, unknown table)
        - 401 Unauthorized: Invalid or expired JWT
        - 403 Forbidden: NOT_A_MEMBER
        - 409 Conflict: EDIT_REQUEST_CONFLICT, body carries the active request
        - 500 Internal Server Error: Server error
    """
    use_case = RequestAccessUseCase(uow)
    result = await use_case.execute(
        user_id=current_user.user_id,
        organization_id=current_user.organization_id,
        table_name=request.table_name,
        record_id=request.record_id,
        reason=request.reason,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/active",
    status_code=status.HTTP_200_OK,
    response_model=ActiveEditRequestResponse,
)
async def get_active_edit_request(
    table_name: str = Query(..., description="Finance record type"),
    record_id: str = Query(..., description="Finance record ID"),
    current_user: CurrentUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Record Lock Status

    Returns the pending/approved request holding the record (if any) and
    whether the caller may edit it right now.
    """
    use_case = GetActiveEditRequestUseCase(uow)
    result = await use_case.execute(
        current_user.user_id, current_user.organization_id, table_name, record_id
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/pending",
    status_code=status.HTTP_200_OK,
    response_model=PendingEditRequestsResponse,
)
async def list_pending_edit_requests(
    current_user: CurrentUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Pending Edit Requests

    Reviewer inbox, newest first.

    Raises:
        - 403 Forbidden: INSUFFICIENT_ROLE
    """
    use_case = ListPendingEditRequestsUseCase(uow)
    result = await use_case.execute(current_user.user_id, current_user.organization_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{request_id}",
    status_code=status.HTTP_200_OK,
    response_model=EditRequestResponse,
)
async def get_edit_request(
    request_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = GetEditRequestUseCase(uow)
    result = await use_case.execute(
        current_user.user_id, current_user.organization_id, parse_request_id(request_id)
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{request_id}/resolve",
    status_code=status.HTTP_200_OK,
    response_model=EditRequestResponse,
)
async def resolve_edit_request(
    request_id: str,
    request: ResolveEditRequestRequest,
    current_user: CurrentUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Approve or Reject Edit Request

    Raises:
        - 400 Bad Request: INVALID_ID, VALIDATION_ERROR (unknown decision)
        - 403 Forbidden: INSUFFICIENT_ROLE
        - 404 Not Found: EDIT_REQUEST_NOT_FOUND
        - 409 Conflict: INVALID_TRANSITION (request no longer pending)
    """
    use_case = ResolveEditRequestUseCase(uow)
    result = await use_case.execute(
        reviewer_id=current_user.user_id,
        organization_id=current_user.organization_id,
        request_id=parse_request_id(request_id),
        decision=request.decision,
        note=request.note,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{request_id}/complete",
    status_code=status.HTTP_200_OK,
    response_model=EditRequestResponse,
)
async def complete_edit_request(
    request_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Release Edit Access

    Raises:
        - 403 Forbidden: NOT_REQUESTER
        - 404 Not Found: EDIT_REQUEST_NOT_FOUND
        - 409 Conflict: INVALID_TRANSITION (request not approved)
    """
    use_case = CompleteEditRequestUseCase(uow)
    result = await use_case.execute(
        current_user.user_id, current_user.organization_id, parse_request_id(request_id)
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/{request_id}",
    status_code=status.HTTP_200_OK,
    response_model=CancelEditRequestResponse,
)
async def cancel_edit_request(
    request_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Cancel or Revoke Edit Request

    The requester cancels their own request; a reviewer revokes anyone's.

    Raises:
        - 403 Forbidden: INSUFFICIENT_ROLE
        - 404 Not Found: EDIT_REQUEST_NOT_FOUND
        - 409 Conflict: INVALID_TRANSITION (request already terminal)
    """
    use_case = CancelEditRequestUseCase(uow)
    result = await use_case.execute(
        current_user.user_id, current_user.organization_id, parse_request_id(request_id)
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value
