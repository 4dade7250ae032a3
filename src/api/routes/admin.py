"""
Admin API Routes - Maintenance Endpoints

These endpoints are for schedulers and internal service integrations.
Authentication is via Admin API Key, not user JWTs.
"""

from fastapi import APIRouter, Depends, status

from src.api.error import ServerError
from src.api.utils.admin_auth import verify_admin_api_key
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.edit_requests import (
    ExpireEditRequestsResponse,
    ExpireEditRequestsUseCase,
)
from src.depends import get_unit_of_work

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.post(
    "/edit-requests/expire",
    status_code=status.HTTP_200_OK,
    response_model=ExpireEditRequestsResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def expire_edit_requests(
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Expire Stale Edit Requests

    Scheduler endpoint. Moves pending/approved requests older than
    EDIT_REQUEST_TTL_HOURS to expired; no-op when no TTL is configured.

    Requires: X-Admin-API-Key header

    Raises:
        - 401 Unauthorized: Missing or invalid admin API key
        - 500 Internal Server Error: Server error
    """
    use_case = ExpireEditRequestsUseCase(uow)
    result = await use_case.execute()

    if result.is_err():
        raise ServerError(result.error)

    return result.value
