"""
Edit Request Use Cases

Request, resolve, cancel/revoke and complete edit access to finance records.
"""

from .cancel_edit_request_use_case import CancelEditRequestUseCase
from .complete_edit_request_use_case import CompleteEditRequestUseCase
from .dtos import (
    ActiveEditRequestResponse,
    CancelEditRequestResponse,
    EditRequestResponse,
    ExpireEditRequestsResponse,
    PendingEditRequestsResponse,
    RequestAccessResponse,
)
from .expire_edit_requests_use_case import ExpireEditRequestsUseCase
from .get_active_edit_request_use_case import GetActiveEditRequestUseCase, can_edit
from .get_edit_request_use_case import GetEditRequestUseCase
from .list_pending_edit_requests_use_case import ListPendingEditRequestsUseCase
from .request_access_use_case import RequestAccessUseCase
from .resolve_edit_request_use_case import ResolveEditRequestUseCase

__all__ = [
    "RequestAccessUseCase",
    "ResolveEditRequestUseCase",
    "CancelEditRequestUseCase",
    "CompleteEditRequestUseCase",
    "GetActiveEditRequestUseCase",
    "GetEditRequestUseCase",
    "ListPendingEditRequestsUseCase",
    "ExpireEditRequestsUseCase",
    "can_edit",
    "EditRequestResponse",
    "RequestAccessResponse",
    "ActiveEditRequestResponse",
    "PendingEditRequestsResponse",
    "CancelEditRequestResponse",
    "ExpireEditRequestsResponse",
]
