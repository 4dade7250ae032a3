"""
Use Cases

Organized by domain folder:
- edit_requests/: Edit access workflow for finance records
"""

from .edit_requests import (
    CancelEditRequestUseCase,
    CompleteEditRequestUseCase,
    ExpireEditRequestsUseCase,
    GetActiveEditRequestUseCase,
    GetEditRequestUseCase,
    ListPendingEditRequestsUseCase,
    RequestAccessUseCase,
    ResolveEditRequestUseCase,
)

__all__ = [
    "RequestAccessUseCase",
    "ResolveEditRequestUseCase",
    "CancelEditRequestUseCase",
    "CompleteEditRequestUseCase",
    "GetActiveEditRequestUseCase",
    "GetEditRequestUseCase",
    "ListPendingEditRequestsUseCase",
    "ExpireEditRequestsUseCase",
]
