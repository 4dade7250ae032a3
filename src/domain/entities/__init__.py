"""
Edit Request Service Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    ActivityAction,
    EditRequestStatus,
    EditRequestTable,
    MemberRole,
    MemberStatus,
    NotificationType,
)

# Export all entities
from .activity_log import FinanceActivityLog
from .edit_request import (
    ACTIVE_STATUSES,
    MAX_NOTE_LENGTH,
    MAX_REASON_LENGTH,
    MAX_RECORD_ID_LENGTH,
    TERMINAL_STATUSES,
    EditRequest,
)
from .membership import OrganizationMember
from .notification import Notification

__all__ = [
    # Enums
    "ActivityAction",
    "EditRequestStatus",
    "EditRequestTable",
    "MemberRole",
    "MemberStatus",
    "NotificationType",
    # Entities
    "EditRequest",
    "FinanceActivityLog",
    "Notification",
    "OrganizationMember",
    # Status groups
    "ACTIVE_STATUSES",
    "TERMINAL_STATUSES",
    # Column limits
    "MAX_RECORD_ID_LENGTH",
    "MAX_REASON_LENGTH",
    "MAX_NOTE_LENGTH",
]
