"""
Edit Request Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class MemberRole(str, Enum):
    """Member role within an organization"""

    owner = "owner"
    admin = "admin"
    member = "member"
    viewer = "viewer"


class MemberStatus(str, Enum):
    """Organization membership status"""

    active = "active"
    revoked = "revoked"


class EditRequestTable(str, Enum):
    """Finance record kinds that are protected by edit requests"""

    income = "income"
    expense = "expense"
    pledge_payment = "pledge_payment"
    pledge_record = "pledge_record"


class EditRequestStatus(str, Enum):
    """Edit request lifecycle status"""

    pending = "pending"
    approved = "approved"
    rejected = "rejected"
    completed = "completed"
    expired = "expired"


class ActivityAction(str, Enum):
    """Finance activity log action types written by the edit request workflow"""

    request_edit = "request_edit"
    approve_edit = "approve_edit"
    reject_edit = "reject_edit"
    cancel_edit = "cancel_edit"
    complete_edit = "complete_edit"
    expire_edit = "expire_edit"


class NotificationType(str, Enum):
    """Notification types emitted on edit request transitions"""

    edit_request_created = "edit_request_created"
    edit_request_approved = "edit_request_approved"
    edit_request_rejected = "edit_request_rejected"
    edit_request_revoked = "edit_request_revoked"
    edit_request_expired = "edit_request_expired"
