"""
Edit Request Workflow Errors

Typed errors returned inside Result values so callers can branch on kind
(isinstance or code) without parsing messages.
"""

from typing import TYPE_CHECKING, Optional

from src.libs.result import Error

if TYPE_CHECKING:
    from .entities import EditRequest


class ConflictError(Error):
    """An active edit request already holds the target record"""

    code_value = "EDIT_REQUEST_CONFLICT"

    def __init__(
        self,
        active_request: Optional["EditRequest"] = None,
        message: str = "A request is already active for this record",
    ):
        super().__init__(self.code_value, message)
        self.active_request = active_request


class InvalidTransitionError(Error):
    """The edit request is not in the state required by the operation"""

    code_value = "INVALID_TRANSITION"

    def __init__(self, message: str):
        super().__init__(self.code_value, message)


class AuthorizationError(Error):
    """The actor lacks the privilege required by the operation"""

    def __init__(self, code: str, message: str):
        super().__init__(code, message)


class ValidationError(Error):
    """Missing or malformed input; nothing was written"""

    code_value = "VALIDATION_ERROR"

    def __init__(self, message: str):
        super().__init__(self.code_value, message)


class NotFoundError(Error):
    """The edit request does not exist or belongs to another organization"""

    code_value = "EDIT_REQUEST_NOT_FOUND"

    def __init__(self, message: str = "Edit request not found"):
        super().__init__(self.code_value, message)


class ActiveEditRequestExistsError(Exception):
    """Raised by the store when the active-target unique index rejects an insert"""
