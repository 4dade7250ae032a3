"""
Edit Request State Machine

Pure transition rules for the edit request lifecycle. No I/O; callers persist
the returned status with a compare-and-set write.

    (none) --request--> pending | approved (privileged requester)
    pending --resolve--> approved | rejected (privileged actor)
    pending | approved --cancel--> (deleted) (requester or privileged actor)
    approved --complete--> completed (requester only)
    pending | approved --expire--> expired (system)

rejected, completed and expired are terminal: every action on them fails.
"""

from enum import Enum
from typing import Dict, FrozenSet, Optional

from src.libs.result import Result, Return

from .entities.enums import EditRequestStatus
from .errors import AuthorizationError, InvalidTransitionError


class EditAction(str, Enum):
    """Actions that move an existing edit request"""

    resolve = "resolve"
    cancel = "cancel"
    complete = "complete"
    expire = "expire"


class Decision(str, Enum):
    """Reviewer decision on a pending edit request"""

    approve = "approve"
    reject = "reject"


DECISION_STATUS: Dict[Decision, EditRequestStatus] = {
    Decision.approve: EditRequestStatus.approved,
    Decision.reject: EditRequestStatus.rejected,
}

# Source statuses each action accepts
ALLOWED_SOURCES: Dict[EditAction, FrozenSet[EditRequestStatus]] = {
    EditAction.resolve: frozenset({EditRequestStatus.pending}),
    EditAction.cancel: frozenset({EditRequestStatus.pending, EditRequestStatus.approved}),
    EditAction.complete: frozenset({EditRequestStatus.approved}),
    EditAction.expire: frozenset({EditRequestStatus.pending, EditRequestStatus.approved}),
}


def initial_status(is_privileged: bool) -> EditRequestStatus:
    """Status of a freshly created request; privileged requesters self-grant"""
    return EditRequestStatus.approved if is_privileged else EditRequestStatus.pending


def transition(
    current: EditRequestStatus,
    action: EditAction,
    *,
    actor_is_privileged: bool = False,
    actor_is_requester: bool = False,
    decision: Optional[Decision] = None,
) -> Result[Optional[EditRequestStatus]]:
    """
    Validate one transition.

    Returns:
        Result with the next status (None for cancel, meaning the row is
        deleted), or InvalidTransitionError / AuthorizationError
    """
    if current not in ALLOWED_SOURCES[action]:
        return Return.err(
            InvalidTransitionError(
                f"Cannot {action.value} an edit request that is {current.value}"
            )
        )

    if action == EditAction.resolve:
        if not actor_is_privileged:
            return Return.err(
                AuthorizationError(
                    "INSUFFICIENT_ROLE", "Only reviewers can approve or reject edit requests"
                )
            )
        if decision is None:
            return Return.err(
                InvalidTransitionError("A decision is required to resolve an edit request")
            )
        return Return.ok(DECISION_STATUS[decision])

    if action == EditAction.cancel:
        if not (actor_is_requester or actor_is_privileged):
            return Return.err(
                AuthorizationError(
                    "INSUFFICIENT_ROLE",
                    "Only the requester or a reviewer can cancel this edit request",
                )
            )
        return Return.ok(None)

    if action == EditAction.complete:
        if not actor_is_requester:
            return Return.err(
                AuthorizationError(
                    "NOT_REQUESTER", "Only the holder of the edit access can complete it"
                )
            )
        return Return.ok(EditRequestStatus.completed)

    return Return.ok(EditRequestStatus.expired)
