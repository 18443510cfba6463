"""
Invitation Lifecycle

Transition rules for process invitations:

    pending -> accepted   (terminal, via acceptance)
    pending -> expired    (lazily on read, or by the sweep)
    pending -> cancelled  (terminal, operator action)
    expired | cancelled | pending -> pending   (resend re-issues the token)

The functions here are pure: they inspect an invitation and report either the
evaluated status or the Error a transition would fail with. Persisting a
transition is the repository's job and is always a conditional update on the
expected prior status.
"""

from datetime import datetime, timedelta
from typing import Optional

from recruitment_gate.libs.result import Error
from recruitment_gate.domain.entities import InvitationStatus, ProcessInvitation

DEFAULT_EXPIRATION_DAYS = 7


def calculate_expiration(now: datetime, days: int = DEFAULT_EXPIRATION_DAYS) -> datetime:
    return now + timedelta(days=days)


def is_overdue(invitation: ProcessInvitation, now: datetime) -> bool:
    """A pending invitation whose expiry has passed."""
    return invitation.status == InvitationStatus.pending and now > invitation.expires_at


def evaluate(invitation: ProcessInvitation, now: datetime) -> InvitationStatus:
    """Status the invitation has at `now`, taking expiry into account."""
    if is_overdue(invitation, now):
        return InvitationStatus.expired
    return invitation.status


def already_accepted_error(message: str = "This invitation has already been accepted") -> Error:
    return Error("INVITATION_ALREADY_ACCEPTED", message)


def expired_error() -> Error:
    return Error("INVITATION_EXPIRED", "This invitation has expired")


def cancelled_error() -> Error:
    return Error("INVITATION_CANCELLED", "This invitation has been cancelled")


def check_acceptable(invitation: ProcessInvitation, now: datetime) -> Optional[Error]:
    """Error preventing acceptance, or None if the invitation can be accepted."""
    status = evaluate(invitation, now)
    if status == InvitationStatus.accepted:
        return already_accepted_error()
    if status == InvitationStatus.cancelled:
        return cancelled_error()
    if status == InvitationStatus.expired:
        return expired_error()
    return None


def check_cancellable(invitation: ProcessInvitation, now: datetime) -> Optional[Error]:
    """Only pending invitations can be cancelled."""
    status = evaluate(invitation, now)
    if status == InvitationStatus.accepted:
        return already_accepted_error(
            "Cannot cancel an invitation that has already been accepted"
        )
    if status == InvitationStatus.cancelled:
        return cancelled_error()
    if status == InvitationStatus.expired:
        return expired_error()
    return None


def check_resendable(invitation: ProcessInvitation) -> Optional[Error]:
    """Anything but an accepted invitation can be re-issued."""
    if invitation.status == InvitationStatus.accepted:
        return already_accepted_error(
            "Cannot resend an invitation that has already been accepted"
        )
    return None
