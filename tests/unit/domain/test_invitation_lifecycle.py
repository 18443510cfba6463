from datetime import timedelta

from recruitment_gate.domain.base import utcnow
from recruitment_gate.domain.entities import InvitationStatus
from recruitment_gate.domain.invitation_lifecycle import (
    calculate_expiration,
    check_acceptable,
    check_cancellable,
    check_resendable,
    evaluate,
    is_overdue,
)
from recruitment_gate.domain.tokens import generate_invitation_token


def test_expiration_defaults_to_seven_days():
    now = utcnow()
    assert calculate_expiration(now) == now + timedelta(days=7)


def test_pending_past_expiry_evaluates_as_expired(make_invitation):
    now = utcnow()
    invitation = make_invitation(expires_at=now - timedelta(seconds=1))

    assert is_overdue(invitation, now)
    assert evaluate(invitation, now) == InvitationStatus.expired


def test_expiry_boundary_is_still_pending(make_invitation):
    now = utcnow()
    invitation = make_invitation(expires_at=now)

    assert not is_overdue(invitation, now)
    assert check_acceptable(invitation, now) is None


def test_terminal_statuses_are_not_overdue(make_invitation):
    now = utcnow()
    past = now - timedelta(days=1)
    for status in (InvitationStatus.accepted, InvitationStatus.cancelled):
        invitation = make_invitation(status=status, expires_at=past)
        assert evaluate(invitation, now) == status


def test_check_acceptable_codes(make_invitation):
    now = utcnow()
    cases = {
        InvitationStatus.accepted: "INVITATION_ALREADY_ACCEPTED",
        InvitationStatus.cancelled: "INVITATION_CANCELLED",
        InvitationStatus.expired: "INVITATION_EXPIRED",
    }
    for status, code in cases.items():
        assert check_acceptable(make_invitation(status=status), now).code == code


def test_cancel_only_from_pending(make_invitation):
    now = utcnow()
    assert check_cancellable(make_invitation(), now) is None

    error = check_cancellable(make_invitation(status=InvitationStatus.accepted), now)
    assert error.code == "INVITATION_ALREADY_ACCEPTED"
    assert "cancel" in error.message

    error = check_cancellable(make_invitation(status=InvitationStatus.expired), now)
    assert error.code == "INVITATION_EXPIRED"


def test_resend_blocked_only_when_accepted(make_invitation):
    for status in (
        InvitationStatus.pending,
        InvitationStatus.expired,
        InvitationStatus.cancelled,
    ):
        assert check_resendable(make_invitation(status=status)) is None

    error = check_resendable(make_invitation(status=InvitationStatus.accepted))
    assert error.code == "INVITATION_ALREADY_ACCEPTED"


def test_tokens_are_url_safe_and_unique():
    tokens = {generate_invitation_token() for _ in range(100)}

    assert len(tokens) == 100
    for token in tokens:
        assert len(token) >= 43
        assert all(c.isalnum() or c in "-_" for c in token)
