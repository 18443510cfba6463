from datetime import timedelta
from uuid import uuid4

import pytest
from unittest.mock import AsyncMock, MagicMock

from recruitment_gate.domain.base import utcnow
from recruitment_gate.domain.entities import (
    InvitationStatus,
    ProcessInvitation,
    SelectionProcess,
    User,
    UserRole,
    Worker,
)


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_id = AsyncMock(return_value=None)

    uow.processes = MagicMock()
    uow.processes.get_by_id = AsyncMock(return_value=None)

    uow.workers = MagicMock()
    uow.workers.get_by_id = AsyncMock(return_value=None)
    uow.workers.get_by_user_id = AsyncMock(return_value=None)

    uow.worker_processes = MagicMock()
    uow.worker_processes.get_by_id = AsyncMock(return_value=None)
    uow.worker_processes.get_by_worker_and_process = AsyncMock(return_value=None)
    uow.worker_processes.create = AsyncMock(side_effect=lambda wp: wp)

    uow.invitations = MagicMock()
    uow.invitations.get_by_id = AsyncMock(return_value=None)
    uow.invitations.get_by_token = AsyncMock(return_value=None)
    uow.invitations.get_pending_by_process_and_email = AsyncMock(return_value=None)
    uow.invitations.get_pending_by_email = AsyncMock(return_value=[])
    uow.invitations.find_all = AsyncMock(return_value=([], 0))
    uow.invitations.create = AsyncMock(side_effect=lambda inv: inv)
    uow.invitations.mark_sent = AsyncMock()
    uow.invitations.expire_overdue = AsyncMock(return_value=0)

    # Conditional transitions mutate the instance the way a refresh would
    async def mark_expired(invitation, now):
        if invitation.status == InvitationStatus.pending and invitation.expires_at < now:
            invitation.status = InvitationStatus.expired
            return True
        return False

    async def mark_accepted(invitation, accepted_at):
        if invitation.status == InvitationStatus.pending:
            invitation.status = InvitationStatus.accepted
            invitation.accepted_at = accepted_at
            return True
        return False

    async def mark_cancelled(invitation):
        if invitation.status == InvitationStatus.pending:
            invitation.status = InvitationStatus.cancelled
            return True
        return False

    async def reissue(invitation, token, expires_at):
        if invitation.status == InvitationStatus.accepted:
            return False
        invitation.status = InvitationStatus.pending
        invitation.token = token
        invitation.expires_at = expires_at
        invitation.sent_at = None
        return True

    uow.invitations.mark_expired = AsyncMock(side_effect=mark_expired)
    uow.invitations.mark_accepted = AsyncMock(side_effect=mark_accepted)
    uow.invitations.mark_cancelled = AsyncMock(side_effect=mark_cancelled)
    uow.invitations.reissue = AsyncMock(side_effect=reissue)

    uow.video_requirements = MagicMock()
    uow.video_requirements.get_by_id = AsyncMock(return_value=None)
    uow.video_requirements.get_for_scope = AsyncMock(return_value=None)
    uow.video_requirements.find_all = AsyncMock(return_value=[])
    uow.video_requirements.create = AsyncMock(side_effect=lambda video: video)
    uow.video_requirements.update = AsyncMock(side_effect=lambda video: video)

    return uow


@pytest.fixture
def mock_notifications():
    sender = MagicMock()
    sender.send = AsyncMock(return_value=True)
    return sender


@pytest.fixture
def process():
    return SelectionProcess(
        id=uuid4(), name="Backend Engineer 2026", position="Backend Engineer",
        company_name="Acme Corp",
    )


@pytest.fixture
def make_invitation(process):
    def _make(**overrides):
        now = utcnow()
        fields = dict(
            id=uuid4(),
            process_id=process.id,
            email="candidate@example.com",
            first_name="Ana",
            last_name="Silva",
            token="token-123",
            status=InvitationStatus.pending,
            expires_at=now + timedelta(days=7),
            created_at=now,
        )
        fields.update(overrides)
        return ProcessInvitation(**fields)

    return _make


@pytest.fixture
def user():
    return User(
        id=uuid4(), email="Candidate@Example.com", first_name="Ana",
        last_name="Silva", role=UserRole.worker,
    )


@pytest.fixture
def worker(user):
    return Worker(
        id=uuid4(), user_id=user.id, first_name="Ana", last_name="Silva",
        email=user.email,
    )
