"""
Repository-level checks for the guarded writes. Two sessions on the same
database stand in for two concurrent requests.
"""

from datetime import timedelta
from uuid import UUID

import pytest

from recruitment_gate.adapter.repositories.invitation_repository import InvitationRepository
from recruitment_gate.adapter.repositories.video_requirement_repository import (
    VideoRequirementRepository,
)
from recruitment_gate.adapter.repositories.worker_process_repository import (
    WorkerProcessRepository,
)
from recruitment_gate.app.repositories.errors import DuplicateRecordError
from recruitment_gate.domain.base import utcnow
from recruitment_gate.domain.entities import (
    InvitationStatus,
    ProcessInvitation,
    WorkerProcess,
    WorkerVideoRequirement,
)
from recruitment_gate.domain.tokens import generate_invitation_token


def new_invitation(process_id: UUID, email: str = "candidate@example.com", **overrides):
    fields = dict(
        process_id=process_id,
        email=email,
        first_name="Ana",
        last_name="Silva",
        token=generate_invitation_token(),
        status=InvitationStatus.pending,
        expires_at=utcnow() + timedelta(days=7),
    )
    fields.update(overrides)
    return ProcessInvitation(**fields)


@pytest.mark.asyncio
async def test_only_one_of_two_acceptances_wins(session_factory, seed):
    async with session_factory() as setup:
        invitation = await InvitationRepository(setup).create(
            new_invitation(seed["processes"]["backend"])
        )
        await setup.commit()
        invitation_id = invitation.id

    async with session_factory() as first, session_factory() as second:
        first_copy = await InvitationRepository(first).get_by_id(invitation_id)
        second_copy = await InvitationRepository(second).get_by_id(invitation_id)
        # Both requests read the invitation as pending
        assert first_copy.status == second_copy.status == InvitationStatus.pending
        await second.rollback()

        assert await InvitationRepository(first).mark_accepted(first_copy, utcnow())
        await first.commit()

        second_copy = await InvitationRepository(second).get_by_id(invitation_id)
        won = await InvitationRepository(second).mark_accepted(second_copy, utcnow())

        assert won is False
        assert second_copy.status == InvitationStatus.accepted


@pytest.mark.asyncio
async def test_second_pending_invitation_is_rejected(db_session, seed):
    repo = InvitationRepository(db_session)
    process_id = seed["processes"]["backend"]
    await repo.create(new_invitation(process_id))
    await db_session.commit()

    with pytest.raises(DuplicateRecordError):
        await repo.create(new_invitation(process_id))


@pytest.mark.asyncio
async def test_non_pending_rows_do_not_block_new_invitation(db_session, seed):
    repo = InvitationRepository(db_session)
    process_id = seed["processes"]["backend"]
    old = await repo.create(new_invitation(process_id))
    assert await repo.mark_cancelled(old)
    await db_session.commit()

    fresh = await repo.create(new_invitation(process_id))
    await db_session.commit()

    assert fresh.status == InvitationStatus.pending


@pytest.mark.asyncio
async def test_mark_expired_requires_overdue(db_session, seed):
    repo = InvitationRepository(db_session)
    invitation = await repo.create(new_invitation(seed["processes"]["backend"]))

    assert await repo.mark_expired(invitation, utcnow()) is False
    assert invitation.status == InvitationStatus.pending

    later = invitation.expires_at + timedelta(seconds=1)
    assert await repo.mark_expired(invitation, later) is True
    assert invitation.status == InvitationStatus.expired


@pytest.mark.asyncio
async def test_sweep_twice(db_session, seed):
    repo = InvitationRepository(db_session)
    past = utcnow() - timedelta(hours=1)
    await repo.create(new_invitation(seed["processes"]["backend"], expires_at=past))
    await repo.create(new_invitation(seed["processes"]["design"], expires_at=past))
    await repo.create(new_invitation(seed["processes"]["backend"], "x@example.com"))
    await db_session.commit()

    assert await repo.expire_overdue(utcnow()) == 2
    await db_session.commit()
    assert await repo.expire_overdue(utcnow()) == 0


@pytest.mark.asyncio
async def test_duplicate_application_is_rejected(db_session, seed):
    repo = WorkerProcessRepository(db_session)
    worker_id = seed["workers"]["candidate"]
    process_id = seed["processes"]["backend"]
    await repo.create(WorkerProcess(worker_id=worker_id, process_id=process_id))
    await db_session.commit()

    with pytest.raises(DuplicateRecordError):
        await repo.create(WorkerProcess(worker_id=worker_id, process_id=process_id))


@pytest.mark.asyncio
async def test_one_video_per_scope(db_session, seed):
    repo = VideoRequirementRepository(db_session)
    worker_id = seed["workers"]["candidate"]
    process_id = seed["processes"]["backend"]

    def video():
        return WorkerVideoRequirement(
            worker_id=worker_id, process_id=process_id, video_url="videos/a.webm"
        )

    await repo.create(video())
    await db_session.commit()

    with pytest.raises(DuplicateRecordError):
        await repo.create(video())


@pytest.mark.asyncio
async def test_reissue_clears_delivery_record(db_session, seed):
    repo = InvitationRepository(db_session)
    invitation = await repo.create(new_invitation(seed["processes"]["backend"]))
    await repo.mark_sent(invitation, utcnow())
    assert invitation.sent_at is not None

    new_token = generate_invitation_token()
    assert await repo.reissue(invitation, new_token, utcnow() + timedelta(days=7))

    assert invitation.token == new_token
    assert invitation.sent_at is None
