"""
Accept Invitation Use Case

Redeems an invitation token for one of three outcomes depending on who the
caller is.
"""

import logging
from typing import Optional
from uuid import UUID

from recruitment_gate.app.repositories.errors import DuplicateRecordError
from recruitment_gate.app.services.notification_sender import INotificationSender
from recruitment_gate.app.services.unit_of_work import UnitOfWork
from recruitment_gate.domain.base import utcnow
from recruitment_gate.domain.entities import WorkerProcess, WorkerProcessStatus
from recruitment_gate.domain.invitation_lifecycle import (
    already_accepted_error,
    check_acceptable,
)
from recruitment_gate.libs.result import Error, Result, Return

from .common import expire_if_overdue, to_invitation_response
from .dtos import AcceptanceOutcome, Applied, NeedsRegistration, NeedsWorkerProfile
from .notifications import build_welcome_email, send_best_effort

logger = logging.getLogger(__name__)


def already_applied_error() -> Error:
    return Error("ALREADY_APPLIED", "You have already applied to this process")


class AcceptInvitationUseCase:
    """
    Use case for accepting a process invitation.

    Business Rules:
    - Unknown token fails with INVITATION_NOT_FOUND
    - Overdue invitations are expired and rejected with INVITATION_EXPIRED
    - Accepted / cancelled invitations are rejected with distinct codes
    - Anonymous caller: needs_registration, nothing is written
    - Caller without a worker profile: needs_worker_profile, nothing is written
    - Caller email must match the invitation email (case-insensitive)
    - One application per (worker, process)
    - Invitation flip and application insert commit together or not at all
    - Welcome email is best-effort and sent after commit
    """

    def __init__(self, uow: UnitOfWork, notifications: INotificationSender):
        self.uow = uow
        self.notifications = notifications

    async def execute(
        self, token: str, user_id: Optional[UUID] = None
    ) -> Result[AcceptanceOutcome]:
        """
        Execute accept invitation use case.

        Args:
            token: Invitation token
            user_id: Authenticated caller, or None for an anonymous caller

        Returns:
            Result with one AcceptanceOutcome variant, or Error
        """
        now = utcnow()

        async with self.uow:
            invitation = await self.uow.invitations.get_by_token(token)
            if invitation is None:
                return Return.err(
                    Error("INVITATION_NOT_FOUND", "Invitation not found")
                )

            if await expire_if_overdue(self.uow, invitation, now):
                await self.uow.commit()

            error = check_acceptable(invitation, now)
            if error is not None:
                return Return.err(error)

            process_id = str(invitation.process_id)

            # Scenario 1: anonymous caller
            if user_id is None:
                return Return.ok(
                    NeedsRegistration(
                        invitation=to_invitation_response(invitation),
                        process_id=process_id,
                    )
                )

            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            # Scenario 2: authenticated, no candidate profile yet
            worker = await self.uow.workers.get_by_user_id(user.id)
            if worker is None:
                return Return.ok(
                    NeedsWorkerProfile(
                        invitation=to_invitation_response(invitation),
                        process_id=process_id,
                    )
                )

            if user.email.lower() != invitation.email.lower():
                return Return.err(
                    Error(
                        "INVITATION_EMAIL_MISMATCH",
                        "This invitation was sent to a different email address",
                    )
                )

            existing = await self.uow.worker_processes.get_by_worker_and_process(
                worker.id, invitation.process_id
            )
            if existing is not None:
                return Return.err(already_applied_error())

            process = await self.uow.processes.get_by_id(invitation.process_id)

            # Scenario 3: flip the invitation first so a concurrent acceptance
            # of the same token blocks on this row and then sees it accepted
            if not await self.uow.invitations.mark_accepted(invitation, now):
                error = check_acceptable(invitation, now) or already_accepted_error()
                await self.uow.rollback()
                return Return.err(error)

            application = WorkerProcess(
                worker_id=worker.id,
                process_id=invitation.process_id,
                status=WorkerProcessStatus.pending,
                applied_at=now,
            )
            try:
                application = await self.uow.worker_processes.create(application)
            except DuplicateRecordError:
                # Applied through another path meanwhile; the invitation
                # update was rolled back with the failed insert
                return Return.err(already_applied_error())

            await self.uow.commit()

        logger.info(
            f"Invitation {invitation.id} accepted; application {application.id} "
            f"created for worker {worker.id}"
        )

        if process is not None:
            subject, text_body, html_body = build_welcome_email(user, process)
            await send_best_effort(
                self.notifications, user.email, subject, text_body, html_body
            )

        return Return.ok(
            Applied(
                invitation=to_invitation_response(invitation, process),
                process_id=process_id,
                application_id=str(application.id),
            )
        )
