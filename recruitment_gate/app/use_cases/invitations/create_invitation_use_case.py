"""
Create Invitation Use Case

Invites a candidate, by email, to apply to a selection process.
"""

import logging
from uuid import UUID

from recruitment_gate.app.repositories.errors import DuplicateRecordError
from recruitment_gate.app.services.notification_sender import INotificationSender
from recruitment_gate.app.services.unit_of_work import UnitOfWork
from recruitment_gate.domain.base import utcnow
from recruitment_gate.domain.entities import InvitationStatus, ProcessInvitation
from recruitment_gate.domain.invitation_lifecycle import (
    DEFAULT_EXPIRATION_DAYS,
    calculate_expiration,
)
from recruitment_gate.domain.tokens import generate_invitation_token
from recruitment_gate.libs.result import Error, Result, Return

from .common import expire_if_overdue, to_invitation_response
from .dtos import InvitationResponse
from .notifications import dispatch_invitation_email

logger = logging.getLogger(__name__)


def duplicate_invitation_error() -> Error:
    return Error(
        "INVITE_ALREADY_EXISTS",
        "A pending invitation already exists for this email in this process",
    )


class CreateInvitationUseCase:
    """
    Use case for inviting a candidate to a selection process.

    Business Rules:
    - The process must exist
    - At most one pending invitation per (process, email); an overdue pending
      invitation is expired first and does not block a new one
    - Email is compared and stored lower-cased
    - Token is 256-bit, URL-safe; expiry is now + expiration_days
    - The email is sent after commit; sent_at is set only if it was delivered
    """

    def __init__(
        self,
        uow: UnitOfWork,
        notifications: INotificationSender,
        frontend_url: str,
        expiration_days: int = DEFAULT_EXPIRATION_DAYS,
    ):
        self.uow = uow
        self.notifications = notifications
        self.frontend_url = frontend_url
        self.expiration_days = expiration_days

    async def execute(
        self,
        created_by_id: UUID,
        process_id: UUID,
        email: str,
        first_name: str,
        last_name: str,
    ) -> Result[InvitationResponse]:
        """
        Execute create invitation use case.

        Args:
            created_by_id: User issuing the invitation
            process_id: Target selection process
            email: Candidate email
            first_name: Candidate first name
            last_name: Candidate last name

        Returns:
            Result with InvitationResponse DTO, or Error
        """
        email = email.strip().lower()
        now = utcnow()

        async with self.uow:
            process = await self.uow.processes.get_by_id(process_id)
            if process is None:
                return Return.err(
                    Error("PROCESS_NOT_FOUND", f"Process {process_id} not found")
                )

            pending = await self.uow.invitations.get_pending_by_process_and_email(
                process_id, email
            )
            if pending is not None:
                await expire_if_overdue(self.uow, pending, now)
                if pending.status == InvitationStatus.pending:
                    return Return.err(duplicate_invitation_error())

            invitation = ProcessInvitation(
                process_id=process_id,
                email=email,
                first_name=first_name,
                last_name=last_name,
                token=generate_invitation_token(),
                status=InvitationStatus.pending,
                expires_at=calculate_expiration(now, self.expiration_days),
                created_by_id=created_by_id,
            )

            try:
                invitation = await self.uow.invitations.create(invitation)
            except DuplicateRecordError:
                # Lost a race with a concurrent invite for the same email
                return Return.err(duplicate_invitation_error())

            await self.uow.commit()

        logger.info(f"Invitation {invitation.id} created for process {process_id}")

        await dispatch_invitation_email(
            self.uow,
            self.notifications,
            invitation,
            process,
            self.frontend_url,
            self.expiration_days,
        )

        return Return.ok(to_invitation_response(invitation, process))
