"""
Resend Invitation Use Case

Re-issues an invitation that was not accepted: new token, fresh expiry,
status back to pending, and the email is sent again.
"""

import logging
from uuid import UUID

from recruitment_gate.app.repositories.errors import DuplicateRecordError
from recruitment_gate.app.services.notification_sender import INotificationSender
from recruitment_gate.app.services.unit_of_work import UnitOfWork
from recruitment_gate.domain.base import utcnow
from recruitment_gate.domain.invitation_lifecycle import (
    DEFAULT_EXPIRATION_DAYS,
    already_accepted_error,
    calculate_expiration,
    check_resendable,
)
from recruitment_gate.domain.tokens import generate_invitation_token
from recruitment_gate.libs.result import Error, Result, Return

from .common import expire_if_overdue, to_invitation_response
from .create_invitation_use_case import duplicate_invitation_error
from .dtos import InvitationResponse
from .notifications import dispatch_invitation_email

logger = logging.getLogger(__name__)


class ResendInvitationUseCase:
    """
    Use case for resending an invitation.

    Business Rules:
    - Accepted invitations cannot be resent (INVITATION_ALREADY_ACCEPTED)
    - The old token stops resolving once the new one is issued
    - Fails with INVITE_ALREADY_EXISTS if another pending invitation exists
      for the same (process, email)
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

    async def execute(self, invitation_id: UUID) -> Result[InvitationResponse]:
        """
        Execute resend invitation use case.

        Args:
            invitation_id: ID of the invitation to resend

        Returns:
            Result with the re-issued InvitationResponse, or Error
        """
        now = utcnow()
        async with self.uow:
            invitation = await self.uow.invitations.get_by_id(invitation_id)
            if invitation is None:
                return Return.err(
                    Error("INVITATION_NOT_FOUND", "Invitation not found")
                )

            if await expire_if_overdue(self.uow, invitation, now):
                await self.uow.commit()

            error = check_resendable(invitation)
            if error is not None:
                return Return.err(error)

            process = await self.uow.processes.get_by_id(invitation.process_id)
            if process is None:
                return Return.err(
                    Error("PROCESS_NOT_FOUND", f"Process {invitation.process_id} not found")
                )

            try:
                reissued = await self.uow.invitations.reissue(
                    invitation,
                    generate_invitation_token(),
                    calculate_expiration(now, self.expiration_days),
                )
            except DuplicateRecordError:
                return Return.err(duplicate_invitation_error())

            if not reissued:
                # Accepted concurrently
                error = check_resendable(invitation) or already_accepted_error(
                    "Cannot resend an invitation that has already been accepted"
                )
                await self.uow.rollback()
                return Return.err(error)

            await self.uow.commit()

        logger.info(f"Invitation {invitation.id} re-issued")

        await dispatch_invitation_email(
            self.uow,
            self.notifications,
            invitation,
            process,
            self.frontend_url,
            self.expiration_days,
        )

        return Return.ok(to_invitation_response(invitation, process))
