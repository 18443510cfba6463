"""
Cancel Invitation Use Case

Handles cancelling pending invitations.
"""

import logging
from uuid import UUID

from recruitment_gate.app.services.unit_of_work import UnitOfWork
from recruitment_gate.domain.base import utcnow
from recruitment_gate.domain.invitation_lifecycle import (
    already_accepted_error,
    check_cancellable,
)
from recruitment_gate.libs.result import Error, Result, Return

from .common import expire_if_overdue, to_invitation_response
from .dtos import InvitationResponse

logger = logging.getLogger(__name__)


class CancelInvitationUseCase:
    """
    Use case for cancelling an invitation.

    Business Rules:
    - Only a pending invitation can be cancelled
    - Accepted fails with INVITATION_ALREADY_ACCEPTED
    - Expired / cancelled fail with INVITATION_EXPIRED / INVITATION_CANCELLED
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, invitation_id: UUID) -> Result[InvitationResponse]:
        """
        Execute cancel invitation use case.

        Args:
            invitation_id: ID of the invitation to cancel

        Returns:
            Result with the cancelled InvitationResponse, or Error
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

            error = check_cancellable(invitation, now)
            if error is not None:
                return Return.err(error)

            if not await self.uow.invitations.mark_cancelled(invitation):
                # Changed underneath us; report the state it moved to
                error = check_cancellable(invitation, now) or already_accepted_error(
                    "Cannot cancel an invitation that has already been accepted"
                )
                await self.uow.rollback()
                return Return.err(error)

            process = await self.uow.processes.get_by_id(invitation.process_id)
            await self.uow.commit()

        logger.info(f"Invitation {invitation.id} cancelled")
        return Return.ok(to_invitation_response(invitation, process))
