"""
Get My Invitations Use Case

Pending invitations addressed to the signed-in candidate, for their dashboard.
"""

from typing import List
from uuid import UUID

from recruitment_gate.app.services.unit_of_work import UnitOfWork
from recruitment_gate.domain.base import utcnow
from recruitment_gate.domain.entities import InvitationStatus
from recruitment_gate.libs.result import Error, Result, Return

from .common import expire_if_overdue, to_invitation_response
from .dtos import InvitationResponse


class GetMyInvitationsUseCase:
    """
    Use case for listing a candidate's open invitations.

    Business Rules:
    - Matched on the user's email, case-insensitively
    - Overdue invitations are expired and left out
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[List[InvitationResponse]]:
        now = utcnow()
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            invitations = await self.uow.invitations.get_pending_by_email(user.email)

            expired_any = False
            valid = []
            for invitation in invitations:
                if await expire_if_overdue(self.uow, invitation, now):
                    expired_any = True
                if invitation.status == InvitationStatus.pending and invitation.expires_at >= now:
                    valid.append(invitation)
            if expired_any:
                await self.uow.commit()

            responses = []
            for invitation in valid:
                process = await self.uow.processes.get_by_id(invitation.process_id)
                responses.append(to_invitation_response(invitation, process))

        return Return.ok(responses)
