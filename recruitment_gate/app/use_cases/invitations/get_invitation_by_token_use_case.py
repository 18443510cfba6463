"""
Get Invitation By Token Use Case

Public, side-effect-free status read used by the invitation landing page.
"""

from recruitment_gate.app.services.unit_of_work import UnitOfWork
from recruitment_gate.domain.base import utcnow
from recruitment_gate.libs.result import Error, Result, Return

from .common import expire_if_overdue, to_invitation_response
from .dtos import InvitationResponse


class GetInvitationByTokenUseCase:
    """
    Use case for reading an invitation by its token.

    Business Rules:
    - Unknown token fails with INVITATION_NOT_FOUND
    - An overdue pending invitation is persisted and reported as expired
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, token: str) -> Result[InvitationResponse]:
        now = utcnow()
        async with self.uow:
            invitation = await self.uow.invitations.get_by_token(token)
            if invitation is None:
                return Return.err(
                    Error("INVITATION_NOT_FOUND", "Invitation not found")
                )

            if await expire_if_overdue(self.uow, invitation, now):
                await self.uow.commit()

            process = await self.uow.processes.get_by_id(invitation.process_id)
            return Return.ok(to_invitation_response(invitation, process))
