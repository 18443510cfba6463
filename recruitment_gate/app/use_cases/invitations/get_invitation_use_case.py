"""
Get Invitation Use Case
"""

from uuid import UUID

from recruitment_gate.app.services.unit_of_work import UnitOfWork
from recruitment_gate.domain.base import utcnow
from recruitment_gate.libs.result import Error, Result, Return

from .common import expire_if_overdue, to_invitation_response
from .dtos import InvitationResponse


class GetInvitationUseCase:
    """Operator read of a single invitation by ID, with lazy expiration."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, invitation_id: UUID) -> Result[InvitationResponse]:
        now = utcnow()
        async with self.uow:
            invitation = await self.uow.invitations.get_by_id(invitation_id)
            if invitation is None:
                return Return.err(
                    Error("INVITATION_NOT_FOUND", f"Invitation {invitation_id} not found")
                )

            if await expire_if_overdue(self.uow, invitation, now):
                await self.uow.commit()

            process = await self.uow.processes.get_by_id(invitation.process_id)
            return Return.ok(to_invitation_response(invitation, process))
