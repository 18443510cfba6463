"""
Sweep Expired Invitations Use Case

Maintenance pass that persists expiry for every overdue pending invitation.
"""

import logging

from recruitment_gate.app.services.unit_of_work import UnitOfWork
from recruitment_gate.domain.base import utcnow
from recruitment_gate.libs.result import Result, Return

from .dtos import SweepExpiredResponse

logger = logging.getLogger(__name__)


class SweepExpiredInvitationsUseCase:
    """Expire overdue pending invitations in one statement. Safe to re-run."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[SweepExpiredResponse]:
        async with self.uow:
            count = await self.uow.invitations.expire_overdue(utcnow())
            await self.uow.commit()

        logger.info(f"Expired {count} overdue invitations")
        return Return.ok(SweepExpiredResponse(expired_count=count))
