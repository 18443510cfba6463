"""
Helpers shared by the invitation use cases.
"""

import logging
from datetime import datetime
from typing import Optional

from recruitment_gate.app.services.unit_of_work import UnitOfWork
from recruitment_gate.domain.entities import ProcessInvitation, SelectionProcess
from recruitment_gate.domain.invitation_lifecycle import is_overdue

from .dtos import InvitationResponse

logger = logging.getLogger(__name__)


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def to_invitation_response(
    invitation: ProcessInvitation, process: Optional[SelectionProcess] = None
) -> InvitationResponse:
    return InvitationResponse(
        id=str(invitation.id),
        process_id=str(invitation.process_id),
        process_name=process.name if process is not None else None,
        email=invitation.email,
        first_name=invitation.first_name,
        last_name=invitation.last_name,
        status=invitation.status.value,
        sent_at=_iso(invitation.sent_at),
        accepted_at=_iso(invitation.accepted_at),
        expires_at=invitation.expires_at.isoformat(),
        created_at=invitation.created_at.isoformat(),
    )


async def expire_if_overdue(
    uow: UnitOfWork, invitation: ProcessInvitation, now: datetime
) -> bool:
    """
    Persist pending -> expired for an overdue invitation.

    Every read path calls this before using the status, so an overdue
    invitation reads as expired whether or not the sweep has run.
    Returns True if a row was written and the caller must commit.
    """
    if not is_overdue(invitation, now):
        return False
    expired = await uow.invitations.mark_expired(invitation, now)
    if expired:
        logger.info(f"Invitation {invitation.id} expired on read")
    return expired
