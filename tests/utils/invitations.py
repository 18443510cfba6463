import re
from datetime import timedelta
from uuid import UUID

from sqlalchemy import update

from recruitment_gate.domain.base import utcnow
from recruitment_gate.domain.entities import ProcessInvitation


def token_from_email(text_body: str) -> str:
    match = re.search(r"/invitations/([A-Za-z0-9_\-]+)", text_body)
    assert match, "invitation link not found in email"
    return match.group(1)


async def backdate_invitation(db_session, invitation_id: str, days: int = 1):
    """Move an invitation's expiry into the past"""
    await db_session.execute(
        update(ProcessInvitation)
        .where(ProcessInvitation.id == UUID(invitation_id))
        .values(expires_at=utcnow() - timedelta(days=days))
    )
    await db_session.commit()
