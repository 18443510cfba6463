from datetime import datetime
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import func, or_, update
from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from recruitment_gate.app.repositories.errors import DuplicateRecordError
from recruitment_gate.app.repositories.invitation_repository import IInvitationRepository
from recruitment_gate.domain.entities import InvitationStatus, ProcessInvitation


class InvitationRepository(IInvitationRepository):
    """Process invitation repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, invitation_id: UUID) -> Optional[ProcessInvitation]:
        """Get invitation by ID"""
        stmt = select(ProcessInvitation).where(ProcessInvitation.id == invitation_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_token(self, token: str) -> Optional[ProcessInvitation]:
        """Get invitation by token"""
        stmt = select(ProcessInvitation).where(ProcessInvitation.token == token)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_pending_by_process_and_email(
        self, process_id: UUID, email: str
    ) -> Optional[ProcessInvitation]:
        """Get pending invitation by process and email"""
        stmt = select(ProcessInvitation).where(
            ProcessInvitation.process_id == process_id,
            ProcessInvitation.email == email.lower(),
            ProcessInvitation.status == InvitationStatus.pending,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_pending_by_email(self, email: str) -> List[ProcessInvitation]:
        """Get all pending invitations addressed to an email"""
        stmt = (
            select(ProcessInvitation)
            .where(
                ProcessInvitation.email == email.lower(),
                ProcessInvitation.status == InvitationStatus.pending,
            )
            .order_by(ProcessInvitation.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def find_all(
        self,
        process_id: Optional[UUID] = None,
        status: Optional[InvitationStatus] = None,
        search: Optional[str] = None,
        offset: int = 0,
        limit: int = 20,
    ) -> Tuple[List[ProcessInvitation], int]:
        """Filtered page of invitations with the total count"""
        conditions = []
        if process_id is not None:
            conditions.append(ProcessInvitation.process_id == process_id)
        if status is not None:
            conditions.append(ProcessInvitation.status == status)
        if search:
            pattern = f"%{search.lower()}%"
            conditions.append(
                or_(
                    func.lower(ProcessInvitation.email).like(pattern),
                    func.lower(ProcessInvitation.first_name).like(pattern),
                    func.lower(ProcessInvitation.last_name).like(pattern),
                )
            )

        count_stmt = select(func.count()).select_from(ProcessInvitation).where(*conditions)
        total = (await self.session.execute(count_stmt)).scalar_one()

        stmt = (
            select(ProcessInvitation)
            .where(*conditions)
            .order_by(ProcessInvitation.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all()), total

    async def create(self, invitation: ProcessInvitation) -> ProcessInvitation:
        """Create a new invitation"""
        self.session.add(invitation)
        try:
            await self.session.flush()
        except IntegrityError:
            await self.session.rollback()
            raise DuplicateRecordError("uq_invitation_pending_process_email")
        await self.session.refresh(invitation)
        return invitation

    async def mark_expired(self, invitation: ProcessInvitation, now: datetime) -> bool:
        """Conditionally expire an overdue pending invitation"""
        return await self._transition(
            invitation,
            [
                ProcessInvitation.status == InvitationStatus.pending,
                ProcessInvitation.expires_at < now,
            ],
            status=InvitationStatus.expired,
        )

    async def mark_accepted(
        self, invitation: ProcessInvitation, accepted_at: datetime
    ) -> bool:
        """Conditionally accept a pending, unexpired invitation"""
        return await self._transition(
            invitation,
            [
                ProcessInvitation.status == InvitationStatus.pending,
                ProcessInvitation.expires_at >= accepted_at,
            ],
            status=InvitationStatus.accepted,
            accepted_at=accepted_at,
        )

    async def mark_cancelled(self, invitation: ProcessInvitation) -> bool:
        """Conditionally cancel a pending invitation"""
        return await self._transition(
            invitation,
            [ProcessInvitation.status == InvitationStatus.pending],
            status=InvitationStatus.cancelled,
        )

    async def reissue(
        self, invitation: ProcessInvitation, token: str, expires_at: datetime
    ) -> bool:
        """Conditionally re-issue any invitation that was not accepted"""
        try:
            return await self._transition(
                invitation,
                [ProcessInvitation.status != InvitationStatus.accepted],
                status=InvitationStatus.pending,
                token=token,
                expires_at=expires_at,
                accepted_at=None,
                sent_at=None,
            )
        except IntegrityError:
            await self.session.rollback()
            raise DuplicateRecordError("uq_invitation_pending_process_email")

    async def mark_sent(self, invitation: ProcessInvitation, sent_at: datetime) -> None:
        """Record a successful notification"""
        invitation.sent_at = sent_at
        self.session.add(invitation)
        await self.session.flush()
        await self.session.refresh(invitation)

    async def expire_overdue(self, now: datetime) -> int:
        """Expire every overdue pending invitation in one statement"""
        stmt = (
            update(ProcessInvitation)
            .where(
                ProcessInvitation.status == InvitationStatus.pending,
                ProcessInvitation.expires_at < now,
            )
            .values(status=InvitationStatus.expired)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount or 0

    async def _transition(
        self, invitation: ProcessInvitation, conditions: list, **values
    ) -> bool:
        stmt = (
            update(ProcessInvitation)
            .where(ProcessInvitation.id == invitation.id, *conditions)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.refresh(invitation)
        return result.rowcount == 1
