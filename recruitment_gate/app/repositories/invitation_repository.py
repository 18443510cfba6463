from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Tuple
from uuid import UUID

from recruitment_gate.domain.entities import InvitationStatus, ProcessInvitation


class IInvitationRepository(ABC):
    """Process invitation repository interface - application layer

    Status transitions are conditional updates on the expected prior status.
    Each returns True when the row was transitioned, False when another writer
    got there first; the passed invitation is refreshed either way.
    """

    @abstractmethod
    async def get_by_id(self, invitation_id: UUID) -> Optional[ProcessInvitation]:
        """Get invitation by ID"""
        pass

    @abstractmethod
    async def get_by_token(self, token: str) -> Optional[ProcessInvitation]:
        """Get invitation by token"""
        pass

    @abstractmethod
    async def get_pending_by_process_and_email(
        self, process_id: UUID, email: str
    ) -> Optional[ProcessInvitation]:
        """Get pending invitation by process and (lower-cased) email"""
        pass

    @abstractmethod
    async def get_pending_by_email(self, email: str) -> List[ProcessInvitation]:
        """Get all pending invitations addressed to an email, newest first"""
        pass

    @abstractmethod
    async def find_all(
        self,
        process_id: Optional[UUID] = None,
        status: Optional[InvitationStatus] = None,
        search: Optional[str] = None,
        offset: int = 0,
        limit: int = 20,
    ) -> Tuple[List[ProcessInvitation], int]:
        """Filtered page of invitations, newest first, with the total count"""
        pass

    @abstractmethod
    async def create(self, invitation: ProcessInvitation) -> ProcessInvitation:
        """Insert a new invitation; raises DuplicateRecordError on conflict"""
        pass

    @abstractmethod
    async def mark_expired(self, invitation: ProcessInvitation, now: datetime) -> bool:
        """pending -> expired, only if expires_at < now"""
        pass

    @abstractmethod
    async def mark_accepted(
        self, invitation: ProcessInvitation, accepted_at: datetime
    ) -> bool:
        """pending -> accepted, only if not yet overdue at accepted_at"""
        pass

    @abstractmethod
    async def mark_cancelled(self, invitation: ProcessInvitation) -> bool:
        """pending -> cancelled"""
        pass

    @abstractmethod
    async def reissue(
        self, invitation: ProcessInvitation, token: str, expires_at: datetime
    ) -> bool:
        """any non-accepted status -> pending with a new token and expiry, not yet sent;
        raises DuplicateRecordError if another pending invitation exists"""
        pass

    @abstractmethod
    async def mark_sent(self, invitation: ProcessInvitation, sent_at: datetime) -> None:
        """Record a successful notification"""
        pass

    @abstractmethod
    async def expire_overdue(self, now: datetime) -> int:
        """Sweep: pending invitations with expires_at < now -> expired"""
        pass
