"""
Process Invitation Entity

Single-use, expiring invitations for a candidate to apply to a selection process.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import text
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from .enums import InvitationStatus


class ProcessInvitation(SQLModel, table=True):
    """
    ProcessInvitation entity - token bound to one process and one email.

    Business Rules:
    - Email is stored lower-cased
    - At most one pending invitation per (process_id, email)
    - Token is unique across all invitations regardless of status
    - accepted_at is set if and only if status is accepted
    - sent_at is set only after the notification was delivered
    """

    __tablename__ = "process_invitations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    process_id: UUID = Field(
        foreign_key="selection_processes.id", nullable=False, index=True
    )
    email: str = Field(max_length=255, nullable=False, index=True)
    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)

    token: str = Field(unique=True, index=True, max_length=64)
    status: InvitationStatus = Field(default=InvitationStatus.pending)

    sent_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime, nullable=True)
    )
    accepted_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime, nullable=True)
    )
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))

    created_by_id: Optional[UUID] = Field(default=None, foreign_key="users.id")

    # Timestamps
    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime, nullable=False)
    )
    updated_at: datetime = Field(
        default_factory=utcnow,
        sa_column=Column(DateTime, nullable=False, onupdate=utcnow),
    )

    __table_args__ = (
        Index(
            "uq_invitation_pending_process_email",
            "process_id",
            "email",
            unique=True,
            sqlite_where=text("status = 'pending'"),
            postgresql_where=text("status = 'pending'"),
        ),
        Index("idx_invitation_status_expires_at", "status", "expires_at"),
    )
