"""
WorkerVideoRequirement Entity

Introductory video a worker records before taking assessments.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import BigInteger, Text, text
from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from .enums import VideoRequirementStatus


class WorkerVideoRequirement(SQLModel, table=True):
    """
    WorkerVideoRequirement entity - one recorded video per scope.

    Business Rules:
    - Scope is the application (worker_process_id) when known, otherwise
      the (worker_id, process_id) pair
    - Existence alone unlocks tests; status is informational
    - A second video for the same scope is rejected, never overwritten
    """

    __tablename__ = "worker_video_requirements"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    worker_id: UUID = Field(foreign_key="workers.id", nullable=False, index=True)
    process_id: UUID = Field(
        foreign_key="selection_processes.id", nullable=False, index=True
    )
    worker_process_id: Optional[UUID] = Field(
        default=None, foreign_key="worker_processes.id", index=True
    )

    video_url: str = Field(max_length=500)
    video_duration: Optional[int] = None  # seconds
    video_size: Optional[int] = Field(
        default=None, sa_column=Column(BigInteger, nullable=True)
    )  # bytes
    device_info: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    status: VideoRequirementStatus = Field(
        default=VideoRequirementStatus.pending_review
    )
    review_notes: Optional[str] = Field(
        default=None, sa_column=Column(Text, nullable=True)
    )
    reviewed_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime, nullable=True)
    )
    reviewed_by_id: Optional[UUID] = Field(default=None, foreign_key="users.id")

    # Timestamps
    recorded_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime, nullable=False)
    )
    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime, nullable=False)
    )
    updated_at: datetime = Field(
        default_factory=utcnow,
        sa_column=Column(DateTime, nullable=False, onupdate=utcnow),
    )

    __table_args__ = (
        Index(
            "uq_video_worker_process_pair",
            "worker_id",
            "process_id",
            unique=True,
            sqlite_where=text("worker_process_id IS NULL"),
            postgresql_where=text("worker_process_id IS NULL"),
        ),
        Index(
            "uq_video_worker_process_id",
            "worker_process_id",
            unique=True,
            sqlite_where=text("worker_process_id IS NOT NULL"),
            postgresql_where=text("worker_process_id IS NOT NULL"),
        ),
        Index("idx_video_status", "status"),
    )
