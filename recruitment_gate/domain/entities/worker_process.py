"""
WorkerProcess Entity

A worker's application to a selection process.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from .enums import WorkerProcessStatus


class WorkerProcess(SQLModel, table=True):
    """
    WorkerProcess entity - links a Worker to a SelectionProcess.

    Business Rules:
    - (worker_id, process_id) must be unique; enforced by the database so
      concurrent acceptances cannot create two applications
    """

    __tablename__ = "worker_processes"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    worker_id: UUID = Field(foreign_key="workers.id", nullable=False, index=True)
    process_id: UUID = Field(
        foreign_key="selection_processes.id", nullable=False, index=True
    )

    status: WorkerProcessStatus = Field(default=WorkerProcessStatus.pending)

    applied_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime, nullable=False)
    )
    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime, nullable=False)
    )

    __table_args__ = (
        Index("uq_worker_process_worker_process", "worker_id", "process_id", unique=True),
    )
