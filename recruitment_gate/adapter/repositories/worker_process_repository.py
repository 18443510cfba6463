from typing import Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from recruitment_gate.app.repositories.errors import DuplicateRecordError
from recruitment_gate.app.repositories.worker_process_repository import (
    IWorkerProcessRepository,
)
from recruitment_gate.domain.entities import WorkerProcess


class WorkerProcessRepository(IWorkerProcessRepository):
    """Application repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, worker_process_id: UUID) -> Optional[WorkerProcess]:
        """Get application by ID"""
        stmt = select(WorkerProcess).where(WorkerProcess.id == worker_process_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_worker_and_process(
        self, worker_id: UUID, process_id: UUID
    ) -> Optional[WorkerProcess]:
        """Get application by worker and process"""
        stmt = select(WorkerProcess).where(
            WorkerProcess.worker_id == worker_id,
            WorkerProcess.process_id == process_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, worker_process: WorkerProcess) -> WorkerProcess:
        """Create a new application"""
        self.session.add(worker_process)
        try:
            await self.session.flush()
        except IntegrityError:
            await self.session.rollback()
            raise DuplicateRecordError("uq_worker_process_worker_process")
        await self.session.refresh(worker_process)
        return worker_process
