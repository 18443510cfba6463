from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from recruitment_gate.app.repositories.worker_repository import IWorkerRepository
from recruitment_gate.domain.entities import Worker


class WorkerRepository(IWorkerRepository):
    """Worker repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, worker_id: UUID) -> Optional[Worker]:
        """Get worker by ID"""
        stmt = select(Worker).where(Worker.id == worker_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_user_id(self, user_id: UUID) -> Optional[Worker]:
        """Get the worker linked to a user"""
        stmt = select(Worker).where(Worker.user_id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
