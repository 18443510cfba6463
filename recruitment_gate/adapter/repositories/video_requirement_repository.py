from typing import List, Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from recruitment_gate.app.repositories.errors import DuplicateRecordError
from recruitment_gate.app.repositories.video_requirement_repository import (
    IVideoRequirementRepository,
)
from recruitment_gate.domain.entities import (
    VideoRequirementStatus,
    WorkerVideoRequirement,
)


class VideoRequirementRepository(IVideoRequirementRepository):
    """Worker video requirement repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, video_id: UUID) -> Optional[WorkerVideoRequirement]:
        """Get video requirement by ID"""
        stmt = select(WorkerVideoRequirement).where(WorkerVideoRequirement.id == video_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_for_scope(
        self,
        worker_id: UUID,
        process_id: UUID,
        worker_process_id: Optional[UUID] = None,
    ) -> Optional[WorkerVideoRequirement]:
        """Most recent video for the most specific scope available"""
        if worker_process_id is not None:
            condition = [WorkerVideoRequirement.worker_process_id == worker_process_id]
        else:
            condition = [
                WorkerVideoRequirement.worker_id == worker_id,
                WorkerVideoRequirement.process_id == process_id,
            ]
        stmt = (
            select(WorkerVideoRequirement)
            .where(*condition)
            .order_by(WorkerVideoRequirement.created_at.desc())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_all(
        self,
        worker_id: Optional[UUID] = None,
        process_id: Optional[UUID] = None,
        status: Optional[VideoRequirementStatus] = None,
    ) -> List[WorkerVideoRequirement]:
        """Filtered list of videos, newest first"""
        stmt = select(WorkerVideoRequirement)
        if worker_id is not None:
            stmt = stmt.where(WorkerVideoRequirement.worker_id == worker_id)
        if process_id is not None:
            stmt = stmt.where(WorkerVideoRequirement.process_id == process_id)
        if status is not None:
            stmt = stmt.where(WorkerVideoRequirement.status == status)
        stmt = stmt.order_by(WorkerVideoRequirement.created_at.desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, video: WorkerVideoRequirement) -> WorkerVideoRequirement:
        """Create a new video requirement"""
        self.session.add(video)
        try:
            await self.session.flush()
        except IntegrityError:
            await self.session.rollback()
            raise DuplicateRecordError("uq_video_scope")
        await self.session.refresh(video)
        return video

    async def update(self, video: WorkerVideoRequirement) -> WorkerVideoRequirement:
        """Update existing video requirement"""
        self.session.add(video)
        await self.session.flush()
        await self.session.refresh(video)
        return video
