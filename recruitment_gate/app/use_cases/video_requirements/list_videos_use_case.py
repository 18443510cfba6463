"""
List Videos Use Case
"""

from typing import List, Optional
from uuid import UUID

from recruitment_gate.app.services.unit_of_work import UnitOfWork
from recruitment_gate.domain.entities import VideoRequirementStatus
from recruitment_gate.libs.result import Result, Return

from .common import to_video_response
from .dtos import VideoResponse


class ListVideosUseCase:
    """Videos for review, filtered by process, worker and status, newest first."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        worker_id: Optional[UUID] = None,
        process_id: Optional[UUID] = None,
        status: Optional[VideoRequirementStatus] = None,
    ) -> Result[List[VideoResponse]]:
        async with self.uow:
            videos = await self.uow.video_requirements.find_all(
                worker_id=worker_id, process_id=process_id, status=status
            )
            return Return.ok([to_video_response(video) for video in videos])
