"""
Get Video Status Use Case
"""

from typing import Optional
from uuid import UUID

from recruitment_gate.app.services.unit_of_work import UnitOfWork
from recruitment_gate.libs.result import Result, Return

from .common import find_scope_video, to_video_response
from .dtos import VideoStatusResponse


class GetVideoStatusUseCase:
    """Video presence and review status for a scope."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        worker_id: UUID,
        process_id: UUID,
        worker_process_id: Optional[UUID] = None,
    ) -> Result[VideoStatusResponse]:
        async with self.uow:
            video = await find_scope_video(
                self.uow, worker_id, process_id, worker_process_id
            )
            if video is None:
                return Return.ok(
                    VideoStatusResponse(has_video=False, can_access_tests=False)
                )

            return Return.ok(
                VideoStatusResponse(
                    has_video=True,
                    status=video.status.value,
                    video=to_video_response(video),
                    can_access_tests=True,
                )
            )
