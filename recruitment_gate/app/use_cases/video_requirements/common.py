"""
Helpers shared by the video requirement use cases.
"""

from typing import Optional
from uuid import UUID

from recruitment_gate.app.services.unit_of_work import UnitOfWork
from recruitment_gate.domain.entities import WorkerVideoRequirement

from .dtos import VideoResponse


def to_video_response(video: WorkerVideoRequirement) -> VideoResponse:
    return VideoResponse(
        id=str(video.id),
        worker_id=str(video.worker_id),
        process_id=str(video.process_id),
        worker_process_id=str(video.worker_process_id) if video.worker_process_id else None,
        video_url=video.video_url,
        video_duration=video.video_duration,
        video_size=video.video_size,
        device_info=video.device_info,
        status=video.status.value,
        review_notes=video.review_notes,
        reviewed_at=video.reviewed_at.isoformat() if video.reviewed_at else None,
        recorded_at=video.recorded_at.isoformat(),
        created_at=video.created_at.isoformat(),
    )


async def find_scope_video(
    uow: UnitOfWork,
    worker_id: UUID,
    process_id: UUID,
    worker_process_id: Optional[UUID] = None,
) -> Optional[WorkerVideoRequirement]:
    """Video for the application if given, otherwise for the worker/process pair"""
    return await uow.video_requirements.get_for_scope(
        worker_id, process_id, worker_process_id
    )
