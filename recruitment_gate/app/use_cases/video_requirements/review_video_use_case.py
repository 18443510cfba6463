"""
Review Video Use Case

Records an evaluator's review of a video. Reviews are informational and do
not change whether the candidate can take tests.
"""

import logging
from typing import Optional
from uuid import UUID

from recruitment_gate.app.services.unit_of_work import UnitOfWork
from recruitment_gate.domain.base import utcnow
from recruitment_gate.domain.entities import VideoRequirementStatus
from recruitment_gate.libs.result import Error, Result, Return

from .common import to_video_response
from .dtos import VideoResponse

logger = logging.getLogger(__name__)


class ReviewVideoUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        reviewer_id: UUID,
        video_id: UUID,
        status: VideoRequirementStatus,
        review_notes: Optional[str] = None,
    ) -> Result[VideoResponse]:
        """
        Execute review video use case.

        Args:
            reviewer_id: User recording the review
            video_id: Video being reviewed
            status: Review decision
            review_notes: Optional free-text notes

        Returns:
            Result with the updated VideoResponse, or Error
        """
        async with self.uow:
            video = await self.uow.video_requirements.get_by_id(video_id)
            if video is None:
                return Return.err(Error("VIDEO_NOT_FOUND", "Video not found"))

            video.status = status
            video.review_notes = review_notes
            video.reviewed_at = utcnow()
            video.reviewed_by_id = reviewer_id

            video = await self.uow.video_requirements.update(video)
            await self.uow.commit()

        logger.info(f"Video {video.id} reviewed as {status.value} by {reviewer_id}")
        return Return.ok(to_video_response(video))
