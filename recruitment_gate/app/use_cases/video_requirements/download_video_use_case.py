"""
Download Video Use Case

Opens a stored video for streaming back to an evaluator.
"""

import logging
from uuid import UUID

from recruitment_gate.app.services.artifact_storage import (
    ArtifactNotFoundError,
    IArtifactStorage,
)
from recruitment_gate.app.services.unit_of_work import UnitOfWork
from recruitment_gate.libs.result import Error, Result, Return

from .dtos import VideoDownload

logger = logging.getLogger(__name__)


class DownloadVideoUseCase:
    def __init__(self, uow: UnitOfWork, storage: IArtifactStorage):
        self.uow = uow
        self.storage = storage

    async def execute(self, video_id: UUID) -> Result[VideoDownload]:
        async with self.uow:
            video = await self.uow.video_requirements.get_by_id(video_id)
            if video is None:
                return Return.err(Error("VIDEO_NOT_FOUND", "Video not found"))
            locator = video.video_url
            size = video.video_size

        try:
            stream = await self.storage.retrieve_stream(locator)
        except ArtifactNotFoundError:
            logger.warning(f"Video {video_id} has no stored object at {locator}")
            return Return.err(Error("VIDEO_NOT_FOUND", "Video file not found"))

        return Return.ok(
            VideoDownload(stream=stream, filename=f"{video_id}.webm", size=size)
        )
