"""
Upload Video Use Case

Stores a candidate's introductory video and records it for the scope.
"""

import logging
from typing import Optional
from uuid import UUID, uuid4

from recruitment_gate.app.repositories.errors import DuplicateRecordError
from recruitment_gate.app.services.artifact_storage import (
    IArtifactStorage,
    StorageUnavailableError,
)
from recruitment_gate.app.services.unit_of_work import UnitOfWork
from recruitment_gate.domain.base import utcnow
from recruitment_gate.domain.entities import (
    VideoRequirementStatus,
    WorkerVideoRequirement,
)
from recruitment_gate.libs.result import Error, Result, Return

from .common import find_scope_video, to_video_response
from .dtos import VideoResponse

logger = logging.getLogger(__name__)


def video_exists_error() -> Error:
    return Error("VIDEO_ALREADY_EXISTS", "A video has already been recorded for this process")


class UploadVideoUseCase:
    """
    Use case for uploading a recorded video.

    Business Rules:
    - The worker profile must exist and belong to the caller
    - The process must exist
    - A given application must exist and match the worker and process
    - One video per scope; a second upload fails with VIDEO_ALREADY_EXISTS
    - Storage failures surface as STORAGE_UNAVAILABLE and nothing is recorded
    - Videos are auto-approved on upload
    """

    def __init__(self, uow: UnitOfWork, storage: IArtifactStorage):
        self.uow = uow
        self.storage = storage

    async def execute(
        self,
        user_id: UUID,
        worker_id: UUID,
        process_id: UUID,
        data: bytes,
        worker_process_id: Optional[UUID] = None,
        video_duration: Optional[int] = None,
        device_info: Optional[dict] = None,
    ) -> Result[VideoResponse]:
        """
        Execute upload video use case.

        Args:
            user_id: Authenticated caller
            worker_id: Worker profile the video belongs to
            process_id: Selection process
            data: Raw video bytes
            worker_process_id: Application, when the candidate has applied
            video_duration: Duration in seconds reported by the recorder
            device_info: Recorder device metadata

        Returns:
            Result with VideoResponse DTO, or Error
        """
        async with self.uow:
            worker = await self.uow.workers.get_by_id(worker_id)
            if worker is None:
                return Return.err(Error("WORKER_NOT_FOUND", "Worker not found"))

            if worker.user_id != user_id:
                return Return.err(
                    Error("NOT_PROFILE_OWNER", "You can only upload videos for your own profile")
                )

            process = await self.uow.processes.get_by_id(process_id)
            if process is None:
                return Return.err(
                    Error("PROCESS_NOT_FOUND", f"Process {process_id} not found")
                )

            if worker_process_id is not None:
                # Verify the application belongs to this worker and process
                application = await self.uow.worker_processes.get_by_id(worker_process_id)
                if application is None or application.process_id != process_id:
                    return Return.err(
                        Error("WORKER_PROCESS_NOT_FOUND", "Application not found")
                    )
                if application.worker_id != worker_id:
                    return Return.err(
                        Error(
                            "NOT_PROFILE_OWNER",
                            "You can only upload videos for your own applications",
                        )
                    )

            existing = await find_scope_video(
                self.uow, worker_id, process_id, worker_process_id
            )
            if existing is not None:
                return Return.err(video_exists_error())

        key = f"videos/{worker_id}/{uuid4()}.webm"
        try:
            locator = await self.storage.store(data, key)
        except StorageUnavailableError as e:
            logger.error(f"Video upload for worker {worker_id} failed: {e}")
            return Return.err(
                Error("STORAGE_UNAVAILABLE", "Video storage is temporarily unavailable")
            )

        now = utcnow()
        video = WorkerVideoRequirement(
            worker_id=worker_id,
            process_id=process_id,
            worker_process_id=worker_process_id,
            video_url=locator,
            video_duration=video_duration,
            video_size=len(data),
            device_info=device_info,
            status=VideoRequirementStatus.approved,
            reviewed_at=now,
            recorded_at=now,
        )

        async with self.uow:
            try:
                video = await self.uow.video_requirements.create(video)
            except DuplicateRecordError:
                # Concurrent upload for the same scope won
                await self.storage.delete(locator)
                return Return.err(video_exists_error())
            await self.uow.commit()

        logger.info(f"Video {video.id} recorded for worker {worker_id}, process {process_id}")
        return Return.ok(to_video_response(video))
