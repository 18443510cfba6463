import json
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, Field

from config import ApplicationConfig
from recruitment_gate.api.error import ClientError, raise_for_error
from recruitment_gate.app.services.artifact_storage import IArtifactStorage
from recruitment_gate.app.services.unit_of_work import UnitOfWork
from recruitment_gate.app.use_cases.video_requirements import (
    CanAccessTestsResponse,
    CanAccessTestsUseCase,
    DownloadVideoUseCase,
    GetVideoStatusUseCase,
    ListVideosUseCase,
    ReviewVideoUseCase,
    UploadVideoUseCase,
    VideoResponse,
    VideoStatusResponse,
)
from recruitment_gate.depends import (
    get_artifact_storage,
    get_current_user,
    get_unit_of_work,
    require_roles,
)
from recruitment_gate.domain.entities import UserRole, VideoRequirementStatus
from recruitment_gate.libs.result import Error

router = APIRouter(prefix="/video-requirements", tags=["Video Requirements"])

require_reviewer = require_roles(UserRole.admin, UserRole.evaluator, UserRole.company)


class ReviewVideoRequest(BaseModel):
    """Review video HTTP request payload"""

    status: VideoRequirementStatus
    review_notes: Optional[str] = Field(None, max_length=2000)


@router.post(
    "/upload-file",
    status_code=status.HTTP_201_CREATED,
    response_model=VideoResponse,
)
async def upload_video(
    file: UploadFile = File(...),
    worker_id: UUID = Form(...),
    process_id: UUID = Form(...),
    worker_process_id: Optional[UUID] = Form(None),
    video_duration: Optional[int] = Form(None),
    device_info: Optional[str] = Form(None),
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    storage: IArtifactStorage = Depends(get_artifact_storage),
):
    """
    Upload Video

    Stores the recorded introductory video for a worker and process.

    Raises:
        - 400 Bad Request: INVALID_FILE_TYPE, INVALID_DEVICE_INFO
        - 403 Forbidden: NOT_PROFILE_OWNER
        - 404 Not Found: WORKER_NOT_FOUND, PROCESS_NOT_FOUND, WORKER_PROCESS_NOT_FOUND
        - 409 Conflict: VIDEO_ALREADY_EXISTS
        - 413 Payload Too Large: VIDEO_TOO_LARGE
        - 503 Service Unavailable: STORAGE_UNAVAILABLE
    """
    if file.content_type and not file.content_type.startswith("video/"):
        raise ClientError(Error("INVALID_FILE_TYPE", "File must be a video"))

    device = None
    if device_info:
        try:
            device = json.loads(device_info)
        except json.JSONDecodeError:
            device = None
        if not isinstance(device, dict):
            raise ClientError(
                Error("INVALID_DEVICE_INFO", "device_info must be a JSON object")
            )

    max_bytes = ApplicationConfig.MAX_VIDEO_SIZE_MB * 1024 * 1024
    data = await file.read(max_bytes + 1)
    if len(data) > max_bytes:
        raise ClientError(
            Error(
                "VIDEO_TOO_LARGE",
                f"Video exceeds the {ApplicationConfig.MAX_VIDEO_SIZE_MB} MB limit",
            ),
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
        )

    use_case = UploadVideoUseCase(uow, storage)
    result = await use_case.execute(
        user_id=UUID(current_user["user_id"]),
        worker_id=worker_id,
        process_id=process_id,
        data=data,
        worker_process_id=worker_process_id,
        video_duration=video_duration,
        device_info=device,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/status",
    status_code=status.HTTP_200_OK,
    response_model=VideoStatusResponse,
    dependencies=[Depends(get_current_user)],
)
async def get_video_status(
    worker_id: UUID,
    process_id: UUID,
    worker_process_id: Optional[UUID] = None,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = GetVideoStatusUseCase(uow)
    result = await use_case.execute(worker_id, process_id, worker_process_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/can-access-tests",
    status_code=status.HTTP_200_OK,
    response_model=CanAccessTestsResponse,
    dependencies=[Depends(get_current_user)],
)
async def can_access_tests(
    worker_id: UUID,
    process_id: UUID,
    worker_process_id: Optional[UUID] = None,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """True once a video has been recorded for the scope."""
    use_case = CanAccessTestsUseCase(uow)
    result = await use_case.execute(worker_id, process_id, worker_process_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=List[VideoResponse],
    dependencies=[Depends(require_reviewer)],
)
async def list_videos(
    worker_id: Optional[UUID] = None,
    process_id: Optional[UUID] = None,
    status_filter: Optional[VideoRequirementStatus] = Query(None, alias="status"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = ListVideosUseCase(uow)
    result = await use_case.execute(worker_id, process_id, status_filter)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch(
    "/{video_id}/review",
    status_code=status.HTTP_200_OK,
    response_model=VideoResponse,
)
async def review_video(
    video_id: UUID,
    request: ReviewVideoRequest,
    current_user: dict = Depends(require_reviewer),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Review Video

    Records the review decision. Does not change test access.

    Raises:
        - 404 Not Found: VIDEO_NOT_FOUND
    """
    use_case = ReviewVideoUseCase(uow)
    result = await use_case.execute(
        UUID(current_user["user_id"]), video_id, request.status, request.review_notes
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{video_id}/download",
    status_code=status.HTTP_200_OK,
    dependencies=[Depends(require_reviewer)],
)
async def download_video(
    video_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
    storage: IArtifactStorage = Depends(get_artifact_storage),
):
    """
    Download Video

    Raises:
        - 404 Not Found: VIDEO_NOT_FOUND
    """
    use_case = DownloadVideoUseCase(uow, storage)
    result = await use_case.execute(video_id)

    if result.is_err():
        raise_for_error(result.error)

    download = result.value
    headers = {"Content-Disposition": f'attachment; filename="{download.filename}"'}
    if download.size is not None:
        headers["Content-Length"] = str(download.size)
    return StreamingResponse(
        download.stream, media_type=download.media_type, headers=headers
    )
