from uuid import uuid4

import pytest
from unittest.mock import AsyncMock, MagicMock

from recruitment_gate.app.repositories.errors import DuplicateRecordError
from recruitment_gate.app.services.artifact_storage import (
    ArtifactNotFoundError,
    StorageUnavailableError,
)
from recruitment_gate.app.use_cases.video_requirements import (
    CanAccessTestsUseCase,
    DownloadVideoUseCase,
    GetVideoStatusUseCase,
    ReviewVideoUseCase,
    UploadVideoUseCase,
)
from recruitment_gate.domain.entities import (
    VideoRequirementStatus,
    WorkerProcess,
    WorkerVideoRequirement,
)

VIDEO_BYTES = b"\x1aE\xdf\xa3" + b"0" * 1024


@pytest.fixture
def mock_storage():
    storage = MagicMock()
    storage.store = AsyncMock(side_effect=lambda data, key: key)
    storage.delete = AsyncMock()
    storage.retrieve_stream = AsyncMock()
    return storage


@pytest.fixture
def upload_setup(mock_uow, process, worker):
    mock_uow.workers.get_by_id.return_value = worker
    mock_uow.processes.get_by_id.return_value = process


def make_video(worker, process, **overrides):
    fields = dict(
        id=uuid4(),
        worker_id=worker.id,
        process_id=process.id,
        video_url=f"videos/{worker.id}/abc.webm",
        video_size=len(VIDEO_BYTES),
        status=VideoRequirementStatus.approved,
    )
    fields.update(overrides)
    return WorkerVideoRequirement(**fields)


@pytest.mark.asyncio
async def test_upload_video_success(
    mock_uow, mock_storage, upload_setup, user, worker, process
):
    use_case = UploadVideoUseCase(mock_uow, mock_storage)
    result = await use_case.execute(
        user_id=user.id,
        worker_id=worker.id,
        process_id=process.id,
        data=VIDEO_BYTES,
        video_duration=42,
        device_info={"browser": "firefox"},
    )

    assert result.is_ok()
    video = result.value
    assert video.video_url.startswith(f"videos/{worker.id}/")
    assert video.video_url.endswith(".webm")
    assert video.video_size == len(VIDEO_BYTES)
    assert video.status == "approved"
    assert video.device_info == {"browser": "firefox"}
    mock_storage.store.assert_called_once()
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_upload_for_someone_elses_profile(
    mock_uow, mock_storage, upload_setup, worker, process
):
    use_case = UploadVideoUseCase(mock_uow, mock_storage)
    result = await use_case.execute(uuid4(), worker.id, process.id, VIDEO_BYTES)

    assert result.is_err()
    assert result.error.code == "NOT_PROFILE_OWNER"
    mock_storage.store.assert_not_called()


@pytest.mark.asyncio
async def test_upload_unknown_worker(mock_uow, mock_storage, user):
    use_case = UploadVideoUseCase(mock_uow, mock_storage)
    result = await use_case.execute(user.id, uuid4(), uuid4(), VIDEO_BYTES)

    assert result.error.code == "WORKER_NOT_FOUND"


@pytest.mark.asyncio
async def test_upload_into_own_application(
    mock_uow, mock_storage, upload_setup, user, worker, process
):
    application = WorkerProcess(id=uuid4(), worker_id=worker.id, process_id=process.id)
    mock_uow.worker_processes.get_by_id.return_value = application

    use_case = UploadVideoUseCase(mock_uow, mock_storage)
    result = await use_case.execute(
        user.id, worker.id, process.id, VIDEO_BYTES, worker_process_id=application.id
    )

    assert result.is_ok()
    assert result.value.worker_process_id == str(application.id)
    mock_uow.worker_processes.get_by_id.assert_called_once_with(application.id)


@pytest.mark.asyncio
async def test_upload_into_another_workers_application(
    mock_uow, mock_storage, upload_setup, user, worker, process
):
    application = WorkerProcess(id=uuid4(), worker_id=uuid4(), process_id=process.id)
    mock_uow.worker_processes.get_by_id.return_value = application

    use_case = UploadVideoUseCase(mock_uow, mock_storage)
    result = await use_case.execute(
        user.id, worker.id, process.id, VIDEO_BYTES, worker_process_id=application.id
    )

    assert result.is_err()
    assert result.error.code == "NOT_PROFILE_OWNER"
    mock_storage.store.assert_not_called()
    mock_uow.video_requirements.create.assert_not_called()


@pytest.mark.asyncio
async def test_upload_into_application_for_other_process(
    mock_uow, mock_storage, upload_setup, user, worker, process
):
    application = WorkerProcess(id=uuid4(), worker_id=worker.id, process_id=uuid4())
    mock_uow.worker_processes.get_by_id.return_value = application

    use_case = UploadVideoUseCase(mock_uow, mock_storage)
    result = await use_case.execute(
        user.id, worker.id, process.id, VIDEO_BYTES, worker_process_id=application.id
    )

    assert result.error.code == "WORKER_PROCESS_NOT_FOUND"
    mock_storage.store.assert_not_called()


@pytest.mark.asyncio
async def test_upload_into_unknown_application(
    mock_uow, mock_storage, upload_setup, user, worker, process
):
    use_case = UploadVideoUseCase(mock_uow, mock_storage)
    result = await use_case.execute(
        user.id, worker.id, process.id, VIDEO_BYTES, worker_process_id=uuid4()
    )

    assert result.error.code == "WORKER_PROCESS_NOT_FOUND"
    mock_storage.store.assert_not_called()


@pytest.mark.asyncio
async def test_second_upload_conflicts(
    mock_uow, mock_storage, upload_setup, user, worker, process
):
    mock_uow.video_requirements.get_for_scope.return_value = make_video(worker, process)

    use_case = UploadVideoUseCase(mock_uow, mock_storage)
    result = await use_case.execute(user.id, worker.id, process.id, VIDEO_BYTES)

    assert result.is_err()
    assert result.error.code == "VIDEO_ALREADY_EXISTS"
    mock_storage.store.assert_not_called()


@pytest.mark.asyncio
async def test_concurrent_upload_removes_orphaned_object(
    mock_uow, mock_storage, upload_setup, user, worker, process
):
    mock_uow.video_requirements.create.side_effect = DuplicateRecordError("uq_video_scope")

    use_case = UploadVideoUseCase(mock_uow, mock_storage)
    result = await use_case.execute(user.id, worker.id, process.id, VIDEO_BYTES)

    assert result.error.code == "VIDEO_ALREADY_EXISTS"
    stored_key = mock_storage.store.call_args[0][1]
    mock_storage.delete.assert_called_once_with(stored_key)


@pytest.mark.asyncio
async def test_storage_failure(mock_uow, mock_storage, upload_setup, user, worker, process):
    mock_storage.store.side_effect = StorageUnavailableError("disk full")

    use_case = UploadVideoUseCase(mock_uow, mock_storage)
    result = await use_case.execute(user.id, worker.id, process.id, VIDEO_BYTES)

    assert result.is_err()
    assert result.error.code == "STORAGE_UNAVAILABLE"
    mock_uow.video_requirements.create.assert_not_called()


@pytest.mark.asyncio
async def test_gate_follows_video_existence(mock_uow, worker, process):
    use_case = CanAccessTestsUseCase(mock_uow)

    result = await use_case.execute(worker.id, process.id)
    assert result.value.can_access_tests is False

    mock_uow.video_requirements.get_for_scope.return_value = make_video(
        worker, process, status=VideoRequirementStatus.rejected
    )
    result = await use_case.execute(worker.id, process.id)
    # Review status is not consulted
    assert result.value.can_access_tests is True


@pytest.mark.asyncio
async def test_gate_prefers_application_scope(mock_uow, worker, process):
    worker_process_id = uuid4()

    await CanAccessTestsUseCase(mock_uow).execute(worker.id, process.id, worker_process_id)

    mock_uow.video_requirements.get_for_scope.assert_called_once_with(
        worker.id, process.id, worker_process_id
    )


@pytest.mark.asyncio
async def test_video_status(mock_uow, worker, process):
    result = await GetVideoStatusUseCase(mock_uow).execute(worker.id, process.id)
    assert result.value.has_video is False
    assert result.value.video is None

    mock_uow.video_requirements.get_for_scope.return_value = make_video(worker, process)
    result = await GetVideoStatusUseCase(mock_uow).execute(worker.id, process.id)
    assert result.value.has_video is True
    assert result.value.status == "approved"
    assert result.value.can_access_tests is True


@pytest.mark.asyncio
async def test_review_video(mock_uow, worker, process):
    video = make_video(worker, process)
    mock_uow.video_requirements.get_by_id.return_value = video
    reviewer_id = uuid4()

    result = await ReviewVideoUseCase(mock_uow).execute(
        reviewer_id, video.id, VideoRequirementStatus.resubmission_required, "Too dark"
    )

    assert result.is_ok()
    assert result.value.status == "resubmission_required"
    assert result.value.review_notes == "Too dark"
    assert video.reviewed_by_id == reviewer_id
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_review_unknown_video(mock_uow):
    result = await ReviewVideoUseCase(mock_uow).execute(
        uuid4(), uuid4(), VideoRequirementStatus.approved
    )

    assert result.error.code == "VIDEO_NOT_FOUND"


@pytest.mark.asyncio
async def test_download_missing_object(mock_uow, mock_storage, worker, process):
    video = make_video(worker, process)
    mock_uow.video_requirements.get_by_id.return_value = video
    mock_storage.retrieve_stream.side_effect = ArtifactNotFoundError(video.video_url)

    result = await DownloadVideoUseCase(mock_uow, mock_storage).execute(video.id)

    assert result.is_err()
    assert result.error.code == "VIDEO_NOT_FOUND"
