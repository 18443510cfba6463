"""
Video Requirement Use Case DTOs (Data Transfer Objects)
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class VideoResponse(BaseModel):
    """Public view of a recorded video"""

    id: str
    worker_id: str
    process_id: str
    worker_process_id: Optional[str] = None
    video_url: str
    video_duration: Optional[int] = None
    video_size: Optional[int] = None
    device_info: Optional[dict] = None
    status: str
    review_notes: Optional[str] = None
    reviewed_at: Optional[str] = None
    recorded_at: str
    created_at: str


class CanAccessTestsResponse(BaseModel):
    can_access_tests: bool


class VideoStatusResponse(BaseModel):
    """Video state for a scope, as shown to the candidate"""

    has_video: bool
    status: Optional[str] = None
    video: Optional[VideoResponse] = None
    can_access_tests: bool


class VideoDownload(BaseModel):
    """Stored video opened for streaming"""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    stream: Any  # AsyncIterator[bytes]
    filename: str
    media_type: str = "video/webm"
    size: Optional[int] = None

