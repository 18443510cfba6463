"""
Video Requirement Use Cases

Recording, gating and reviewing candidates' introductory videos.
"""

from .can_access_tests_use_case import CanAccessTestsUseCase
from .download_video_use_case import DownloadVideoUseCase
from .get_video_status_use_case import GetVideoStatusUseCase
from .list_videos_use_case import ListVideosUseCase
from .review_video_use_case import ReviewVideoUseCase
from .upload_video_use_case import UploadVideoUseCase
from .dtos import (
    CanAccessTestsResponse,
    VideoDownload,
    VideoResponse,
    VideoStatusResponse,
)

__all__ = [
    "CanAccessTestsUseCase",
    "DownloadVideoUseCase",
    "GetVideoStatusUseCase",
    "ListVideosUseCase",
    "ReviewVideoUseCase",
    "UploadVideoUseCase",
    "CanAccessTestsResponse",
    "VideoDownload",
    "VideoResponse",
    "VideoStatusResponse",
]
