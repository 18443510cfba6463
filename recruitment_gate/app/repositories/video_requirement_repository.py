from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from recruitment_gate.domain.entities import (
    VideoRequirementStatus,
    WorkerVideoRequirement,
)


class IVideoRequirementRepository(ABC):
    """Worker video requirement repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, video_id: UUID) -> Optional[WorkerVideoRequirement]:
        """Get video requirement by ID"""
        pass

    @abstractmethod
    async def get_for_scope(
        self,
        worker_id: UUID,
        process_id: UUID,
        worker_process_id: Optional[UUID] = None,
    ) -> Optional[WorkerVideoRequirement]:
        """Most recent video for the application when worker_process_id is
        given, otherwise for the (worker, process) pair"""
        pass

    @abstractmethod
    async def find_all(
        self,
        worker_id: Optional[UUID] = None,
        process_id: Optional[UUID] = None,
        status: Optional[VideoRequirementStatus] = None,
    ) -> List[WorkerVideoRequirement]:
        """Filtered list of videos, newest first"""
        pass

    @abstractmethod
    async def create(self, video: WorkerVideoRequirement) -> WorkerVideoRequirement:
        """Insert a new video; raises DuplicateRecordError on conflict"""
        pass

    @abstractmethod
    async def update(self, video: WorkerVideoRequirement) -> WorkerVideoRequirement:
        """Update existing video"""
        pass
