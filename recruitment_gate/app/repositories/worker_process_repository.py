from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from recruitment_gate.domain.entities import WorkerProcess


class IWorkerProcessRepository(ABC):
    """Application (worker process) repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, worker_process_id: UUID) -> Optional[WorkerProcess]:
        """Get application by ID"""
        pass

    @abstractmethod
    async def get_by_worker_and_process(
        self, worker_id: UUID, process_id: UUID
    ) -> Optional[WorkerProcess]:
        """Get application by worker and process"""
        pass

    @abstractmethod
    async def create(self, worker_process: WorkerProcess) -> WorkerProcess:
        """Insert a new application; raises DuplicateRecordError on conflict"""
        pass
