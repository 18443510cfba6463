from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from recruitment_gate.domain.entities import Worker


class IWorkerRepository(ABC):
    """Worker profile repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, worker_id: UUID) -> Optional[Worker]:
        """Get worker by ID"""
        pass

    @abstractmethod
    async def get_by_user_id(self, user_id: UUID) -> Optional[Worker]:
        """Get the worker profile linked to a user"""
        pass
