from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from recruitment_gate.domain.entities import User


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        pass
