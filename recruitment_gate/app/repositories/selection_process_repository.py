from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from recruitment_gate.domain.entities import SelectionProcess


class ISelectionProcessRepository(ABC):
    """Selection process repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, process_id: UUID) -> Optional[SelectionProcess]:
        """Get selection process by ID"""
        pass
