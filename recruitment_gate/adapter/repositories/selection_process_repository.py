from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from recruitment_gate.app.repositories.selection_process_repository import (
    ISelectionProcessRepository,
)
from recruitment_gate.domain.entities import SelectionProcess


class SelectionProcessRepository(ISelectionProcessRepository):
    """Selection process repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, process_id: UUID) -> Optional[SelectionProcess]:
        """Get selection process by ID"""
        stmt = select(SelectionProcess).where(SelectionProcess.id == process_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
