"""
Can Access Tests Use Case

Gate in front of the assessments: a candidate may take tests once a video
exists for the scope. Review status is not consulted.
"""

from typing import Optional
from uuid import UUID

from recruitment_gate.app.services.unit_of_work import UnitOfWork
from recruitment_gate.libs.result import Result, Return

from .common import find_scope_video
from .dtos import CanAccessTestsResponse


class CanAccessTestsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        worker_id: UUID,
        process_id: UUID,
        worker_process_id: Optional[UUID] = None,
    ) -> Result[CanAccessTestsResponse]:
        async with self.uow:
            video = await find_scope_video(
                self.uow, worker_id, process_id, worker_process_id
            )
        return Return.ok(CanAccessTestsResponse(can_access_tests=video is not None))
