"""
List Invitations Use Case

Filtered, paginated listing of invitations for operators.
"""

import math
from typing import Dict, Optional
from uuid import UUID

from recruitment_gate.app.services.unit_of_work import UnitOfWork
from recruitment_gate.domain.base import utcnow
from recruitment_gate.domain.entities import InvitationStatus, SelectionProcess
from recruitment_gate.libs.result import Result, Return

from .common import expire_if_overdue, to_invitation_response
from .dtos import InvitationListResponse


class ListInvitationsUseCase:
    """
    Use case for listing invitations.

    Business Rules:
    - Filters: process, status, free-text search over email and names
    - Newest first
    - Overdue pending invitations in the page are expired before returning
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        process_id: Optional[UUID] = None,
        status: Optional[InvitationStatus] = None,
        search: Optional[str] = None,
        page: int = 1,
        limit: int = 20,
    ) -> Result[InvitationListResponse]:
        now = utcnow()
        async with self.uow:
            invitations, total = await self.uow.invitations.find_all(
                process_id=process_id,
                status=status,
                search=search,
                offset=(page - 1) * limit,
                limit=limit,
            )

            expired_any = False
            for invitation in invitations:
                if await expire_if_overdue(self.uow, invitation, now):
                    expired_any = True
            if expired_any:
                await self.uow.commit()

            processes: Dict[UUID, Optional[SelectionProcess]] = {}
            data = []
            for invitation in invitations:
                if invitation.process_id not in processes:
                    processes[invitation.process_id] = await self.uow.processes.get_by_id(
                        invitation.process_id
                    )
                data.append(
                    to_invitation_response(invitation, processes[invitation.process_id])
                )

        return Return.ok(
            InvitationListResponse(
                data=data,
                total=total,
                page=page,
                limit=limit,
                total_pages=math.ceil(total / limit) if limit else 0,
            )
        )
