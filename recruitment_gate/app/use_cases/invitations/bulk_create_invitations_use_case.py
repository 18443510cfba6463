"""
Bulk Create Invitations Use Case

Invites many candidates to one process. Each invitee is handled on its own,
so one failure does not affect the others.
"""

import logging
from typing import List
from uuid import UUID

from recruitment_gate.app.services.notification_sender import INotificationSender
from recruitment_gate.app.services.unit_of_work import UnitOfWork
from recruitment_gate.domain.invitation_lifecycle import DEFAULT_EXPIRATION_DAYS
from recruitment_gate.libs.result import Error, Result, Return

from .create_invitation_use_case import CreateInvitationUseCase
from .dtos import BulkInviteFailure, BulkInviteResponse, Invitee

logger = logging.getLogger(__name__)


class BulkCreateInvitationsUseCase:
    """
    Use case for inviting several candidates at once.

    Business Rules:
    - Unknown process aborts the whole call with PROCESS_NOT_FOUND
    - Each invitee runs through the single-invite flow in its own transaction
    - Failures are reported per email with the reason
    """

    def __init__(
        self,
        uow: UnitOfWork,
        notifications: INotificationSender,
        frontend_url: str,
        expiration_days: int = DEFAULT_EXPIRATION_DAYS,
    ):
        self.uow = uow
        self.create_invitation = CreateInvitationUseCase(
            uow, notifications, frontend_url, expiration_days
        )

    async def execute(
        self, created_by_id: UUID, process_id: UUID, invitees: List[Invitee]
    ) -> Result[BulkInviteResponse]:
        """
        Execute bulk create invitations use case.

        Args:
            created_by_id: User issuing the invitations
            process_id: Target selection process
            invitees: Candidates to invite

        Returns:
            Result with BulkInviteResponse (successful and failed), or Error
        """
        async with self.uow:
            process = await self.uow.processes.get_by_id(process_id)
            if process is None:
                return Return.err(
                    Error("PROCESS_NOT_FOUND", f"Process {process_id} not found")
                )

        successful = []
        failed = []
        for invitee in invitees:
            result = await self.create_invitation.execute(
                created_by_id=created_by_id,
                process_id=process_id,
                email=invitee.email,
                first_name=invitee.first_name,
                last_name=invitee.last_name,
            )
            if result.is_ok():
                successful.append(result.value)
            else:
                failed.append(
                    BulkInviteFailure(email=invitee.email, reason=result.error.message)
                )

        logger.info(
            f"Bulk invite for process {process_id}: "
            f"{len(successful)} sent, {len(failed)} failed"
        )
        return Return.ok(BulkInviteResponse(successful=successful, failed=failed))
