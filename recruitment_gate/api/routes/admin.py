"""
Admin API Routes - Maintenance Endpoints

Called by schedulers and internal services.
Authentication is via Admin API Key, not user JWTs.
"""

from fastapi import APIRouter, Depends, status

from recruitment_gate.api.error import raise_for_error
from recruitment_gate.api.utils.admin_auth import verify_admin_api_key
from recruitment_gate.app.services.unit_of_work import UnitOfWork
from recruitment_gate.app.use_cases.invitations import (
    SweepExpiredInvitationsUseCase,
    SweepExpiredResponse,
)
from recruitment_gate.depends import get_unit_of_work

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.post(
    "/invitations/sweep-expired",
    status_code=status.HTTP_200_OK,
    response_model=SweepExpiredResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def sweep_expired_invitations(
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Sweep Expired Invitations

    Marks every overdue pending invitation as expired. Safe to call
    repeatedly; a second run right after the first reports 0.

    Requires: X-Admin-API-Key header

    Raises:
        - 401 Unauthorized: Missing or invalid admin API key
    """
    use_case = SweepExpiredInvitationsUseCase(uow)
    result = await use_case.execute()

    if result.is_err():
        raise_for_error(result.error)

    return result.value
