from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, EmailStr, Field

from config import ApplicationConfig
from recruitment_gate.api.error import raise_for_error
from recruitment_gate.app.services.notification_sender import INotificationSender
from recruitment_gate.app.services.unit_of_work import UnitOfWork
from recruitment_gate.app.use_cases.invitations import (
    AcceptanceOutcome,
    AcceptInvitationUseCase,
    BulkCreateInvitationsUseCase,
    BulkInviteResponse,
    CancelInvitationUseCase,
    CreateInvitationUseCase,
    GetInvitationByTokenUseCase,
    GetInvitationUseCase,
    GetMyInvitationsUseCase,
    InvitationListResponse,
    InvitationResponse,
    Invitee,
    ListInvitationsUseCase,
    ResendInvitationUseCase,
)
from recruitment_gate.depends import (
    get_current_user,
    get_notification_sender,
    get_optional_user,
    get_unit_of_work,
    require_roles,
)
from recruitment_gate.domain.entities import InvitationStatus, UserRole

router = APIRouter(prefix="/invitations", tags=["Invitations"])

# Roles allowed to manage invitations
require_operator = require_roles(UserRole.admin, UserRole.evaluator, UserRole.company)


class CreateInvitationRequest(BaseModel):
    """Create invitation HTTP request payload"""

    process_id: UUID
    email: EmailStr
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)


class BulkInvitationRequest(BaseModel):
    """Bulk invitation HTTP request payload"""

    process_id: UUID
    invitations: List[Invitee] = Field(..., min_length=1)


class AcceptInvitationRequest(BaseModel):
    """Accept invitation HTTP request payload"""

    token: str = Field(..., description="Invitation token")


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=InvitationResponse,
)
async def create_invitation(
    request: CreateInvitationRequest,
    current_user: dict = Depends(require_operator),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifications: INotificationSender = Depends(get_notification_sender),
):
    """
    Create Invitation

    Invites a candidate to a selection process and emails the link.

    Raises:
        - 403 Forbidden: INSUFFICIENT_ROLE
        - 404 Not Found: PROCESS_NOT_FOUND
        - 409 Conflict: INVITE_ALREADY_EXISTS
    """
    use_case = CreateInvitationUseCase(
        uow,
        notifications,
        ApplicationConfig.FRONTEND_URL,
        ApplicationConfig.INVITATION_EXPIRATION_DAYS,
    )
    result = await use_case.execute(
        created_by_id=UUID(current_user["user_id"]),
        process_id=request.process_id,
        email=request.email,
        first_name=request.first_name,
        last_name=request.last_name,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/bulk",
    status_code=status.HTTP_201_CREATED,
    response_model=BulkInviteResponse,
)
async def bulk_create_invitations(
    request: BulkInvitationRequest,
    current_user: dict = Depends(require_operator),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifications: INotificationSender = Depends(get_notification_sender),
):
    """
    Bulk Create Invitations

    Invites several candidates; per-candidate failures are reported in
    `failed` rather than failing the request.

    Raises:
        - 404 Not Found: PROCESS_NOT_FOUND
    """
    use_case = BulkCreateInvitationsUseCase(
        uow,
        notifications,
        ApplicationConfig.FRONTEND_URL,
        ApplicationConfig.INVITATION_EXPIRATION_DAYS,
    )
    result = await use_case.execute(
        UUID(current_user["user_id"]), request.process_id, request.invitations
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/accept",
    status_code=status.HTTP_200_OK,
    response_model=AcceptanceOutcome,
)
async def accept_invitation(
    request: AcceptInvitationRequest,
    current_user: Optional[dict] = Depends(get_optional_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifications: INotificationSender = Depends(get_notification_sender),
):
    """
    Accept Invitation

    Anonymous callers get `needs_registration`, callers without a candidate
    profile get `needs_worker_profile`; otherwise the application is created
    and `applied` is returned.

    Raises:
        - 403 Forbidden: INVITATION_EMAIL_MISMATCH
        - 404 Not Found: INVITATION_NOT_FOUND, USER_NOT_FOUND
        - 409 Conflict: INVITATION_ALREADY_ACCEPTED, ALREADY_APPLIED
        - 410 Gone: INVITATION_EXPIRED, INVITATION_CANCELLED
    """
    user_id = UUID(current_user["user_id"]) if current_user else None

    use_case = AcceptInvitationUseCase(uow, notifications)
    result = await use_case.execute(request.token, user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=InvitationListResponse,
    dependencies=[Depends(require_operator)],
)
async def list_invitations(
    process_id: Optional[UUID] = None,
    status_filter: Optional[InvitationStatus] = Query(None, alias="status"),
    search: Optional[str] = None,
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List invitations with filters and pagination, newest first."""
    use_case = ListInvitationsUseCase(uow)
    result = await use_case.execute(process_id, status_filter, search, page, limit)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/by-token/{token}",
    status_code=status.HTTP_200_OK,
    response_model=InvitationResponse,
)
async def get_invitation_by_token(
    token: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Invitation By Token

    Public endpoint behind the emailed link.

    Raises:
        - 404 Not Found: INVITATION_NOT_FOUND
    """
    use_case = GetInvitationByTokenUseCase(uow)
    result = await use_case.execute(token)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/my-invitations",
    status_code=status.HTTP_200_OK,
    response_model=List[InvitationResponse],
)
async def get_my_invitations(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Open invitations addressed to the signed-in user's email."""
    use_case = GetMyInvitationsUseCase(uow)
    result = await use_case.execute(UUID(current_user["user_id"]))

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{invitation_id}",
    status_code=status.HTTP_200_OK,
    response_model=InvitationResponse,
    dependencies=[Depends(require_operator)],
)
async def get_invitation(
    invitation_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = GetInvitationUseCase(uow)
    result = await use_case.execute(invitation_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch(
    "/{invitation_id}/cancel",
    status_code=status.HTTP_200_OK,
    response_model=InvitationResponse,
    dependencies=[Depends(require_operator)],
)
async def cancel_invitation(
    invitation_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Cancel Invitation

    Raises:
        - 404 Not Found: INVITATION_NOT_FOUND
        - 409 Conflict: INVITATION_ALREADY_ACCEPTED
        - 410 Gone: INVITATION_EXPIRED, INVITATION_CANCELLED
    """
    use_case = CancelInvitationUseCase(uow)
    result = await use_case.execute(invitation_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch(
    "/{invitation_id}/resend",
    status_code=status.HTTP_200_OK,
    response_model=InvitationResponse,
    dependencies=[Depends(require_operator)],
)
async def resend_invitation(
    invitation_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifications: INotificationSender = Depends(get_notification_sender),
):
    """
    Resend Invitation

    Issues a new token with a fresh expiry and emails it again.

    Raises:
        - 404 Not Found: INVITATION_NOT_FOUND
        - 409 Conflict: INVITATION_ALREADY_ACCEPTED, INVITE_ALREADY_EXISTS
    """
    use_case = ResendInvitationUseCase(
        uow,
        notifications,
        ApplicationConfig.FRONTEND_URL,
        ApplicationConfig.INVITATION_EXPIRATION_DAYS,
    )
    result = await use_case.execute(invitation_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
