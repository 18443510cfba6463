"""
Invitation Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the invitation domain.
Provides type safety and clear contracts between layers.
"""

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, EmailStr, Field


# ============================================================================
# Command DTOs
# ============================================================================


class Invitee(BaseModel):
    """One candidate in a bulk invitation"""

    email: EmailStr
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)


# ============================================================================
# Response DTOs
# ============================================================================


class InvitationResponse(BaseModel):
    """Public view of a process invitation"""

    id: str
    process_id: str
    process_name: Optional[str] = None
    email: str
    first_name: str
    last_name: str
    status: str
    sent_at: Optional[str] = None
    accepted_at: Optional[str] = None
    expires_at: str
    created_at: str


class BulkInviteFailure(BaseModel):
    """An invitee that could not be invited, with the reason"""

    email: str
    reason: str


class BulkInviteResponse(BaseModel):
    """Response for bulk invitation use case"""

    successful: List[InvitationResponse]
    failed: List[BulkInviteFailure]


class InvitationListResponse(BaseModel):
    """Paginated invitation listing"""

    data: List[InvitationResponse]
    total: int
    page: int
    limit: int
    total_pages: int


class SweepExpiredResponse(BaseModel):
    """Response for sweep expired invitations use case"""

    expired_count: int


# ----------------------------------------------------------------------------
# Acceptance outcome: one variant per scenario, discriminated by `status`
# ----------------------------------------------------------------------------


class NeedsRegistration(BaseModel):
    """Caller is not authenticated; nothing was changed"""

    status: Literal["needs_registration"] = "needs_registration"
    message: str = "You must register or sign in to accept this invitation"
    invitation: InvitationResponse
    process_id: str


class NeedsWorkerProfile(BaseModel):
    """Caller is authenticated but has no candidate profile; nothing was changed"""

    status: Literal["needs_worker_profile"] = "needs_worker_profile"
    message: str = "You must complete your candidate profile to accept this invitation"
    invitation: InvitationResponse
    process_id: str


class Applied(BaseModel):
    """Invitation accepted and application created"""

    status: Literal["applied"] = "applied"
    message: str = "Invitation accepted and application to the process completed"
    invitation: InvitationResponse
    process_id: str
    application_id: str


AcceptanceOutcome = Annotated[
    Union[NeedsRegistration, NeedsWorkerProfile, Applied],
    Field(discriminator="status"),
]
