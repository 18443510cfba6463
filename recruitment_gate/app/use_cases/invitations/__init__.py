"""
Invitation Use Cases

Issuing, redeeming and maintaining process invitations.
"""

from .accept_invitation_use_case import AcceptInvitationUseCase
from .bulk_create_invitations_use_case import BulkCreateInvitationsUseCase
from .cancel_invitation_use_case import CancelInvitationUseCase
from .create_invitation_use_case import CreateInvitationUseCase
from .get_invitation_by_token_use_case import GetInvitationByTokenUseCase
from .get_invitation_use_case import GetInvitationUseCase
from .get_my_invitations_use_case import GetMyInvitationsUseCase
from .list_invitations_use_case import ListInvitationsUseCase
from .resend_invitation_use_case import ResendInvitationUseCase
from .sweep_expired_invitations_use_case import SweepExpiredInvitationsUseCase
from .dtos import (
    AcceptanceOutcome,
    Applied,
    BulkInviteFailure,
    BulkInviteResponse,
    InvitationListResponse,
    InvitationResponse,
    Invitee,
    NeedsRegistration,
    NeedsWorkerProfile,
    SweepExpiredResponse,
)

__all__ = [
    "AcceptInvitationUseCase",
    "BulkCreateInvitationsUseCase",
    "CancelInvitationUseCase",
    "CreateInvitationUseCase",
    "GetInvitationByTokenUseCase",
    "GetInvitationUseCase",
    "GetMyInvitationsUseCase",
    "ListInvitationsUseCase",
    "ResendInvitationUseCase",
    "SweepExpiredInvitationsUseCase",
    "AcceptanceOutcome",
    "Applied",
    "BulkInviteFailure",
    "BulkInviteResponse",
    "InvitationListResponse",
    "InvitationResponse",
    "Invitee",
    "NeedsRegistration",
    "NeedsWorkerProfile",
    "SweepExpiredResponse",
]
