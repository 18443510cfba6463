"""
Recruitment Gate Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    UserRole,
    InvitationStatus,
    WorkerProcessStatus,
    VideoRequirementStatus,
)

# Export all entities
from .user import User
from .selection_process import SelectionProcess
from .worker import Worker
from .worker_process import WorkerProcess
from .invitation import ProcessInvitation
from .worker_video_requirement import WorkerVideoRequirement

__all__ = [
    # Enums
    "UserRole",
    "InvitationStatus",
    "WorkerProcessStatus",
    "VideoRequirementStatus",
    # Entities
    "User",
    "SelectionProcess",
    "Worker",
    "WorkerProcess",
    "ProcessInvitation",
    "WorkerVideoRequirement",
]
