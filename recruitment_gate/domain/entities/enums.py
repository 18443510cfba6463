"""
Recruitment Gate Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class UserRole(str, Enum):
    """Platform role of an authenticated user"""

    admin = "admin"
    evaluator = "evaluator"
    company = "company"
    worker = "worker"


class InvitationStatus(str, Enum):
    """Process invitation status"""

    pending = "pending"
    accepted = "accepted"
    expired = "expired"
    cancelled = "cancelled"


class WorkerProcessStatus(str, Enum):
    """Status of a worker's application to a selection process"""

    pending = "pending"
    in_process = "in_process"
    completed = "completed"
    approved = "approved"
    rejected = "rejected"
    hired = "hired"


class VideoRequirementStatus(str, Enum):
    """Review status of an introductory video (informational only)"""

    pending_review = "pending_review"
    approved = "approved"
    rejected = "rejected"
    resubmission_required = "resubmission_required"
