from abc import ABC, abstractmethod

from recruitment_gate.app.repositories.invitation_repository import IInvitationRepository
from recruitment_gate.app.repositories.selection_process_repository import (
    ISelectionProcessRepository,
)
from recruitment_gate.app.repositories.user_repository import IUserRepository
from recruitment_gate.app.repositories.video_requirement_repository import (
    IVideoRequirementRepository,
)
from recruitment_gate.app.repositories.worker_process_repository import (
    IWorkerProcessRepository,
)
from recruitment_gate.app.repositories.worker_repository import IWorkerRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    processes: ISelectionProcessRepository
    workers: IWorkerRepository
    worker_processes: IWorkerProcessRepository
    invitations: IInvitationRepository
    video_requirements: IVideoRequirementRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
