from sqlmodel.ext.asyncio.session import AsyncSession

from recruitment_gate.adapter.repositories.invitation_repository import InvitationRepository
from recruitment_gate.adapter.repositories.selection_process_repository import (
    SelectionProcessRepository,
)
from recruitment_gate.adapter.repositories.user_repository import UserRepository
from recruitment_gate.adapter.repositories.video_requirement_repository import (
    VideoRequirementRepository,
)
from recruitment_gate.adapter.repositories.worker_process_repository import (
    WorkerProcessRepository,
)
from recruitment_gate.adapter.repositories.worker_repository import WorkerRepository
from recruitment_gate.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.processes = SelectionProcessRepository(self.session)
        self.workers = WorkerRepository(self.session)
        self.worker_processes = WorkerProcessRepository(self.session)
        self.invitations = InvitationRepository(self.session)
        self.video_requirements = VideoRequirementRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
