from typing import List, Optional
from uuid import UUID

import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from tests.fixtures.json_loader import TestDataLoader
from recruitment_gate.adapter.services.local_artifact_storage import LocalArtifactStorage
from recruitment_gate.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from recruitment_gate.api.utils.jwt import generate_jwt
from recruitment_gate.app.services.notification_sender import INotificationSender
from recruitment_gate.depends import (
    get_artifact_storage,
    get_notification_sender,
    get_unit_of_work,
)
from recruitment_gate.domain.entities import SelectionProcess, User, UserRole, Worker


class FakeNotificationSender(INotificationSender):
    """Records messages instead of sending them"""

    def __init__(self):
        self.sent: List[dict] = []
        self.fail = False

    async def send(
        self, to: str, subject: str, text_body: str, html_body: Optional[str] = None
    ) -> bool:
        if self.fail:
            return False
        self.sent.append({"to": to, "subject": subject, "text": text_body})
        return True


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def seed(db_session, test_data):
    """Users, worker profiles and processes from tests/fixtures/test_data.json.

    Returns plain IDs by key; ORM instances are expired whenever a request
    rolls the shared session back.
    """
    users = test_data.get_copy("users")
    workers = test_data.get_copy("workers")
    processes = test_data.get_copy("processes")

    for row in users.values():
        db_session.add(
            User(
                id=UUID(row["id"]),
                email=row["email"],
                first_name=row["first_name"],
                last_name=row["last_name"],
                role=UserRole(row["role"]),
            )
        )
    for row in workers.values():
        db_session.add(
            Worker(
                id=UUID(row["id"]),
                user_id=UUID(row["user_id"]),
                first_name=row["first_name"],
                last_name=row["last_name"],
                email=row["email"],
            )
        )
    for row in processes.values():
        db_session.add(
            SelectionProcess(
                id=UUID(row["id"]),
                name=row["name"],
                position=row["position"],
                company_name=row["company_name"],
            )
        )
    await db_session.commit()

    return {
        "users": {key: UUID(row["id"]) for key, row in users.items()},
        "roles": {key: row["role"] for key, row in users.items()},
        "workers": {key: UUID(row["id"]) for key, row in workers.items()},
        "processes": {key: UUID(row["id"]) for key, row in processes.items()},
    }


@pytest_asyncio.fixture
def auth_headers(seed):
    def _headers(user_key: str) -> dict:
        token = generate_jwt(seed["users"][user_key], seed["roles"][user_key])
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest_asyncio.fixture
def notifications():
    return FakeNotificationSender()


@pytest_asyncio.fixture
def storage(tmp_path):
    return LocalArtifactStorage(str(tmp_path / "uploads"), timeout=5.0)


@pytest_asyncio.fixture
async def client(db_session, notifications, storage):
    from httpx import ASGITransport
    from recruitment_gate.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_notification_sender] = lambda: notifications
    app.dependency_overrides[get_artifact_storage] = lambda: storage

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
