from typing import Callable, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from recruitment_gate.adapter.services.local_artifact_storage import LocalArtifactStorage
from recruitment_gate.adapter.services.smtp_notification_sender import SmtpNotificationSender
from recruitment_gate.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from recruitment_gate.api.error import ClientError
from recruitment_gate.api.utils.jwt import verify_jwt
from recruitment_gate.app.services.artifact_storage import IArtifactStorage
from recruitment_gate.app.services.notification_sender import INotificationSender
from recruitment_gate.domain.entities import UserRole
from recruitment_gate.libs.result import Error

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer()
optional_security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_notification_sender() -> INotificationSender:
    return SmtpNotificationSender.from_config(ApplicationConfig)


def get_artifact_storage() -> IArtifactStorage:
    return LocalArtifactStorage(
        ApplicationConfig.STORAGE_LOCAL_PATH,
        timeout=ApplicationConfig.STORAGE_TIMEOUT_SECONDS,
    )


def _decode(token: str) -> dict:
    payload = verify_jwt(token)
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )
    return payload


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> dict:
    """
    Dependency to extract and verify JWT token from Authorization header.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        Decoded JWT payload containing user_id and role

    Raises:
        HTTPException: 401 if token is invalid or expired
    """
    return _decode(credentials.credentials)


async def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(optional_security),
) -> Optional[dict]:
    """
    Like get_current_user, but anonymous callers get None instead of a 401.

    A token that is present but invalid is still rejected.
    """
    if credentials is None:
        return None
    return _decode(credentials.credentials)


def require_roles(*roles: UserRole) -> Callable:
    """Dependency factory restricting an endpoint to the given user roles"""
    allowed = {role.value for role in roles}

    async def check_role(current_user: dict = Depends(get_current_user)) -> dict:
        if current_user.get("role") not in allowed:
            raise ClientError(
                Error("INSUFFICIENT_ROLE", "You do not have permission for this action"),
                status_code=status.HTTP_403_FORBIDDEN,
            )
        return current_user

    return check_role
