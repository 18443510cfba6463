"""
User Entity

Authenticated identity issued by the identity provider.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from ..base import utcnow
from .enums import UserRole


class User(SQLModel, table=True):
    """
    User entity - an authenticated identity.

    Business Rules:
    - Email must be unique across all users
    - A user may have at most one linked Worker profile
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    first_name: str = Field(default="", max_length=100)
    last_name: str = Field(default="", max_length=100)
    role: UserRole = Field(default=UserRole.worker)

    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime, nullable=False)
    )
