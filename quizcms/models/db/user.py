"""User database model."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from quizcms.database import Base

if TYPE_CHECKING:
    from quizcms.models.db.examination import Examination


class UserRole:
    """Role strings stored on users."""

    ADMIN = "admin"
    SCHOOL = "school"
    USER = "user"


class User(Base):
    """Admin, school or plain user account."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    username: Mapped[str] = mapped_column(String(50), unique=True, index=True, nullable=False)
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)
    # Fernet token of the plain password, kept for school accounts only
    original_password: Mapped[str | None] = mapped_column(Text, nullable=True)
    role: Mapped[str] = mapped_column(String(20), default=UserRole.USER, index=True, nullable=False)
    status: Mapped[bool] = mapped_column(default=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False
    )

    # Relationships
    examinations: Mapped[list["Examination"]] = relationship(
        "Examination",
        back_populates="school",
        cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}', role='{self.role}')>"
