"""
Examination database model.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

import sqlalchemy as sa
from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from quizcms.database import Base

if TYPE_CHECKING:
    from quizcms.models.db.user import User


class Examination(Base):
    """
    Examination paper composed by a school.
    Questions are stored as sent; the whole request body is kept in raw_payload.
    """

    __tablename__ = "examinations"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    school_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    subject: Mapped[str] = mapped_column(String(100), nullable=False)
    class_name: Mapped[str] = mapped_column(String(50), nullable=False)
    book: Mapped[str] = mapped_column(String(200), nullable=False)
    code: Mapped[str | None] = mapped_column(String(50), nullable=True)
    chapters: Mapped[list[str]] = mapped_column(sa.JSON, nullable=False)
    examination_type: Mapped[str] = mapped_column(String(100), nullable=False)
    total_mark: Mapped[float] = mapped_column(sa.Float, nullable=False)
    duration: Mapped[int] = mapped_column(nullable=False)
    school_name: Mapped[str] = mapped_column(String(200), nullable=False)
    questions: Mapped[list[Any]] = mapped_column(sa.JSON, default=list, nullable=False)
    raw_payload: Mapped[dict[str, Any] | None] = mapped_column(sa.JSON, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    # Relationships
    school: Mapped["User"] = relationship("User", back_populates="examinations")
