"""Quiz item database model."""
from datetime import datetime, timezone
from typing import Any

import sqlalchemy as sa
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from quizcms.database import Base


class QuizItem(Base):
    """
    One quiz and its embedded questions.
    Questions are stored as a JSON list and only ever replaced as a whole.
    """

    __tablename__ = "quiz_items"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    class_name: Mapped[str] = mapped_column(String(50), index=True, nullable=False)
    subject: Mapped[str] = mapped_column(String(100), index=True, nullable=False)
    book: Mapped[str] = mapped_column(String(200), index=True, nullable=False)
    chapter: Mapped[str] = mapped_column(String(200), index=True, nullable=False)
    title: Mapped[str] = mapped_column(String(300), nullable=False)
    status: Mapped[bool] = mapped_column(default=True, nullable=False)
    questions: Mapped[list[dict[str, Any]]] = mapped_column(sa.JSON, nullable=False)
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

    def __repr__(self) -> str:
        return f"<QuizItem(id={self.id}, title='{self.title}')>"
