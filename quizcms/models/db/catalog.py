"""
Catalog models: books, chapter lists and subjects.

Books and chapter lists reference subjects and classes by plain strings;
nothing enforces that the referenced rows exist.
"""

from datetime import datetime, timezone
from typing import Any

import sqlalchemy as sa
from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from quizcms.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Book(Base):
    """Book with its embedded chapter list."""

    __tablename__ = "books"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    book: Mapped[str] = mapped_column(String(200), index=True, nullable=False)
    code: Mapped[str] = mapped_column(String(50), nullable=False)
    subject: Mapped[str] = mapped_column(String(100), index=True, nullable=False)
    class_name: Mapped[str] = mapped_column(String(50), index=True, nullable=False)
    chapters: Mapped[list[dict[str, Any]]] = mapped_column(sa.JSON, default=list, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True), default=_utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False
    )


class ChapterList(Base):
    """
    Chapter names published for a book, independent of the book record.
    """

    __tablename__ = "chapters"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    book: Mapped[str] = mapped_column(String(200), index=True, nullable=False)
    code: Mapped[str | None] = mapped_column(String(50), nullable=True)
    subject: Mapped[str] = mapped_column(String(100), index=True, nullable=False)
    class_name: Mapped[str] = mapped_column(String(50), index=True, nullable=False)
    chapters: Mapped[list[dict[str, Any]]] = mapped_column(sa.JSON, default=list, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True), default=_utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False
    )


class Subject(Base):
    """Subject taught in a class."""

    __tablename__ = "subjects"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    class_name: Mapped[str] = mapped_column(String(50), index=True, nullable=False)
    code: Mapped[str | None] = mapped_column(String(50), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True), default=_utcnow, nullable=False
    )

    __table_args__ = (
        UniqueConstraint("name", "class_name", name="uq_subject_class"),
    )
