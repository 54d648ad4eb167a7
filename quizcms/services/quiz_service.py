"""Service layer for quiz items."""
import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.orm import Session as DbSession

from quizcms import question_types
from quizcms.models.db.quiz_item import QuizItem
from quizcms.models.quizzes import NormalizedQuizItem
from quizcms.services.quiz_validator import QuizValidationError, validate_quiz_item
from quizcms.utils.pagination import where_contains

logger = logging.getLogger(__name__)


def _validated(payload: Mapping[str, Any]) -> NormalizedQuizItem:
    try:
        return validate_quiz_item(payload)
    except QuizValidationError as e:
        logger.info(f"Rejected quiz payload: {e.code}: {e.message}")
        raise


def _apply(quiz: QuizItem, item: NormalizedQuizItem) -> None:
    quiz.class_name = item.class_name
    quiz.subject = item.subject
    quiz.book = item.book
    quiz.chapter = item.chapter
    quiz.title = item.title
    quiz.status = item.status
    quiz.questions = item.questions_document()


def create_quiz(db: DbSession, payload: Mapping[str, Any]) -> QuizItem:
    """Validate and store a new quiz item.

    Raises:
        QuizValidationError: payload rejected, nothing written.
    """
    item = _validated(payload)
    quiz = QuizItem()
    _apply(quiz, item)
    db.add(quiz)
    db.commit()
    db.refresh(quiz)
    logger.info(f"Created quiz {quiz.id} '{quiz.title}' with {len(quiz.questions)} questions")
    return quiz


def get_quiz(db: DbSession, quiz_id: int) -> QuizItem | None:
    return db.get(QuizItem, quiz_id)


def replace_quiz(db: DbSession, quiz: QuizItem, payload: Mapping[str, Any]) -> QuizItem:
    """Replace every field of a quiz, questions included.

    Raises:
        QuizValidationError: payload rejected, stored quiz untouched.
    """
    item = _validated(payload)
    _apply(quiz, item)
    db.commit()
    db.refresh(quiz)
    logger.info(f"Replaced quiz {quiz.id}")
    return quiz


def toggle_quiz_status(db: DbSession, quiz: QuizItem) -> QuizItem:
    quiz.status = not quiz.status
    db.commit()
    db.refresh(quiz)
    logger.info(f"Quiz {quiz.id} status set to {'active' if quiz.status else 'inactive'}")
    return quiz


def delete_quiz(db: DbSession, quiz: QuizItem) -> None:
    db.delete(quiz)
    db.commit()
    logger.info(f"Deleted quiz {quiz.id}")


def list_quizzes(
    db: DbSession,
    page: int,
    page_size: int,
    class_name: str | None = None,
    subject: str | None = None,
    book: str | None = None,
    chapter: str | None = None,
    status: bool | None = None,
    search: str | None = None,
) -> tuple[list[QuizItem], int]:
    """Get one page of quizzes matching the filters, newest first, and the total."""
    stmt = select(QuizItem)
    for column, value in (
        (QuizItem.class_name, class_name),
        (QuizItem.subject, subject),
        (QuizItem.book, book),
        (QuizItem.chapter, chapter),
    ):
        if value:
            stmt = stmt.where(column == value)
    if status is not None:
        stmt = stmt.where(QuizItem.status == status)
    stmt = where_contains(stmt, QuizItem.title, search)

    total = db.execute(select(func.count()).select_from(stmt.subquery())).scalar_one()
    quizzes = db.execute(
        stmt.order_by(QuizItem.created_at.desc(), QuizItem.id.desc())
        .offset((page - 1) * page_size)
        .limit(page_size)
    ).scalars().all()
    return list(quizzes), total


def find_unknown_question_types(db: DbSession) -> list[dict[str, object]]:
    """Stored quizzes with questions whose type is not in the registry."""
    report = []
    for quiz in db.execute(select(QuizItem).order_by(QuizItem.id)).scalars():
        types = [
            q.get("questionType") if isinstance(q, Mapping) else None
            for q in quiz.questions or []
        ]
        unknown = sorted({str(t) for t in types if not question_types.is_known(t)})
        if unknown:
            report.append({"id": quiz.id, "title": quiz.title, "types": unknown})
    return report
