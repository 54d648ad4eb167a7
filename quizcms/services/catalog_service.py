"""Service layer for books, chapter lists and subjects."""
import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session as DbSession

from quizcms.models.catalog import BookCreate, ChapterListCreate, SubjectCreate
from quizcms.models.db.catalog import Book, ChapterList, Subject
from quizcms.utils.pagination import where_contains

logger = logging.getLogger(__name__)


class DuplicateSubjectError(Exception):
    """Subject with the same name already exists for the class."""


# Books

def create_book(db: DbSession, data: BookCreate) -> Book:
    book = Book(
        book=data.book,
        code=data.code,
        subject=data.subject,
        class_name=data.class_name,
        chapters=[c.model_dump() for c in data.chapters],
    )
    db.add(book)
    db.commit()
    db.refresh(book)
    logger.info(f"Created book {book.id} '{book.book}'")
    return book


def list_books(
    db: DbSession,
    subject: str | None = None,
    class_name: str | None = None,
    search: str | None = None,
) -> list[Book]:
    stmt = select(Book)
    if subject:
        stmt = stmt.where(Book.subject == subject)
    if class_name:
        stmt = stmt.where(Book.class_name == class_name)
    stmt = where_contains(stmt, Book.book, search)
    return list(db.execute(stmt.order_by(Book.id)).scalars().all())


def get_book(db: DbSession, book_id: int) -> Book | None:
    return db.get(Book, book_id)


def replace_book(db: DbSession, book: Book, data: BookCreate) -> Book:
    book.book = data.book
    book.code = data.code
    book.subject = data.subject
    book.class_name = data.class_name
    book.chapters = [c.model_dump() for c in data.chapters]
    db.commit()
    db.refresh(book)
    logger.info(f"Updated book {book.id}")
    return book


# Chapter lists

def create_chapter_list(db: DbSession, data: ChapterListCreate) -> ChapterList:
    chapter_list = ChapterList(
        book=data.book,
        code=data.code,
        subject=data.subject,
        class_name=data.class_name,
        chapters=[c.model_dump(by_alias=True) for c in data.chapters],
    )
    db.add(chapter_list)
    db.commit()
    db.refresh(chapter_list)
    logger.info(f"Created chapter list {chapter_list.id} for book '{chapter_list.book}'")
    return chapter_list


def list_chapter_lists(
    db: DbSession,
    book: str | None = None,
    subject: str | None = None,
    class_name: str | None = None,
) -> list[ChapterList]:
    stmt = select(ChapterList)
    if book:
        stmt = stmt.where(ChapterList.book == book)
    if subject:
        stmt = stmt.where(ChapterList.subject == subject)
    if class_name:
        stmt = stmt.where(ChapterList.class_name == class_name)
    return list(db.execute(stmt.order_by(ChapterList.id)).scalars().all())


def get_chapter_list(db: DbSession, chapter_list_id: int) -> ChapterList | None:
    return db.get(ChapterList, chapter_list_id)


def replace_chapter_list(
    db: DbSession, chapter_list: ChapterList, data: ChapterListCreate
) -> ChapterList:
    chapter_list.book = data.book
    chapter_list.code = data.code
    chapter_list.subject = data.subject
    chapter_list.class_name = data.class_name
    chapter_list.chapters = [c.model_dump(by_alias=True) for c in data.chapters]
    db.commit()
    db.refresh(chapter_list)
    logger.info(f"Updated chapter list {chapter_list.id}")
    return chapter_list


# Subjects

def create_subject(db: DbSession, data: SubjectCreate) -> Subject:
    """Create a subject.

    Raises:
        DuplicateSubjectError: name already used for this class.
    """
    subject = Subject(name=data.name, class_name=data.class_name, code=data.code)
    db.add(subject)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise DuplicateSubjectError(f"{data.name} already exists for class {data.class_name}") from e
    db.refresh(subject)
    logger.info(f"Created subject {subject.id} '{subject.name}'")
    return subject


def list_subjects(db: DbSession, class_name: str | None = None) -> list[Subject]:
    stmt = select(Subject)
    if class_name:
        stmt = stmt.where(Subject.class_name == class_name)
    return list(db.execute(stmt.order_by(Subject.class_name, Subject.name)).scalars().all())


def get_subject(db: DbSession, subject_id: int) -> Subject | None:
    return db.get(Subject, subject_id)


def delete_record(db: DbSession, record: Book | ChapterList | Subject) -> None:
    """Delete any catalog row."""
    db.delete(record)
    db.commit()
    logger.info(f"Deleted {type(record).__name__} {record.id}")
