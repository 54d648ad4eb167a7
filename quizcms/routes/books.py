"""Book catalog endpoints."""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session as DbSession

from quizcms.database import get_db
from quizcms.models.auth import DeletedResponse
from quizcms.models.catalog import BookCreate, BookResponse
from quizcms.models.db.catalog import Book
from quizcms.services import catalog_service

router = APIRouter(prefix="/api/books", tags=["books"])


def book_to_response(book: Book) -> BookResponse:
    return BookResponse(
        id=book.id,
        book=book.book,
        code=book.code,
        subject=book.subject,
        class_name=book.class_name,
        chapters=book.chapters,
        created_at=book.created_at,
        updated_at=book.updated_at,
    )


def _get_book_or_404(db: DbSession, book_id: int) -> Book:
    book = catalog_service.get_book(db, book_id)
    if book is None:
        raise HTTPException(status_code=404, detail="Book not found")
    return book


@router.post("", response_model=BookResponse, status_code=status.HTTP_201_CREATED)
def create_book(
    data: BookCreate,
    db: Annotated[DbSession, Depends(get_db)],
) -> BookResponse:
    """Create a book."""
    return book_to_response(catalog_service.create_book(db, data))


@router.get("", response_model=list[BookResponse])
def list_books(
    db: Annotated[DbSession, Depends(get_db)],
    subject: str | None = None,
    class_name: str | None = Query(None, alias="className"),
    search: str | None = None,
) -> list[BookResponse]:
    """List books, optionally filtered."""
    books = catalog_service.list_books(db, subject=subject, class_name=class_name, search=search)
    return [book_to_response(b) for b in books]


@router.get("/{book_id}", response_model=BookResponse)
def get_book(
    book_id: int,
    db: Annotated[DbSession, Depends(get_db)],
) -> BookResponse:
    return book_to_response(_get_book_or_404(db, book_id))


@router.put("/{book_id}", response_model=BookResponse)
def replace_book(
    book_id: int,
    data: BookCreate,
    db: Annotated[DbSession, Depends(get_db)],
) -> BookResponse:
    """Replace book details and chapters."""
    book = catalog_service.replace_book(db, _get_book_or_404(db, book_id), data)
    return book_to_response(book)


@router.delete("/{book_id}", response_model=DeletedResponse)
def delete_book(
    book_id: int,
    db: Annotated[DbSession, Depends(get_db)],
) -> DeletedResponse:
    catalog_service.delete_record(db, _get_book_or_404(db, book_id))
    return DeletedResponse(message="Book deleted successfully", deleted_id=book_id)
