"""Chapter list endpoints."""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session as DbSession

from quizcms.database import get_db
from quizcms.models.auth import DeletedResponse
from quizcms.models.catalog import ChapterListCreate, ChapterListResponse
from quizcms.models.db.catalog import ChapterList
from quizcms.services import catalog_service

router = APIRouter(prefix="/api/chapters", tags=["chapters"])


def chapter_list_to_response(chapter_list: ChapterList) -> ChapterListResponse:
    return ChapterListResponse(
        id=chapter_list.id,
        book=chapter_list.book,
        code=chapter_list.code,
        subject=chapter_list.subject,
        class_name=chapter_list.class_name,
        chapters=chapter_list.chapters,
        created_at=chapter_list.created_at,
        updated_at=chapter_list.updated_at,
    )


def _get_chapter_list_or_404(db: DbSession, chapter_list_id: int) -> ChapterList:
    chapter_list = catalog_service.get_chapter_list(db, chapter_list_id)
    if chapter_list is None:
        raise HTTPException(status_code=404, detail="Chapter list not found")
    return chapter_list


@router.post("", response_model=ChapterListResponse, status_code=status.HTTP_201_CREATED)
def create_chapter_list(
    data: ChapterListCreate,
    db: Annotated[DbSession, Depends(get_db)],
) -> ChapterListResponse:
    """Publish the chapter names of a book."""
    return chapter_list_to_response(catalog_service.create_chapter_list(db, data))


@router.get("", response_model=list[ChapterListResponse])
def list_chapter_lists(
    db: Annotated[DbSession, Depends(get_db)],
    book: str | None = None,
    subject: str | None = None,
    class_name: str | None = Query(None, alias="className"),
) -> list[ChapterListResponse]:
    """List chapter lists by book, subject and class."""
    chapter_lists = catalog_service.list_chapter_lists(
        db, book=book, subject=subject, class_name=class_name
    )
    return [chapter_list_to_response(c) for c in chapter_lists]


@router.get("/{chapter_list_id}", response_model=ChapterListResponse)
def get_chapter_list(
    chapter_list_id: int,
    db: Annotated[DbSession, Depends(get_db)],
) -> ChapterListResponse:
    return chapter_list_to_response(_get_chapter_list_or_404(db, chapter_list_id))


@router.put("/{chapter_list_id}", response_model=ChapterListResponse)
def replace_chapter_list(
    chapter_list_id: int,
    data: ChapterListCreate,
    db: Annotated[DbSession, Depends(get_db)],
) -> ChapterListResponse:
    chapter_list = catalog_service.replace_chapter_list(
        db, _get_chapter_list_or_404(db, chapter_list_id), data
    )
    return chapter_list_to_response(chapter_list)


@router.delete("/{chapter_list_id}", response_model=DeletedResponse)
def delete_chapter_list(
    chapter_list_id: int,
    db: Annotated[DbSession, Depends(get_db)],
) -> DeletedResponse:
    catalog_service.delete_record(db, _get_chapter_list_or_404(db, chapter_list_id))
    return DeletedResponse(message="Chapter list deleted successfully", deleted_id=chapter_list_id)
