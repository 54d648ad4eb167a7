"""Catalog Pydantic models (books, chapter lists, subjects)."""
from datetime import datetime

from pydantic import BaseModel, Field


class BookChapter(BaseModel):
    """Chapter embedded in a book."""

    title: str = Field(..., min_length=1)
    number: int | None = None
    description: str | None = None

    class Config:
        str_strip_whitespace = True


class BookCreate(BaseModel):
    """Book create/replace request."""

    book: str = Field(..., min_length=1)
    code: str = Field(..., min_length=1)
    subject: str = Field(..., min_length=1)
    class_name: str = Field(..., min_length=1, alias="className")
    chapters: list[BookChapter] = Field(default_factory=list)

    class Config:
        populate_by_name = True
        str_strip_whitespace = True


class BookResponse(BookCreate):
    id: int
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")


class ChapterEntry(BaseModel):
    chapter_name: str = Field(..., min_length=1, alias="chapterName")
    number: int | None = None

    class Config:
        populate_by_name = True
        str_strip_whitespace = True


class ChapterListCreate(BaseModel):
    """Chapter list create/replace request."""

    book: str = Field(..., min_length=1)
    code: str | None = None
    subject: str = Field(..., min_length=1)
    class_name: str = Field(..., min_length=1, alias="className")
    chapters: list[ChapterEntry] = Field(default_factory=list)

    class Config:
        populate_by_name = True
        str_strip_whitespace = True


class ChapterListResponse(ChapterListCreate):
    id: int
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")


class SubjectCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    class_name: str = Field(..., min_length=1, alias="className")
    code: str | None = None

    class Config:
        populate_by_name = True
        str_strip_whitespace = True


class SubjectResponse(SubjectCreate):
    id: int
    created_at: datetime = Field(..., alias="createdAt")
