"""Examination Pydantic models."""
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class ExaminationCreate(BaseModel):
    """
    Examination composed by a school.

    Unknown keys are accepted so the whole body can be kept as raw payload.
    """

    school: int
    subject: str = Field(..., min_length=1)
    class_name: str = Field(..., min_length=1, alias="className")
    book: str = Field(..., min_length=1)
    code: str | None = None
    chapters: list[str] = Field(..., min_length=1)
    examination_type: str = Field(..., min_length=1, alias="examinationType")
    total_mark: float = Field(..., ge=0, alias="totalMark")
    duration: int = Field(..., gt=0)
    school_name: str = Field(..., min_length=1, alias="schoolName")
    questions: list[Any] = Field(default_factory=list)

    class Config:
        populate_by_name = True
        str_strip_whitespace = True
        extra = "allow"


class ExaminationResponse(BaseModel):
    id: int
    school: int
    subject: str
    class_name: str = Field(..., alias="className")
    book: str
    code: str | None
    chapters: list[str]
    examination_type: str = Field(..., alias="examinationType")
    total_mark: float = Field(..., alias="totalMark")
    duration: int
    school_name: str = Field(..., alias="schoolName")
    questions: list[Any]
    raw_payload: dict[str, Any] | None = Field(None, alias="rawPayload")
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")

    class Config:
        populate_by_name = True
