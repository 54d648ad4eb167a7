"""Quiz-related Pydantic models.

Attributes are snake_case; the JSON shape (requests, responses and the
stored document) uses the camelCase aliases.
"""
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class QuizOption(BaseModel):
    """Selectable answer of a choice question."""

    text: str
    is_correct: bool = Field(False, alias="isCorrect")

    class Config:
        populate_by_name = True


class SubQuestion(BaseModel):
    """Part of a picture question."""

    text: str


class QuizQuestion(BaseModel):
    """Question embedded in a quiz item."""

    question_id: str | None = Field(None, alias="questionId")
    qtitle: str | None = None
    section: Any = None
    question_type: str = Field(..., alias="questionType")
    question: str
    marks: int | float = Field(..., ge=1)
    options: list[QuizOption] = Field(default_factory=list)
    sub_questions: list[SubQuestion] = Field(default_factory=list, alias="subQuestions")
    correct_answer: Any = Field(None, alias="correctAnswer")
    image_url: str | None = Field(None, alias="imageUrl")

    class Config:
        populate_by_name = True


class NormalizedQuizItem(BaseModel):
    """Validated quiz item with defaults applied, ready to persist."""

    class_name: str = Field(..., alias="className")
    subject: str
    book: str
    chapter: str
    title: str
    status: bool = True
    questions: list[QuizQuestion] = Field(..., min_length=1)

    class Config:
        populate_by_name = True

    def questions_document(self) -> list[dict[str, Any]]:
        return [q.model_dump(by_alias=True) for q in self.questions]

    def to_document(self) -> dict[str, Any]:
        """Stored representation (camelCase keys)."""
        return self.model_dump(by_alias=True)


class QuizItemResponse(NormalizedQuizItem):
    """Quiz item as returned by the API."""

    id: int
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")


class QuizListResponse(BaseModel):
    """Paginated quiz listing."""

    quizzes: list[QuizItemResponse]
    total: int
    page: int
    page_size: int = Field(..., alias="pageSize")

    class Config:
        populate_by_name = True


class QuizImageResponse(BaseModel):
    """Stored question image."""

    image_url: str = Field(..., alias="imageUrl")
    name: str
    size: int

    class Config:
        populate_by_name = True
