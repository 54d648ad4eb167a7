"""Quiz management endpoints."""
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, File, HTTPException, Query, UploadFile, status
from fastapi.responses import FileResponse
from sqlalchemy.orm import Session as DbSession

from quizcms.config import Settings
from quizcms.database import get_db
from quizcms.dependencies import get_image_storage, get_settings
from quizcms.models.auth import DeletedResponse, MessageResponse
from quizcms.models.db.quiz_item import QuizItem
from quizcms.models.quizzes import QuizImageResponse, QuizItemResponse, QuizListResponse
from quizcms.services import quiz_service
from quizcms.services.image_service import ImageStorage
from quizcms.services.quiz_validator import QuizValidationError
from quizcms.utils import clamp_page

router = APIRouter(prefix="/api/quizzes", tags=["quizzes"])


def quiz_to_response(quiz: QuizItem) -> QuizItemResponse:
    """Convert QuizItem model to QuizItemResponse."""
    return QuizItemResponse(
        id=quiz.id,
        class_name=quiz.class_name,
        subject=quiz.subject,
        book=quiz.book,
        chapter=quiz.chapter,
        title=quiz.title,
        status=quiz.status,
        questions=quiz.questions,
        created_at=quiz.created_at,
        updated_at=quiz.updated_at,
    )


def _get_quiz_or_404(db: DbSession, quiz_id: int) -> QuizItem:
    quiz = quiz_service.get_quiz(db, quiz_id)
    if quiz is None:
        raise HTTPException(status_code=404, detail="Quiz not found")
    return quiz


def _bad_request(error: QuizValidationError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error.to_dict())


@router.post("/images", response_model=QuizImageResponse, status_code=status.HTTP_201_CREATED)
async def upload_question_image(
    storage: Annotated[ImageStorage, Depends(get_image_storage)],
    file: UploadFile = File(...),
) -> QuizImageResponse:
    """Upload an image to reference from a question's imageUrl."""
    name, size = await storage.save(file)
    return QuizImageResponse(image_url=storage.url_for(name), name=name, size=size)


@router.get("/images/{name}")
def get_question_image(
    name: str,
    storage: Annotated[ImageStorage, Depends(get_image_storage)],
) -> FileResponse:
    """Serve a stored question image."""
    path = storage.path_for(name)
    if path is None:
        raise HTTPException(status_code=404, detail="Image not found")
    return FileResponse(path, headers={"Cache-Control": "public, max-age=3600"})


@router.delete("/images/{name}", response_model=MessageResponse)
def delete_question_image(
    name: str,
    storage: Annotated[ImageStorage, Depends(get_image_storage)],
) -> MessageResponse:
    """Delete a stored question image."""
    if not storage.delete(name):
        raise HTTPException(status_code=404, detail="Image not found")
    return MessageResponse(message="Image deleted successfully")


@router.post("", response_model=QuizItemResponse, status_code=status.HTTP_201_CREATED)
def create_quiz(
    db: Annotated[DbSession, Depends(get_db)],
    payload: dict[str, Any] = Body(...),
) -> QuizItemResponse:
    """Create a quiz with its full question set."""
    try:
        quiz = quiz_service.create_quiz(db, payload)
    except QuizValidationError as e:
        raise _bad_request(e) from e
    return quiz_to_response(quiz)


@router.get("", response_model=QuizListResponse)
def list_quizzes(
    db: Annotated[DbSession, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
    class_name: str | None = Query(None, alias="className"),
    subject: str | None = None,
    book: str | None = None,
    chapter: str | None = None,
    quiz_status: bool | None = Query(None, alias="status"),
    search: str | None = None,
    page: int = Query(1, ge=1),
    page_size: int | None = Query(None, alias="pageSize", ge=1),
) -> QuizListResponse:
    """List quizzes, filtered and paginated."""
    page, page_size = clamp_page(
        page, page_size, settings.default_page_size, settings.max_page_size
    )
    quizzes, total = quiz_service.list_quizzes(
        db,
        page,
        page_size,
        class_name=class_name,
        subject=subject,
        book=book,
        chapter=chapter,
        status=quiz_status,
        search=search,
    )
    return QuizListResponse(
        quizzes=[quiz_to_response(q) for q in quizzes],
        total=total,
        page=page,
        page_size=page_size,
    )


@router.get("/{quiz_id}", response_model=QuizItemResponse)
def get_quiz(
    quiz_id: int,
    db: Annotated[DbSession, Depends(get_db)],
) -> QuizItemResponse:
    """Get one quiz with its questions."""
    return quiz_to_response(_get_quiz_or_404(db, quiz_id))


@router.put("/{quiz_id}", response_model=QuizItemResponse)
def replace_quiz(
    quiz_id: int,
    db: Annotated[DbSession, Depends(get_db)],
    payload: dict[str, Any] = Body(...),
) -> QuizItemResponse:
    """Replace a quiz, questions included."""
    quiz = _get_quiz_or_404(db, quiz_id)
    try:
        quiz = quiz_service.replace_quiz(db, quiz, payload)
    except QuizValidationError as e:
        raise _bad_request(e) from e
    return quiz_to_response(quiz)


@router.patch("/{quiz_id}/status", response_model=QuizItemResponse)
def toggle_quiz_status(
    quiz_id: int,
    db: Annotated[DbSession, Depends(get_db)],
) -> QuizItemResponse:
    """Activate or deactivate a quiz."""
    quiz = quiz_service.toggle_quiz_status(db, _get_quiz_or_404(db, quiz_id))
    return quiz_to_response(quiz)


@router.delete("/{quiz_id}", response_model=DeletedResponse)
def delete_quiz(
    quiz_id: int,
    db: Annotated[DbSession, Depends(get_db)],
) -> DeletedResponse:
    """Delete a quiz and its questions."""
    quiz_service.delete_quiz(db, _get_quiz_or_404(db, quiz_id))
    return DeletedResponse(message="Quiz deleted successfully", deleted_id=quiz_id)
