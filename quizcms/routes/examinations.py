"""Examination endpoints."""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session as DbSession

from quizcms.database import get_db
from quizcms.models.auth import DeletedResponse
from quizcms.models.db.examination import Examination
from quizcms.models.db.user import UserRole
from quizcms.models.examinations import ExaminationCreate, ExaminationResponse
from quizcms.services import examination_service
from quizcms.services.auth_service import get_user_by_id

router = APIRouter(prefix="/api/examinations", tags=["examinations"])


def examination_to_response(examination: Examination) -> ExaminationResponse:
    return ExaminationResponse(
        id=examination.id,
        school=examination.school_id,
        subject=examination.subject,
        class_name=examination.class_name,
        book=examination.book,
        code=examination.code,
        chapters=examination.chapters,
        examination_type=examination.examination_type,
        total_mark=examination.total_mark,
        duration=examination.duration,
        school_name=examination.school_name,
        questions=examination.questions,
        raw_payload=examination.raw_payload,
        created_at=examination.created_at,
        updated_at=examination.updated_at,
    )


def _get_examination_or_404(db: DbSession, examination_id: int) -> Examination:
    examination = examination_service.get_examination(db, examination_id)
    if examination is None:
        raise HTTPException(status_code=404, detail="Examination not found")
    return examination


@router.post("", response_model=ExaminationResponse, status_code=status.HTTP_201_CREATED)
def create_examination(
    data: ExaminationCreate,
    db: Annotated[DbSession, Depends(get_db)],
) -> ExaminationResponse:
    """Store an examination composed by a school."""
    school = get_user_by_id(db, data.school)
    if school is None or school.role != UserRole.SCHOOL:
        raise HTTPException(status_code=404, detail="School not found")
    return examination_to_response(examination_service.create_examination(db, data))


@router.get("", response_model=list[ExaminationResponse])
def list_examinations(
    db: Annotated[DbSession, Depends(get_db)],
    school: int | None = None,
) -> list[ExaminationResponse]:
    """List examinations, optionally for one school."""
    return [
        examination_to_response(e)
        for e in examination_service.list_examinations(db, school)
    ]


@router.get("/{examination_id}", response_model=ExaminationResponse)
def get_examination(
    examination_id: int,
    db: Annotated[DbSession, Depends(get_db)],
) -> ExaminationResponse:
    return examination_to_response(_get_examination_or_404(db, examination_id))


@router.delete("/{examination_id}", response_model=DeletedResponse)
def delete_examination(
    examination_id: int,
    db: Annotated[DbSession, Depends(get_db)],
) -> DeletedResponse:
    examination_service.delete_examination(db, _get_examination_or_404(db, examination_id))
    return DeletedResponse(message="Examination deleted successfully", deleted_id=examination_id)
