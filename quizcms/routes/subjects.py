"""Subject endpoints."""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session as DbSession

from quizcms.database import get_db
from quizcms.models.auth import DeletedResponse
from quizcms.models.catalog import SubjectCreate, SubjectResponse
from quizcms.models.db.catalog import Subject
from quizcms.services import catalog_service

router = APIRouter(prefix="/api/subjects", tags=["subjects"])


def subject_to_response(subject: Subject) -> SubjectResponse:
    return SubjectResponse(
        id=subject.id,
        name=subject.name,
        class_name=subject.class_name,
        code=subject.code,
        created_at=subject.created_at,
    )


@router.post("", response_model=SubjectResponse, status_code=status.HTTP_201_CREATED)
def create_subject(
    data: SubjectCreate,
    db: Annotated[DbSession, Depends(get_db)],
) -> SubjectResponse:
    """Create a subject for a class."""
    try:
        subject = catalog_service.create_subject(db, data)
    except catalog_service.DuplicateSubjectError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    return subject_to_response(subject)


@router.get("", response_model=list[SubjectResponse])
def list_subjects(
    db: Annotated[DbSession, Depends(get_db)],
    class_name: str | None = Query(None, alias="className"),
) -> list[SubjectResponse]:
    return [subject_to_response(s) for s in catalog_service.list_subjects(db, class_name)]


@router.delete("/{subject_id}", response_model=DeletedResponse)
def delete_subject(
    subject_id: int,
    db: Annotated[DbSession, Depends(get_db)],
) -> DeletedResponse:
    subject = catalog_service.get_subject(db, subject_id)
    if subject is None:
        raise HTTPException(status_code=404, detail="Subject not found")
    catalog_service.delete_record(db, subject)
    return DeletedResponse(message="Subject deleted successfully", deleted_id=subject_id)
