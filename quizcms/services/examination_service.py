"""Service layer for school examinations."""
import logging

from sqlalchemy import select
from sqlalchemy.orm import Session as DbSession

from quizcms.models.db.examination import Examination
from quizcms.models.examinations import ExaminationCreate

logger = logging.getLogger(__name__)


def create_examination(db: DbSession, data: ExaminationCreate) -> Examination:
    """Store an examination together with the request body it came from."""
    examination = Examination(
        school_id=data.school,
        subject=data.subject,
        class_name=data.class_name,
        book=data.book,
        code=data.code,
        chapters=list(data.chapters),
        examination_type=data.examination_type,
        total_mark=data.total_mark,
        duration=data.duration,
        school_name=data.school_name,
        questions=list(data.questions),
        raw_payload=data.model_dump(mode="json", by_alias=True),
    )
    db.add(examination)
    db.commit()
    db.refresh(examination)
    logger.info(
        f"Created examination {examination.id} for school {examination.school_id} "
        f"with {len(examination.questions)} questions"
    )
    return examination


def list_examinations(db: DbSession, school_id: int | None = None) -> list[Examination]:
    stmt = select(Examination)
    if school_id is not None:
        stmt = stmt.where(Examination.school_id == school_id)
    return list(db.execute(stmt.order_by(Examination.created_at.desc(), Examination.id.desc())).scalars().all())


def get_examination(db: DbSession, examination_id: int) -> Examination | None:
    return db.get(Examination, examination_id)


def delete_examination(db: DbSession, examination: Examination) -> None:
    db.delete(examination)
    db.commit()
    logger.info(f"Deleted examination {examination.id}")
