from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from database.repositories import SqlAlchemyGradingRepository
from dependencies.security import grading_access
from schemas.subjects import Experiment as ExperimentSchema, Subject as SubjectSchema
from services.errors import SubjectNotFoundError

router = APIRouter(prefix="/subjects", tags=["과목 정보"], dependencies=[Depends(grading_access)])


# ✅ [READ] 전체 과목 조회 (기준 순서)
@router.get("/")
def read_subjects(db: Session = Depends(get_db)):
    records = SqlAlchemyGradingRepository(db).get_subjects()
    return {
        "success": True,
        "data": [SubjectSchema.model_validate(r).model_dump() for r in records],
        "message": "전체 과목 조회 완료"
    }


# ✅ [READ] 특정 과목 조회
@router.get("/{code}")
def read_subject(code: str, db: Session = Depends(get_db)):
    subject = SqlAlchemyGradingRepository(db).get_subject_by_code(code)
    if subject is None:
        raise SubjectNotFoundError(code)
    return {"success": True, "data": SubjectSchema.model_validate(subject).model_dump()}


# ✅ [READ] 과목의 실험 목록
@router.get("/{code}/experiments")
def read_subject_experiments(code: str, db: Session = Depends(get_db)):
    subject = SqlAlchemyGradingRepository(db).get_subject_by_code(code)
    if subject is None:
        raise SubjectNotFoundError(code)
    return {
        "success": True,
        "data": [ExperimentSchema.model_validate(e).model_dump() for e in subject.experiments],
    }
