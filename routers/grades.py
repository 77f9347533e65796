from typing import Optional

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from database.db import get_db
from database.repositories import SqlAlchemyGradingRepository
from dependencies.security import grading_access
from schemas.grades import ExperimentProgress, Grade as GradeSchema, GradeUpdate, GradeUpsert
from services import grade_service
from services.errors import GradeNotFoundError

router = APIRouter(prefix="/grades", tags=["grades"], dependencies=[Depends(grading_access)])


def _to_dict(grade):
    return GradeSchema.model_validate(grade).model_dump(mode="json")


# ==========================================================
# [1단계] 조회 라우터
# ==========================================================

# ✅ [READ] 채점 목록 (학생/과목/실험 번호 필터)
# - 필터가 하나도 없으면 빈 목록 반환
@router.get("/")
def read_grades(
    student_id: Optional[int] = None,
    subject: Optional[str] = None,
    experiment_number: Optional[int] = None,
    db: Session = Depends(get_db),
):
    if student_id is None and not subject and experiment_number is None:
        return {"success": True, "data": [], "message": "No filter provided"}

    records = SqlAlchemyGradingRepository(db).find_grades(
        student_id=student_id, subject=subject, experiment_number=experiment_number
    )
    return {"success": True, "data": [_to_dict(r) for r in records]}


# ✅ [PROGRESS] 반 기준 실험별 채점 진행 현황
@router.get("/progress")
def read_grading_progress(class_name: str, db: Session = Depends(get_db)):
    rows = grade_service.grading_progress(db, class_name)
    return {
        "success": True,
        "data": [ExperimentProgress(**r).model_dump() for r in rows],
    }


# ✅ [READ] 특정 채점 조회
@router.get("/{grade_id}")
def read_grade(grade_id: int, db: Session = Depends(get_db)):
    grade = SqlAlchemyGradingRepository(db).get_grade(grade_id)
    if grade is None:
        raise GradeNotFoundError(grade_id)
    return {"success": True, "data": _to_dict(grade)}


# ==========================================================
# [2단계] 저장/수정/삭제
# ==========================================================

# ✅ [UPSERT] 채점 저장 - 새로 만들면 201, 기존 기록 갱신이면 200
@router.post("/")
def save_grade(payload: GradeUpsert, response: Response, db: Session = Depends(get_db)):
    grade, created = grade_service.upsert_grade(db, payload.model_dump())
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return {
        "success": True,
        "data": _to_dict(grade),
        "message": "Grade created successfully" if created else "Grade updated successfully"
    }


# ✅ [UPDATE] 채점 부분 수정
@router.patch("/{grade_id}")
def update_grade(grade_id: int, updated: GradeUpdate, db: Session = Depends(get_db)):
    grade = grade_service.update_grade(db, grade_id, updated.model_dump(exclude_unset=True))
    return {
        "success": True,
        "data": _to_dict(grade),
        "message": "Grade updated successfully"
    }


# ✅ [DELETE] 채점 삭제
@router.delete("/{grade_id}")
def delete_grade(grade_id: int, db: Session = Depends(get_db)):
    grade_service.delete_grade(db, grade_id)
    return {
        "success": True,
        "data": {"grade_id": grade_id},
        "message": "Grade deleted successfully"
    }
