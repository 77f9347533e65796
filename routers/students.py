from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database.db import get_db
from database.repositories import SqlAlchemyGradingRepository
from dependencies.security import grading_access
from schemas.students import Student as StudentSchema, StudentCreate, StudentUpdate
from services import student_service
from services.errors import StudentNotFoundError

router = APIRouter(prefix="/students", tags=["학생 정보"], dependencies=[Depends(grading_access)])


def _to_dict(student):
    return StudentSchema.model_validate(student).model_dump()


# ==========================================================
# [1단계] CRUD 기본 라우터
# ==========================================================

# ✅ [CREATE] 학생 정보 추가 (SAP ID 중복 불가)
@router.post("/", status_code=status.HTTP_201_CREATED)
def create_student(student: StudentCreate, db: Session = Depends(get_db)):
    db_student = student_service.create_student(db, student.model_dump())
    return {
        "success": True,
        "data": _to_dict(db_student),
        "message": "Student created successfully"
    }


# ✅ [READ] 전체 학생 조회 (반 필터, 이름/SAP ID 검색)
@router.get("/")
def read_students(class_name: Optional[str] = None, q: Optional[str] = None, db: Session = Depends(get_db)):
    records = SqlAlchemyGradingRepository(db).list_students(class_name=class_name, q=q)
    return {
        "success": True,
        "data": [_to_dict(r) for r in records],
        "message": f"{len(records)} students"
    }


# ==========================================================
# [2단계] 동적 라우터 (개별 조회/수정/삭제)
# ==========================================================

# ✅ [READ] 특정 학생 상세 조회
@router.get("/{student_id}")
def read_student(student_id: int, db: Session = Depends(get_db)):
    student = SqlAlchemyGradingRepository(db).get_student(student_id)
    if student is None:
        raise StudentNotFoundError(student_id)
    return {"success": True, "data": _to_dict(student)}


# ✅ [UPDATE] 특정 학생 정보 부분 수정
@router.patch("/{student_id}")
def update_student(student_id: int, updated: StudentUpdate, db: Session = Depends(get_db)):
    student = student_service.update_student(db, student_id, updated.model_dump(exclude_unset=True))
    return {
        "success": True,
        "data": _to_dict(student),
        "message": "Student updated successfully"
    }


# ✅ [DELETE] 특정 학생 삭제 (채점 기록 포함)
@router.delete("/{student_id}")
def delete_student(student_id: int, db: Session = Depends(get_db)):
    student_service.delete_student(db, student_id)
    return {
        "success": True,
        "data": {"student_id": student_id},
        "message": "Student deleted successfully"
    }
