from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from database.repositories import SqlAlchemyGradingRepository
from dependencies.security import grading_access
from schemas.reports import ClassSummary, StudentReport
from services.report_service import build_class_summary, generate_student_report

router = APIRouter(prefix="/reports", tags=["리포트"], dependencies=[Depends(grading_access)])


# ✅ [REPORT] 학생 종합 리포트 (과목별 합계, 루브릭 평균, 전체 등급)
@router.get("/student/{student_id}")
def get_student_report(student_id: int, db: Session = Depends(get_db)):
    report = generate_student_report(SqlAlchemyGradingRepository(db), student_id)
    return {"success": True, "data": StudentReport(**report).model_dump()}


# ✅ [SUMMARY] 학급 요약 (학생별 등급, 과목별 평균)
@router.get("/class/{class_name}/summary")
def get_class_summary(class_name: str, db: Session = Depends(get_db)):
    summary = build_class_summary(SqlAlchemyGradingRepository(db), class_name)
    return {"success": True, "data": ClassSummary(**summary).model_dump()}
