"""
schemas/reports.py

- 학생 종합 리포트(집계 결과) 응답 스키마
- 모든 과목이 항상 포함되므로 채점 진행 상황과 무관하게 같은 구조를 보장
"""

from typing import Dict, List

from pydantic import BaseModel


class ReportStudent(BaseModel):
    id: int
    name: str
    sap_id: str
    class_name: str


class ExperimentEntry(BaseModel):
    experiment_number: int
    experiment_title: str
    performance: int
    knowledge: int
    implementation: int
    strategy: int
    attitude: int
    total_marks: int                         # 5개 항목 합계 (0~25)
    max_marks: int = 25


class SubjectReport(BaseModel):
    subject_name: str
    experiments: List[ExperimentEntry] = []
    total_marks: int = 0
    max_marks: int = 0


class OverallReport(BaseModel):
    total_marks: int
    max_marks: int
    percentage: float
    grade: str                               # A+, A, B, C, D, F


class StudentReport(BaseModel):
    student: ReportStudent
    subjects: Dict[str, SubjectReport]       # 과목 코드 → 과목별 집계
    metrics: Dict[str, float]                # 루브릭 항목 → 평균
    overall: OverallReport


# ==========================================================
# [학급 요약]
# ==========================================================
class ClassStudentSummary(BaseModel):
    student_id: int
    name: str
    sap_id: str
    total_marks: int
    max_marks: int
    percentage: float
    grade: str


class ClassSummary(BaseModel):
    class_name: str
    student_count: int
    subject_averages: Dict[str, float]       # 과목 코드 → 실험 1건당 평균 합계
    students: List[ClassStudentSummary]
