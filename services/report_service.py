"""
학생 종합 리포트 집계 서비스

- 학생의 전체 채점 기록을 과목별로 묶어 과목 합계/만점, 전체 백분율, 등급을 계산합니다.
- 루브릭 항목별 평균은 실제 입력된 값만 분모에 포함합니다.
  (미입력 항목은 합계에서는 0점, 평균에서는 제외)
- 저장소 인터페이스(GradingRepository)에만 의존하며 쓰기 작업은 하지 않습니다.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from database.repositories.base import ClassRosterRepository, GradingRepository
from models.grades import MAX_MARKS_PER_EXPERIMENT, RUBRIC_FIELDS
from services.errors import ClassNotFoundError, StudentNotFoundError

logger = logging.getLogger(__name__)

# ✅ 등급 기준 (하한 포함, 높은 등급부터 검사)
GRADE_THRESHOLDS = (
    (90.0, "A+"),
    (80.0, "A"),
    (70.0, "B"),
    (60.0, "C"),
    (50.0, "D"),
)
FAILING_GRADE = "F"


def letter_grade(percentage: float) -> str:
    """백분율 → 등급 (90 이상 A+, 80 이상 A, ... 50 미만 F)"""
    for lower_bound, grade in GRADE_THRESHOLDS:
        if percentage >= lower_bound:
            return grade
    return FAILING_GRADE


def _resolve_subject_code(experiment) -> Optional[str]:
    subject = getattr(experiment, "subject", None)
    return getattr(subject, "code", None) if subject is not None else None


def build_student_report(student, grades: Iterable[Any], subjects: Iterable[Any]) -> Dict[str, Any]:
    """
    이미 조회된 데이터로 리포트를 계산합니다. (순수 함수)

    Args:
        student: id, name, sap_id, class_name 속성을 가진 학생
        grades: 학생의 채점 기록. 각 기록은 experiment(→ subject) 참조와 5개 루브릭 값을 가짐
        subjects: 과목 기준 목록 (code, name)

    Returns:
        {"student", "subjects", "metrics", "overall"} 구조의 dict
    """
    # 1) 모든 과목을 0으로 초기화 (채점 여부와 무관하게 항상 같은 구조)
    subject_map: Dict[str, Dict[str, Any]] = {}
    for subject in subjects:
        subject_map[subject.code] = {
            "subject_name": subject.name,
            "experiments": [],
            "total_marks": 0,
            "max_marks": 0,
        }

    metric_sums = {field: 0 for field in RUBRIC_FIELDS}
    metric_counts = {field: 0 for field in RUBRIC_FIELDS}

    # 2) 채점 기록을 과목별로 분류
    for grade in grades:
        experiment = getattr(grade, "experiment", None)
        subject_code = _resolve_subject_code(experiment)
        if experiment is None or subject_code not in subject_map:
            logger.debug("실험 참조가 없는 채점 기록 제외: grade_id=%s", getattr(grade, "id", None))
            continue

        entry = {
            "experiment_number": experiment.number,
            "experiment_title": experiment.title,
        }
        total = 0
        for field in RUBRIC_FIELDS:
            value = getattr(grade, field, None)
            entry[field] = value or 0
            total += value or 0
            # 4) 평균은 입력된 값만 집계
            if value is not None:
                metric_sums[field] += value
                metric_counts[field] += 1
        entry["total_marks"] = total
        entry["max_marks"] = MAX_MARKS_PER_EXPERIMENT

        bucket = subject_map[subject_code]
        bucket["experiments"].append(entry)
        bucket["total_marks"] += total
        bucket["max_marks"] += MAX_MARKS_PER_EXPERIMENT

    # 3) 전체 합계
    overall_total = sum(s["total_marks"] for s in subject_map.values())
    overall_max = sum(s["max_marks"] for s in subject_map.values())

    metrics = {
        field: (metric_sums[field] / metric_counts[field]) if metric_counts[field] else 0.0
        for field in RUBRIC_FIELDS
    }

    # 5) 백분율 (만점 0이면 0)
    percentage = (overall_total * 100 / overall_max) if overall_max else 0.0

    return {
        "student": {
            "id": student.id,
            "name": student.name,
            "sap_id": student.sap_id,
            "class_name": student.class_name,
        },
        "subjects": subject_map,
        "metrics": metrics,
        "overall": {
            "total_marks": overall_total,
            "max_marks": overall_max,
            "percentage": percentage,
            # 6) 등급
            "grade": letter_grade(percentage),
        },
    }


def generate_student_report(repository: GradingRepository, student_id: int) -> Dict[str, Any]:
    """
    학생 ID로 리포트를 생성합니다.

    Raises:
        StudentNotFoundError: 학생이 존재하지 않을 때 (집계 전에 즉시 발생)
    """
    student = repository.get_student(student_id)
    if student is None:
        raise StudentNotFoundError(student_id)

    grades: List[Any] = repository.get_grades_by_student(student_id)
    subjects = repository.get_subjects()
    logger.info("리포트 생성: student_id=%s, grades=%d", student_id, len(grades))
    return build_student_report(student, grades, subjects)


def build_class_summary(repository: ClassRosterRepository, class_name: str) -> Dict[str, Any]:
    """
    학급 단위 요약: 학생별 전체 백분율/등급과 과목별 실험 1건당 평균 점수

    - repository: 학생 리포트 조회 + get_class_by_name, list_students
    """
    if repository.get_class_by_name(class_name) is None:
        raise ClassNotFoundError(class_name)

    subjects = repository.get_subjects()
    students = repository.list_students(class_name=class_name)

    subject_sums = {s.code: 0 for s in subjects}
    subject_counts = {s.code: 0 for s in subjects}
    rows = []

    for student in students:
        report = build_student_report(student, repository.get_grades_by_student(student.id), subjects)
        for code, bucket in report["subjects"].items():
            subject_sums[code] += bucket["total_marks"]
            subject_counts[code] += len(bucket["experiments"])
        rows.append({
            "student_id": student.id,
            "name": student.name,
            "sap_id": student.sap_id,
            **report["overall"],
        })

    subject_averages = {
        code: round(subject_sums[code] / subject_counts[code], 1) if subject_counts[code] else 0.0
        for code in subject_sums
    }

    return {
        "class_name": class_name,
        "student_count": len(rows),
        "subject_averages": subject_averages,
        "students": rows,
    }
