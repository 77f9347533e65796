"""
채점 저장 서비스

- (학생, 실험) 쌍마다 채점 기록은 최대 1건
- 처음 저장하면 생성, 이후 저장은 기존 기록을 갱신(upsert)하고 수정 시각을 새로 기록
- 합계(total)는 저장하지 않고 모델에서 매번 계산
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from database.repositories import SqlAlchemyGradingRepository
from models.grades import Grade as GradeModel, RUBRIC_FIELDS
from services.errors import (
    ClassNotFoundError,
    ExperimentNotFoundError,
    GradeNotFoundError,
    StudentNotFoundError,
)

logger = logging.getLogger(__name__)

_EDITABLE_FIELDS = RUBRIC_FIELDS + ("comment",)


def _now():
    return datetime.now(timezone.utc)


def _apply(grade, values):
    for key, value in values.items():
        setattr(grade, key, value)
    grade.updated_at = _now()


def upsert_grade(db: Session, data: Dict[str, Any]) -> Tuple[GradeModel, bool]:
    """
    채점 저장

    Returns:
        (grade, created) - 새로 생성했으면 created=True
    """
    repo = SqlAlchemyGradingRepository(db)

    if repo.get_student(data["student_id"]) is None:
        raise StudentNotFoundError(data["student_id"])

    experiment = repo.get_experiment(data["subject"], data["experiment_number"])
    if experiment is None:
        raise ExperimentNotFoundError(data["subject"], data["experiment_number"])

    values = {field: data.get(field) for field in _EDITABLE_FIELDS}

    grade = repo.get_grade_for_pair(data["student_id"], experiment.id)
    created = grade is None
    if created:
        grade = GradeModel(student_id=data["student_id"], experiment_id=experiment.id, **values)
        db.add(grade)
    else:
        _apply(grade, values)

    try:
        db.commit()
    except IntegrityError:
        # 동시에 같은 (학생, 실험) 첫 저장이 들어온 경우 → 먼저 저장된 기록을 갱신
        db.rollback()
        grade = repo.get_grade_for_pair(data["student_id"], experiment.id)
        if grade is None:
            raise
        created = False
        _apply(grade, values)
        db.commit()
    db.refresh(grade)
    logger.info(
        "채점 %s: student_id=%s, %s-%s, total=%s",
        "생성" if created else "갱신",
        grade.student_id, data["subject"], data["experiment_number"], grade.total,
    )
    return grade, created


def update_grade(db: Session, grade_id: int, changes: Dict[str, Any]) -> GradeModel:
    """보낸 항목만 수정 (None을 명시하면 해당 항목을 미입력으로 되돌림)"""
    grade = SqlAlchemyGradingRepository(db).get_grade(grade_id)
    if grade is None:
        raise GradeNotFoundError(grade_id)

    for key, value in changes.items():
        if key in _EDITABLE_FIELDS:
            setattr(grade, key, value)
    grade.updated_at = _now()

    db.commit()
    db.refresh(grade)
    return grade


def delete_grade(db: Session, grade_id: int) -> None:
    grade = db.query(GradeModel).filter(GradeModel.id == grade_id).first()
    if grade is None:
        raise GradeNotFoundError(grade_id)
    db.delete(grade)
    db.commit()


def grading_progress(db: Session, class_name: str) -> List[Dict[str, Any]]:
    """반 기준 (과목, 실험)별 채점 완료 학생 수"""
    repo = SqlAlchemyGradingRepository(db)
    if repo.get_class_by_name(class_name) is None:
        raise ClassNotFoundError(class_name)

    student_ids = [s.id for s in repo.list_students(class_name=class_name)]

    graded_pairs = set()
    if student_ids:
        rows = (
            db.query(GradeModel.experiment_id, GradeModel.student_id)
            .filter(GradeModel.student_id.in_(student_ids))
            .all()
        )
        graded_pairs = {(experiment_id, student_id) for experiment_id, student_id in rows}

    progress = []
    for subject in repo.get_subjects():
        for experiment in subject.experiments:
            graded = sum(1 for experiment_id, _ in graded_pairs if experiment_id == experiment.id)
            progress.append({
                "subject": subject.code,
                "experiment_number": experiment.number,
                "graded": graded,
                "total_students": len(student_ids),
            })
    return progress
