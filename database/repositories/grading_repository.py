"""
SQLAlchemy 기반 조회 저장소

- 테이블: classes, students, subjects, experiments, grades
- 쓰기 작업은 services/* 에서 수행하고, 여기서는 조회만 담당합니다.
"""
from __future__ import annotations

from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session, joinedload

from models.classes import Class as ClassModel
from models.experiments import Experiment as ExperimentModel
from models.grades import Grade as GradeModel
from models.students import Student as StudentModel
from models.subjects import Subject as SubjectModel


class SqlAlchemyGradingRepository:
    def __init__(self, db: Session):
        self._db = db

    # =========================
    # 학급
    # =========================
    def get_classes(self) -> List[ClassModel]:
        return self._db.query(ClassModel).order_by(ClassModel.id).all()

    def get_class_by_name(self, name: str) -> Optional[ClassModel]:
        return self._db.query(ClassModel).filter(ClassModel.name == name).first()

    # =========================
    # 학생
    # =========================
    def get_student(self, student_id: int) -> Optional[StudentModel]:
        return (
            self._db.query(StudentModel)
            .options(joinedload(StudentModel.class_))
            .filter(StudentModel.id == student_id)
            .first()
        )

    def get_student_by_sap_id(self, sap_id: str) -> Optional[StudentModel]:
        return self._db.query(StudentModel).filter(StudentModel.sap_id == sap_id).first()

    def list_students(self, class_name: Optional[str] = None, q: Optional[str] = None) -> List[StudentModel]:
        query = self._db.query(StudentModel).options(joinedload(StudentModel.class_))
        if class_name:
            query = query.join(ClassModel, ClassModel.id == StudentModel.class_id).filter(ClassModel.name == class_name)
        if q:
            query = query.filter(or_(StudentModel.name.contains(q), StudentModel.sap_id.contains(q)))
        return query.order_by(StudentModel.id).all()

    # =========================
    # 과목 / 실험
    # =========================
    def get_subjects(self) -> List[SubjectModel]:
        return self._db.query(SubjectModel).order_by(SubjectModel.id).all()

    def get_subject_by_code(self, code: str) -> Optional[SubjectModel]:
        return self._db.query(SubjectModel).filter(SubjectModel.code == code).first()

    def get_experiment(self, subject_code: str, number: int) -> Optional[ExperimentModel]:
        return (
            self._db.query(ExperimentModel)
            .join(SubjectModel, SubjectModel.id == ExperimentModel.subject_id)
            .filter(SubjectModel.code == subject_code, ExperimentModel.number == number)
            .first()
        )

    # =========================
    # 채점
    # =========================
    def _grade_query(self):
        return self._db.query(GradeModel).options(
            joinedload(GradeModel.experiment).joinedload(ExperimentModel.subject)
        )

    def get_grade(self, grade_id: int) -> Optional[GradeModel]:
        return self._grade_query().filter(GradeModel.id == grade_id).first()

    def get_grade_for_pair(self, student_id: int, experiment_id: int) -> Optional[GradeModel]:
        return (
            self._db.query(GradeModel)
            .filter(GradeModel.student_id == student_id, GradeModel.experiment_id == experiment_id)
            .first()
        )

    def get_grades_by_student(self, student_id: int) -> List[GradeModel]:
        return self._grade_query().filter(GradeModel.student_id == student_id).order_by(GradeModel.id).all()

    def find_grades(
        self,
        student_id: Optional[int] = None,
        subject: Optional[str] = None,
        experiment_number: Optional[int] = None,
    ) -> List[GradeModel]:
        query = (
            self._grade_query()
            .join(ExperimentModel, ExperimentModel.id == GradeModel.experiment_id)
            .join(SubjectModel, SubjectModel.id == ExperimentModel.subject_id)
        )
        if student_id is not None:
            query = query.filter(GradeModel.student_id == student_id)
        if subject:
            query = query.filter(SubjectModel.code == subject)
        if experiment_number is not None:
            query = query.filter(ExperimentModel.number == experiment_number)
        return query.order_by(GradeModel.id).all()
