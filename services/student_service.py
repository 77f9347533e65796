"""
학생 명부 관리 서비스 (생성/수정/삭제)

- SAP ID는 전체 학생 중 유일해야 함
- 반 이름은 classes 테이블에 존재해야 함
"""

import logging
from typing import Any, Dict

from sqlalchemy.orm import Session

from database.repositories import SqlAlchemyGradingRepository
from models.students import Student as StudentModel
from services.errors import ClassNotFoundError, DuplicateSapIdError, StudentNotFoundError

logger = logging.getLogger(__name__)


def create_student(db: Session, data: Dict[str, Any]) -> StudentModel:
    repo = SqlAlchemyGradingRepository(db)

    if repo.get_student_by_sap_id(data["sap_id"]):
        raise DuplicateSapIdError(data["sap_id"])

    class_obj = repo.get_class_by_name(data["class_name"])
    if class_obj is None:
        raise ClassNotFoundError(data["class_name"])

    student = StudentModel(name=data["name"], sap_id=data["sap_id"], class_id=class_obj.id)
    db.add(student)
    db.commit()
    db.refresh(student)
    logger.info("학생 추가: id=%s, sap_id=%s", student.id, student.sap_id)
    return student


def update_student(db: Session, student_id: int, changes: Dict[str, Any]) -> StudentModel:
    repo = SqlAlchemyGradingRepository(db)

    student = repo.get_student(student_id)
    if student is None:
        raise StudentNotFoundError(student_id)

    sap_id = changes.get("sap_id")
    if sap_id is not None and sap_id != student.sap_id:
        if repo.get_student_by_sap_id(sap_id):
            raise DuplicateSapIdError(sap_id)
        student.sap_id = sap_id

    if changes.get("name") is not None:
        student.name = changes["name"]

    class_name = changes.get("class_name")
    if class_name is not None:
        class_obj = repo.get_class_by_name(class_name)
        if class_obj is None:
            raise ClassNotFoundError(class_name)
        student.class_id = class_obj.id

    db.commit()
    db.refresh(student)
    return student


def delete_student(db: Session, student_id: int) -> None:
    student = SqlAlchemyGradingRepository(db).get_student(student_id)
    if student is None:
        raise StudentNotFoundError(student_id)

    # 채점 기록은 cascade로 함께 삭제
    db.delete(student)
    db.commit()
    logger.info("학생 삭제: id=%s", student_id)
