"""
database/seed.py

- 테이블 생성 및 기준 데이터(반, 과목, 실험) 입력
- 이미 존재하는 데이터는 건너뛰므로 여러 번 실행해도 안전
"""

import logging

from sqlalchemy.orm import Session

from database.db import Base, engine
from models import classes, experiments, grades, students, subjects, teachers  # noqa: F401  (테이블 등록)
from models.classes import Class as ClassModel
from models.experiments import Experiment as ExperimentModel
from models.subjects import Subject as SubjectModel

logger = logging.getLogger(__name__)

# ✅ 기본 반
DEFAULT_CLASSES = ("IT1", "IT2", "IT3")

# ✅ 기본 과목 (코드, 이름) - 순서가 리포트 과목 순서
DEFAULT_SUBJECTS = (
    ("FSD", "Full Stack Development"),
    ("IPCV", "Image Processing & Computer Vision"),
    ("ISIG", "Information Security & Integrity"),
    ("BDA", "Big Data Analytics"),
    ("SE", "Software Engineering"),
)

EXPERIMENTS_PER_SUBJECT = 5


def init_db(bind=None):
    Base.metadata.create_all(bind=bind or engine)


def seed_reference_data(db: Session) -> None:
    existing_classes = {c.name for c in db.query(ClassModel).all()}
    for name in DEFAULT_CLASSES:
        if name not in existing_classes:
            db.add(ClassModel(name=name))

    for code, name in DEFAULT_SUBJECTS:
        subject = db.query(SubjectModel).filter(SubjectModel.code == code).first()
        if subject is None:
            subject = SubjectModel(code=code, name=name)
            db.add(subject)
            db.flush()

        numbers = {e.number for e in subject.experiments}
        for number in range(1, EXPERIMENTS_PER_SUBJECT + 1):
            if number not in numbers:
                db.add(ExperimentModel(
                    subject_id=subject.id,
                    number=number,
                    title=f"Experiment {number}: {subject.name}",
                ))

    db.commit()
    logger.info("기준 데이터 확인 완료: 반 %d개, 과목 %d개", len(DEFAULT_CLASSES), len(DEFAULT_SUBJECTS))
