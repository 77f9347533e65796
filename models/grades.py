from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from database.db import Base

# ✅ 루브릭 항목 (각 0~5점)
RUBRIC_FIELDS = ("performance", "knowledge", "implementation", "strategy", "attitude")

# ✅ 실험 1건의 만점 (5개 항목 × 5점)
MAX_MARKS_PER_EXPERIMENT = 25


def _utcnow():
    return datetime.now(timezone.utc)


class Grade(Base):
    __tablename__ = "grades"  # 학생 × 실험 루브릭 채점 테이블
    __table_args__ = (
        UniqueConstraint("student_id", "experiment_id", name="uq_grade_student_experiment"),
    )

    id = Column(Integer, primary_key=True, index=True)                          # 채점 고유 ID (PK)
    student_id = Column(Integer, ForeignKey("students.id"), nullable=False)     # 학생 ID (FK)
    experiment_id = Column(Integer, ForeignKey("experiments.id"), nullable=False)  # 실험 ID (FK)
    performance = Column(Integer)                                               # 수행 (0~5, 미입력 시 NULL)
    knowledge = Column(Integer)                                                 # 지식 (0~5)
    implementation = Column(Integer)                                            # 구현 (0~5)
    strategy = Column(Integer)                                                  # 전략 (0~5)
    attitude = Column(Integer)                                                  # 태도 (0~5)
    comment = Column(String(1000))                                              # 교사 코멘트
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)  # 최종 수정 시각

    # ==========================================================
    # [관계 설정]
    # ==========================================================
    student = relationship("Student", back_populates="grades")
    experiment = relationship("Experiment")

    # ✅ 합계는 저장하지 않고 항상 다시 계산 (미입력 항목은 0점)
    @property
    def total(self):
        return sum(getattr(self, field) or 0 for field in RUBRIC_FIELDS)

    # ✅ 응답용 편의 속성 (실험 참조가 끊긴 경우 기본값)
    @property
    def subject(self):
        if self.experiment is None or self.experiment.subject is None:
            return "Unknown"
        return self.experiment.subject.code

    @property
    def experiment_number(self):
        return self.experiment.number if self.experiment else 0
