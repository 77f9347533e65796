from sqlalchemy import Column, Integer, String, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from database.db import Base

class Experiment(Base):
    __tablename__ = "experiments"  # 과목별 실험(채점 단위) 테이블
    __table_args__ = (
        UniqueConstraint("subject_id", "number", name="uq_experiment_subject_number"),
    )

    id = Column(Integer, primary_key=True, index=True)                     # 실험 고유 ID (PK)
    subject_id = Column(Integer, ForeignKey("subjects.id"), nullable=False) # 소속 과목 ID (FK)
    number = Column(Integer, nullable=False)                               # 실험 번호 (1~5)
    title = Column(String(200), nullable=False)                            # 실험 제목

    # ✅ 소속 과목 (N:1)
    subject = relationship("Subject", back_populates="experiments")

    @property
    def subject_code(self):
        return self.subject.code if self.subject else "Unknown"
