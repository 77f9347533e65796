from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from database.db import Base

class Subject(Base):
    __tablename__ = "subjects"  # 과목 정보 테이블 (기준 데이터)

    id = Column(Integer, primary_key=True, index=True)         # 과목 고유 ID (PK)
    code = Column(String(10), unique=True, nullable=False)     # 과목 코드 (예: FSD, IPCV)
    name = Column(String(100), nullable=False)                 # 과목 이름 (예: Full Stack Development)

    # ✅ 과목별 실험 목록 (1:N), 실험 번호 순
    experiments = relationship(
        "Experiment",
        back_populates="subject",
        order_by="Experiment.number",
    )
