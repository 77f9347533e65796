from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from database.db import Base

class Student(Base):
    __tablename__ = "students"  # 학생 기본 정보 테이블

    id = Column(Integer, primary_key=True, index=True)                  # 고유 학생 ID (PK)
    name = Column(String(100), nullable=False)                         # 학생 이름
    sap_id = Column(String(50), unique=True, nullable=False, index=True)  # 학번 (SAP ID, 전체에서 유일)
    class_id = Column(Integer, ForeignKey("classes.id"), nullable=False)  # 소속 반 ID (FK)

    # ==========================================================
    # [관계 설정]
    # ==========================================================

    # ✅ 소속 학급 (N:1)
    class_ = relationship("Class", back_populates="students")

    # ✅ 이 학생의 채점 기록 (1:N), 학생 삭제 시 함께 삭제
    grades = relationship("Grade", back_populates="student", cascade="all, delete-orphan")

    @property
    def class_name(self):
        return self.class_.name if self.class_ else "Unknown"
