from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from database.db import Base

class Class(Base):
    __tablename__ = "classes"

    id = Column(Integer, primary_key=True, index=True)          # 학급 고유 ID (PK)
    name = Column(String(20), unique=True, nullable=False)      # 학급 이름 (예: IT1, IT2, IT3)

    # ✅ 이 학급에 소속된 학생들 (1:N 관계)
    students = relationship("Student", back_populates="class_")
