from sqlalchemy import Column, Integer, String
from database.db import Base

class Teacher(Base):
    __tablename__ = "teachers"  # 교사 계정 테이블

    id = Column(Integer, primary_key=True, index=True)          # 교사 고유 ID (PK)
    username = Column(String(100), unique=True, nullable=False) # 로그인 아이디
    password = Column(String(300), nullable=False)              # scrypt 해시 ("hash.salt" 형식)
    name = Column(String(100), nullable=False)                  # 교사 이름
    token = Column(String(128), unique=True, index=True)        # 로그인 시 발급되는 Bearer 토큰
