"""
Repository 모듈

리포트 집계와 라우터가 사용하는 조회 인터페이스를 export합니다.
"""
from .base import ClassRosterRepository, GradingRepository
from .grading_repository import SqlAlchemyGradingRepository

__all__ = [
    'ClassRosterRepository',
    'GradingRepository',
    'SqlAlchemyGradingRepository',
]
