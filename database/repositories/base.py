"""
조회 저장소 인터페이스

- 리포트 집계는 이 인터페이스에만 의존하며 구체적인 저장소(SQL, 메모리 등)를 알지 못합니다.
"""
from __future__ import annotations

from typing import Any, List, Optional, Protocol


class GradingRepository(Protocol):
    def get_student(self, student_id: int) -> Optional[Any]:
        """학생 1명 조회. 없으면 None"""
        ...

    def get_grades_by_student(self, student_id: int) -> List[Any]:
        """학생의 전체 채점 기록 (각 기록은 experiment → subject 참조 포함)"""
        ...

    def get_subjects(self) -> List[Any]:
        """과목 기준 목록 (정해진 순서)"""
        ...


class ClassRosterRepository(GradingRepository, Protocol):
    """학급 요약에 필요한 추가 조회"""

    def get_class_by_name(self, name: str) -> Optional[Any]:
        ...

    def list_students(self, class_name: Optional[str] = None, q: Optional[str] = None) -> List[Any]:
        ...
