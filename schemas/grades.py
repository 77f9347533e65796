from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# ✅ 루브릭 점수: 0~5 정수, 미입력 허용
RubricScore = Optional[int]


# ==========================================================
# [입력용 스키마]
# ==========================================================
class GradeUpsert(BaseModel):
    """(학생, 과목, 실험 번호) 기준 채점 저장. 이미 있으면 갱신, 없으면 생성"""
    student_id: int
    subject: str = Field(..., description="과목 코드 (예: FSD)")
    experiment_number: int = Field(..., ge=1, le=5)
    performance: RubricScore = Field(default=None, ge=0, le=5)
    knowledge: RubricScore = Field(default=None, ge=0, le=5)
    implementation: RubricScore = Field(default=None, ge=0, le=5)
    strategy: RubricScore = Field(default=None, ge=0, le=5)
    attitude: RubricScore = Field(default=None, ge=0, le=5)
    comment: Optional[str] = Field(default=None, max_length=1000)


class GradeUpdate(BaseModel):
    """PATCH 용: 보낸 항목만 반영"""
    performance: RubricScore = Field(default=None, ge=0, le=5)
    knowledge: RubricScore = Field(default=None, ge=0, le=5)
    implementation: RubricScore = Field(default=None, ge=0, le=5)
    strategy: RubricScore = Field(default=None, ge=0, le=5)
    attitude: RubricScore = Field(default=None, ge=0, le=5)
    comment: Optional[str] = Field(default=None, max_length=1000)


# ==========================================================
# [출력용 스키마]
# ==========================================================
class Grade(BaseModel):
    id: int
    student_id: int
    experiment_id: int
    subject: str                             # 과목 코드
    experiment_number: int                   # 실험 번호
    performance: RubricScore = None
    knowledge: RubricScore = None
    implementation: RubricScore = None
    strategy: RubricScore = None
    attitude: RubricScore = None
    comment: Optional[str] = None
    total: int                               # 5개 항목 합계 (0~25)
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ExperimentProgress(BaseModel):
    subject: str
    experiment_number: int
    graded: int                              # 채점 완료 학생 수
    total_students: int                      # 반 전체 학생 수
