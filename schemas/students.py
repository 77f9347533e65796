from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

# ✅ 입력용 (POST)
class StudentCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)       # 학생 이름
    sap_id: str = Field(..., min_length=1, max_length=50)      # 학번 (SAP ID)
    class_name: str = Field(..., min_length=1, max_length=20)  # 소속 반 이름 (예: IT1)

# ✅ 부분 수정용 (PATCH) - 보낸 필드만 반영
class StudentUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    sap_id: Optional[str] = Field(default=None, min_length=1, max_length=50)
    class_name: Optional[str] = Field(default=None, min_length=1, max_length=20)

# ✅ 전체 출력용 (GET, 상세조회 등)
class Student(BaseModel):
    id: int
    name: str
    sap_id: str
    class_name: str

    model_config = ConfigDict(from_attributes=True)
