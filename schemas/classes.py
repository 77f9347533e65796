from pydantic import BaseModel, ConfigDict

# ✅ 출력용: 학급 목록 조회
class Class(BaseModel):
    id: int                                  # 학급 고유 ID
    name: str                                # 학급 이름 (IT1, IT2, IT3)

    model_config = ConfigDict(from_attributes=True)
