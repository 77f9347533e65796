from pydantic import BaseModel, ConfigDict

# ✅ 출력용: 과목 (기준 데이터, 사용자 생성 없음)
class Subject(BaseModel):
    id: int                                  # 고유 과목 ID
    code: str                                # 과목 코드 (FSD, IPCV, ISIG, BDA, SE)
    name: str                                # 과목 이름

    model_config = ConfigDict(from_attributes=True)


# ✅ 출력용: 실험
class Experiment(BaseModel):
    id: int                                  # 실험 고유 ID
    number: int                              # 실험 번호 (1~5)
    title: str                               # 실험 제목
    subject_code: str                        # 소속 과목 코드

    model_config = ConfigDict(from_attributes=True)
