from pydantic import BaseModel, ConfigDict, Field

# ✅ 회원가입 요청
class TeacherRegister(BaseModel):
    username: str = Field(..., min_length=3, max_length=100)
    password: str = Field(..., min_length=4, max_length=200)
    name: str = Field(..., min_length=1, max_length=100)

# ✅ 로그인 요청
class LoginRequest(BaseModel):
    username: str
    password: str

# ✅ 교사 정보 응답 (비밀번호/토큰 제외)
class Teacher(BaseModel):
    id: int
    username: str
    name: str

    model_config = ConfigDict(from_attributes=True)

# ✅ 로그인 응답
class LoginResponse(BaseModel):
    teacher: Teacher
    token: str
    token_type: str = "bearer"
