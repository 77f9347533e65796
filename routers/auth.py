from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from database.db import get_db
from dependencies.security import require_teacher
from schemas.teachers import LoginRequest, LoginResponse, Teacher as TeacherSchema, TeacherRegister
from services import auth_service

router = APIRouter(prefix="/auth", tags=["인증"])


# ✅ [REGISTER] 교사 회원가입
@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(request: TeacherRegister, db: Session = Depends(get_db)):
    teacher = auth_service.register_teacher(db, request.username, request.password, request.name)
    return {
        "success": True,
        "data": TeacherSchema.model_validate(teacher).model_dump(),
        "message": "Teacher registered successfully"
    }


# ✅ [LOGIN] 로그인 API
@router.post("/login")
def login(request: LoginRequest, db: Session = Depends(get_db)):
    teacher = auth_service.authenticate(db, request.username, request.password)
    if teacher is None:
        raise HTTPException(status_code=401, detail="Invalid username or password")
    payload = LoginResponse(teacher=TeacherSchema.model_validate(teacher), token=teacher.token)
    return {"success": True, "data": payload.model_dump(), "message": "Login successful"}


# ✅ [LOGOUT] 토큰 폐기
@router.post("/logout")
def logout(teacher=Depends(require_teacher), db: Session = Depends(get_db)):
    auth_service.logout(db, teacher)
    return {"success": True, "data": None, "message": "Logged out"}


# ✅ [ME] 현재 로그인한 교사
@router.get("/me")
def me(teacher=Depends(require_teacher)):
    return {"success": True, "data": TeacherSchema.model_validate(teacher).model_dump()}
