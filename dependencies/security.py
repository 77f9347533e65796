from typing import Optional, Annotated
from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session

from config.settings import settings
from database.db import get_db
from services.auth_service import get_teacher_by_token

AuthHeader = Annotated[Optional[str], Header(alias="Authorization")]


def _unauthorized(detail: str):
    return HTTPException(
        status_code=401,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def require_teacher(authorization: AuthHeader = None, db: Session = Depends(get_db)):
    """Bearer 토큰으로 로그인한 교사를 확인"""
    if not authorization:
        raise _unauthorized("Missing Authorization header")

    # "Bearer <token>" 파싱
    try:
        scheme, token = authorization.split(" ", 1)
    except ValueError:
        raise _unauthorized("Invalid Authorization header format")

    if scheme.lower() != "bearer":
        raise _unauthorized("Invalid auth scheme")

    teacher = get_teacher_by_token(db, token.strip())
    if teacher is None:
        raise _unauthorized("Invalid token")

    return teacher


def grading_access(authorization: AuthHeader = None, db: Session = Depends(get_db)):
    """채점/명부 라우터용: AUTH_REQUIRED가 꺼져 있으면 인증 생략"""
    if not settings.AUTH_REQUIRED:
        return None
    return require_teacher(authorization, db)
