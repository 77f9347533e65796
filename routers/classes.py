from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from database.repositories import SqlAlchemyGradingRepository
from dependencies.security import grading_access
from schemas.classes import Class as ClassSchema

router = APIRouter(prefix="/classes", tags=["학급"], dependencies=[Depends(grading_access)])


# ✅ [READ] 전체 학급 조회
@router.get("/")
def read_classes(db: Session = Depends(get_db)):
    records = SqlAlchemyGradingRepository(db).get_classes()
    return {
        "success": True,
        "data": [ClassSchema.model_validate(r).model_dump() for r in records],
        "message": "전체 학급 조회 완료"
    }
