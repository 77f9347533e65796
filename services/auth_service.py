"""
교사 계정 인증 서비스

- 비밀번호는 scrypt 해시로 저장 ("<hex hash>.<hex salt>")
- 로그인 성공 시 임의 Bearer 토큰을 발급해 교사 레코드에 저장
"""

import hashlib
import hmac
import logging
import secrets

from sqlalchemy.orm import Session

from config.settings import settings
from models.teachers import Teacher as TeacherModel
from services.errors import DuplicateUsernameError

logger = logging.getLogger(__name__)

# scrypt 파라미터
_SCRYPT_N = 16384
_SCRYPT_R = 8
_SCRYPT_P = 1
_KEY_LEN = 64


def _scrypt(password: str, salt: str) -> bytes:
    return hashlib.scrypt(
        password.encode("utf-8"),
        salt=salt.encode("utf-8"),
        n=_SCRYPT_N,
        r=_SCRYPT_R,
        p=_SCRYPT_P,
        dklen=_KEY_LEN,
    )


def hash_password(password: str) -> str:
    salt = secrets.token_hex(16)
    return f"{_scrypt(password, salt).hex()}.{salt}"


def verify_password(supplied: str, stored: str) -> bool:
    try:
        hashed, salt = stored.split(".", 1)
        expected = bytes.fromhex(hashed)
    except ValueError:
        return False
    # 타이밍 안전 비교
    return hmac.compare_digest(expected, _scrypt(supplied, salt))


def register_teacher(db: Session, username: str, password: str, name: str) -> TeacherModel:
    if db.query(TeacherModel).filter(TeacherModel.username == username).first():
        raise DuplicateUsernameError(username)

    teacher = TeacherModel(username=username, password=hash_password(password), name=name)
    db.add(teacher)
    db.commit()
    db.refresh(teacher)
    logger.info("교사 계정 생성: username=%s", username)
    return teacher


def authenticate(db: Session, username: str, password: str):
    """아이디/비밀번호 확인 후 새 토큰을 발급. 실패 시 None"""
    teacher = db.query(TeacherModel).filter(TeacherModel.username == username).first()
    if teacher is None or not verify_password(password, teacher.password):
        logger.warning("로그인 실패: username=%s", username)
        return None

    teacher.token = secrets.token_urlsafe(settings.TOKEN_BYTES)
    db.commit()
    db.refresh(teacher)
    return teacher


def get_teacher_by_token(db: Session, token: str):
    if not token:
        return None
    return db.query(TeacherModel).filter(TeacherModel.token == token).first()


def logout(db: Session, teacher: TeacherModel) -> None:
    teacher.token = None
    db.commit()
