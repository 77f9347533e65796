import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from schemas.common import ErrorDetail, ErrorResponse
from services.errors import GradingError

logger = logging.getLogger(__name__)


def _error_response(status_code: int, code: str, message, headers=None):
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=ErrorDetail(code=code, message=message)).model_dump(mode="json"),
        headers=headers,
    )


def add_error_handlers(app: FastAPI):
    # ✅ 도메인 예외 (NotFound / 중복 등)
    @app.exception_handler(GradingError)
    async def grading_error_handler(request: Request, exc: GradingError):
        logger.info("%s %s → %s: %s", request.method, request.url.path, exc.code, exc.message)
        return _error_response(exc.status_code, exc.code, exc.message)

    # ✅ HTTPException (인증 실패 등)
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return _error_response(exc.status_code, f"HTTP_{exc.status_code}", exc.detail, getattr(exc, "headers", None))

    # ✅ 요청 본문/파라미터 검증 실패 → 400
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = [
            {"loc": list(err.get("loc", ())), "msg": err.get("msg")}
            for err in exc.errors()
        ]
        return _error_response(400, "VALIDATION_ERROR", errors)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("처리되지 않은 예외: %s %s", request.method, request.url.path)
        return _error_response(500, "INTERNAL_ERROR", str(exc))
