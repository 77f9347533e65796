"""
services/errors.py

- 서비스 계층에서 발생시키는 도메인 예외 모음
- middlewares/error_handler.py에서 HTTP 상태 코드와 표준 에러 응답으로 변환
"""


class GradingError(Exception):
    """도메인 예외 기본 클래스"""
    status_code = 400
    code = "BAD_REQUEST"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# =========================================================
# 404 계열
# =========================================================

class NotFoundError(GradingError):
    status_code = 404
    code = "NOT_FOUND"


class StudentNotFoundError(NotFoundError):
    code = "STUDENT_NOT_FOUND"

    def __init__(self, student_id):
        super().__init__(f"Student not found: {student_id}")
        self.student_id = student_id


class ClassNotFoundError(NotFoundError):
    code = "CLASS_NOT_FOUND"

    def __init__(self, class_name):
        super().__init__(f"Class not found: {class_name}")


class SubjectNotFoundError(NotFoundError):
    code = "SUBJECT_NOT_FOUND"

    def __init__(self, code):
        super().__init__(f"Subject not found: {code}")


class ExperimentNotFoundError(NotFoundError):
    code = "EXPERIMENT_NOT_FOUND"

    def __init__(self, subject, number):
        super().__init__(f"Experiment {number} not found for subject {subject}")


class GradeNotFoundError(NotFoundError):
    code = "GRADE_NOT_FOUND"

    def __init__(self, grade_id):
        super().__init__(f"Grade not found: {grade_id}")


# =========================================================
# 400 계열 (중복)
# =========================================================

class ConflictError(GradingError):
    code = "DUPLICATE"


class DuplicateSapIdError(ConflictError):
    def __init__(self, sap_id):
        super().__init__(f"Student with this SAP ID already exists: {sap_id}")


class DuplicateUsernameError(ConflictError):
    def __init__(self, username):
        super().__init__(f"Username already exists: {username}")
