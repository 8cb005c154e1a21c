# social_api/core/errors.py
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ErrorKind(Enum):
    """
    서비스 계층이 반환할 수 있는 실패 유형의 닫힌 목록.
    각 멤버는 (HTTP 상태 코드, error_code, 기본 메시지) 튜플을 값으로 가집니다.
    """
    VALIDATION_FAILED = (400, "VALIDATION_ERROR", "Invalid request body")
    INVALID_ID = (400, "INVALID_POST_ID", "Post not found")
    NOT_FOUND = (404, "POST_NOT_FOUND", "Post not found")
    UNAUTHORIZED = (401, "NOT_AUTHORIZED", "User not authorized")
    ALREADY_LIKED = (400, "POST_ALREADY_LIKED", "Post already liked")
    NOT_LIKED = (400, "POST_NOT_LIKED", "Post has not yet been liked")
    COMMENT_NOT_FOUND = (404, "COMMENT_NOT_FOUND", "Comment not found")
    USER_ALREADY_EXISTS = (400, "USER_ALREADY_EXISTS", "User already exists")
    INTERNAL = (500, "INTERNAL_SERVER_ERROR", "Server error")

    @property
    def status_code(self) -> int:
        return self.value[0]

    @property
    def error_code(self) -> str:
        return self.value[1]

    @property
    def message(self) -> str:
        return self.value[2]


@dataclass
class ServiceResult:
    """서비스 호출 결과. 성공 시 value, 실패 시 error 중 하나만 채워집니다."""
    value: Any = None
    error: Optional[ErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Any = None) -> "ServiceResult":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind) -> "ServiceResult":
        return cls(error=kind)


def error_body(kind: ErrorKind, message: Optional[str] = None) -> dict:
    """API 에러 응답 본문을 만듭니다."""
    return {"error_code": kind.error_code, "message": message or kind.message}
