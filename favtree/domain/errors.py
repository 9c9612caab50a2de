"""
Error definitions for the request pipeline.

규칙:
- 모든 에러는 요청 단위로 종료 (재시도 없음, 프로세스 전파 없음)
- 각 에러는 자신의 HTTP status code와 메시지를 가진다
- 파이프라인 최외곽에서 RenderedResponse로 변환
"""

from http import HTTPStatus
from typing import Any

from favtree.domain.constants import (
    ALLOWED_METHOD,
    EMPTY_BODY_MESSAGE,
    EMPTY_BODY_STATUS,
    METHOD_NOT_ALLOWED_MESSAGE,
    MISSING_BODY_MESSAGE,
    MISSING_BODY_STATUS,
    NOT_FOUND_MESSAGE,
)

# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수. 로그의 code 필드로 사용."""

    # === Routing ===
    ROUTE_NOT_FOUND = "ROUTE_NOT_FOUND"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"

    # === Body ===
    BODY_MISSING = "BODY_MISSING"
    BODY_EMPTY = "BODY_EMPTY"
    BODY_MALFORMED = "BODY_MALFORMED"

    # === Render ===
    TEMPLATE_FAILED = "TEMPLATE_FAILED"


# =============================================================================
# Base
# =============================================================================

class PipelineError(Exception):
    """
    요청 파이프라인에서 요청을 거절할 때 발생하는 에러.

    Usage:
        raise MalformedJSONError("Expecting value: line 1 column 1 (char 0)")
    """

    code: str = "PIPELINE_ERROR"
    status_code: int = HTTPStatus.BAD_REQUEST

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(f"[{self.code}] {message}")

    @property
    def headers(self) -> dict[str, str]:
        """응답에 추가할 헤더."""
        return {}

    def to_dict(self) -> dict[str, Any]:
        """로그/JSON 직렬화용."""
        return {
            "code": self.code,
            "status_code": int(self.status_code),
            "message": self.message,
            **self.context,
        }


# =============================================================================
# Routing
# =============================================================================

class RoutingError(PipelineError):
    """루트(/) 이외의 경로."""

    code = ErrorCodes.ROUTE_NOT_FOUND
    status_code = HTTPStatus.NOT_FOUND

    def __init__(self, path: str) -> None:
        super().__init__(NOT_FOUND_MESSAGE, path=path)


class MethodError(PipelineError):
    """POST 이외의 메서드."""

    code = ErrorCodes.METHOD_NOT_ALLOWED
    status_code = HTTPStatus.METHOD_NOT_ALLOWED

    def __init__(self, method: str) -> None:
        super().__init__(METHOD_NOT_ALLOWED_MESSAGE, method=method)

    @property
    def headers(self) -> dict[str, str]:
        return {"Allow": ALLOWED_METHOD}


# =============================================================================
# Body
# =============================================================================

class MissingBodyError(PipelineError):
    """body 객체 자체가 없음 (None)."""

    code = ErrorCodes.BODY_MISSING
    status_code = MISSING_BODY_STATUS

    def __init__(self) -> None:
        super().__init__(MISSING_BODY_MESSAGE)


class EmptyBodyError(PipelineError):
    """body는 있으나 내용이 없음 (0 bytes 또는 공백만)."""

    code = ErrorCodes.BODY_EMPTY
    status_code = EMPTY_BODY_STATUS

    def __init__(self) -> None:
        super().__init__(EMPTY_BODY_MESSAGE)


class MalformedJSONError(PipelineError):
    """JSON 파싱 실패 또는 최상위 값이 object가 아님."""

    code = ErrorCodes.BODY_MALFORMED
    status_code = HTTPStatus.BAD_REQUEST


# =============================================================================
# Render
# =============================================================================

class TemplateError(PipelineError):
    """
    템플릿 로드/렌더 실패.

    설정 오류지만 호출자에게 400으로 그대로 보고한다.
    """

    code = ErrorCodes.TEMPLATE_FAILED
    status_code = HTTPStatus.BAD_REQUEST
