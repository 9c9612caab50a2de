"""
Domain Constants: 엔드포인트 전역 상수.

라우트, 요청 키, 템플릿 이름, 응답 메시지 등
파이프라인 전반에서 사용되는 값들.
"""

from http import HTTPStatus

# =============================================================================
# Route (단일 엔드포인트)
# =============================================================================

ROOT_PATH = "/"
ALLOWED_METHOD = "POST"

# FastAPI 라우트에 등록할 메서드 목록.
# 405 판정은 프레임워크가 아니라 파이프라인이 하므로 전부 받는다.
ROUTED_METHODS = [
    "GET",
    "HEAD",
    "POST",
    "PUT",
    "PATCH",
    "DELETE",
    "OPTIONS",
    "TRACE",
]

# =============================================================================
# Payload
# =============================================================================

FAVORITE_TREE_KEY = "favoriteTree"

# =============================================================================
# Templates (favtree/app/templates/)
# =============================================================================

TREE_TEMPLATE = "favorite_tree.html"
NO_TREE_TEMPLATE = "no_tree.html"

# =============================================================================
# Status Codes
# =============================================================================
# body 객체 자체가 없는 요청은 418로 구분한다 (빈 body = 412).
# 다른 4xx로 바꿀 경우 이 값만 수정.

MISSING_BODY_STATUS = HTTPStatus.IM_A_TEAPOT
EMPTY_BODY_STATUS = HTTPStatus.PRECONDITION_FAILED

# =============================================================================
# Messages
# =============================================================================

NOT_FOUND_MESSAGE = "404 page not found"
METHOD_NOT_ALLOWED_MESSAGE = "Please only use Post requests"
MISSING_BODY_MESSAGE = "Body of request cannot be nil, expecting Json data."
EMPTY_BODY_MESSAGE = "Body of request cannot be empty, expecting Json data."

# =============================================================================
# Media Types
# =============================================================================

HTML_MEDIA_TYPE = "text/html; charset=utf-8"
TEXT_MEDIA_TYPE = "text/plain; charset=utf-8"

# =============================================================================
# Server Defaults (default.yaml 미설정 시)
# =============================================================================

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
