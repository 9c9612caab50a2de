"""
Request pipeline: path → method → body → template.

각 필터는 다음 handler를 감싸는 decorator:
- 조건을 만족하지 않으면 PipelineError를 raise (short-circuit)
- 만족하면 다음 handler에 그대로 위임
- recover_errors가 PipelineError → RenderedResponse 변환

    log_requests(recover_errors(from_index(post_only(handle_body))))
"""

import functools
import logging
from typing import Any, Protocol

from favtree.core.body import decode_payload
from favtree.core.logging import log_requests
from favtree.domain.constants import (
    ALLOWED_METHOD,
    FAVORITE_TREE_KEY,
    NO_TREE_TEMPLATE,
    ROOT_PATH,
    TREE_TEMPLATE,
)
from favtree.domain.errors import (
    MethodError,
    PipelineError,
    RoutingError,
    TemplateError,
)
from favtree.domain.schemas import (
    Handler,
    IncomingRequest,
    ParsedPayload,
    RenderedResponse,
)

logger = logging.getLogger(__name__)


class Renderer(Protocol):
    """템플릿 이름 + 데이터 → HTML bytes."""

    def render(self, template_name: str, data: dict[str, Any]) -> bytes: ...


# =============================================================================
# Filters
# =============================================================================

def from_index(handler: Handler) -> Handler:
    """루트(/) 요청만 통과."""

    @functools.wraps(handler)
    def wrapper(request: IncomingRequest) -> RenderedResponse:
        if request.path != ROOT_PATH:
            raise RoutingError(request.path)
        return handler(request)

    return wrapper


def post_only(handler: Handler) -> Handler:
    """POST 요청만 통과."""

    @functools.wraps(handler)
    def wrapper(request: IncomingRequest) -> RenderedResponse:
        if request.method != ALLOWED_METHOD:
            raise MethodError(request.method)
        return handler(request)

    return wrapper


def recover_errors(handler: Handler) -> Handler:
    """PipelineError를 에러 응답으로 변환. 그 외 예외는 전파."""

    @functools.wraps(handler)
    def wrapper(request: IncomingRequest) -> RenderedResponse:
        try:
            return handler(request)
        except PipelineError as e:
            if isinstance(e, TemplateError):
                logger.error(f"Template failure: {e}")
            else:
                logger.info(f"Request rejected: {e}")
            return RenderedResponse.from_error(e)

    return wrapper


# =============================================================================
# Pipeline
# =============================================================================

def select_template(payload: ParsedPayload) -> tuple[str, dict[str, Any]]:
    """
    favoriteTree 유무로 템플릿 선택.

    값의 타입과 무관하게 키가 있으면 tree 템플릿 (null 포함).

    Returns:
        (템플릿 이름, 템플릿 데이터)
    """
    if FAVORITE_TREE_KEY in payload:
        return TREE_TEMPLATE, {"favorite_tree": payload[FAVORITE_TREE_KEY]}
    return NO_TREE_TEMPLATE, {}


class RequestPipeline:
    """
    단일 엔드포인트 요청 파이프라인.

    상태는 renderer(불변 설정)뿐이므로 요청 간 공유해도 안전.

    Usage:
        pipeline = RequestPipeline(HtmlRenderer(templates_dir))
        response = pipeline(IncomingRequest("POST", "/", b'{"favoriteTree": "Oak"}'))
    """

    def __init__(self, renderer: Renderer) -> None:
        self.renderer = renderer
        self._handler: Handler = log_requests(
            recover_errors(from_index(post_only(self.handle_body)))
        )

    def __call__(self, request: IncomingRequest) -> RenderedResponse:
        return self._handler(request)

    def handle_body(self, request: IncomingRequest) -> RenderedResponse:
        """body 디코딩 → 템플릿 렌더."""
        payload = decode_payload(request.body)
        return self.respond(payload)

    def respond(self, payload: ParsedPayload) -> RenderedResponse:
        template_name, data = select_template(payload)
        content = self.renderer.render(template_name, data)
        return RenderedResponse.html(content)
