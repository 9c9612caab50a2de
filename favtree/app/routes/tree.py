"""
Tree Routes: 좋아하는 나무 엔드포인트.

- POST / → HTML (favorite_tree.html 또는 no_tree.html)
- 그 외 경로/메서드 → 파이프라인이 404/405 판정

모든 경로, 모든 메서드를 하나의 라우트로 받는다.
FastAPI 기본 404/405가 먼저 응답하지 않도록.
"""

from fastapi import APIRouter, Request
from fastapi.responses import Response

from favtree.core.pipeline import RequestPipeline
from favtree.domain.constants import ROUTED_METHODS
from favtree.domain.schemas import IncomingRequest, RenderedResponse

router = APIRouter()


# =============================================================================
# Conversion
# =============================================================================

def has_body(request: Request) -> bool:
    """
    body 객체 존재 여부.

    Content-Length, Transfer-Encoding 둘 다 없으면 body 없음 (None).
    Content-Length: 0 은 "빈 body" (b"").
    """
    return (
        "content-length" in request.headers
        or "transfer-encoding" in request.headers
    )


async def to_incoming(request: Request) -> IncomingRequest:
    """Starlette Request → IncomingRequest."""
    body: bytes | None = None
    if has_body(request):
        body = await request.body()

    return IncomingRequest(
        method=request.method,
        path=request.url.path,
        body=body,
    )


def to_response(rendered: RenderedResponse) -> Response:
    """RenderedResponse → Starlette Response."""
    return Response(
        content=rendered.body,
        status_code=rendered.status_code,
        headers=rendered.headers,
        media_type=rendered.media_type,
    )


# =============================================================================
# Route
# =============================================================================

@router.api_route(
    "/{path:path}",
    methods=ROUTED_METHODS,
    include_in_schema=False,
)
async def favorite_tree(request: Request) -> Response:
    """
    모든 요청 → RequestPipeline.

    curl -X POST http://127.0.0.1:8000/ -d '{"favoriteTree": "Beech"}'
    """
    pipeline: RequestPipeline = request.app.state.pipeline
    incoming = await to_incoming(request)
    return to_response(pipeline(incoming))
