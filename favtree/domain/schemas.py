"""
Request/Response schemas.

IncomingRequest.body:
- None  → body 객체 없음 (418)
- b""   → body는 있으나 비어 있음 (412)
- bytes → JSON 디코딩 대상
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from favtree.domain.constants import HTML_MEDIA_TYPE, TEXT_MEDIA_TYPE
from favtree.domain.errors import PipelineError

# Decoded request body. "favoriteTree" 외의 키는 무시된다.
ParsedPayload = dict[str, Any]


@dataclass(frozen=True)
class IncomingRequest:
    """요청 1건. 응답 후 폐기."""
    method: str
    path: str
    body: bytes | None = None

    def describe_body(self) -> str:
        """로그용 body 요약."""
        if self.body is None:
            return "nil"
        return f"{len(self.body)} bytes"


@dataclass(frozen=True)
class RenderedResponse:
    """HTTP status + content. 200이면 항상 두 템플릿 중 하나."""
    status_code: int
    body: bytes
    media_type: str = HTML_MEDIA_TYPE
    headers: dict[str, str] = field(default_factory=dict)

    @classmethod
    def html(cls, content: bytes) -> "RenderedResponse":
        """렌더된 템플릿 → 200 응답."""
        return cls(status_code=200, body=content)

    @classmethod
    def from_error(cls, error: PipelineError) -> "RenderedResponse":
        """PipelineError → plain text 에러 응답."""
        return cls(
            status_code=int(error.status_code),
            body=error.message.encode("utf-8"),
            media_type=TEXT_MEDIA_TYPE,
            headers=dict(error.headers),
        )

    @property
    def text(self) -> str:
        return self.body.decode("utf-8")


# 파이프라인 필터가 감싸는 단위
Handler = Callable[[IncomingRequest], RenderedResponse]
