"""
Core layer: 요청 파이프라인.

역할:
- path / method 필터
- body 디코딩 (nil / empty / malformed 구분)
- 템플릿 선택
"""

from .body import decode_payload
from .logging import configure_logging, log_requests
from .pipeline import (
    RequestPipeline,
    from_index,
    post_only,
    recover_errors,
    select_template,
)

__all__ = [
    # pipeline
    "RequestPipeline",
    "from_index",
    "post_only",
    "recover_errors",
    "select_template",
    # body
    "decode_payload",
    # logging
    "configure_logging",
    "log_requests",
]
