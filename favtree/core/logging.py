"""
Request logging.

- configure_logging: 프로세스 시작 시 1회 (import 시점 X)
- log_requests: 파이프라인 최외곽 wrapper, 요청/응답 요약 기록
"""

import functools
import logging

from favtree.domain.schemas import Handler, IncomingRequest, RenderedResponse

logger = logging.getLogger(__name__)


def configure_logging(level: str, fmt: str) -> None:
    """
    루트 로거 설정.

    Args:
        level: 로그 레벨 이름 (예: "INFO")
        fmt: logging 포맷 문자열
    """
    logging.basicConfig(level=level.upper(), format=fmt)


def log_requests(handler: Handler) -> Handler:
    """요청 path/method/body 요약과 결과 status를 기록."""

    @functools.wraps(handler)
    def wrapper(request: IncomingRequest) -> RenderedResponse:
        logger.info(
            f"Request: path={request.path} method={request.method} "
            f"body={request.describe_body()}"
        )
        response = handler(request)
        logger.info(
            f"Response: status={response.status_code} "
            f"length={len(response.body)}"
        )
        return response

    return wrapper
