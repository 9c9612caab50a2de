"""
Request body 디코딩.

스트리밍 JSON 디코더와 같은 규칙:
- 앞쪽 공백만 있는 body는 "비어 있음"으로 취급
- 첫 번째 JSON 값만 읽고, 뒤따르는 바이트는 무시
- NaN/Infinity 같은 비표준 상수, 범위 초과 숫자는 거절
- 중첩이 너무 깊은 body는 거절 (RecursionError)
"""

import json
import math
from typing import Any

from favtree.domain.errors import EmptyBodyError, MalformedJSONError, MissingBodyError
from favtree.domain.schemas import ParsedPayload

# RFC 8259 insignificant whitespace
JSON_WHITESPACE = " \t\n\r"


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name!r}")


def _parse_finite_float(text: str) -> float:
    # 1e400 같은 범위 초과 값은 inf가 되므로 거절
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"number {text} is out of range")
    return value


_decoder = json.JSONDecoder(
    parse_constant=_reject_constant,
    parse_float=_parse_finite_float,
)


def json_type_name(value: Any) -> str:
    """JSON 관점의 타입 이름 (에러 메시지용)."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def decode_payload(body: bytes | None) -> ParsedPayload:
    """
    body → JSON object.

    Args:
        body: 요청 body (None이면 body 객체 없음)

    Returns:
        디코딩된 object

    Raises:
        MissingBodyError: body가 None
        EmptyBodyError: 0 bytes 또는 공백만
        MalformedJSONError: UTF-8/JSON 오류, 최상위 값이 object가 아님
    """
    if body is None:
        raise MissingBodyError()

    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedJSONError(f"request body is not valid UTF-8: {e}") from e

    text = text.lstrip(JSON_WHITESPACE)
    if not text:
        raise EmptyBodyError()

    try:
        payload, _ = _decoder.raw_decode(text)
    except ValueError as e:
        # json.JSONDecodeError 포함
        raise MalformedJSONError(str(e)) from e
    except RecursionError as e:
        raise MalformedJSONError("exceeded maximum nesting depth") from e

    if not isinstance(payload, dict):
        raise MalformedJSONError(
            f"expected a JSON object, got {json_type_name(payload)}",
            json_type=json_type_name(payload),
        )

    return payload
