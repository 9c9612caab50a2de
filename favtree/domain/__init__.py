"""Domain layer: constants, errors and schemas."""

from .errors import (
    EmptyBodyError,
    ErrorCodes,
    MalformedJSONError,
    MethodError,
    MissingBodyError,
    PipelineError,
    RoutingError,
    TemplateError,
)
from .schemas import IncomingRequest, RenderedResponse

__all__ = [
    "PipelineError",
    "RoutingError",
    "MethodError",
    "MissingBodyError",
    "EmptyBodyError",
    "MalformedJSONError",
    "TemplateError",
    "ErrorCodes",
    "IncomingRequest",
    "RenderedResponse",
]
