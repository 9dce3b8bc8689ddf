"""
Data models for events, normalized requests and adapted responses.
"""

from lambda_adapter.models.event import (
    ContextKind,
    IncomingEvent,
    JwtAuthorizedRequestContext,
    PlainRequestContext,
)
from lambda_adapter.models.request import HandlerResult, NormalizedRequest
from lambda_adapter.models.response import AdaptedResponse, ErrorEnvelope, FieldError, encode_body

__all__ = [
    "AdaptedResponse",
    "ContextKind",
    "ErrorEnvelope",
    "FieldError",
    "HandlerResult",
    "IncomingEvent",
    "JwtAuthorizedRequestContext",
    "NormalizedRequest",
    "PlainRequestContext",
    "encode_body",
]
