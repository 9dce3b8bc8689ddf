"""
Error types and the error-to-HTTP translation chain.
"""

from lambda_adapter.errors.application import (
    ApplicationError,
    DependencyNotRegisteredError,
    MalformedEventError,
)
from lambda_adapter.errors.classification import (
    INTERNAL_SERVER_ERROR_MESSAGE,
    ErrorKind,
    build_error_envelope,
    classify_error,
)
from lambda_adapter.errors.error_code import ErrorCode
from lambda_adapter.errors.http import (
    BadRequest,
    Conflict,
    Forbidden,
    HttpError,
    NotFound,
    Unauthorized,
)

__all__ = [
    "ApplicationError",
    "BadRequest",
    "Conflict",
    "DependencyNotRegisteredError",
    "ErrorCode",
    "ErrorKind",
    "Forbidden",
    "HttpError",
    "INTERNAL_SERVER_ERROR_MESSAGE",
    "MalformedEventError",
    "NotFound",
    "Unauthorized",
    "build_error_envelope",
    "classify_error",
]
