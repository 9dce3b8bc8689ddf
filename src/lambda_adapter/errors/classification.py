"""
Error classification and envelope construction.

Errors are classified into an ErrorKind in a fixed priority order and each
kind has exactly one envelope builder. The first matching kind wins.
"""

from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple, Type, Union

from pydantic import ValidationError

from lambda_adapter.errors.application import ApplicationError
from lambda_adapter.errors.error_code import ErrorCode
from lambda_adapter.errors.http import HttpError
from lambda_adapter.models.response import ErrorEnvelope, FieldError

INTERNAL_SERVER_ERROR_MESSAGE = "Internal server error."


class ErrorKind(str, Enum):
    """Kinds of failures the adapter knows how to render, in priority order."""
    VALIDATION = "VALIDATION"
    HTTP = "HTTP"
    APPLICATION = "APPLICATION"
    UNEXPECTED = "UNEXPECTED"


# Order matters: pydantic's ValidationError is a ValueError, and application
# code may subclass HttpError and ApplicationError together.
_CLASSIFICATION_ORDER: Tuple[Tuple[Type[BaseException], ErrorKind], ...] = (
    (ValidationError, ErrorKind.VALIDATION),
    (HttpError, ErrorKind.HTTP),
    (ApplicationError, ErrorKind.APPLICATION),
)


def classify_error(error: BaseException) -> ErrorKind:
    """Return the ErrorKind of the first rule matching ``error``."""
    for error_type, kind in _CLASSIFICATION_ORDER:
        if isinstance(error, error_type):
            return kind
    return ErrorKind.UNEXPECTED


def format_field_path(loc: Tuple[Union[int, str], ...]) -> str:
    """Join a pydantic error location into a dotted path, e.g. ``items.0.name``."""
    return ".".join(str(part) for part in loc)


def _validation_envelope(error: ValidationError) -> ErrorEnvelope:
    field_errors: List[FieldError] = [
        FieldError(field=format_field_path(issue["loc"]), error=issue["msg"])
        for issue in error.errors()
    ]
    return ErrorEnvelope(
        status_code=400,
        code=ErrorCode.VALIDATION,
        message=field_errors,
    )


def _http_envelope(error: HttpError) -> ErrorEnvelope:
    return ErrorEnvelope(
        status_code=error.status_code,
        code=error.code,
        message=error.message,
    )


def _application_envelope(error: ApplicationError) -> ErrorEnvelope:
    return ErrorEnvelope(
        status_code=error.status_code if error.status_code is not None else 400,
        code=error.code,
        message=error.message,
    )


def _unexpected_envelope(error: BaseException) -> ErrorEnvelope:
    return ErrorEnvelope(
        status_code=500,
        code=ErrorCode.INTERNAL_SERVER_ERROR,
        message=INTERNAL_SERVER_ERROR_MESSAGE,
    )


_ENVELOPE_BUILDERS: Dict[ErrorKind, Callable[..., ErrorEnvelope]] = {
    ErrorKind.VALIDATION: _validation_envelope,
    ErrorKind.HTTP: _http_envelope,
    ErrorKind.APPLICATION: _application_envelope,
    ErrorKind.UNEXPECTED: _unexpected_envelope,
}


def build_error_envelope(error: BaseException, kind: Optional[ErrorKind] = None) -> ErrorEnvelope:
    """Build the ErrorEnvelope for ``error``, classifying it first if needed."""
    if kind is None:
        kind = classify_error(error)
    return _ENVELOPE_BUILDERS[kind](error)
