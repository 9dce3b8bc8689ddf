"""
HTTP errors that already know how they should be rendered.

Raising one of these from a controller (or a collaborator such as the body
parser) makes the adapter return its status code, code and message unchanged.
"""

from typing import Optional

from lambda_adapter.errors.error_code import ErrorCode


class HttpError(Exception):
    """Base class for errors carrying their own HTTP status, code and message."""

    status_code: int = 500
    code: ErrorCode = ErrorCode.INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error."

    def __init__(self, message: Optional[str] = None, code: Optional[ErrorCode] = None):
        self.message = message if message is not None else self.default_message
        if code is not None:
            self.code = code
        super().__init__(self.message)


class BadRequest(HttpError):
    status_code = 400
    code = ErrorCode.BAD_REQUEST
    default_message = "Bad request."


class Unauthorized(HttpError):
    status_code = 401
    code = ErrorCode.UNAUTHORIZED
    default_message = "Unauthorized."


class Forbidden(HttpError):
    status_code = 403
    code = ErrorCode.FORBIDDEN
    default_message = "Forbidden."


class NotFound(HttpError):
    status_code = 404
    code = ErrorCode.NOT_FOUND
    default_message = "Resource not found."


class Conflict(HttpError):
    status_code = 409
    code = ErrorCode.CONFLICT
    default_message = "Conflict."
