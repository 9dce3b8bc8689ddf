"""
Domain errors raised by controllers and the services behind them.

Unlike HttpError, an application error is not required to know its HTTP
status code; the adapter falls back to 400 when none is set.
"""

from typing import Optional, Union

from lambda_adapter.errors.error_code import ErrorCode


class ApplicationError(Exception):
    """Base exception class for recognized application errors."""

    def __init__(
        self,
        message: str,
        code: Union[ErrorCode, str],
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code


class MalformedEventError(Exception):
    """Raised when the incoming Lambda event does not have the API Gateway v2 shape."""


class DependencyNotRegisteredError(LookupError):
    """Raised when the registry is asked for a type it cannot build."""

    def __init__(self, impl: type):
        super().__init__(f"{impl.__name__} not registered.")
        self.impl = impl
