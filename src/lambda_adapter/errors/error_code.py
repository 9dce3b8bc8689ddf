"""
Error codes shared by HTTP and application errors.

The values are part of the public response contract and must stay stable.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Machine-readable error codes returned in error response bodies."""
    VALIDATION = "VALIDATION"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
    BAD_REQUEST = "BAD_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
