"""
Output models for adapted responses and error envelopes.

These models describe what leaves the adapter: either the result of a
controller rendered as a Lambda proxy response, or an error envelope that is
rendered the same way.
"""

import json
from typing import Annotated, Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import to_jsonable_python


class FieldError(BaseModel):
    """A single failing field of a validation error."""

    model_config = ConfigDict(frozen=True)

    field: Annotated[str, Field(description='Dotted path of the failing field', examples=['address.zip_code'])]
    error: Annotated[str, Field(description='Validation message for the field', examples=['Field required'])]


class ErrorEnvelope(BaseModel):
    """Structured error payload, built only on the failure path."""

    model_config = ConfigDict(frozen=True)

    status_code: Annotated[int, Field(ge=100, le=599, description='HTTP status code')]
    code: Annotated[str, Field(description='Machine-readable error code', examples=['VALIDATION'])]
    message: Annotated[Union[str, List[FieldError]], Field(
        description='Human-readable message, or the list of failing fields for validation errors'
    )]

    @field_validator('code', mode='before')
    @classmethod
    def unwrap_enum(cls, v: Any) -> Any:
        """Store enum codes by their value."""
        return getattr(v, 'value', v)


class AdaptedResponse(BaseModel):
    """Lambda proxy response produced by the adapter."""

    model_config = ConfigDict(frozen=True)

    status_code: Annotated[int, Field(ge=100, le=599, description='HTTP status code')]
    body: Annotated[Optional[str], Field(description='JSON-encoded response body')] = None

    def to_lambda(self) -> Dict[str, Any]:
        """Render as the dict API Gateway expects; no ``body`` key when there is no body."""
        response: Dict[str, Any] = {"statusCode": self.status_code}
        if self.body is not None:
            response["body"] = self.body
        return response


def _jsonable_fallback(value: Any) -> Any:
    # Read-only mappings such as NormalizedRequest.params
    if isinstance(value, Mapping):
        return {key: to_jsonable_python(item, fallback=_jsonable_fallback) for key, item in value.items()}
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode_body(body: Any) -> str:
    """
    JSON-encode a response body compactly, e.g. ``{"id":1}``.

    Pydantic models are dumped by alias wherever they appear in the body.

    Raises:
        ValueError: if the body holds NaN or infinite floats
        PydanticSerializationError, TypeError: if the body holds a value with no JSON representation
    """
    return json.dumps(
        to_jsonable_python(body, fallback=_jsonable_fallback),
        separators=(',', ':'),
        allow_nan=False,
    )
