"""
Request-side models handed to controllers.
"""

from types import MappingProxyType
from typing import Annotated, Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class NormalizedRequest(BaseModel):
    """
    Request representation decoupled from the originating event shape.

    The model is frozen and its parameter mappings are read-only views, so a
    controller cannot change the request it was given.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    body: Annotated[Any, Field(description='Parsed JSON body, or None when absent')] = None
    params: Annotated[Mapping[str, str], Field(default_factory=dict, validate_default=True, description='Path parameters')]
    query_params: Annotated[Mapping[str, str], Field(
        default_factory=dict, validate_default=True, description='Query string parameters'
    )]
    account_id: Annotated[Optional[str], Field(description='Authenticated account identifier')] = None

    @field_validator('params', 'query_params')
    @classmethod
    def make_read_only(cls, v: Mapping[str, str]) -> Mapping[str, str]:
        """Wrap a copy of the parameters in a read-only view."""
        return MappingProxyType(dict(v))

    @field_serializer('params', 'query_params')
    def serialize_params(self, v: Mapping[str, str]) -> Dict[str, str]:
        return dict(v)


class HandlerResult(BaseModel):
    """Result returned by a controller."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, arbitrary_types_allowed=True)

    status_code: Annotated[int, Field(alias='statusCode', ge=100, le=599)]
    body: Annotated[Any, Field(description='JSON-serializable body, omitted when None')] = None
