"""
API Gateway HTTP API (payload v2) event models.

The request context is a tagged variant: a plain context, or a context
authorized by a JWT authorizer that carries the token claims. The variant is
chosen once, when the raw event is parsed, so the rest of the adapter branches
on ``kind`` instead of probing dictionary keys.
"""

from enum import Enum
from typing import Annotated, Any, Dict, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from lambda_adapter.errors.application import MalformedEventError


class ContextKind(str, Enum):
    PLAIN = "PLAIN"
    JWT_AUTHORIZED = "JWT_AUTHORIZED"


class PlainRequestContext(BaseModel):
    """Request context of an unauthenticated request."""

    model_config = ConfigDict(frozen=True)

    kind: Literal[ContextKind.PLAIN] = ContextKind.PLAIN
    request_id: Optional[str] = None


class JwtAuthorizedRequestContext(BaseModel):
    """Request context of a request that passed a JWT authorizer."""

    model_config = ConfigDict(frozen=True)

    kind: Literal[ContextKind.JWT_AUTHORIZED] = ContextKind.JWT_AUTHORIZED
    request_id: Optional[str] = None
    claims: Dict[str, Any] = Field(default_factory=dict)


RequestContext = Annotated[
    Union[PlainRequestContext, JwtAuthorizedRequestContext],
    Field(discriminator='kind'),
]


class IncomingEvent(BaseModel):
    """The parts of an API Gateway v2 event the adapter consumes."""

    model_config = ConfigDict(frozen=True)

    body: Optional[str] = None
    is_base64_encoded: bool = False
    path_parameters: Optional[Dict[str, str]] = None
    query_string_parameters: Optional[Dict[str, str]] = None
    request_context: RequestContext = Field(default_factory=PlainRequestContext)

    @property
    def has_authorizer(self) -> bool:
        return self.request_context.kind == ContextKind.JWT_AUTHORIZED

    @classmethod
    def from_lambda_event(cls, event: Mapping[str, Any]) -> "IncomingEvent":
        """
        Parse a raw Lambda event.

        Raises:
            MalformedEventError: if the event is not shaped like an API Gateway v2 event
        """
        if not isinstance(event, Mapping):
            raise MalformedEventError(f"Expected a mapping event, got {type(event).__name__}")

        raw_context = event.get('requestContext') or {}
        if not isinstance(raw_context, Mapping):
            raise MalformedEventError("requestContext must be a mapping")

        context: Dict[str, Any] = {
            'kind': ContextKind.PLAIN,
            'request_id': raw_context.get('requestId'),
        }
        claims = _jwt_claims(raw_context.get('authorizer'))
        if claims is not None:
            context['kind'] = ContextKind.JWT_AUTHORIZED
            context['claims'] = claims

        try:
            return cls(
                body=event.get('body'),
                is_base64_encoded=event.get('isBase64Encoded') or False,
                path_parameters=event.get('pathParameters'),
                query_string_parameters=event.get('queryStringParameters'),
                request_context=context,
            )
        except ValidationError as exc:
            # Shape problems in the platform event are not client validation errors
            raise MalformedEventError(str(exc)) from exc


def _jwt_claims(authorizer: Any) -> Optional[Dict[str, Any]]:
    """Return the JWT claims of an authorizer section, or None when it has none."""
    if not isinstance(authorizer, Mapping):
        return None
    jwt = authorizer.get('jwt')
    if not isinstance(jwt, Mapping):
        return None
    claims = jwt.get('claims')
    if not isinstance(claims, Mapping):
        return None
    return dict(claims)
