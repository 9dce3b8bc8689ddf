"""
Lambda HTTP adapter.

Turns an API Gateway HTTP API (payload v2) event into a NormalizedRequest,
runs the controller resolved from the registry and renders either its result
or the error it raised as a Lambda proxy response. No exception escapes the
adapter: errors are classified in a fixed order (validation, HTTP,
application, unexpected) and the first match decides the response.
"""

import asyncio
import inspect
from typing import Any, Callable, Dict, Mapping, Optional, Type

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from lambda_adapter.contracts.controller import Controller
from lambda_adapter.errors.classification import ErrorKind, build_error_envelope, classify_error
from lambda_adapter.kernel.registry import Registry
from lambda_adapter.models.env_vars import get_adapter_env_vars
from lambda_adapter.models.event import ContextKind, IncomingEvent
from lambda_adapter.models.request import HandlerResult, NormalizedRequest
from lambda_adapter.models.response import AdaptedResponse, encode_body
from lambda_adapter.utils.body_parser import lambda_body_parser
from lambda_adapter.utils.error_response import lambda_error_response
from lambda_adapter.utils.observability import logger, metrics, tracer

LambdaHandler = Callable[[Dict[str, Any], LambdaContext], Dict[str, Any]]


class InvalidHandlerResultError(TypeError):
    """Raised when a controller returns something that is not a HandlerResult."""


class LambdaHttpAdapter:
    """Adapts API Gateway v2 events to one controller type."""

    def __init__(
        self,
        controller_type: Type[Controller],
        registry: Optional[Registry] = None,
        account_id_claim: Optional[str] = None,
    ):
        self.controller_type = controller_type
        self.registry = registry if registry is not None else Registry.get_instance()
        self.account_id_claim = account_id_claim or get_adapter_env_vars().ACCOUNT_ID_CLAIM

    async def handle(self, event: Mapping[str, Any]) -> AdaptedResponse:
        """Process one event; always returns a response."""
        try:
            controller = self.registry.resolve(self.controller_type)
            request = self.normalize(event)

            result = controller.execute(request)
            if inspect.isawaitable(result):
                result = await result

            response = self.success_response(result)
        except Exception as error:
            return self.error_response(error)

        metrics.add_metric(name="SuccessCount", unit=MetricUnit.Count, value=1)
        return response

    def normalize(self, event: Mapping[str, Any]) -> NormalizedRequest:
        """Build the NormalizedRequest for a raw Lambda event."""
        incoming = IncomingEvent.from_lambda_event(event)

        body = lambda_body_parser(incoming.body, incoming.is_base64_encoded)
        account_id: Optional[str] = None
        if incoming.request_context.kind == ContextKind.JWT_AUTHORIZED:
            claim = incoming.request_context.claims.get(self.account_id_claim)
            account_id = str(claim) if claim is not None else None

        return NormalizedRequest(
            body=body,
            params=incoming.path_parameters or {},
            query_params=incoming.query_string_parameters or {},
            account_id=account_id,
        )

    @staticmethod
    def success_response(result: Any) -> AdaptedResponse:
        try:
            handler_result = HandlerResult.model_validate(result)
        except ValidationError as exc:
            # A broken controller result is a server fault, not a client validation error
            raise InvalidHandlerResultError(
                f"Controller returned an invalid result of type {type(result).__name__}"
            ) from exc

        body = encode_body(handler_result.body) if handler_result.body is not None else None
        return AdaptedResponse(status_code=handler_result.status_code, body=body)

    def error_response(self, error: Exception) -> AdaptedResponse:
        kind = classify_error(error)
        tracer.put_annotation("error_kind", kind.value)
        metrics.add_metric(name=f"Error{kind.value.title()}Count", unit=MetricUnit.Count, value=1)

        if kind is ErrorKind.UNEXPECTED:
            logger.exception("Unexpected error while handling request", extra={
                "controller": self.controller_type.__name__,
                "error_type": type(error).__name__,
            })
        else:
            logger.info("Request failed", extra={
                "controller": self.controller_type.__name__,
                "error_kind": kind.value,
                "error_type": type(error).__name__,
            })

        try:
            return lambda_error_response(build_error_envelope(error, kind))
        except Exception:
            # e.g. an HttpError subclass with an out-of-range status code, or an
            # ApplicationError subclass that never set status_code or message
            logger.exception("Could not build error envelope", extra={
                "error_kind": kind.value,
                "error_type": type(error).__name__,
            })
            return lambda_error_response(build_error_envelope(error, ErrorKind.UNEXPECTED))

    def __call__(self, event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
        """Synchronous Lambda entry point."""
        metrics.add_metric(name="RequestCount", unit=MetricUnit.Count, value=1)
        response = asyncio.run(self.handle(event))
        return response.to_lambda()


def lambda_http_adapter(
    controller_type: Type[Controller],
    registry: Optional[Registry] = None,
) -> LambdaHandler:
    """
    Build a Lambda handler serving ``controller_type``.

    The handler is wrapped with the Powertools logger, tracer and metrics
    decorators, so it can be exported directly as the function entry point.

    Args:
        controller_type: Controller class to resolve from the registry on each invocation
        registry: Registry to resolve from; the process-wide registry when omitted

    Returns:
        A ``(event, context) -> dict`` Lambda handler
    """
    env_vars = get_adapter_env_vars()
    adapter = LambdaHttpAdapter(controller_type, registry=registry, account_id_claim=env_vars.ACCOUNT_ID_CLAIM)

    @metrics.log_metrics(capture_cold_start_metric=True)
    @tracer.capture_lambda_handler
    @logger.inject_lambda_context(
        correlation_id_path=correlation_paths.API_GATEWAY_HTTP,
        log_event=env_vars.log_event_enabled,
    )
    def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
        return adapter(event, context)

    lambda_handler.adapter = adapter
    return lambda_handler
