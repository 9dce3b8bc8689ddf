"""
Lambda HTTP adapter.

Adapts API Gateway HTTP API (payload v2) events, optionally JWT-authorized,
into controller invocations and maps controller results and errors back into
Lambda proxy responses:

- adapters: the request adapter and the Lambda entry point factory
- contracts: the Controller base class
- errors: error types and the error-to-HTTP translation chain
- kernel: the dependency registry
- models: event, request and response models, environment configuration
- utils: body parsing, error rendering and observability
"""

__version__ = "1.0.0"
__description__ = "Lambda HTTP adapter for API Gateway v2 events"

from lambda_adapter.adapters.lambda_http_adapter import LambdaHttpAdapter, lambda_http_adapter
from lambda_adapter.contracts.controller import Controller
from lambda_adapter.errors import ApplicationError, ErrorCode, HttpError
from lambda_adapter.kernel.registry import Registry, injectable
from lambda_adapter.models.request import HandlerResult, NormalizedRequest
from lambda_adapter.utils.observability import logger, metrics, tracer

__all__ = [
    "ApplicationError",
    "Controller",
    "ErrorCode",
    "HandlerResult",
    "HttpError",
    "LambdaHttpAdapter",
    "NormalizedRequest",
    "Registry",
    "injectable",
    "lambda_http_adapter",
    "logger",
    "metrics",
    "tracer",
]
