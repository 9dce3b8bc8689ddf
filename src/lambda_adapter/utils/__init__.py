from lambda_adapter.utils.body_parser import lambda_body_parser
from lambda_adapter.utils.error_response import lambda_error_response
from lambda_adapter.utils.observability import logger, metrics, tracer

__all__ = [
    "lambda_body_parser",
    "lambda_error_response",
    "logger",
    "metrics",
    "tracer",
]
