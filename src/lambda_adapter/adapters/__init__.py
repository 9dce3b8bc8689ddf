from lambda_adapter.adapters.lambda_http_adapter import (
    InvalidHandlerResultError,
    LambdaHttpAdapter,
    lambda_http_adapter,
)

__all__ = ["InvalidHandlerResultError", "LambdaHttpAdapter", "lambda_http_adapter"]
