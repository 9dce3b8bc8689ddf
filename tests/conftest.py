"""
Pytest configuration and shared fixtures for the Lambda HTTP adapter.

This module provides common test fixtures and configuration used across
unit and integration tests.
"""

import os
from typing import Any, Dict, Optional
from unittest.mock import Mock

import pytest

from lambda_adapter.kernel.registry import Registry
from lambda_adapter.utils.observability import metrics


# Test environment configuration
@pytest.fixture(scope="session", autouse=True)
def test_environment():
    """Set up test environment variables."""
    os.environ.update({
        "AWS_DEFAULT_REGION": "us-east-1",
        "ENVIRONMENT": "test",
        "APP_VERSION": "test-1.0.0",
        "POWERTOOLS_SERVICE_NAME": "test-lambda-http-adapter",
        "POWERTOOLS_METRICS_NAMESPACE": "TestLambdaHttpAdapter",
        "LOG_LEVEL": "DEBUG",
        "POWERTOOLS_TRACE_DISABLED": "true",  # Disable X-Ray in tests
    })


def make_http_event(
    body: Optional[str] = None,
    path_parameters: Optional[Dict[str, str]] = None,
    query_string_parameters: Optional[Dict[str, str]] = None,
    claims: Optional[Dict[str, Any]] = None,
    is_base64_encoded: bool = False,
) -> Dict[str, Any]:
    """Build an API Gateway HTTP API (payload v2) event."""
    request_context: Dict[str, Any] = {
        "accountId": "123456789012",
        "apiId": "api-id",
        "domainName": "id.execute-api.us-east-1.amazonaws.com",
        "http": {
            "method": "POST",
            "path": "/accounts",
            "protocol": "HTTP/1.1",
            "sourceIp": "127.0.0.1",
            "userAgent": "test-agent/1.0",
        },
        "requestId": "test-request-id-123",
        "routeKey": "POST /accounts",
        "stage": "$default",
        "time": "01/Jan/2024:12:00:00 +0000",
        "timeEpoch": 1704110400000,
    }
    if claims is not None:
        request_context["authorizer"] = {"jwt": {"claims": claims, "scopes": None}}

    event: Dict[str, Any] = {
        "version": "2.0",
        "routeKey": "POST /accounts",
        "rawPath": "/accounts",
        "rawQueryString": "",
        "headers": {"content-type": "application/json"},
        "requestContext": request_context,
        "isBase64Encoded": is_base64_encoded,
    }
    if body is not None:
        event["body"] = body
    if path_parameters is not None:
        event["pathParameters"] = path_parameters
    if query_string_parameters is not None:
        event["queryStringParameters"] = query_string_parameters
    return event


@pytest.fixture
def http_event() -> Dict[str, Any]:
    """A minimal unauthenticated API Gateway v2 event without body or parameters."""
    return make_http_event()


@pytest.fixture
def authorized_http_event() -> Dict[str, Any]:
    """An API Gateway v2 event authorized by a JWT authorizer."""
    return make_http_event(
        body='{"name": "Jane Smith"}',
        path_parameters={"accountId": "abc123"},
        query_string_parameters={"page": "2"},
        claims={"sub": "cognito-sub", "internalId": "abc123"},
    )


@pytest.fixture
def lambda_context():
    """Create a mock Lambda context for testing."""
    context = Mock()
    context.function_name = "test-lambda-function"
    context.function_version = "1"
    context.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:test-lambda-function"
    context.memory_limit_in_mb = 512
    context.aws_request_id = "test-request-id-123"
    context.log_group_name = "/aws/lambda/test-lambda-function"
    context.log_stream_name = "2024/01/01/[$LATEST]test123"
    context.get_remaining_time_in_millis.return_value = 30000
    return context


@pytest.fixture
def registry() -> Registry:
    """A fresh registry, isolated from the process-wide one."""
    return Registry()


# Pytest configuration
def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def reset_metrics():
    """Drop metrics buffered by tests that call the adapter without flushing."""
    metrics.clear_metrics()
    yield
    metrics.clear_metrics()


@pytest.fixture
def make_event():
    """Factory fixture building API Gateway v2 events."""
    return make_http_event
