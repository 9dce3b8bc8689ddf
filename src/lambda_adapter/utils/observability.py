"""
Centralized observability utilities for the Lambda HTTP adapter.

Configured instances of AWS Lambda Powertools for logging, tracing and
metrics collection. Service name and metrics namespace come from the
validated environment (POWERTOOLS_SERVICE_NAME, POWERTOOLS_METRICS_NAMESPACE),
falling back to the AdapterEnvVars defaults.
"""

from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.metrics import Metrics
from aws_lambda_powertools.tracing import Tracer

from lambda_adapter.models.env_vars import get_adapter_env_vars

_env_vars = get_adapter_env_vars()

# JSON output format, level set by environment variable "LOG_LEVEL"
logger: Logger = Logger(service=_env_vars.POWERTOOLS_SERVICE_NAME)

# Disabled by setting POWERTOOLS_TRACE_DISABLED to "True"
tracer: Tracer = Tracer(service=_env_vars.POWERTOOLS_SERVICE_NAME)

metrics = Metrics(
    namespace=_env_vars.POWERTOOLS_METRICS_NAMESPACE,
    service=_env_vars.POWERTOOLS_SERVICE_NAME,
)
