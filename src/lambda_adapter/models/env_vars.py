"""
Environment variable models for type-safe configuration.

This module defines the Pydantic model for environment variables read by the
adapter, validated once per execution environment.
"""

from typing import Annotated

from aws_lambda_env_modeler import BaseModel, get_environment_variables
from pydantic import Field


class AdapterEnvVars(BaseModel):
    """Environment variables for the Lambda HTTP adapter."""

    # Service name for observability
    POWERTOOLS_SERVICE_NAME: Annotated[str, Field(
        description='Service name for AWS Powertools'
    )] = 'lambda-http-adapter'

    # Metrics namespace
    POWERTOOLS_METRICS_NAMESPACE: Annotated[str, Field(
        description='Namespace for CloudWatch metrics'
    )] = 'LambdaHttpAdapter'

    LOG_LEVEL: Annotated[str, Field(
        description='Log level for application logging',
        pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$'
    )] = 'INFO'

    ENVIRONMENT: Annotated[str, Field(
        description='Deployment environment name',
        pattern=r'^(dev|staging|prod|test)$'
    )] = 'dev'

    APP_VERSION: Annotated[str, Field(
        description='Application version string'
    )] = '1.0.0'

    # JWT claim holding the internal account identifier
    ACCOUNT_ID_CLAIM: Annotated[str, Field(
        description='JWT claim used as the account identifier',
        min_length=1
    )] = 'internalId'

    # Log the raw incoming event on every invocation
    LOG_EVENT: Annotated[str, Field(
        description='Log incoming events (true/false)',
        pattern=r'^(true|false)$'
    )] = 'false'

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.ENVIRONMENT == 'prod'

    @property
    def log_event_enabled(self) -> bool:
        """Check if incoming events should be logged."""
        return self.LOG_EVENT.lower() == 'true'


def get_adapter_env_vars() -> AdapterEnvVars:
    """
    Get typed environment variables for the adapter.

    Returns:
        Validated environment variables model instance
    """
    return get_environment_variables(model=AdapterEnvVars)
