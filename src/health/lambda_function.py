"""
Health Lambda function - entry point for the health check API.

Reports service status and version through the HTTP adapter.
"""

from datetime import datetime, timezone

from lambda_adapter import Controller, HandlerResult, NormalizedRequest, injectable, lambda_http_adapter
from lambda_adapter.models.env_vars import get_adapter_env_vars


@injectable
class HealthController(Controller):
    """Reports that the service is up."""

    async def handle(self, request: NormalizedRequest) -> HandlerResult:
        env_vars = get_adapter_env_vars()
        body = {
            "status": "healthy",
            "version": env_vars.APP_VERSION,
            "environment": env_vars.ENVIRONMENT,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        if request.query_params.get("verbose") == "true":
            body["authenticated"] = request.account_id is not None
        return HandlerResult(status_code=200, body=body)


lambda_handler = lambda_http_adapter(HealthController)
