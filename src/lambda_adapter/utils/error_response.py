"""
Rendering of error envelopes as Lambda proxy responses.
"""

from typing import Any, Dict, List, Union

from lambda_adapter.models.response import AdaptedResponse, ErrorEnvelope, FieldError, encode_body


def _render_message(message: Union[str, List[FieldError]]) -> Any:
    if isinstance(message, str):
        return message
    return [field_error.model_dump() for field_error in message]


def lambda_error_response(envelope: ErrorEnvelope) -> AdaptedResponse:
    """Render ``envelope`` as ``{"error": {"code": ..., "message": ...}}`` with its status code."""
    body: Dict[str, Any] = {
        "error": {
            "code": envelope.code,
            "message": _render_message(envelope.message),
        }
    }
    return AdaptedResponse(status_code=envelope.status_code, body=encode_body(body))
