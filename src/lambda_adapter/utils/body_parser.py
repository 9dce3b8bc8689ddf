"""
Request body parsing for API Gateway events.
"""

import base64
import binascii
import json
from typing import Any, Optional

from lambda_adapter.errors.http import BadRequest

MALFORMED_BODY_MESSAGE = "Malformed body."


def lambda_body_parser(body: Optional[str], is_base64_encoded: bool = False) -> Any:
    """
    Parse a raw event body into a JSON value.

    Args:
        body: Raw body string from the event, possibly absent
        is_base64_encoded: Whether API Gateway base64-encoded the body

    Returns:
        The decoded JSON value, or None when there is no body

    Raises:
        BadRequest: if the body is not valid JSON (or not valid base64)
    """
    if not body:
        return None

    try:
        if is_base64_encoded:
            body = base64.b64decode(body, validate=True).decode('utf-8')
        return json.loads(body)
    except (binascii.Error, UnicodeDecodeError, ValueError) as exc:
        raise BadRequest(MALFORMED_BODY_MESSAGE) from exc
