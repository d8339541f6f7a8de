"""Helpers for reading API Gateway proxy events.

Both REST API (v1) and HTTP API (v2) payload shapes are accepted.
"""

import base64
import binascii
from typing import Any

from core.models.errors import MethodNotAllowedError, ValidationError

Event = dict[str, Any]


def get_http_method(event: Event) -> str:
    """Return the upper-cased HTTP method of the request, or an empty string."""
    method = event.get("httpMethod")

    if not method:
        http = (event.get("requestContext") or {}).get("http") or {}
        method = http.get("method")

    return str(method or "").upper()


def require_method(event: Event, allowed: str) -> None:
    """Raise MethodNotAllowedError unless the request uses ``allowed``."""
    method = get_http_method(event)
    if method != allowed:
        raise MethodNotAllowedError(context={"method": method, "allowed": allowed})


def get_header(event: Event, name: str) -> str | None:
    """Case-insensitive header lookup."""
    headers = event.get("headers") or {}
    wanted = name.lower()

    for key, value in headers.items():
        if key.lower() == wanted:
            return str(value)

    return None


def get_body_bytes(event: Event) -> bytes:
    """Return the raw request body, decoding base64 when API Gateway encoded it."""
    body = event.get("body")

    if body is None:
        return b""

    if event.get("isBase64Encoded"):
        try:
            return base64.b64decode(body, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise ValidationError(
                message="Invalid request body",
                details="Body is flagged as base64 but could not be decoded",
            ) from exc

    if isinstance(body, bytes):
        return body

    return str(body).encode("utf-8")


def get_path_or_query_param(event: Event, name: str) -> str | None:
    """Read a parameter from the path, falling back to the query string."""
    path_params = event.get("pathParameters") or {}
    query_params = event.get("queryStringParameters") or {}

    value = path_params.get(name)
    if value is None:
        value = query_params.get(name)

    return value
