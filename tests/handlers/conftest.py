from types import SimpleNamespace
from typing import Any

import pytest


@pytest.fixture
def lambda_context() -> SimpleNamespace:
    return SimpleNamespace(
        aws_request_id="test-request-id",
        function_name="test-function",
        memory_limit_in_mb=256,
        invoked_function_arn="arn:aws:lambda:us-east-1:000000000000:function:test",
        log_group_name="/aws/lambda/test-function",
        log_stream_name="2024/01/01/[$LATEST]test",
    )


@pytest.fixture
def download_event_factory():
    """
    Build an API Gateway download event.

    Usage:
        event = download_event_factory("photo-1")
    """

    def _build(photo_id: str | None, *, method: str = "GET") -> dict[str, Any]:
        return {
            "httpMethod": method,
            "path": f"/download/{photo_id}",
            "pathParameters": {"photoId": photo_id} if photo_id is not None else None,
            "queryStringParameters": None,
            "headers": {},
        }

    return _build
