"""
Lambda handler responsible for photo download.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.config import get_settings
from core.utils.constants import CORS_ORIGIN, METRIC_PHOTOS_DOWNLOADED, METRICS_NAMESPACE, NO_CACHE
from core.utils.decorators import api_gateway_handler
from core.utils.request import get_path_or_query_param, require_method
from core.utils.response import ResponseBuilder
from core.utils.validators import validate_request

from .models import PhotoDownloadRequest
from .service import DownloadService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics(namespace=METRICS_NAMESPACE)


@metrics.log_metrics(raise_on_empty_metrics=False)
@api_gateway_handler(failure_message="Download failed", metrics=metrics)
@tracer.capture_lambda_handler
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle photo download requests (``GET /download/{photoId}``).

    The whole object is buffered and returned base64-encoded with
    attachment headers so browsers save it under its original name.

    Args:
        event: API Gateway event payload.
        context: AWS Lambda runtime context.

    Returns:
        API Gateway-compatible binary response.
    """
    logger.info(
        "Received photo download request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "request_id": getattr(context, "aws_request_id", None),
            "function_name": getattr(context, "function_name", None),
        },
    )

    require_method(event, "GET")
    settings = get_settings()

    request = validate_request(
        PhotoDownloadRequest,
        {"photo_id": get_path_or_query_param(event, "photoId")},
        message="Photo ID is required",
    )

    photo = DownloadService(settings).download_photo(request.photo_id)

    metrics.add_metric(name=METRIC_PHOTOS_DOWNLOADED, unit=MetricUnit.Count, value=1)

    return ResponseBuilder.binary_response(
        photo.content,
        content_type=photo.content_type,
        headers={
            "Content-Disposition": photo.content_disposition,
            "Cache-Control": NO_CACHE,
        },
        cors_origin=CORS_ORIGIN,
    )
