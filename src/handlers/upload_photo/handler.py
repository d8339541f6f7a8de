"""
Lambda handler responsible for photo upload and metadata creation.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.config import get_settings
from core.utils.constants import METRIC_PHOTOS_UPLOADED, METRICS_NAMESPACE
from core.utils.decorators import api_gateway_handler
from core.utils.multipart import parse_multipart
from core.utils.request import get_body_bytes, get_header, require_method
from core.utils.response import ResponseBuilder

from .models import PhotoUploadRequest, PhotoUploadResponse
from .service import UploadService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics(namespace=METRICS_NAMESPACE)


@metrics.log_metrics(raise_on_empty_metrics=False)
@api_gateway_handler(failure_message="Upload failed", metrics=metrics)
@tracer.capture_lambda_handler
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle photo upload requests.

    Expected API Gateway event structure:
    {
        "httpMethod": "POST",
        "headers": {"Content-Type": "multipart/form-data; boundary=..."},
        "body": "...",             # multipart body, base64 when binary
        "isBase64Encoded": true
    }

    Form fields: ``photo`` (image file) and ``eventId`` (text).

    Args:
        event: API Gateway Lambda proxy event containing the upload payload
        context: AWS Lambda execution context

    Returns:
        API Gateway-compatible HTTP response describing the stored photo
    """
    logger.info(
        "Received photo upload request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "request_id": getattr(context, "aws_request_id", None),
            "function_name": getattr(context, "function_name", None),
        },
    )

    require_method(event, "POST")
    settings = get_settings()

    form = parse_multipart(get_body_bytes(event), get_header(event, "Content-Type"))
    request = PhotoUploadRequest.from_form(form)

    logger.info(
        "File received",
        extra={
            "event_id": request.event_id,
            "file_name": request.file_name,
            "size": request.size,
        },
    )

    record = UploadService(settings).upload_photo(request)

    metrics.add_metric(name=METRIC_PHOTOS_UPLOADED, unit=MetricUnit.Count, value=1)

    response = PhotoUploadResponse(
        photo_id=record.id,
        url=record.url,
        file_name=record.file_name,
        size=record.size,
    )

    return ResponseBuilder.ok(
        response.model_dump(by_alias=True),
        request_id=getattr(context, "aws_request_id", None),
    )
