"""
Common decorators and helpers for API Gateway Lambda handlers.
"""

from __future__ import annotations

import traceback
from collections.abc import Callable
from functools import wraps
from typing import Any

from aws_lambda_powertools import Logger, Metrics
from aws_lambda_powertools.metrics import MetricUnit

from core.models.errors import (
    ConfigurationError,
    MethodNotAllowedError,
    NotFoundError,
    PhotoServiceError,
    ValidationError,
)
from core.utils.constants import METRIC_REQUESTS_FAILED
from core.utils.response import ResponseBuilder

logger = Logger(service="api-gateway-handler", UTC=True)

JsonDict = dict[str, Any]
LambdaHandler = Callable[..., JsonDict]


def _log_error(
    message: str,
    *,
    handler_name: str,
    request_id: str | None,
    exc: Exception,
    level: str = "warning",
) -> None:
    """
    Log error with consistent structure and full context.

    Args:
        message: Log message
        handler_name: Name of the handler function
        request_id: AWS request ID
        exc: Exception that was raised
        level: Log level ('warning' or 'exception')
    """
    log_extra: dict[str, Any] = {
        "handler": handler_name,
        "request_id": request_id,
        "error": str(exc),
        "error_type": type(exc).__name__,
    }

    if isinstance(exc, PhotoServiceError):
        log_extra["error_code"] = exc.error_code
        log_extra.update(exc.context)

    if level == "exception":
        # logger.exception automatically includes traceback
        logger.exception(message, extra=log_extra)
    else:
        log_extra["traceback"] = traceback.format_exc()
        logger.warning(message, extra=log_extra)


def _count_failure(metrics: Metrics | None, exc: Exception) -> None:
    if metrics is None:
        return

    metrics.add_metric(name=METRIC_REQUESTS_FAILED, unit=MetricUnit.Count, value=1)
    metrics.add_metadata(
        key="error_code",
        value=exc.error_code if isinstance(exc, PhotoServiceError) else type(exc).__name__,
    )


def api_gateway_handler(
    *,
    failure_message: str,
    metrics: Metrics | None = None,
) -> Callable[[LambdaHandler], LambdaHandler]:
    """
    Decorator for API Gateway Lambda handlers.

    Provides:
    - Centralized exception handling and error responses
    - Request ID tracking and structured logging

    Client-facing errors (validation, method, not found, configuration)
    keep their own message. Storage, metadata and unexpected errors are
    reported as ``failure_message`` with the cause in ``details``.

    When ``metrics`` is given every failure adds a ``PhotoRequestsFailed``
    count, so place ``log_metrics`` outside this decorator to flush it.

    Example:
        @api_gateway_handler(failure_message="Upload failed")
        def lambda_handler(event, context):
            return {"statusCode": 200, "body": "Success"}
    """

    def decorator(func: LambdaHandler) -> LambdaHandler:
        @wraps(func)
        def wrapper(event: Any, context: Any) -> JsonDict:
            request_id = getattr(context, "aws_request_id", None)

            try:
                return func(event, context)

            # Client errors (4xx)
            except (ValidationError, MethodNotAllowedError, NotFoundError) as exc:
                _log_error(
                    "Request rejected",
                    handler_name=func.__name__,
                    request_id=request_id,
                    exc=exc,
                )
                _count_failure(metrics, exc)
                return ResponseBuilder.error(
                    status=exc.status,
                    message=exc.message,
                    error_code=exc.error_code,
                    details=exc.details,
                    request_id=request_id,
                )

            # Server errors (5xx) - Missing configuration
            except ConfigurationError as exc:
                _log_error(
                    "Configuration error",
                    handler_name=func.__name__,
                    request_id=request_id,
                    exc=exc,
                    level="exception",
                )
                _count_failure(metrics, exc)
                return ResponseBuilder.internal_error(
                    exc.message,
                    error_code=exc.error_code,
                    details=exc.details,
                    request_id=request_id,
                )

            # Server errors (5xx) - Storage / metadata store
            except PhotoServiceError as exc:
                _log_error(
                    "Infrastructure error in handler",
                    handler_name=func.__name__,
                    request_id=request_id,
                    exc=exc,
                    level="exception",
                )
                _count_failure(metrics, exc)
                return ResponseBuilder.internal_error(
                    failure_message,
                    error_code=exc.error_code,
                    details=exc.details or exc.message,
                    request_id=request_id,
                )

            # Catch-all for unexpected errors
            except Exception as exc:
                _log_error(
                    "Unexpected error in handler",
                    handler_name=func.__name__,
                    request_id=request_id,
                    exc=exc,
                    level="exception",
                )
                _count_failure(metrics, exc)
                return ResponseBuilder.internal_error(
                    failure_message,
                    details=str(exc) or "Unknown error",
                    request_id=request_id,
                )

        return wrapper

    return decorator
