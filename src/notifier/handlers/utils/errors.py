"""
Error taxonomy and error handling utilities for the notification handlers.

Every failure raised below the handler layer is a ``NotifierError`` carrying an
error code, a caller-facing message and, where available, the upstream
diagnostic payload. The handler converts them into JSON error responses.
"""

from typing import Any, Dict, List, Optional

from aws_lambda_powertools.metrics import MetricUnit

from notifier.handlers.utils.observability import logger, metrics, tracer
from notifier.models.output import ErrorOutput


class NotifierError(Exception):
    """Base exception class for notification errors."""

    def __init__(
        self,
        message: str,
        error_code: str,
        details: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class RequestValidationError(NotifierError):
    """Raised when a required field is missing or the payload is malformed."""

    def __init__(
        self,
        message: str,
        missing_fields: Optional[List[str]] = None,
        field_errors: Optional[List[Dict[str, Any]]] = None,
    ):
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            details=field_errors or None,
        )
        self.missing_fields = missing_fields or []
        self.field_errors = field_errors or []


class DirectoryLookupError(NotifierError):
    """Raised when the administrator lookup against the user directory fails."""

    def __init__(self, details: Any = None, message: str = "Failed to fetch admin users"):
        super().__init__(
            message=message,
            error_code="DIRECTORY_LOOKUP_ERROR",
            details=details,
        )


class NoRecipientsError(NotifierError):
    """Raised when the directory lookup succeeded but returned no administrators."""

    def __init__(self, message: str = "No admin users found"):
        super().__init__(message=message, error_code="NO_RECIPIENTS")


class DeliveryError(NotifierError):
    """Raised when the email provider rejects or fails the send."""

    def __init__(self, details: Any = None, message: str = "Failed to send email"):
        super().__init__(
            message=message,
            error_code="DELIVERY_ERROR",
            details=details,
        )


_STATUS_MAPPING = {
    "VALIDATION_ERROR": 400,
    "NO_RECIPIENTS": 404,
    "DIRECTORY_LOOKUP_ERROR": 500,
    "DELIVERY_ERROR": 500,
}

_METRIC_MAPPING = {
    "VALIDATION_ERROR": "ValidationError",
    "NO_RECIPIENTS": "NoAdminRecipients",
    "DIRECTORY_LOOKUP_ERROR": "DirectoryLookupFailure",
    "DELIVERY_ERROR": "DeliveryFailure",
}


def get_http_status_code(error: NotifierError) -> int:
    """Get appropriate HTTP status code for error."""
    return _STATUS_MAPPING.get(error.error_code, 500)


@tracer.capture_method
def log_error_metrics(error: NotifierError) -> None:
    """Log error metrics for monitoring and alerting."""
    metrics.add_metric(
        name=_METRIC_MAPPING.get(error.error_code, "UnhandledError"),
        unit=MetricUnit.Count,
        value=1,
    )

    tracer.put_annotation("error_code", error.error_code)
    tracer.put_metadata("error_details", error.to_dict())

    log = logger.warning if get_http_status_code(error) < 500 else logger.error
    log(
        "Notification failed",
        extra={
            "error_code": error.error_code,
            "error_message": error.message,
            "details": error.details,
        },
    )


def format_error_response(error: NotifierError) -> Dict[str, Any]:
    """Format error for API response."""
    return ErrorOutput(error=error.message, details=error.details).model_dump(
        mode="json", exclude_none=True
    )
