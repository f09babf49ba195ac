"""
Notification Handler - generic handler shared by every notification Lambda.

One class serves all six endpoints; the variant descriptor supplies what
differs between them. ``handle`` works on a decoded payload, ``handle_http``
adds the API Gateway concerns (preflight, method check, JSON decoding, CORS)
and ``create_lambda_handler`` wires a variant into a Powertools-instrumented
Lambda entry point.
"""

import json
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, Optional

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent, event_source
from aws_lambda_powertools.utilities.typing import LambdaContext

from notifier.dal import EmailClient, UserDirectory, get_email_client, get_user_directory
from notifier.handlers.models.env_vars import load_notifier_config
from notifier.handlers.utils.errors import (
    NotifierError,
    format_error_response,
    get_http_status_code,
    log_error_metrics,
)
from notifier.handlers.utils.observability import logger, metrics, tracer
from notifier.handlers.utils.responses import create_api_response, preflight_response
from notifier.logic.formatting import utc_now
from notifier.logic.notification_service import NotificationService
from notifier.logic.variants import NotificationVariant
from notifier.models.config import NotifierConfig
from notifier.models.output import ErrorOutput, NoRecipientsOutput

INTERNAL_ERROR_MESSAGE = "Internal server error"


@dataclass(frozen=True)
class HandlerResponse:
    status_code: int
    body: Dict[str, Any]


def internal_error_body(exc: Exception) -> Dict[str, Any]:
    return ErrorOutput(error=INTERNAL_ERROR_MESSAGE, details=str(exc)).model_dump(mode="json")


class NotificationHandler:
    """Validate, resolve recipients, render and deliver for one variant."""

    def __init__(
        self,
        variant: NotificationVariant,
        config: NotifierConfig,
        email_client: Optional[EmailClient] = None,
        directory: Optional[UserDirectory] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize the handler.

        Args:
            variant: Descriptor of the endpoint being served
            config: Credentials and endpoints of the collaborators
            email_client: Delivery client; built from ``config`` when omitted
            directory: User directory; built from ``config`` for admin variants when omitted
            clock: Current-time source for the rendered emails
        """
        self.variant = variant
        self.config = config

        if email_client is None:
            email_client = get_email_client(config)
        if directory is None and variant.uses_directory:
            directory = get_user_directory(config)

        self.service = NotificationService(
            email_client=email_client,
            directory=directory,
            sender=config.email_sender,
            clock=clock or utc_now,
        )

    @tracer.capture_method
    def handle(self, payload: Any) -> HandlerResponse:
        """
        Process a decoded request body.

        Every failure is turned into a response; nothing escapes this method.

        Args:
            payload: Decoded JSON body

        Returns:
            Status code and JSON-ready body
        """
        tracer.put_annotation("variant", self.variant.key)

        try:
            outcome = self.service.notify(self.variant, payload)
            result = outcome.result

            if result.skipped:
                metrics.add_metric(name="NoAdminRecipients", unit=MetricUnit.Count, value=1)
                return HandlerResponse(
                    status_code=200,
                    body=NoRecipientsOutput(message=result.skipped_reason).model_dump(by_alias=True),
                )

            body = self.variant.build_response(outcome.request, result)

        except NotifierError as e:
            log_error_metrics(e)
            return HandlerResponse(
                status_code=get_http_status_code(e),
                body=format_error_response(e),
            )

        except Exception as e:
            logger.exception("Unexpected error while sending notification", extra={
                "variant": self.variant.key,
                "error": str(e),
            })
            metrics.add_metric(name="UnhandledError", unit=MetricUnit.Count, value=1)
            return HandlerResponse(status_code=500, body=internal_error_body(e))

        metrics.add_metric(name="EmailSent", unit=MetricUnit.Count, value=1)
        logger.info("Notification sent", extra={
            "variant": self.variant.key,
            "message_id": result.message_id,
            "recipient_count": len(result.recipients),
        })

        return HandlerResponse(status_code=200, body=body)

    def handle_http(self, event: APIGatewayProxyEvent) -> Dict[str, Any]:
        """
        Process an API Gateway proxy event.

        Args:
            event: API Gateway proxy event

        Returns:
            API Gateway response dictionary
        """
        method = (event.http_method or "").upper()

        if method == "OPTIONS":
            return preflight_response()

        if method != "POST":
            return create_api_response(405, {"error": "Method not allowed"})

        # an absent or empty body is not valid JSON either
        try:
            payload = json.loads(event.decoded_body if event.get("body") else "")
        except json.JSONDecodeError as e:
            logger.exception("Request body is not valid JSON", extra={"variant": self.variant.key})
            metrics.add_metric(name="UnhandledError", unit=MetricUnit.Count, value=1)
            return create_api_response(500, internal_error_body(e))

        response = self.handle(payload)
        tracer.put_annotation("status_code", response.status_code)
        return create_api_response(response.status_code, response.body)


def create_lambda_handler(
    variant: NotificationVariant,
    config_loader: Callable[[], NotifierConfig] = load_notifier_config,
) -> Callable[[Dict[str, Any], LambdaContext], Dict[str, Any]]:
    """
    Build the Lambda entry point for a variant.

    Configuration is loaded on every invocation, after the preflight check, so
    a missing credential never breaks CORS preflight requests.

    Args:
        variant: Descriptor of the endpoint being served
        config_loader: Returns the configuration for one invocation

    Returns:
        Lambda handler function
    """

    @tracer.capture_lambda_handler
    @logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
    @metrics.log_metrics(capture_cold_start_metric=True)
    @event_source(data_class=APIGatewayProxyEvent)
    def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> Dict[str, Any]:
        metrics.add_metric(name="RequestCount", unit=MetricUnit.Count, value=1)
        metrics.add_metadata(key="variant", value=variant.key)
        logger.append_keys(variant=variant.key)

        if (event.http_method or "").upper() == "OPTIONS":
            return preflight_response()

        try:
            config = config_loader()
        except ValueError as e:
            logger.exception("Invalid notifier configuration", extra={"error": str(e)})
            metrics.add_metric(name="UnhandledError", unit=MetricUnit.Count, value=1)
            return create_api_response(500, internal_error_body(e))

        if variant.uses_directory and not (config.directory_endpoint and config.directory_credential):
            logger.warning("User directory is not configured", extra={"variant": variant.key})

        return NotificationHandler(variant=variant, config=config).handle_http(event)

    return lambda_handler
