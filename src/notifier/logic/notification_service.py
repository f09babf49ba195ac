"""
Business Logic Layer for notifications.

This module runs one notification end to end: presence check, payload
parsing, recipient resolution, rendering and delivery. It knows nothing about
HTTP; the handler layer maps its outcomes and errors to responses.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, List, Mapping, Optional

from pydantic import BaseModel, ValidationError

from notifier.dal import EmailClient, UserDirectory
from notifier.handlers.utils.errors import DirectoryLookupError, NoRecipientsError, RequestValidationError
from notifier.handlers.utils.observability import logger, tracer
from notifier.logic.formatting import utc_now
from notifier.logic.variants import EmptyDirectoryPolicy, NotificationVariant
from notifier.models.config import DEFAULT_SENDER
from notifier.models.output import DeliveryResult, EmailMessage

NO_ADMINS_MESSAGE = 'No admin users found'


def is_missing(value: Any) -> bool:
    """Absent, null, blank text and empty lists all count as missing."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict)):
        return len(value) == 0
    return False


def find_missing_fields(payload: Mapping[str, Any], required_fields: List[str]) -> List[str]:
    return [field for field in required_fields if is_missing(payload.get(field))]


def to_field_errors(exc: ValidationError) -> List[Dict[str, str]]:
    return [
        {
            'field': '.'.join(str(part) for part in error['loc']),
            'message': error['msg'],
        }
        for error in exc.errors()
    ]


@dataclass(frozen=True)
class NotificationOutcome:
    request: BaseModel
    result: DeliveryResult


class NotificationService:
    """Compose and deliver one notification for a variant."""

    def __init__(
        self,
        email_client: EmailClient,
        directory: Optional[UserDirectory] = None,
        sender: str = DEFAULT_SENDER,
        clock: Callable[[], datetime] = utc_now,
    ):
        """
        Initialize notification service.

        Args:
            email_client: Delivery provider client
            directory: User directory, required by the admin-facing variants only
            sender: Sender identity of every outgoing email
            clock: Source of the current time shown in the emails
        """
        self.email_client = email_client
        self.directory = directory
        self.sender = sender
        self.clock = clock

    @tracer.capture_method
    def parse_request(self, variant: NotificationVariant, payload: Any) -> BaseModel:
        """
        Check required fields, then parse the payload with the variant's model.

        Raises:
            RequestValidationError: Missing required field or invalid field value
        """
        if not isinstance(payload, Mapping):
            payload = {}

        missing = find_missing_fields(payload, list(variant.required_fields))
        if missing:
            raise RequestValidationError(
                message=variant.missing_fields_message,
                missing_fields=missing,
            )

        try:
            return variant.request_model.model_validate(payload)
        except ValidationError as exc:
            raise RequestValidationError(
                message='Invalid request payload',
                field_errors=to_field_errors(exc),
            ) from exc

    @tracer.capture_method
    def resolve_recipients(self, variant: NotificationVariant, request: BaseModel) -> List[str]:
        """
        Addresses the email goes to.

        Explicit variants use the request's ``email``; admin variants ask the
        directory. An empty answer from the directory yields an empty list.
        """
        if not variant.uses_directory:
            return [request.email]

        if self.directory is None:
            raise DirectoryLookupError(details={'message': 'User directory is not configured'})

        admins = self.directory.list_admins()
        return [admin.email for admin in admins]

    @tracer.capture_method
    def notify(self, variant: NotificationVariant, payload: Any) -> NotificationOutcome:
        """
        Run one notification.

        Args:
            variant: Descriptor of the endpoint being served
            payload: Decoded request body

        Returns:
            The parsed request and the delivery result; the result is marked as
            skipped when an admin variant with the no-op policy finds no admins

        Raises:
            RequestValidationError: Invalid request
            DirectoryLookupError: Admin lookup failed
            NoRecipientsError: No admins found and the variant treats that as not found
            DeliveryError: Provider rejected the email
        """
        request = self.parse_request(variant, payload)
        recipients = self.resolve_recipients(variant, request)

        if not recipients:
            if variant.empty_directory_policy is EmptyDirectoryPolicy.NOT_FOUND:
                raise NoRecipientsError(message=NO_ADMINS_MESSAGE)
            logger.warning('No admin recipients, skipping delivery', extra={'variant': variant.key})
            return NotificationOutcome(
                request=request,
                result=DeliveryResult(success=False, skipped_reason=NO_ADMINS_MESSAGE),
            )

        rendered = variant.render(request, self.clock())
        message = EmailMessage(
            sender=self.sender,
            to=recipients,
            subject=rendered.subject,
            html=rendered.html,
        )

        logger.debug('Sending notification', extra={
            'variant': variant.key,
            'recipient_count': len(recipients),
            'subject': rendered.subject,
        })

        result = self.email_client.send(message)
        return NotificationOutcome(request=request, result=result)
