"""
Email delivery through the Resend HTTP API.

One ``POST`` per notification, no retries. The provider payload is returned to
the caller untouched so that it can be echoed back in success and error
responses alike.
"""

from typing import Any, Dict, Optional

import httpx

from notifier.dal import http_session
from notifier.handlers.utils.errors import DeliveryError
from notifier.handlers.utils.observability import logger, tracer
from notifier.models.config import DEFAULT_EMAIL_API_URL, DEFAULT_SENDER
from notifier.models.output import DeliveryResult, EmailMessage


def parse_provider_payload(response: httpx.Response) -> Any:
    """Decode the provider body, wrapping anything that is not JSON."""
    try:
        return response.json()
    except ValueError:
        return {"message": response.text}


class ResendEmailClient:
    """Send rendered emails with the Resend ``/emails`` endpoint."""

    def __init__(
        self,
        api_key: str,
        sender: Optional[str] = None,
        api_url: str = DEFAULT_EMAIL_API_URL,
        timeout: float = 10.0,
        http_client: Optional[httpx.Client] = None,
    ):
        """
        Initialize the email client.

        Args:
            api_key: Resend API key, sent as a bearer token
            sender: Default sender used when a message carries none
            api_url: Send-email endpoint
            timeout: Timeout in seconds for the HTTP call
            http_client: Optional pre-built client (tests inject a mock transport)
        """
        self.api_key = api_key
        self.sender = sender or DEFAULT_SENDER
        self.api_url = api_url
        self.timeout = timeout
        self.http_client = http_client

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    @staticmethod
    def _is_failure(response: httpx.Response, payload: Any) -> bool:
        if response.is_error or not isinstance(payload, dict):
            return True
        # Resend reports some failures inside a 2xx body
        status = payload.get("statusCode")
        return isinstance(status, int) and status >= 400

    @tracer.capture_method
    def send(self, message: EmailMessage) -> DeliveryResult:
        """
        Deliver one email.

        Args:
            message: Rendered email

        Returns:
            Successful delivery result with the provider message id

        Raises:
            DeliveryError: On transport errors or a provider rejection
        """
        body = message.to_payload()
        body["from"] = body["from"] or self.sender

        try:
            with http_session(self.http_client, self.timeout) as client:
                response = client.post(self.api_url, headers=self._headers(), json=body)
        except httpx.HTTPError as exc:
            logger.error("Email provider request failed", extra={"error": str(exc)})
            raise DeliveryError(details={"message": str(exc)}) from exc

        payload = parse_provider_payload(response)

        if self._is_failure(response, payload):
            logger.error("Email provider rejected the message", extra={
                "status_code": response.status_code,
                "provider_response": payload,
            })
            raise DeliveryError(details=payload)

        message_id = payload.get("id")
        logger.info("Email sent", extra={
            "message_id": message_id,
            "recipient_count": len(message.to),
        })

        return DeliveryResult(
            success=True,
            message_id=message_id,
            recipients=list(message.to),
            provider_response=payload,
        )
