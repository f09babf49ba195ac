"""
Output models for delivery results and API responses using Pydantic.

Response bodies are serialised with camelCase keys, the format the storefront
client reads.
"""

from typing import Annotated, Any, Dict, List, Optional

from pydantic import BaseModel, Field

from notifier.models.input import CamelModel


class Recipient(BaseModel):
    """A resolved email recipient."""

    email: str
    name: Optional[str] = None


class EmailMessage(BaseModel):
    """A fully rendered email ready for the delivery provider."""

    sender: str
    to: List[str]
    subject: str
    html: str

    def to_payload(self) -> Dict[str, Any]:
        """Request body for the provider send API."""
        return {
            'from': self.sender,
            'to': self.to,
            'subject': self.subject,
            'html': self.html,
        }


class DeliveryResult(BaseModel):
    """Outcome of one notification."""

    success: bool
    message_id: Optional[str] = None
    recipients: List[str] = Field(default_factory=list)
    provider_response: Dict[str, Any] = Field(default_factory=dict)
    skipped_reason: Optional[str] = None

    @property
    def skipped(self) -> bool:
        return self.skipped_reason is not None


class AdminOrderNotificationOutput(CamelModel):
    """Response body of the new-order admin notification."""

    success: bool = True
    message_id: Annotated[Optional[str], Field(description='Provider message identifier')]
    sent_to: List[str]
    admin_count: int


class LowStockNotificationOutput(CamelModel):
    """Response body of the low-stock notification."""

    success: bool = True
    message: str = 'Low stock notification sent'
    sent_to: List[str]
    products_count: int
    email_id: Optional[str]


class EmailSentOutput(CamelModel):
    """Response body echoing the raw provider payload."""

    success: bool = True
    message: str
    data: Dict[str, Any]


class MessageIdOutput(CamelModel):
    """Response body carrying only the provider message identifier."""

    success: bool = True
    message_id: Optional[str]


class NoRecipientsOutput(CamelModel):
    """Successful no-op when no administrator could be found."""

    success: bool = False
    message: str


class ErrorOutput(BaseModel):
    """Standard error response model."""

    error: Annotated[str, Field(
        description='Human-readable error message',
        examples=['Failed to send email', 'Missing required fields']
    )]

    details: Annotated[Any, Field(
        default=None,
        description='Upstream diagnostic payload'
    )] = None
