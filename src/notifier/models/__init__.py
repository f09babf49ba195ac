"""
Notifier Models Package

This package contains the Pydantic models used throughout the service:
request validation models, response and delivery models, the order status
presentation table and the handler configuration.
"""

from .config import NotifierConfig
from .input import (
    LowStockNotifyRequest,
    LowStockProduct,
    NewOrderAdminNotifyRequest,
    OrderConfirmationRequest,
    OrderItem,
    OrderStatusUpdateRequest,
    VerificationCodeRequest,
    WelcomeEmailRequest,
)
from .order import OrderStatus, StatusPresentation, get_status_presentation
from .output import DeliveryResult, EmailMessage, ErrorOutput, Recipient

__all__ = [
    # Input models
    "LowStockNotifyRequest",
    "LowStockProduct",
    "NewOrderAdminNotifyRequest",
    "OrderConfirmationRequest",
    "OrderItem",
    "OrderStatusUpdateRequest",
    "VerificationCodeRequest",
    "WelcomeEmailRequest",

    # Output models
    "DeliveryResult",
    "EmailMessage",
    "ErrorOutput",
    "Recipient",

    # Domain models
    "OrderStatus",
    "StatusPresentation",
    "get_status_presentation",

    # Configuration
    "NotifierConfig",
]
