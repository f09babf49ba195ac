"""
Per-variant descriptors for the generic notification handler.

A descriptor bundles everything that differs between the six notification
endpoints: the request model, the required fields and their error message,
how recipients are found, what to do when the admin directory is empty, the
renderer and the success-body builder.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Tuple, Type

from notifier.logic import templates
from notifier.models.input import (
    CamelModel,
    LowStockNotifyRequest,
    NewOrderAdminNotifyRequest,
    OrderConfirmationRequest,
    OrderStatusUpdateRequest,
    VerificationCodeRequest,
    WelcomeEmailRequest,
)
from notifier.models.output import (
    AdminOrderNotificationOutput,
    DeliveryResult,
    EmailSentOutput,
    LowStockNotificationOutput,
    MessageIdOutput,
)


class RecipientStrategy(str, Enum):
    EXPLICIT = 'explicit'
    ADMIN_DIRECTORY = 'admin_directory'


class EmptyDirectoryPolicy(str, Enum):
    """What an admin variant does when the directory returns nobody."""

    NO_OP = 'no_op'  # 200 with success=false, nothing sent
    NOT_FOUND = 'not_found'  # 404


ResponseBuilder = Callable[[Any, DeliveryResult], Dict[str, Any]]


@dataclass(frozen=True)
class NotificationVariant:
    key: str
    request_model: Type[CamelModel]
    required_fields: Tuple[str, ...]
    missing_fields_message: str
    render: Callable[..., templates.RenderedEmail]
    build_response: ResponseBuilder
    recipient_strategy: RecipientStrategy = RecipientStrategy.EXPLICIT
    empty_directory_policy: EmptyDirectoryPolicy = EmptyDirectoryPolicy.NOT_FOUND

    @property
    def uses_directory(self) -> bool:
        return self.recipient_strategy is RecipientStrategy.ADMIN_DIRECTORY


def _dump(model: CamelModel) -> Dict[str, Any]:
    return model.model_dump(mode='json', by_alias=True)


def _admin_order_response(request: NewOrderAdminNotifyRequest, result: DeliveryResult) -> Dict[str, Any]:
    return _dump(AdminOrderNotificationOutput(
        message_id=result.message_id,
        sent_to=result.recipients,
        admin_count=len(result.recipients),
    ))


def _low_stock_response(request: LowStockNotifyRequest, result: DeliveryResult) -> Dict[str, Any]:
    return _dump(LowStockNotificationOutput(
        sent_to=result.recipients,
        products_count=len(request.products),
        email_id=result.message_id,
    ))


def _echo_provider_response(message: str) -> ResponseBuilder:
    def build(request: Any, result: DeliveryResult) -> Dict[str, Any]:
        return _dump(EmailSentOutput(message=message, data=result.provider_response))

    return build


def _message_id_response(request: Any, result: DeliveryResult) -> Dict[str, Any]:
    return _dump(MessageIdOutput(message_id=result.message_id))


NEW_ORDER_ADMIN_NOTIFY = NotificationVariant(
    key='new-order-admin-notify',
    request_model=NewOrderAdminNotifyRequest,
    required_fields=('orderId', 'customerName'),
    missing_fields_message='OrderId and customerName are required',
    render=templates.render_new_order_admin,
    build_response=_admin_order_response,
    recipient_strategy=RecipientStrategy.ADMIN_DIRECTORY,
    empty_directory_policy=EmptyDirectoryPolicy.NO_OP,
)

LOW_STOCK_NOTIFY = NotificationVariant(
    key='low-stock-notify',
    request_model=LowStockNotifyRequest,
    required_fields=('products',),
    missing_fields_message='No products provided',
    render=templates.render_low_stock,
    build_response=_low_stock_response,
    recipient_strategy=RecipientStrategy.ADMIN_DIRECTORY,
    empty_directory_policy=EmptyDirectoryPolicy.NOT_FOUND,
)

ORDER_CONFIRMATION = NotificationVariant(
    key='order-confirmation',
    request_model=OrderConfirmationRequest,
    required_fields=('email', 'name', 'orderId', 'items', 'totalAmount', 'shippingAddress'),
    missing_fields_message='Missing required fields',
    render=templates.render_order_confirmation,
    build_response=_echo_provider_response('Order confirmation email sent!'),
)

ORDER_STATUS_UPDATE = NotificationVariant(
    key='order-status-update',
    request_model=OrderStatusUpdateRequest,
    required_fields=('email', 'orderId', 'status'),
    missing_fields_message='Email, orderId, and status are required',
    render=templates.render_order_status_update,
    build_response=_message_id_response,
)

VERIFICATION_CODE = NotificationVariant(
    key='verification-code',
    request_model=VerificationCodeRequest,
    required_fields=('email', 'verificationCode'),
    missing_fields_message='Email and verification code are required',
    render=templates.render_verification_code,
    build_response=_message_id_response,
)

WELCOME_EMAIL = NotificationVariant(
    key='welcome-email',
    request_model=WelcomeEmailRequest,
    required_fields=('email', 'name'),
    missing_fields_message='Email and name are required',
    render=templates.render_welcome_email,
    build_response=_echo_provider_response('Welcome email sent!'),
)

VARIANTS: Mapping[str, NotificationVariant] = {
    variant.key: variant
    for variant in (
        NEW_ORDER_ADMIN_NOTIFY,
        LOW_STOCK_NOTIFY,
        ORDER_CONFIRMATION,
        ORDER_STATUS_UPDATE,
        VERIFICATION_CODE,
        WELCOME_EMAIL,
    )
}


def get_variant(key: str) -> NotificationVariant:
    """Look up a variant descriptor by key; raises ``KeyError`` for unknown keys."""
    return VARIANTS[key]
