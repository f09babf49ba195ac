"""
Input models for notification request validation using Pydantic.

Request bodies arrive with camelCase keys; every model accepts those aliases
and exposes snake_case attributes. Email addresses are deliberately not
syntax-checked.
"""

from decimal import Decimal
from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model accepting camelCase JSON keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra='ignore',
    )


class OrderItem(CamelModel):
    """A single line of an order."""

    product_name: Annotated[str, Field(
        description='Product display name',
        examples=['Kaos Polos Hitam']
    )]

    price: Annotated[Decimal, Field(
        ge=0,
        description='Unit price in rupiah',
        examples=[15000]
    )]

    quantity: Annotated[int, Field(
        description='Number of units ordered',
        examples=[2]
    )]

    @field_validator('quantity')
    @classmethod
    def validate_quantity(cls, v: int) -> int:
        """Validate that quantity is positive."""
        if v <= 0:
            raise ValueError('quantity must be greater than 0')
        return v

    @property
    def subtotal(self) -> Decimal:
        return self.price * self.quantity


class LowStockProduct(CamelModel):
    """A product whose stock fell to the alert threshold."""

    product_name: Annotated[str, Field(description='Product display name')]

    current_stock: Annotated[int, Field(description='Units left in stock', examples=[0, 3])]

    category: Annotated[str, Field(description='Product category', examples=['Tops'])]

    @property
    def is_out_of_stock(self) -> bool:
        return self.current_stock <= 0


class NewOrderAdminNotifyRequest(CamelModel):
    """Payload announcing a new order to every administrator."""

    order_id: Annotated[str, Field(description='Order identifier')]
    customer_name: Annotated[str, Field(description='Name of the ordering customer')]
    customer_email: Optional[str] = None
    customer_phone: Optional[str] = None
    items: Optional[List[OrderItem]] = None
    total_amount: Optional[Annotated[Decimal, Field(ge=0)]] = None
    shipping_address: Optional[str] = None

    @property
    def total_items(self) -> int:
        return sum(item.quantity for item in self.items or [])


class LowStockNotifyRequest(CamelModel):
    """Payload listing products that need restocking."""

    products: Annotated[List[LowStockProduct], Field(min_length=1)]


class OrderConfirmationRequest(CamelModel):
    """Payload confirming a freshly placed order to the customer."""

    email: str
    name: str
    order_id: str
    items: List[OrderItem]
    total_amount: Annotated[Decimal, Field(ge=0)]
    shipping_address: str


class OrderStatusUpdateRequest(CamelModel):
    """Payload telling the customer about an order status change."""

    email: str
    order_id: str
    status: str
    name: Optional[str] = None
    items: Optional[List[OrderItem]] = None
    total_amount: Optional[Annotated[Decimal, Field(ge=0)]] = None
    shipping_address: Optional[str] = None


class VerificationCodeRequest(CamelModel):
    """Payload carrying an account verification code."""

    email: str
    verification_code: str
    name: Optional[str] = None

    @field_validator('verification_code', mode='before')
    @classmethod
    def coerce_code(cls, v: Any) -> Any:
        """Accept numeric codes by turning them into text."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class WelcomeEmailRequest(CamelModel):
    """Payload for a newly created account."""

    email: str
    name: str
