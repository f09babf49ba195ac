"""
HTML email rendering for every notification variant.

The bodies are Jinja2 templates shipped in ``notifier/templates``; rendering
autoescapes every interpolated value. Subjects are plain text and built here.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from jinja2 import Environment, PackageLoader, StrictUndefined, select_autoescape

from notifier.logic.formatting import (
    format_long_date,
    format_numeric_timestamp,
    format_order_timestamp,
    format_rupiah,
    short_order_id,
    utc_now,
)
from notifier.models.input import (
    LowStockNotifyRequest,
    NewOrderAdminNotifyRequest,
    OrderConfirmationRequest,
    OrderStatusUpdateRequest,
    VerificationCodeRequest,
    WelcomeEmailRequest,
)
from notifier.models.order import get_status_presentation

LOW_STOCK_THRESHOLD = 3
VERIFICATION_CODE_VALIDITY_MINUTES = 15


@dataclass(frozen=True)
class RenderedEmail:
    subject: str
    html: str


def stock_badge_color(current_stock: int) -> str:
    """Red when sold out, amber at or below the threshold, green otherwise."""
    if current_stock <= 0:
        return '#dc3545'
    if current_stock <= LOW_STOCK_THRESHOLD:
        return '#ffc107'
    return '#28a745'


def create_environment() -> Environment:
    environment = Environment(
        loader=PackageLoader('notifier', 'templates'),
        autoescape=select_autoescape(['html']),
        undefined=StrictUndefined,
    )
    environment.filters.update({
        'rupiah': format_rupiah,
        'short_order_id': short_order_id,
        'long_date': format_long_date,
        'order_timestamp': format_order_timestamp,
        'numeric_timestamp': format_numeric_timestamp,
        'stock_badge_color': stock_badge_color,
    })
    return environment


environment = create_environment()


def render_html(template_name: str, **context: Any) -> str:
    return environment.get_template(template_name).render(**context)


def render_new_order_admin(request: NewOrderAdminNotifyRequest, now: datetime) -> RenderedEmail:
    """Admin alert for a newly placed order."""
    subject = (
        f'🔔 Pesanan Baru! #{short_order_id(request.order_id)} - '
        f'{request.customer_name} (Rp {format_rupiah(request.total_amount)})'
    )
    return RenderedEmail(
        subject=subject,
        html=render_html('new_order_admin.html', request=request, now=now),
    )


def render_low_stock(request: LowStockNotifyRequest, now: datetime) -> RenderedEmail:
    """Admin alert listing products that need restocking."""
    html = render_html('low_stock.html', request=request, now=now, threshold=LOW_STOCK_THRESHOLD)
    return RenderedEmail(
        subject=f'⚠️ Peringatan: {len(request.products)} Produk Stok Rendah',
        html=html,
    )


def render_order_confirmation(request: OrderConfirmationRequest, now: datetime) -> RenderedEmail:
    """Customer receipt for a freshly placed order."""
    return RenderedEmail(
        subject=f'Konfirmasi Pesanan #{short_order_id(request.order_id)} ✅',
        html=render_html('order_confirmation.html', request=request, now=now),
    )


def render_order_status_update(request: OrderStatusUpdateRequest, now: Optional[datetime] = None) -> RenderedEmail:
    """Customer notice for an order status change; items and address are optional sections."""
    status = get_status_presentation(request.status)
    subject = f'{status.icon} Status Pesanan: {status.label} - Order #{short_order_id(request.order_id)}'
    return RenderedEmail(
        subject=subject,
        html=render_html('order_status_update.html', request=request, status=status, now=now or utc_now()),
    )


def render_verification_code(request: VerificationCodeRequest, now: Optional[datetime] = None) -> RenderedEmail:
    html = render_html(
        'verification_code.html',
        request=request,
        validity_minutes=VERIFICATION_CODE_VALIDITY_MINUTES,
    )
    return RenderedEmail(subject=f'{request.verification_code} - Kode Verifikasi Retail App', html=html)


def render_welcome_email(request: WelcomeEmailRequest, now: Optional[datetime] = None) -> RenderedEmail:
    return RenderedEmail(
        subject='Selamat Datang di Retail App! 🎉',
        html=render_html('welcome_email.html', request=request),
    )
