"""
Order status presentation for customer-facing emails.

The set of known statuses is closed; any other status string renders with the
fallback presentation instead of failing.
"""

from enum import Enum
from typing import Mapping, NamedTuple


class OrderStatus(str, Enum):
    """Order status enumeration."""

    PENDING = 'pending'
    PROCESSING = 'processing'
    SHIPPED = 'shipped'
    DELIVERED = 'delivered'
    CANCELLED = 'cancelled'


class StatusPresentation(NamedTuple):
    """How a status is shown in an email."""

    label: str
    color: str
    icon: str
    message: str


STATUS_PRESENTATIONS: Mapping[OrderStatus, StatusPresentation] = {
    OrderStatus.PENDING: StatusPresentation(
        label='Menunggu Konfirmasi',
        color='#FF9800',
        icon='⏳',
        message='Pesanan Anda sedang menunggu konfirmasi dari admin.',
    ),
    OrderStatus.PROCESSING: StatusPresentation(
        label='Sedang Diproses',
        color='#2196F3',
        icon='🔄',
        message='Pesanan Anda sedang diproses dan akan segera dikirim.',
    ),
    OrderStatus.SHIPPED: StatusPresentation(
        label='Dalam Pengiriman',
        color='#9C27B0',
        icon='🚚',
        message='Pesanan Anda sedang dalam perjalanan menuju alamat tujuan.',
    ),
    OrderStatus.DELIVERED: StatusPresentation(
        label='Terkirim',
        color='#4CAF50',
        icon='✅',
        message='Pesanan Anda telah sampai di tujuan. Terima kasih telah berbelanja!',
    ),
    OrderStatus.CANCELLED: StatusPresentation(
        label='Dibatalkan',
        color='#F44336',
        icon='❌',
        message='Pesanan Anda telah dibatalkan. Silakan hubungi admin untuk informasi lebih lanjut.',
    ),
}

FALLBACK_COLOR = '#757575'
FALLBACK_ICON = '📦'
FALLBACK_MESSAGE = 'Status pesanan Anda telah diperbarui.'


def fallback_presentation(status: str) -> StatusPresentation:
    """Presentation for a status outside the known set; the raw code is the label."""
    return StatusPresentation(
        label=status,
        color=FALLBACK_COLOR,
        icon=FALLBACK_ICON,
        message=FALLBACK_MESSAGE,
    )


def get_status_presentation(status: str) -> StatusPresentation:
    """
    Look up the presentation for a status code.

    Matching is exact, as the status codes stored with orders are lower-case.

    Args:
        status: Raw status code from the request

    Returns:
        Known presentation, or the fallback for unrecognised codes
    """
    try:
        return STATUS_PRESENTATIONS[OrderStatus(status)]
    except ValueError:
        return fallback_presentation(status)
