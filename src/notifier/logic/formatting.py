"""
Indonesian-locale formatting helpers used by the email templates.

Amounts are whole rupiah with ``.`` as thousands separator; dates are shown in
Jakarta time (WIB, UTC+7, no daylight saving).
"""

from datetime import datetime, timedelta, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

WIB = timezone(timedelta(hours=7), 'WIB')

DAY_NAMES = ('Senin', 'Selasa', 'Rabu', 'Kamis', 'Jumat', 'Sabtu', 'Minggu')
MONTH_NAMES = (
    'Januari', 'Februari', 'Maret', 'April', 'Mei', 'Juni',
    'Juli', 'Agustus', 'September', 'Oktober', 'November', 'Desember',
)

Amount = Union[Decimal, int, float]


def format_rupiah(amount: Optional[Amount]) -> str:
    """
    Format an amount with thousands grouping and no decimals.

    Examples:
        30000 -> "30.000", 1250000.5 -> "1.250.001", None -> "0"
    """
    if amount is None:
        return '0'
    whole = Decimal(str(amount)).quantize(Decimal('1'), rounding=ROUND_HALF_UP)
    return f'{int(whole):,}'.replace(',', '.')


def short_order_id(order_id: str) -> str:
    """Display form of an order identifier: first 8 characters, upper-cased."""
    return order_id[:8].upper()


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_jakarta(moment: datetime) -> datetime:
    # naive datetimes are treated as UTC
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(WIB)


def format_long_date(moment: datetime) -> str:
    """e.g. ``Senin, 19 Oktober 2026``"""
    local = to_jakarta(moment)
    return f'{DAY_NAMES[local.weekday()]}, {local.day} {MONTH_NAMES[local.month - 1]} {local.year}'


def format_order_timestamp(moment: datetime) -> str:
    """e.g. ``Senin, 19 Oktober 2026 pukul 14.30``"""
    local = to_jakarta(moment)
    return f'{format_long_date(local)} pukul {local:%H.%M}'


def format_numeric_timestamp(moment: datetime) -> str:
    """e.g. ``19/10/2026, 14.30.00``"""
    local = to_jakarta(moment)
    return f'{local:%d/%m/%Y, %H.%M.%S}'
