"""
Business Logic Layer Module.

This module contains the notification workflow and everything it needs that
is independent of HTTP: the per-variant descriptors, the HTML templates and the
Indonesian formatting helpers.
"""

from notifier.logic.notification_service import NotificationOutcome, NotificationService
from notifier.logic.variants import VARIANTS, NotificationVariant, get_variant

__all__ = [
    "NotificationOutcome",
    "NotificationService",
    "NotificationVariant",
    "VARIANTS",
    "get_variant",
]
