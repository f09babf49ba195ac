"""
Data Access Layer (DAL) for the notification service.

This module defines the interfaces of the two external collaborators, the
transactional email provider and the user directory, and the factory functions
that build their HTTP-backed implementations from a ``NotifierConfig``.
"""

from contextlib import contextmanager
from typing import Iterator, List, Optional, Protocol, runtime_checkable

import httpx

from notifier.models.config import NotifierConfig
from notifier.models.output import DeliveryResult, EmailMessage, Recipient


@runtime_checkable
class EmailClient(Protocol):
    """Protocol defining the email delivery interface."""

    def send(self, message: EmailMessage) -> DeliveryResult:
        """Deliver one rendered email."""
        ...


@runtime_checkable
class UserDirectory(Protocol):
    """Protocol defining the user directory interface."""

    def list_admins(self) -> List[Recipient]:
        """Return every user flagged as administrator."""
        ...


@contextmanager
def http_session(http_client: Optional[httpx.Client], timeout: float) -> Iterator[httpx.Client]:
    """
    Yield the injected client, or a fresh one that is closed on exit.

    Injected clients are left open; their owner closes them.
    """
    if http_client is not None:
        yield http_client
        return
    with httpx.Client(timeout=timeout) as client:
        yield client


def get_email_client(config: NotifierConfig) -> EmailClient:
    """
    Factory function to get the email delivery client.

    Args:
        config: Handler configuration

    Returns:
        Email client instance
    """
    # Import here to avoid circular imports
    from notifier.dal.email_client import ResendEmailClient

    return ResendEmailClient(
        api_key=config.email_api_key,
        sender=config.email_sender,
        api_url=config.email_api_url,
        timeout=config.request_timeout_seconds,
    )


def get_user_directory(config: NotifierConfig) -> UserDirectory:
    """
    Factory function to get the user directory.

    Args:
        config: Handler configuration

    Returns:
        User directory instance
    """
    from notifier.dal.user_directory import SupabaseUserDirectory

    return SupabaseUserDirectory(
        endpoint=config.directory_endpoint,
        service_key=config.directory_credential,
        timeout=config.request_timeout_seconds,
    )


__all__ = [
    'EmailClient',
    'UserDirectory',
    'http_session',
    'get_email_client',
    'get_user_directory',
]
