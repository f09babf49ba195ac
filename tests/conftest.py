"""
Pytest configuration and shared fixtures for the Retail Notifier.

This module provides common test fixtures and configuration used across
unit and integration tests: environment, Lambda context, API Gateway events
and in-memory doubles for the email provider and the user directory.
"""

import json
import os
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from unittest.mock import Mock

import pytest

# Powertools reads these when the notifier modules are first imported
os.environ.update({
    "RESEND_API_KEY": "re_test_key",
    "SUPABASE_URL": "https://project.supabase.co",
    "SUPABASE_SERVICE_ROLE_KEY": "service-role-test-key",
    "POWERTOOLS_SERVICE_NAME": "test-retail-notifier",
    "LOG_LEVEL": "DEBUG",
    "POWERTOOLS_TRACE_DISABLED": "true",  # Disable X-Ray in tests
    "POWERTOOLS_DEV": "false",
    "LAMBDA_ENV_MODELER_DISABLE_CACHE": "true",
})

from notifier.handlers.utils.observability import metrics  # noqa: E402
from notifier.models.config import NotifierConfig  # noqa: E402
from notifier.models.output import DeliveryResult, EmailMessage, Recipient  # noqa: E402

# Monday 19 October 2026, 14:30 in Jakarta
FIXED_NOW = datetime(2026, 10, 19, 7, 30, 0, tzinfo=timezone.utc)


class RecordingEmailClient:
    """Email client double that records every message and answers with unique ids."""

    def __init__(self, journal: Optional[List[str]] = None, error: Optional[Exception] = None):
        self.sent: List[EmailMessage] = []
        self.journal = journal
        self.error = error

    def send(self, message: EmailMessage) -> DeliveryResult:
        if self.journal is not None:
            self.journal.append("send")
        if self.error is not None:
            raise self.error
        self.sent.append(message)
        message_id = f"msg_{len(self.sent)}"
        return DeliveryResult(
            success=True,
            message_id=message_id,
            recipients=list(message.to),
            provider_response={"id": message_id},
        )


class StaticUserDirectory:
    """User directory double returning a fixed admin list or raising a fixed error."""

    def __init__(
        self,
        admins: Optional[List[Recipient]] = None,
        error: Optional[Exception] = None,
        journal: Optional[List[str]] = None,
    ):
        self.admins = admins or []
        self.error = error
        self.journal = journal
        self.calls = 0

    def list_admins(self) -> List[Recipient]:
        self.calls += 1
        if self.journal is not None:
            self.journal.append("list_admins")
        if self.error is not None:
            raise self.error
        return list(self.admins)


# Test environment configuration
@pytest.fixture(scope="session", autouse=True)
def test_environment():
    """Expose the test environment variables."""
    return dict(os.environ)


@pytest.fixture(autouse=True)
def reset_metrics():
    """Drop metrics accumulated by handlers called outside a Lambda wrapper."""
    metrics.clear_metrics()
    yield
    metrics.clear_metrics()


@pytest.fixture
def notifier_config() -> NotifierConfig:
    return NotifierConfig(
        email_api_key="re_test_key",
        directory_endpoint="https://project.supabase.co",
        directory_credential="service-role-test-key",
    )


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def email_client() -> RecordingEmailClient:
    return RecordingEmailClient()


@pytest.fixture
def admins() -> List[Recipient]:
    return [
        Recipient(email="owner@retail.test", name="Owner"),
        Recipient(email="ops@retail.test", name="Ops"),
    ]


@pytest.fixture
def admin_directory(admins) -> StaticUserDirectory:
    return StaticUserDirectory(admins=admins)


# Sample payload fixtures
@pytest.fixture
def order_items() -> List[Dict[str, Any]]:
    return [
        {"productName": "Kaos Polos Hitam", "price": 15000, "quantity": 2},
        {"productName": "Kemeja Flanel", "price": 125000, "quantity": 1},
    ]


@pytest.fixture
def new_order_payload(order_items) -> Dict[str, Any]:
    return {
        "orderId": "a1b2c3d4-e5f6-7890-abcd-ef1234567890",
        "customerName": "Budi Santoso",
        "customerEmail": "budi@example.com",
        "customerPhone": "081234567890",
        "items": order_items,
        "totalAmount": 155000,
        "shippingAddress": "Jl. Merdeka No. 1, Jakarta",
    }


@pytest.fixture
def low_stock_payload() -> Dict[str, Any]:
    return {
        "products": [
            {"productName": "Sepatu Kets", "currentStock": 0, "category": "Sepatu"},
            {"productName": "Celana Chino", "currentStock": 2, "category": "Celana"},
        ]
    }


@pytest.fixture
def order_confirmation_payload(order_items) -> Dict[str, Any]:
    return {
        "email": "budi@example.com",
        "name": "Budi",
        "orderId": "a1b2c3d4-e5f6-7890-abcd-ef1234567890",
        "items": order_items,
        "totalAmount": 155000,
        "shippingAddress": "Jl. Merdeka No. 1, Jakarta",
    }


@pytest.fixture
def status_update_payload() -> Dict[str, Any]:
    return {
        "email": "budi@example.com",
        "orderId": "a1b2c3d4-e5f6-7890-abcd-ef1234567890",
        "status": "shipped",
        "name": "Budi",
    }


@pytest.fixture
def verification_payload() -> Dict[str, Any]:
    return {"email": "budi@example.com", "verificationCode": "482913", "name": "Budi"}


@pytest.fixture
def welcome_payload() -> Dict[str, Any]:
    return {"email": "budi@example.com", "name": "Budi"}


def build_api_gateway_event(
    body: Any = None,
    method: str = "POST",
    path: str = "/notifications",
) -> Dict[str, Any]:
    """Create an API Gateway REST proxy event."""
    if body is not None and not isinstance(body, str):
        body = json.dumps(body)

    return {
        "httpMethod": method,
        "path": path,
        "headers": {
            "Content-Type": "application/json",
            "User-Agent": "test-agent/1.0",
        },
        "body": body,
        "requestContext": {
            "requestId": "test-request-id-123",
            "accountId": "123456789012",
            "stage": "test",
            "httpMethod": method,
            "path": path,
            "protocol": "HTTP/1.1",
            "requestTime": "2026-10-19T07:30:00.000Z",
            "requestTimeEpoch": 1792395000000,
            "identity": {
                "sourceIp": "127.0.0.1",
                "userAgent": "test-agent/1.0",
            },
        },
        "pathParameters": None,
        "queryStringParameters": None,
        "multiValueQueryStringParameters": None,
        "stageVariables": None,
        "isBase64Encoded": False,
    }


@pytest.fixture
def api_gateway_event():
    """Factory for API Gateway events."""
    return build_api_gateway_event


@pytest.fixture
def lambda_context():
    """Create a mock Lambda context for testing."""
    context = Mock()
    context.function_name = "test-notifier-function"
    context.function_version = "1"
    context.invoked_function_arn = "arn:aws:lambda:ap-southeast-1:123456789012:function:test-notifier-function"
    context.memory_limit_in_mb = 256
    context.get_remaining_time_in_millis = lambda: 30000
    context.aws_request_id = "test-request-id-123"
    context.log_group_name = "/aws/lambda/test-notifier-function"
    context.log_stream_name = "2026/10/19/[$LATEST]test123"
    return context


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
