"""
Unit tests for the Lambda entry points.

The collaborators built from configuration are patched with in-memory
doubles; everything else runs through the Powertools decorators.
"""

import json
from unittest.mock import patch

import pytest

from conftest import RecordingEmailClient, StaticUserDirectory

from notifier.handlers.notification_handler import create_lambda_handler
from notifier.logic.variants import WELCOME_EMAIL
from notifier.models.config import NotifierConfig


@pytest.fixture
def patched_collaborators(admins):
    client = RecordingEmailClient()
    directory = StaticUserDirectory(admins=admins)
    with patch("notifier.handlers.notification_handler.get_email_client", return_value=client) as email_factory, \
            patch("notifier.handlers.notification_handler.get_user_directory", return_value=directory):
        yield client, directory, email_factory


class TestEntryPoints:
    """Test cases for the six notification Lambdas."""

    def test_welcome_email(self, patched_collaborators, api_gateway_event, lambda_context, welcome_payload):
        """Test the welcome Lambda end to end."""
        from send_welcome_email import lambda_function

        client, _, email_factory = patched_collaborators

        response = lambda_function.lambda_handler(api_gateway_event(body=welcome_payload), lambda_context)

        assert response["statusCode"] == 200
        assert json.loads(response["body"])["message"] == "Welcome email sent!"
        assert client.sent[0].to == ["budi@example.com"]

        config = email_factory.call_args.args[0]
        assert config.email_api_key == "re_test_key"

    def test_verification_code(self, patched_collaborators, api_gateway_event, lambda_context, verification_payload):
        """Test the verification code Lambda end to end."""
        from send_verification_code import lambda_function

        client, _, _ = patched_collaborators

        response = lambda_function.lambda_handler(api_gateway_event(body=verification_payload), lambda_context)

        assert json.loads(response["body"]) == {"success": True, "messageId": "msg_1"}
        assert client.sent[0].subject.startswith("482913")

    def test_order_confirmation(self, patched_collaborators, api_gateway_event, lambda_context,
                                order_confirmation_payload):
        """Test the order confirmation Lambda end to end."""
        from send_order_confirmation import lambda_function

        response = lambda_function.lambda_handler(
            api_gateway_event(body=order_confirmation_payload), lambda_context
        )

        assert response["statusCode"] == 200
        assert json.loads(response["body"])["data"] == {"id": "msg_1"}

    def test_order_status_update(self, patched_collaborators, api_gateway_event, lambda_context,
                                 status_update_payload):
        """Test the order status update Lambda end to end."""
        from send_order_status_update import lambda_function

        client, _, _ = patched_collaborators

        response = lambda_function.lambda_handler(api_gateway_event(body=status_update_payload), lambda_context)

        assert response["statusCode"] == 200
        assert "Dalam Pengiriman" in client.sent[0].subject

    def test_new_order_admin(self, patched_collaborators, api_gateway_event, lambda_context, new_order_payload):
        """Test the admin new order Lambda end to end."""
        from notify_admin_new_order import lambda_function

        client, directory, _ = patched_collaborators

        response = lambda_function.lambda_handler(api_gateway_event(body=new_order_payload), lambda_context)

        body = json.loads(response["body"])
        assert response["statusCode"] == 200
        assert body["adminCount"] == 2
        assert directory.calls == 1
        assert len(client.sent) == 1

    def test_low_stock(self, patched_collaborators, api_gateway_event, lambda_context, low_stock_payload):
        """Test the low stock Lambda end to end."""
        from notify_low_stock import lambda_function

        client, directory, _ = patched_collaborators

        response = lambda_function.lambda_handler(api_gateway_event(body=low_stock_payload), lambda_context)

        assert response["statusCode"] == 200
        assert json.loads(response["body"])["productsCount"] == 2
        assert "HABIS" in client.sent[0].html
        assert directory.calls == 1

    def test_preflight_skips_configuration(self, api_gateway_event, lambda_context):
        """Test that OPTIONS is answered before configuration is loaded."""
        def broken_config():
            raise AssertionError("configuration must not be loaded for preflight")

        handler = create_lambda_handler(WELCOME_EMAIL, config_loader=broken_config)

        response = handler(api_gateway_event(method="OPTIONS"), lambda_context)

        assert response["statusCode"] == 200
        assert response["body"] == ""

    def test_invalid_configuration_is_500(self, api_gateway_event, lambda_context, welcome_payload):
        """Test that a configuration error is reported as an internal error."""
        def broken_config():
            raise ValueError("failed to load environmental variables")

        handler = create_lambda_handler(WELCOME_EMAIL, config_loader=broken_config)

        response = handler(api_gateway_event(body=welcome_payload), lambda_context)

        assert response["statusCode"] == 500
        assert json.loads(response["body"])["error"] == "Internal server error"

    def test_injected_configuration(self, patched_collaborators, api_gateway_event, lambda_context,
                                    welcome_payload):
        """Test that the configuration comes from the loader, not the environment."""
        client, _, email_factory = patched_collaborators
        config = NotifierConfig(email_api_key="re_injected", email_sender="Toko <toko@example.com>")

        handler = create_lambda_handler(WELCOME_EMAIL, config_loader=lambda: config)
        handler(api_gateway_event(body=welcome_payload), lambda_context)

        assert email_factory.call_args.args[0] is config
        assert client.sent[0].sender == "Toko <toko@example.com>"
