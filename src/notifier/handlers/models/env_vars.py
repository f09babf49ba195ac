"""
Environment variable models for type-safe configuration.

This module defines the Pydantic model for the environment variables read by the
notification Lambdas and converts them into the explicit ``NotifierConfig``
handed to the handlers.
"""

from typing import Annotated, Optional

from aws_lambda_env_modeler import get_environment_variables
from pydantic import BaseModel, Field

from notifier.models.config import DEFAULT_EMAIL_API_URL, DEFAULT_SENDER, NotifierConfig


class NotifierEnvVars(BaseModel):
    """Environment variables for the notification handlers."""

    # Resend API key
    RESEND_API_KEY: Annotated[str, Field(
        description='API key for the Resend email API',
        min_length=1
    )]

    # Supabase project URL, only needed by the admin-facing variants
    SUPABASE_URL: Annotated[Optional[str], Field(
        description='Supabase project URL used for the administrator lookup'
    )] = None

    SUPABASE_SERVICE_ROLE_KEY: Annotated[Optional[str], Field(
        description='Supabase service role key used for the administrator lookup'
    )] = None

    EMAIL_SENDER: Annotated[str, Field(
        description='Sender identity for outgoing emails'
    )] = DEFAULT_SENDER

    RESEND_API_URL: Annotated[str, Field(
        description='Resend send-email endpoint'
    )] = DEFAULT_EMAIL_API_URL

    HTTP_TIMEOUT_SECONDS: Annotated[float, Field(
        description='Timeout in seconds for each outbound HTTP call',
        gt=0,
        le=900
    )] = 10.0

    # Service name for observability
    POWERTOOLS_SERVICE_NAME: Annotated[str, Field(
        description='Service name for AWS Powertools'
    )] = 'retail-notifier'

    # Log level for AWS Powertools Logger
    LOG_LEVEL: Annotated[str, Field(
        description='Log level for application logging',
        pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$'
    )] = 'INFO'

    def to_config(self) -> NotifierConfig:
        """Build the explicit handler configuration."""
        return NotifierConfig(
            email_api_key=self.RESEND_API_KEY,
            directory_endpoint=self.SUPABASE_URL,
            directory_credential=self.SUPABASE_SERVICE_ROLE_KEY,
            email_sender=self.EMAIL_SENDER,
            email_api_url=self.RESEND_API_URL,
            request_timeout_seconds=self.HTTP_TIMEOUT_SECONDS,
        )


def get_handler_env_vars() -> NotifierEnvVars:
    """
    Get typed environment variables for the notification handlers.

    Returns:
        Validated environment variables model instance
    """
    return get_environment_variables(model=NotifierEnvVars)


def load_notifier_config() -> NotifierConfig:
    """Read the environment and return the configuration for one invocation."""
    return get_handler_env_vars().to_config()
