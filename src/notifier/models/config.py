"""
Explicit configuration handed to the notification handlers.

The handlers never read the process environment themselves; the Lambda entry
points build a ``NotifierConfig`` at invocation time and pass it in.
"""

from typing import Annotated, Optional

from pydantic import BaseModel, Field

DEFAULT_SENDER = 'Retail App <noreply@enaknih-resto.me>'
DEFAULT_EMAIL_API_URL = 'https://api.resend.com/emails'


class NotifierConfig(BaseModel):
    """Credentials and endpoints for the email provider and the user directory."""

    email_api_key: Annotated[str, Field(
        min_length=1,
        description='API key for the transactional email provider'
    )]

    directory_endpoint: Annotated[Optional[str], Field(
        default=None,
        description='Base URL of the user directory (only needed by admin-facing variants)',
        examples=['https://project.supabase.co']
    )] = None

    directory_credential: Annotated[Optional[str], Field(
        default=None,
        description='Service credential for the user directory'
    )] = None

    email_sender: Annotated[str, Field(
        default=DEFAULT_SENDER,
        description='Sender identity used for every outgoing email'
    )] = DEFAULT_SENDER

    email_api_url: Annotated[str, Field(
        default=DEFAULT_EMAIL_API_URL,
        description='Endpoint of the email provider send API'
    )] = DEFAULT_EMAIL_API_URL

    request_timeout_seconds: Annotated[float, Field(
        default=10.0,
        gt=0,
        description='Timeout applied to each outbound HTTP call'
    )] = 10.0

    model_config = {'frozen': True}
