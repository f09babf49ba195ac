"""
Administrator lookup against the Supabase ``users`` table.

The table is read through its PostgREST endpoint with the service role key,
filtered on ``is_admin = true`` and projected to ``email, name``.
"""

from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError

from notifier.dal import http_session
from notifier.handlers.utils.errors import DirectoryLookupError
from notifier.handlers.utils.observability import logger, tracer
from notifier.models.output import Recipient

USERS_PATH = '/rest/v1/users'
ADMIN_QUERY = {'is_admin': 'eq.true', 'select': 'email,name'}


class SupabaseUserDirectory:
    """Read administrator recipients from Supabase."""

    def __init__(
        self,
        endpoint: Optional[str],
        service_key: Optional[str],
        timeout: float = 10.0,
        http_client: Optional[httpx.Client] = None,
    ):
        self.endpoint = endpoint.rstrip('/') if endpoint else endpoint
        self.service_key = service_key
        self.timeout = timeout
        self.http_client = http_client

    @property
    def users_url(self) -> str:
        return f'{self.endpoint}{USERS_PATH}'

    def _headers(self) -> Dict[str, str]:
        return {
            'apikey': self.service_key,
            'Authorization': f'Bearer {self.service_key}',
            'Accept': 'application/json',
        }

    @staticmethod
    def _to_recipients(rows: List[Any]) -> List[Recipient]:
        recipients = []
        for row in rows:
            try:
                recipient = Recipient.model_validate(row)
            except ValidationError:
                continue
            if recipient.email.strip():
                recipients.append(recipient)

        skipped = len(rows) - len(recipients)
        if skipped:
            logger.warning('Skipped admin rows without a usable email', extra={'skipped_count': skipped})
        return recipients

    @tracer.capture_method
    def list_admins(self) -> List[Recipient]:
        """
        Return every user flagged as administrator.

        Raises:
            DirectoryLookupError: When the directory is not configured, the
                request fails, or the answer is not a list of users
        """
        if not self.endpoint or not self.service_key:
            raise DirectoryLookupError(details={'message': 'User directory is not configured'})

        try:
            with http_session(self.http_client, self.timeout) as client:
                response = client.get(self.users_url, params=ADMIN_QUERY, headers=self._headers())
        except httpx.HTTPError as exc:
            logger.error('Admin lookup request failed', extra={'error': str(exc)})
            raise DirectoryLookupError(details={'message': str(exc)}) from exc

        try:
            payload = response.json()
        except ValueError:
            payload = {'message': response.text}

        if response.is_error or not isinstance(payload, list):
            logger.error('Admin lookup failed', extra={
                'status_code': response.status_code,
                'response': payload,
            })
            raise DirectoryLookupError(details=payload)

        admins = self._to_recipients(payload)
        logger.info('Admin lookup completed', extra={'admin_count': len(admins)})
        return admins
