"""
API Gateway response helpers.

All notification endpoints answer with JSON and the same permissive
cross-origin header set, including the empty-body preflight reply.
"""

import json
from typing import Any, Dict, Optional

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}


def create_api_response(
    status_code: int,
    body: Any,
    headers: Optional[Dict[str, str]] = None,
) -> Dict[str, Any]:
    """Create standardized API Gateway response."""

    default_headers = {"Content-Type": "application/json", **CORS_HEADERS}

    if headers:
        default_headers.update(headers)

    return {
        "statusCode": status_code,
        "headers": default_headers,
        "body": body if isinstance(body, str) else json.dumps(body, ensure_ascii=False),
    }


def preflight_response() -> Dict[str, Any]:
    """Answer a CORS preflight request with an empty body."""
    return {
        "statusCode": 200,
        "headers": dict(CORS_HEADERS),
        "body": "",
    }
