"""
Shared-secret gate.

Registered as the first HTTP middleware so every request, on every route,
is checked before routing happens. Rejected requests never reach a handler.
"""

import hmac
import logging
from typing import Optional

from fastapi import Request
from fastapi.responses import PlainTextResponse

from session_catalog.config import API_KEY_HEADER
from session_catalog.errors import AuthenticationError

logger = logging.getLogger(__name__)

UNAUTHORIZED_MESSAGE = "API key missing or invalid"


class ApiKeyMiddleware:
    """
    Compares the X-API-Key header against one configured secret.

    Holds only the immutable expected key, so a single instance serves
    concurrent requests.
    """

    def __init__(self, expected_api_key: str, header_name: str = API_KEY_HEADER):
        if not expected_api_key:
            raise ValueError("expected_api_key must be non-empty")
        self.expected_api_key = expected_api_key
        self.header_name = header_name

    def check(self, api_key: Optional[str]) -> None:
        """Raise AuthenticationError unless api_key equals the expected key"""
        if api_key is None:
            raise AuthenticationError(f"{self.header_name} header missing")
        if not hmac.compare_digest(api_key.encode("utf-8"), self.expected_api_key.encode("utf-8")):
            raise AuthenticationError(f"{self.header_name} header does not match")

    async def __call__(self, request: Request, call_next):
        # Starlette headers are case-insensitive
        try:
            self.check(request.headers.get(self.header_name))
        except AuthenticationError as e:
            logger.warning("Rejected %s %s: %s", request.method, request.url.path, e.detail)
            return PlainTextResponse(UNAUTHORIZED_MESSAGE, status_code=AuthenticationError.status_code)

        return await call_next(request)
