"""
Error taxonomy for the session catalog.

Each error carries the HTTP status it maps to; the app factory registers
handlers that turn them into responses.
"""

from typing import List, Optional


class SessionServiceError(Exception):
    status_code = 500

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class AuthenticationError(SessionServiceError):
    status_code = 401


class ValidationError(SessionServiceError):
    status_code = 400

    def __init__(self, errors: List[str], detail: Optional[str] = None):
        super().__init__(detail or "Validation failed: " + "; ".join(errors))
        self.errors = list(errors)


class NotFoundError(SessionServiceError):
    status_code = 404


class StoreError(SessionServiceError):
    """Unrecoverable failure in the persistence layer."""

    status_code = 500
