from session_catalog.middleware.api_key import UNAUTHORIZED_MESSAGE, ApiKeyMiddleware

__all__ = [
    "ApiKeyMiddleware",
    "UNAUTHORIZED_MESSAGE",
]
