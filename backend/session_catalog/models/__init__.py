from session_catalog.models.session import ConferenceSession

__all__ = [
    "ConferenceSession",
]
