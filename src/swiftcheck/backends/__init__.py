"""Page session interface exports."""
from .base import PageSession, SessionError

__all__ = [
    "PageSession",
    "SessionError",
]
