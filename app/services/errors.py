# app/services/errors.py
"""
Domain exceptions raised by the visitor services.
Mapped to HTTP responses by the exception handlers in app/main.py.
"""

from app.schemas.notification import Notification


class NotificationError(Exception):
    """A validation guard rejected the action. Carries the message shown to the user."""

    def __init__(self, title: str, description: str, missing_fields=None):
        super().__init__(f"{title}: {description}")
        self.notification = Notification(title=title, description=description, variant="destructive")
        self.missing_fields = list(missing_fields or [])


class StorageWriteError(Exception):
    """Persisting the visitor collection failed. In-memory state was rolled back."""


class StorageReadError(Exception):
    """Reading local storage failed. Distinct from an absent key, which reads as None."""
