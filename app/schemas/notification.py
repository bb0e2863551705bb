# app/schemas/notification.py
from pydantic import BaseModel
from typing import Literal


class Notification(BaseModel):
    """Transient user-facing message (title + description)."""
    title: str
    description: str
    variant: Literal["default", "destructive"] = "default"
