# app/schemas/export.py
from pydantic import BaseModel
from typing import Optional


class WhatsAppRequest(BaseModel):
    number: str = ""
    q: Optional[str] = None     # Optional search term, same as GET /visitors


class OutboundMessageOut(BaseModel):
    url: str
    message: str
    total: int
