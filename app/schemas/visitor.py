# app/schemas/visitor.py
from pydantic import BaseModel, Field
from typing import Optional


class VisitorFormData(BaseModel):
    """Draft captured by the registration form. Blank fields are allowed here."""
    full_name: str = Field("", alias="fullName")
    phone: str = ""
    city: str = ""
    service_date: str = Field("", alias="serviceDate")    # dd/MM/yyyy
    service_time: str = Field("", alias="serviceTime")    # HH:mm
    observations: Optional[str] = None

    class Config:
        populate_by_name = True


class Visitor(BaseModel):
    """A registered visitor, persisted with camelCase keys."""
    id: str
    full_name: str = Field(alias="fullName", min_length=1)
    phone: str = Field(min_length=1)
    city: str = Field(min_length=1)
    service_date: str = Field(alias="serviceDate")
    service_time: str = Field(alias="serviceTime")
    observations: Optional[str] = None
    created_at: str = Field(alias="createdAt")    # ISO-8601 UTC, e.g. 2024-03-10T22:00:00.000Z

    class Config:
        populate_by_name = True


class VisitorListOut(BaseModel):
    total: int
    count: int
    visitors: list[Visitor]
