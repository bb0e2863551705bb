# app/services/visitor_form.py
"""
Registration form state: a draft VisitorFormData plus the date picked in the calendar.
submit() validates the draft, hands it to on_submit (normally VisitorStore.add)
and resets the form.
"""

from datetime import date
from typing import Callable, Optional
from app.schemas.notification import Notification
from app.schemas.visitor import VisitorFormData
from app.services.errors import NotificationError
from app.utils.phone import format_phone
from app.utils.logger import get_logger

logger = get_logger(__name__)

REQUIRED_FIELDS = ("full_name", "phone", "city", "service_date", "service_time")

PT_BR_MONTHS = (
    "janeiro", "fevereiro", "março", "abril", "maio", "junho",
    "julho", "agosto", "setembro", "outubro", "novembro", "dezembro",
)

# camelCase names as sent by the web form
_FIELD_ALIASES = {
    field.alias: name
    for name, field in VisitorFormData.model_fields.items()
    if field.alias
}


def format_service_date(value: date) -> str:
    return value.strftime("%d/%m/%Y")


def format_long_date(value: date) -> str:
    """10 de março de 2024"""
    return f"{value.day:02d} de {PT_BR_MONTHS[value.month - 1]} de {value.year}"


class VisitorFormController:
    def __init__(self, on_submit: Callable[[VisitorFormData], object]):
        self._on_submit = on_submit
        self.draft = VisitorFormData()
        self.selected_date: Optional[date] = None

    @property
    def display_date(self) -> str:
        if self.selected_date is None:
            return "Selecione a data"
        return format_long_date(self.selected_date)

    def update_field(self, name: str, value):
        field = _FIELD_ALIASES.get(name, name)
        if field not in VisitorFormData.model_fields:
            raise ValueError(f"Unknown form field: {name}")
        if field == "phone":
            value = format_phone(value)
        setattr(self.draft, field, value)

    def select_date(self, value: Optional[date]):
        self.selected_date = value
        self.draft.service_date = format_service_date(value) if value else ""

    def missing_fields(self) -> list[str]:
        return [f for f in REQUIRED_FIELDS if not (getattr(self.draft, f) or "").strip()]

    def reset(self):
        self.draft = VisitorFormData()
        self.selected_date = None

    def submit(self):
        """Returns (whatever on_submit returned, success notification)."""
        missing = self.missing_fields()
        if missing:
            logger.info(f"[FORM] Rejected submit, missing: {', '.join(missing)}")
            raise NotificationError(
                "Campos obrigatórios",
                "Por favor, preencha todos os campos.",
                missing_fields=missing,
            )

        submitted = self._on_submit(self.draft)
        self.reset()
        return submitted, Notification(
            title="Visitante cadastrado!",
            description="Os dados foram salvos com sucesso.",
        )
