# app/services/visitor_list.py
"""
List/export commands over the VisitorStore: search, .xlsx / .csv export,
WhatsApp report and confirmed deletions.

Validation guards raise NotificationError and leave the store untouched.
A declined confirmation returns None without any notification.
"""

import re
from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Callable, Optional
from zoneinfo import ZoneInfo
from fastapi import Request
from app.config import settings
from app.schemas.notification import Notification
from app.schemas.visitor import Visitor
from app.services import exporters
from app.services.errors import NotificationError
from app.services.visitor_store import VisitorStore
from app.utils.phone import digits_only
from app.utils.logger import get_logger

logger = get_logger(__name__)

Confirm = Callable[[str], bool]

# Terms made only of digits and phone punctuation also match on phone digits
_PHONE_TERM = re.compile(r"[\d\s().+-]+")


@dataclass
class ExportFile:
    filename: str
    content: bytes
    media_type: str
    notification: Notification
    cleared: bool = False


@dataclass
class OutboundMessage:
    url: str
    message: str
    total: int
    notification: Notification


def _empty_list_error(action: str = "exportar") -> NotificationError:
    return NotificationError("Lista vazia", f"Não há visitantes para {action}.")


class VisitorListController:
    def __init__(self, store: VisitorStore, tz: tzinfo, clear_after_export: bool = False,
                 clock: Optional[Callable[[], datetime]] = None):
        self.store = store
        self.tz = tz
        self.clear_after_export = clear_after_export
        self._clock = clock or (lambda: datetime.now(self.tz))

    def now(self) -> datetime:
        return self._clock()

    # ── Search ────────────────────────────────────────────────────────────
    def filter(self, search_term: Optional[str] = None) -> list[Visitor]:
        visitors = self.store.visitors
        term = (search_term or "").strip()
        if not term:
            return visitors

        needle = term.lower()
        needle_digits = digits_only(term) if _PHONE_TERM.fullmatch(term) else ""

        def matches(v: Visitor) -> bool:
            if needle in v.full_name.lower() or needle in v.city.lower():
                return True
            if term in v.phone:
                return True
            return bool(needle_digits) and needle_digits in digits_only(v.phone)

        return [v for v in visitors if matches(v)]

    # ── Exports ───────────────────────────────────────────────────────────
    def export_spreadsheet(self, records: list[Visitor]) -> ExportFile:
        if not records:
            raise _empty_list_error()

        filename = exporters.export_filename("xlsx", self.now())
        content = exporters.build_spreadsheet(records, self.tz)
        logger.info(f"[EXPORT] {filename}: {len(records)} visitor(s)")

        cleared = False
        if self.clear_after_export:
            removed = self.store.clear()
            cleared = True
            logger.warning(f"[EXPORT] Cleared {removed} visitor(s) after spreadsheet export")

        description = f"Arquivo {filename} baixado com sucesso."
        if cleared:
            description += " A lista de visitantes foi limpa."
        return ExportFile(
            filename=filename,
            content=content,
            media_type=exporters.XLSX_MEDIA_TYPE,
            notification=Notification(title="Planilha exportada!", description=description),
            cleared=cleared,
        )

    def export_csv(self, records: list[Visitor]) -> ExportFile:
        if not records:
            raise _empty_list_error()

        filename = exporters.export_filename("csv", self.now())
        content = exporters.build_csv(records).encode("utf-8")
        logger.info(f"[EXPORT] {filename}: {len(records)} visitor(s)")
        return ExportFile(
            filename=filename,
            content=content,
            media_type=exporters.CSV_MEDIA_TYPE,
            notification=Notification(title="CSV exportado!", description=f"Arquivo {filename} baixado com sucesso."),
        )

    def build_outbound_message(self, records: list[Visitor], destination_number: str) -> OutboundMessage:
        if not digits_only(destination_number):
            raise NotificationError("Número necessário", "Digite um número do WhatsApp para enviar.")
        if not records:
            raise _empty_list_error("enviar")

        message = exporters.build_outbound_message(records, self.now())
        url = exporters.build_whatsapp_url(destination_number, message)
        logger.info(f"[WHATSAPP] Report for {len(records)} visitor(s) to {digits_only(destination_number)}")
        return OutboundMessage(
            url=url,
            message=message,
            total=len(records),
            notification=Notification(title="WhatsApp aberto!", description="A mensagem foi preparada para envio."),
        )

    # ── Deletions ─────────────────────────────────────────────────────────
    def delete_one(self, visitor_id: str, display_name: str, confirm: Confirm) -> Optional[Notification]:
        if not confirm(f"Deseja realmente excluir o visitante {display_name}?"):
            return None
        self.store.remove(visitor_id)
        return Notification(title="Visitante excluído", description=f"{display_name} foi removido da lista.")

    def delete_all(self, confirm: Confirm) -> Optional[Notification]:
        total = len(self.store)
        if total <= 1:
            raise NotificationError(
                "Ação indisponível",
                "A exclusão de todos os visitantes requer mais de um cadastro.",
            )
        if not confirm(f"Deseja realmente excluir todos os {total} visitantes?"):
            return None
        removed = self.store.clear()
        return Notification(
            title="Lista limpa",
            description=f"{removed} visitante(s) foram removidos da lista.",
        )

    def delete_selected(self, ids: list[str], confirm: Confirm) -> Optional[Notification]:
        if not ids:
            raise NotificationError("Nenhum visitante selecionado", "Selecione os visitantes a excluir.")
        if not confirm(f"Deseja realmente excluir {len(ids)} visitante(s)?"):
            return None
        removed = self.store.remove_all(ids)
        return Notification(
            title="Visitantes excluídos",
            description=f"{removed} visitante(s) foram removidos da lista.",
        )


def get_list_controller(request: Request) -> VisitorListController:
    """FastAPI dependency - list controller bound to the app's store and settings."""
    return VisitorListController(
        store=request.app.state.visitor_store,
        tz=ZoneInfo(settings.TIMEZONE),
        clear_after_export=settings.CLEAR_AFTER_SPREADSHEET_EXPORT,
    )
