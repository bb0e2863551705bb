# app/services/exporters.py
"""
Serializers for the visitor list: .xlsx workbook, CSV text and the
WhatsApp report message. Pure functions; the caller supplies the clock.
"""

import csv
from datetime import datetime, timezone, tzinfo
from io import BytesIO, StringIO
from urllib.parse import quote
import openpyxl
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter
from app.schemas.visitor import Visitor
from app.utils.phone import digits_only

NOT_INFORMED = "Não informado"
NO_OBSERVATIONS = "Sem observações"

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
CSV_MEDIA_TYPE = "text/csv; charset=utf-8"

SHEET_TITLE = "Visitantes"
SPREADSHEET_HEADERS = [
    "Data do Culto", "Horário", "Nome", "Telefone", "Cidade", "Observações", "Cadastrado em",
]
CSV_HEADER = "Dados dos Visitantes"
MESSAGE_TITLE = "*Lista de Visitantes da Igreja*"
WHATSAPP_URL = "https://wa.me/{number}?text={text}"


def service_period(visitor: Visitor) -> str:
    return f"{visitor.service_time}h" if visitor.service_time else NOT_INFORMED


def observations_text(visitor: Visitor) -> str:
    return visitor.observations or NO_OBSERVATIONS


def format_created_at(created_at: str, tz: tzinfo) -> str:
    """ISO timestamp → dd/MM/yyyy HH:mm in the given timezone. Unparseable values pass through."""
    try:
        parsed = datetime.fromisoformat(created_at.replace("Z", "+00:00"))
    except (AttributeError, ValueError):
        return created_at
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(tz).strftime("%d/%m/%Y %H:%M")


def export_filename(extension: str, now: datetime) -> str:
    return f"visitantes_{now.strftime('%d-%m-%Y_%H-%M')}.{extension}"


def visitor_narrative(visitor: Visitor) -> str:
    return (
        f"Culto {service_period(visitor)}: {visitor.service_date}\n"
        f"Nome: {visitor.full_name}\n"
        f"Fone: {visitor.phone}\n"
        f"Cidade: {visitor.city}\n"
        f"Obs: {observations_text(visitor)}"
    )


def build_spreadsheet(records: list[Visitor], tz: tzinfo) -> bytes:
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = SHEET_TITLE

    ws.append(SPREADSHEET_HEADERS)
    for cell in ws[1]:
        cell.font = Font(bold=True)

    for v in records:
        ws.append([
            v.service_date,
            service_period(v),
            v.full_name,
            v.phone,
            v.city,
            observations_text(v),
            format_created_at(v.created_at, tz),
        ])

    # Adjust column widths
    for i, col in enumerate(ws.columns, 1):
        max_length = max((len(str(cell.value)) for cell in col if cell.value), default=0)
        ws.column_dimensions[get_column_letter(i)].width = max_length + 2

    buffer = BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


def build_csv(records: list[Visitor]) -> str:
    """Single quoted column, "\\n" between rows and no trailing newline."""
    buffer = StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow([CSV_HEADER])
    for v in records:
        writer.writerow([visitor_narrative(v)])
    return buffer.getvalue()[:-1]


def build_outbound_message(records: list[Visitor], now: datetime) -> str:
    blocks = [f"*{visitor_narrative(v)}\n" for v in records]
    return (
        f"{MESSAGE_TITLE}\n\n"
        + "\n".join(blocks)
        + f"\nTotal: {len(records)} visitante(s) - "
        f"Relatório gerado em {now.strftime('%d/%m/%Y %H:%M')}"
    )


def build_whatsapp_url(number: str, message: str) -> str:
    # safe set matches JavaScript encodeURIComponent
    return WHATSAPP_URL.format(number=digits_only(number), text=quote(message, safe="!*'()"))
