# app/routers/exports.py
"""
Exports of the visitor list (whole list, or the search result when q is given).
GET  /exports/xlsx     - spreadsheet download
GET  /exports/csv      - CSV download
POST /exports/whatsapp - report message + wa.me link for the client to open
"""

from typing import Optional
from fastapi import APIRouter, Depends
from fastapi.responses import Response
from app.schemas.export import OutboundMessageOut, WhatsAppRequest
from app.services.visitor_list import ExportFile, VisitorListController, get_list_controller

router = APIRouter()


def _download(export: ExportFile) -> Response:
    return Response(
        content=export.content,
        media_type=export.media_type,
        headers={
            "Content-Disposition": f'attachment; filename="{export.filename}"',
            "X-Visitors-Cleared": "true" if export.cleared else "false",
        },
    )


@router.get("/exports/xlsx", summary="Download visitors as .xlsx")
def export_xlsx(q: Optional[str] = None, controller: VisitorListController = Depends(get_list_controller)):
    return _download(controller.export_spreadsheet(controller.filter(q)))


@router.get("/exports/csv", summary="Download visitors as .csv")
def export_csv(q: Optional[str] = None, controller: VisitorListController = Depends(get_list_controller)):
    return _download(controller.export_csv(controller.filter(q)))


@router.post("/exports/whatsapp", summary="Build the WhatsApp report link")
def export_whatsapp(body: WhatsAppRequest, controller: VisitorListController = Depends(get_list_controller)):
    outbound = controller.build_outbound_message(controller.filter(body.q), body.number)
    return {
        **OutboundMessageOut(url=outbound.url, message=outbound.message, total=outbound.total).model_dump(),
        "notification": outbound.notification,
    }
