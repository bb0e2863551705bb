# app/routers/visitors.py
"""
Visitor registration and list management.
POST   /visitors       - submit the registration form
GET    /visitors       - list / search (newest first)
DELETE /visitors/{id}  - delete one visitor (requires confirm=true)
DELETE /visitors       - delete all, or the given ids (requires confirm=true)
"""

from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status
from app.schemas.visitor import VisitorFormData, VisitorListOut
from app.services.visitor_form import VisitorFormController
from app.services.visitor_list import VisitorListController, get_list_controller
from app.services.visitor_store import VisitorStore, get_store

router = APIRouter()


def _answer(confirm: bool, asked: dict):
    """Confirmation callback answering with the client's confirm flag, recording the prompt."""
    def ask(prompt: str) -> bool:
        asked["prompt"] = prompt
        return confirm
    return ask


def _cancelled(asked: dict) -> dict:
    return {"status": "cancelled", "prompt": asked.get("prompt")}


@router.get("/visitors", response_model=VisitorListOut, summary="List visitors - optional search")
def list_visitors(q: Optional[str] = None, controller: VisitorListController = Depends(get_list_controller)):
    """Case-insensitive search on name and city, digit search on phone."""
    visitors = controller.filter(q)
    return VisitorListOut(total=len(controller.store), count=len(visitors), visitors=visitors)


@router.post("/visitors", status_code=status.HTTP_201_CREATED, summary="Register a visitor")
def register_visitor(body: VisitorFormData, store: VisitorStore = Depends(get_store)):
    form = VisitorFormController(on_submit=store.add)
    for name, value in body.model_dump(exclude_none=True).items():
        form.update_field(name, value)
    visitor, notification = form.submit()
    return {"status": "registered", "visitor": visitor, "notification": notification}


@router.delete("/visitors/{visitor_id}", summary="Delete one visitor")
def delete_visitor(visitor_id: str, confirm: bool = False,
                   controller: VisitorListController = Depends(get_list_controller)):
    visitor = controller.store.get(visitor_id)
    if not visitor:
        raise HTTPException(status_code=404, detail="Visitor not found")
    asked = {}
    notification = controller.delete_one(visitor.id, visitor.full_name, _answer(confirm, asked))
    if notification is None:
        return _cancelled(asked)
    return {"status": "removed", "id": visitor_id, "notification": notification}


@router.delete("/visitors", summary="Delete all visitors, or a selection by id")
def delete_visitors(confirm: bool = False, ids: Optional[list[str]] = Query(None),
                    controller: VisitorListController = Depends(get_list_controller)):
    asked = {}
    if ids:
        notification = controller.delete_selected(ids, _answer(confirm, asked))
    else:
        notification = controller.delete_all(_answer(confirm, asked))
    if notification is None:
        return _cancelled(asked)
    return {"status": "removed", "remaining": len(controller.store), "notification": notification}
