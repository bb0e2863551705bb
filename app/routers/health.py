# app/routers/health.py
"""
System health check endpoint.
Returns status of backend + storage database + visitor count.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from sqlalchemy import text
from app.database import get_db
from app.services.visitor_store import VisitorStore, get_store
from datetime import datetime, timezone

router = APIRouter()


@router.get("/health", summary="System health check")
def health_check(db: Session = Depends(get_db), store: VisitorStore = Depends(get_store)):
    result = {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "backend": "ok",
        "storage": "unknown",
        "visitors": len(store),
    }

    try:
        db.execute(text("SELECT 1"))
        result["storage"] = "ok"
    except Exception as e:
        result["storage"] = f"error: {str(e)}"
        result["status"] = "degraded"

    return result
