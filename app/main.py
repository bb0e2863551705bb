# app/main.py
"""
FastAPI application entry point.
Includes request logging, domain/global error handlers, and all routers.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from app.routers import visitors, exports, health
from app.database import create_tables, SessionLocal
from app.config import settings
from app.schemas.notification import Notification
from app.services.errors import NotificationError, StorageWriteError
from app.services.local_storage import LocalStorage
from app.services.visitor_store import VisitorStore
from app.utils.logger import get_logger
import time

logger = get_logger(__name__)

app = FastAPI(
    title="Church Visitors API",
    description="Cadastro de Visitantes - Ministério Primeira Vez. Registration, search and exports.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# ── CORS (the registration page may be served from another origin) ──────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition", "X-Visitors-Cleared"],
)


# ── Request Timing Middleware ────────────────────────────────────────────────
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    duration = round((time.time() - start) * 1000, 2)
    logger.debug(f"{request.method} {request.url.path} → {response.status_code} ({duration}ms)")
    return response


# ── Exception Handlers ───────────────────────────────────────────────────────
@app.exception_handler(NotificationError)
async def notification_error_handler(request: Request, exc: NotificationError):
    logger.info(f"Rejected {request.method} {request.url.path}: {exc}")
    content = {"detail": exc.notification.model_dump()}
    if exc.missing_fields:
        content["missing_fields"] = exc.missing_fields
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=content)


@app.exception_handler(StorageWriteError)
async def storage_error_handler(request: Request, exc: StorageWriteError):
    logger.error(f"Storage write failed on {request.url.path}: {exc}")
    notification = Notification(
        title="Erro ao salvar",
        description="Não foi possível salvar a lista de visitantes. Tente novamente.",
        variant="destructive",
    )
    return JSONResponse(
        status_code=status.HTTP_507_INSUFFICIENT_STORAGE,
        content={"detail": notification.model_dump()},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# ── Routers ──────────────────────────────────────────────────────────────────
app.include_router(visitors.router, prefix="/api/v1", tags=["👥 Visitors"])
app.include_router(exports.router,  prefix="/api/v1", tags=["📤 Exports"])
app.include_router(health.router,   prefix="/api/v1", tags=["💚 Health"])


# ── Startup ───────────────────────────────────────────────────────────────────
@app.on_event("startup")
async def startup():
    logger.info("🚀 Church Visitors backend starting up...")
    create_tables()
    logger.info("✅ Storage table ready")

    store = VisitorStore(LocalStorage(SessionLocal), settings.STORAGE_KEY)
    store.load()
    app.state.visitor_store = store
    logger.info(f"👥 {len(store)} visitor(s) under key '{settings.STORAGE_KEY}'")
    if settings.CLEAR_AFTER_SPREADSHEET_EXPORT:
        logger.warning("⚠️  CLEAR_AFTER_SPREADSHEET_EXPORT is on - .xlsx exports wipe the list")
    logger.info(f"🌐 Listening on http://{settings.BACKEND_HOST}:{settings.BACKEND_PORT}")
    logger.info("📖 API docs at /docs")


@app.on_event("shutdown")
async def shutdown():
    logger.info("🛑 Church Visitors backend shutting down...")
