"""FastAPI application entry point."""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from ridecatalog.config import settings
from ridecatalog.database import Base, SessionLocal, engine
from ridecatalog.errors import CatalogError, StoreError, ValidationError
from ridecatalog.logging_config import configure_logging
from ridecatalog.routers import admin, events, organizers, suggestions
from ridecatalog.schemas.common import error_details
from ridecatalog.security import AdminGate

# Import all models so Base.metadata knows about them
from ridecatalog.models.organizer import Organizer  # noqa: F401
from ridecatalog.models.event import Event  # noqa: F401
from ridecatalog.models.video_suggestion import VideoSuggestion  # noqa: F401

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Ride Event Catalog",
    description="Moderated catalog of ride events, organizers and video links",
    version="0.1.0",
)
app.state.admin_gate = AdminGate(settings.ADMIN_API_KEY)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(events.router, prefix="/api/events", tags=["Events"])
app.include_router(organizers.router, prefix="/api/organizers", tags=["Organizers"])
app.include_router(suggestions.router, prefix="/api/suggestions", tags=["Suggestions"])
app.include_router(admin.router, prefix="/api/admin", tags=["Admin"])


@app.exception_handler(CatalogError)
async def handle_catalog_error(request: Request, exc: CatalogError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def handle_request_validation(request: Request, exc: RequestValidationError):
    error = ValidationError("Invalid input", details=error_details(exc.errors()))
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


@app.exception_handler(SQLAlchemyError)
async def handle_store_error(request: Request, exc: SQLAlchemyError):
    logger.exception("Store failure on %s %s", request.method, request.url.path)
    error = StoreError()
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


@app.on_event("startup")
def on_startup():
    """Create database tables on startup (for SQLite dev mode)."""
    if settings.DATABASE_URL.startswith("sqlite"):
        Base.metadata.create_all(bind=engine)
    if settings.SEED_SAMPLE_DATA:
        from ridecatalog.seed import seed_sample_data

        with SessionLocal() as db:
            seed_sample_data(db)


@app.get("/api/health")
def health_check():
    return {"status": "ok"}
