"""FastAPI application for the workout-tracker web interface."""

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from ..chat.model import ChatModel, GroqChatModel
from ..config import Settings
from ..db import DataStore, SqliteStore, StoreError, create_store, init_db
from ..events import StaleViewNotifier
from .routers import chat, gym, pages, workouts
from .view_cache import ViewCache

log = logging.getLogger(__name__)

VERSION = "0.1.0"

# Template and static file paths
TEMPLATES_DIR = Path(__file__).parent / "templates"
STATIC_DIR = Path(__file__).parent / "static"


def format_history_date(value: datetime) -> str:
    """Local date and time such as ``Jan 5, 2:30 PM``."""
    local = value.astimezone()
    hour = local.hour % 12 or 12
    return f"{local:%b} {local.day}, {hour}:{local:%M} {local:%p}"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - runs on startup and shutdown."""
    # Startup: make sure the local schema exists
    store = app.state.store
    if isinstance(store, SqliteStore):
        await init_db(store.db_path)
    yield


def create_app(
    settings: Settings | None = None,
    store: DataStore | None = None,
    model: ChatModel | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or Settings.from_env()

    app = FastAPI(
        title="workout-tracker",
        description="Workout log with an AI coach",
        version=VERSION,
        lifespan=lifespan,
    )

    # Mount static files
    if STATIC_DIR.exists():
        app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    # Setup templates
    templates = Jinja2Templates(directory=TEMPLATES_DIR)
    templates.env.filters["history_date"] = format_history_date

    notifier = StaleViewNotifier()
    view_cache = ViewCache()
    view_cache.attach(notifier)

    # Shared collaborators, looked up by the routers
    app.state.settings = settings
    app.state.templates = templates
    app.state.store = store or create_store(settings)
    app.state.model = model or GroqChatModel(settings.groq_api_key)
    app.state.notifier = notifier
    app.state.view_cache = view_cache

    # Include routers
    app.include_router(pages.router)
    app.include_router(workouts.router)
    app.include_router(gym.router)
    app.include_router(chat.router)

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        log.error("Store error on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse({"error": str(exc)}, status_code=500)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": VERSION}

    return app

