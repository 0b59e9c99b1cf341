from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from hostel_leave.api import api_router
from hostel_leave.config.logging import get_logger, setup_logging
from hostel_leave.config.settings import Settings, get_settings
from hostel_leave.core.context import AppContext
from hostel_leave.core.exceptions import register_exception_handlers
from hostel_leave.core.middleware import register_middlewares
from hostel_leave.db.init_db import init_db

logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Application factory for the FastAPI app.

    - Configures logging and builds the AppContext from Settings.
    - Creates missing tables and the public PDF directory.
    - Registers CORS, core middleware and exception handlers.
    - Includes the API routes and serves generated PDFs under /pdfs.
    """
    settings = settings or get_settings()
    setup_logging(settings)

    context = AppContext.from_settings(settings)
    # Schema management is create_all only; there are no migrations
    init_db(context.engine)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(f"{settings.APP_NAME} started ({settings.ENVIRONMENT})")
        yield
        context.dispose()
        logger.info(f"{settings.APP_NAME} stopped")

    app = FastAPI(
        title=settings.APP_NAME,
        debug=settings.DEBUG,
        version=settings.API_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.context = context

    origins = settings.get_cors_origins() or ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Browsers refuse credentials with a wildcard origin
        allow_credentials=origins != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_middlewares(app)
    register_exception_handlers(app)

    app.include_router(api_router)

    pdf_dir = settings.get_pdf_dir()
    pdf_dir.mkdir(parents=True, exist_ok=True)
    app.mount(settings.get_pdf_url_prefix(), StaticFiles(directory=str(pdf_dir)), name="pdfs")

    @app.get("/health", tags=["Health"])
    def health() -> dict:
        return {"status": "ok"}

    return app
