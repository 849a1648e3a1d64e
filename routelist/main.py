"""Route List API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - The TableStore is built once per app and lives on app.state.store
    - Global error handlers map TableError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Logging configured and sample data seeded on startup via lifespan

Design Decisions:
    - create_app() factory: tests build isolated apps with their own store;
      the module-level `app` is what uvicorn serves
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from routelist.api.error_handlers import register_error_handlers
from routelist.api.request_logging import register_request_logging
from routelist.api.routes import health, table
from routelist.config import Settings, get_settings
from routelist.core.seed_data import seed_table
from routelist.core.table_store import TableStore
from routelist.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    if settings.seed_sample_data:
        seed_table(app.state.store)
    logger.info(
        f"{settings.app_name} started ({settings.environment})",
    )
    yield
    logger.info(f"{settings.app_name} shutting down")


def create_app(
    settings: Settings | None = None, store: TableStore | None = None,
) -> FastAPI:
    """Build the FastAPI app around one TableStore."""
    settings = settings or get_settings()
    app = FastAPI(
        title=settings.app_name, version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store if store is not None else TableStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    register_request_logging(app)
    register_error_handlers(app)

    app.include_router(health.router)
    app.include_router(table.router, prefix=settings.api_prefix)
    return app


app = create_app()
