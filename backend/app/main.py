"""ResponseRift API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly: one generated router per catalog resource and
      per nested collection, plus index and health
    - Global error handlers map ResponseRiftError → structured JSON responses
    - CORS configured from settings (default: any origin)
    - Resource registry loaded from fixtures on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Nested routers registered before resource routers so /users/{id}/posts is
      never shadowed by a future catch-all item route
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app import __version__
from app.api.error_handlers import register_error_handlers
from app.api.responses import PrettyJSONResponse
from app.api.routes import health, index
from app.api.routes.nested import build_nested_router
from app.api.routes.resources import build_resource_router
from app.config import get_settings
from app.core.resource_catalog import NESTED_COLLECTIONS, RESOURCE_CATALOG
from app.infrastructure.observability import setup_logging
from app.infrastructure.resource_registry import init_registry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_registry(settings.data_dir)
    logger.info("ResponseRift API started")
    yield
    logger.info("ResponseRift API shutting down")


app = FastAPI(
    title="ResponseRift API", version=__version__, lifespan=lifespan,
    default_response_class=PrettyJSONResponse,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

app.include_router(health.router)
app.include_router(index.router)
for nested in NESTED_COLLECTIONS:
    app.include_router(build_nested_router(nested, settings.api_prefix))
for definition in RESOURCE_CATALOG:
    app.include_router(build_resource_router(definition, settings.api_prefix))

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
