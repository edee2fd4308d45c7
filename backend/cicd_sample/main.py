"""CI/CD Sample API — FastAPI application factory and process entry point.

Invariants:
    - Routes registered explicitly from the route table (no auto-discovery)
    - Global error handlers map every failure to {"error": <message>}
    - ServiceConfig is built once and attached to the app; handlers only read it
    - Uptime starts when the app is built, so it is valid without a lifespan run

Design Decisions:
    - create_app() factory over a bare module global: tests build isolated apps
      with their own seed and uptime
    - Lifespan over @app.on_event: logging configured once on startup
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cicd_sample.api.error_handlers import register_error_handlers
from cicd_sample.api.route_table import register_routes
from cicd_sample.config import Settings, build_service_config, get_settings
from cicd_sample.core.clock import Uptime
from cicd_sample.core.service_config import ServiceConfig
from cicd_sample.infrastructure.observability import AccessLogMiddleware, setup_logging

logger = logging.getLogger(__name__)


def create_app(
    config: ServiceConfig | None = None, settings: Settings | None = None,
) -> FastAPI:
    """Build the application around an immutable ServiceConfig."""
    settings = settings or get_settings()
    config = config or build_service_config(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        logger.info(
            f"{settings.app_name} {config.version} started "
            f"with {len(config.directory)} users",
        )
        yield
        logger.info(f"{settings.app_name} shutting down")

    # Only route-table paths are served: no docs, no slash redirects
    app = FastAPI(
        title=settings.app_name, version=config.version, lifespan=lifespan,
        docs_url=None, redoc_url=None, openapi_url=None,
        redirect_slashes=False,
    )
    app.state.service_config = config
    app.state.uptime = Uptime()

    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_routes(app)
    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn (console script: cicd-sample)."""
    settings = get_settings()
    uvicorn.run(
        "cicd_sample.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
