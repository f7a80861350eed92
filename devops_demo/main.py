import logging
from contextlib import asynccontextmanager
from typing import Optional
import uvicorn
from fastapi import FastAPI
from devops_demo.api import health, info, pages
from devops_demo.core.config import Settings, settings as default_settings
from devops_demo.core.errors import register_error_handlers
from devops_demo.core.logging import setup_logging
from devops_demo.core.middleware import register_compression, register_middleware
from devops_demo.services.runtime import RuntimeInfo, utc_now_iso

logger = logging.getLogger(__name__)

ENDPOINTS = [
    ("/", "Main page"),
    ("/health", "Health check"),
    ("/ready", "Readiness check"),
    ("/metrics", "App metrics"),
    ("/api/info", "App information"),
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    runtime: RuntimeInfo = app.state.runtime
    config: Settings = app.state.settings

    logger.info(
        "DevOps Demo App started",
        extra={
            "port": config.PORT,
            "version": runtime.version,
            "env": runtime.environment,
            "started_at": utc_now_iso(),
            "endpoints": [f"GET {path} - {label}" for path, label in ENDPOINTS],
        },
    )
    yield
    logger.info("Shutting down gracefully", extra={"pid": runtime.pid})


def create_app(config: Optional[Settings] = None) -> FastAPI:
    """Build the application; version and build time are fixed here."""
    config = config or default_settings
    setup_logging(config.LOG_LEVEL)

    app = FastAPI(
        title=config.APP_NAME,
        version=config.APP_VERSION,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = config
    app.state.runtime = RuntimeInfo.capture(config)

    register_compression(app)
    register_error_handlers(app, include_details=config.is_development)
    register_middleware(app)

    app.include_router(pages.router)
    app.include_router(health.router)
    app.include_router(info.router)
    return app


app = create_app()


def run(config: Optional[Settings] = None):
    """Serve ``app`` with uvicorn unless running under the test designation."""
    config = config or default_settings
    if config.is_test:
        logger.info("Test environment, not starting listener", extra={"env": config.ENV})
        return

    # uvicorn stops accepting on SIGTERM/SIGINT and drains in-flight requests
    uvicorn.run(
        app if config is default_settings else create_app(config),
        host=config.HOST,
        port=config.PORT,
        log_config=None,
        timeout_graceful_shutdown=config.SHUTDOWN_TIMEOUT_SECONDS,
    )


if __name__ == "__main__":
    run()
