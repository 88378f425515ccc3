"""
FastAPI application setup with dependency injection.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import logging
import time
import uuid
from datetime import datetime, timezone
from contextlib import asynccontextmanager
from typing import Optional

from app.config import Settings, get_settings
from app.config.loader import load_config_for_environment
from app.core.dependencies import ServiceContainer
from app.core.error_handlers import setup_error_handlers, error_handler
from app.core.logging import configure_logging
from app.core.metrics_translation import snapshot_latency_stats

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan management with service container.
    A broken dictionary aborts startup.
    """
    settings = app.state.settings
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")

    service_container = ServiceContainer(settings)
    try:
        await service_container.initialize_services()
    except Exception as e:
        logger.error(f"Application startup failed: {e}", exc_info=True)
        raise
    app.state.service_container = service_container
    logger.info("Application startup complete")

    try:
        yield
    finally:
        logger.info("Shutting down application")
        await service_container.cleanup_services()
        logger.info("Application shutdown complete")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        settings: Settings to use; defaults to the process-wide settings

    Returns:
        FastAPI: Configured application instance
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level.value, settings.log_format, settings.log_file)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        **settings.get_cors_config()
    )

    setup_error_handlers(app)

    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        """Log requests and responses with timing information."""
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id

        start_time = time.time()

        logger.info(
            f"Request {request_id} started: {request.method} {request.url.path}",
            extra={
                'request_id': request_id,
                'method': request.method,
                'path': request.url.path,
                'client_ip': request.client.host if request.client else 'unknown'
            }
        )

        response = await call_next(request)

        processing_time = (time.time() - start_time) * 1000

        logger.info(
            f"Request {request_id} completed: {response.status_code} ({processing_time:.2f}ms)",
            extra={
                'request_id': request_id,
                'status_code': response.status_code,
                'processing_time_ms': processing_time
            }
        )
        response.headers["X-Request-ID"] = request_id

        return response

    from app.api.translation_endpoints import router as translation_router
    app.include_router(translation_router)

    @app.get("/")
    async def root():
        """Root endpoint for basic health check."""
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": settings.app_version,
            "status": "running"
        }

    @app.get("/health")
    async def health_check(request: Request):
        """Health check with dictionary, store and latency status."""
        service_container = getattr(request.app.state, 'service_container', None)
        timestamp = datetime.now(timezone.utc).isoformat()

        if service_container is None or not service_container.is_initialized:
            return {
                "status": "unhealthy",
                "message": "Service container not initialized",
                "version": settings.app_version,
                "timestamp": timestamp,
            }

        store = service_container.get_store()
        store_healthy = store.health_check()
        matcher = service_container.get_matcher()

        return {
            "status": "healthy" if store_healthy else "degraded",
            "version": settings.app_version,
            "timestamp": timestamp,
            "details": {
                "dictionary": {
                    "entries": len(service_container.get_lexicon()),
                    "aliases": len(service_container.get_lexicon().aliases),
                },
                "store": {
                    "backend": settings.storage.backend.value,
                    "status": "healthy" if store_healthy else "unhealthy",
                },
                "external_translation": {
                    "enabled": matcher.translator is not None,
                },
                "speech": {
                    "enabled": service_container.get_speech_proxy() is not None,
                },
                "translation_latency": snapshot_latency_stats(),
            },
            "error_statistics": error_handler.get_error_statistics(),
        }

    return app


# Import-string entry point for uvicorn reload and multi-worker modes;
# run.py exports ENVIRONMENT so the matching .env.<environment> file is used.
app = create_app(load_config_for_environment())
