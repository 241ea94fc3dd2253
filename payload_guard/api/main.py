"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance and configures
session and flash middleware, exception handlers, and routes.
"""

import logging

import uvicorn
from fastapi import FastAPI
from starlette.middleware.sessions import SessionMiddleware

from payload_guard.api.errors import register_error_handlers
from payload_guard.api.middleware import FlashMessagesMiddleware
from payload_guard.api.routes import router
from payload_guard.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "products",
        "description": "JSON product endpoints - three ways to validate a request body",
    },
    {
        "name": "signup",
        "description": "HTML signup form - validation failures are flashed and redirected",
    },
]


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the application.

    Middleware order matters: SessionMiddleware is added last so it wraps
    FlashMessagesMiddleware and the session is loaded before flashes are
    drained.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Request payload validation and centralized error handling",
        version="0.1.0",
        openapi_tags=tags_metadata,
    )
    app.state.settings = settings

    app.add_middleware(FlashMessagesMiddleware)
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.session_secret_key,
        session_cookie=settings.session_cookie,
        max_age=settings.session_max_age,
    )

    register_error_handlers(app)
    app.include_router(router)

    return app


app = create_app()


def run() -> None:
    """Serve the application on the configured host and port."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Listening on %s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
